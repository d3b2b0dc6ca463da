from exam_portal.core.config import UNKNOWN_SUBJECT

SUBJECTS: dict[str, str] = {
    "CS3001": "Data Structures & Algorithms",
    "CS3002": "Operating Systems",
    "CS3003": "Database Management Systems",
    "CS3004": "Computer Networks",
    "CS3005": "Software Engineering",
    "MA2001": "Discrete Mathematics",
}


def canonical_code(subject_code: str) -> str:
    return subject_code.strip().upper()


def subject_name(subject_code: str, default: str | None = None) -> str:
    """
    Look up the display name for a subject code (any case).

    Unknown codes fall back to `default`, or to the code itself as given.
    """
    name = SUBJECTS.get(canonical_code(subject_code))
    if name is not None:
        return name
    return default if default is not None else subject_code


def viewer_subject_name(subject_code: str) -> str:
    return subject_name(subject_code, default=UNKNOWN_SUBJECT)
