from sqlalchemy.orm import Session

from exam_portal.models.answer_script import AnswerScript
from exam_portal.models.portal_setting import PortalSetting
from exam_portal.schemas.evaluation import MarksRow
from exam_portal.services.evaluation_store import marks_to_records
from exam_portal.services.scoring import empty_marks

GRADED_MARKS = [
    MarksRow(q="Q1", parts={"a": "2", "b": "3", "c": "5", "d": "4", "e": "-"}),
    MarksRow(q="Q2", parts={"a": "4", "b": "-", "c": "3", "d": "2", "e": "5"}),
    MarksRow(q="Q3", parts={"a": "5", "b": "4", "c": "-", "d": "3", "e": "2"}),
    MarksRow(q="Q4", parts={"a": "-", "b": "2", "c": "4", "d": "5", "e": "3"}),
    MarksRow(q="Q5", parts={"a": "3", "b": "5", "c": "2", "d": "-", "e": "4"}),
]

# (roll_no, subject_code, submission_date, status, grievance_text, grievance_date)
ROSTER = [
    ("230501", "CS3001", "2025-12-10", "pending", None, None),
    ("230512", "CS3002", "2025-12-11", "pending", None, None),
    ("230523", "CS3003", "2025-12-10", "graded", None, None),
    ("230534", "CS3001", "2025-12-12", "pending", None, None),
    (
        "230545",
        "CS3004",
        "2025-12-11",
        "graded",
        "I believe Q3 part (c) was marked incorrectly. My approach using dynamic "
        "programming is valid as per the textbook reference on page 247.",
        "2025-12-15 14:32",
    ),
    (
        "230547",
        "CS3002",
        "2025-12-12",
        "graded",
        "Q2 part (b) was left unevaluated but I have written a valid solution.",
        "2025-12-16 09:15",
    ),
    ("230558", "CS3005", "2025-12-10", "graded", None, None),
    ("230569", "CS3003", "2025-12-11", "pending", None, None),
    # 230547 sits every paper
    ("230547", "CS3001", "2025-12-10", "graded", None, None),
    ("230547", "CS3003", "2025-12-10", "graded", None, None),
    ("230547", "CS3004", "2025-12-11", "pending", None, None),
    ("230547", "CS3005", "2025-12-10", "graded", None, None),
    ("230547", "MA2001", "2025-12-12", "graded", None, None),
]


def seed_roster(db: Session) -> int:
    """Load the demo roster into an empty store. Returns how many scripts were added."""
    if db.query(AnswerScript).first() is not None:
        return 0

    if db.get(PortalSetting, 1) is None:
        db.add(PortalSetting(id=1, results_published=False))

    for roll_no, code, submitted, status, text, filed_at in ROSTER:
        marks = GRADED_MARKS if status == "graded" else empty_marks()
        db.add(
            AnswerScript(
                roll_no=roll_no,
                subject_code=code,
                submission_date=submitted,
                status=status,
                has_grievance=text is not None,
                grievance_text=text,
                grievance_date=filed_at,
                marks_rows=marks_to_records(marks),
            )
        )

    try:
        db.commit()
    except Exception:
        db.rollback()
        raise

    return len(ROSTER)
