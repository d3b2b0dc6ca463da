import logging
import threading
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy.orm import Session

from exam_portal.core.config import GRIEVANCE_DATE_FORMAT, PART_LABELS
from exam_portal.core.subjects import canonical_code, subject_name
from exam_portal.models.answer_script import AnswerScript
from exam_portal.models.marks_row import MarksRowRecord
from exam_portal.models.portal_setting import PortalSetting
from exam_portal.schemas.evaluation import (
    AnswerScriptRead,
    FacultyDashboardStats,
    MarksRow,
    RecheckStatus,
    StudentResult,
)
from exam_portal.services.scoring import compute_total

logger = logging.getLogger(__name__)

# All sessions share one sqlite connection: only one transaction may be open on it at a time.
_store_lock = threading.Lock()


def marks_to_records(marks: list[MarksRow]) -> list[MarksRowRecord]:
    return [
        MarksRowRecord(
            position=i,
            question=row.q,
            **{f"part_{label}": row.parts[label] for label in PART_LABELS},
        )
        for i, row in enumerate(marks)
    ]


def records_to_marks(records: list[MarksRowRecord]) -> list[MarksRow]:
    return [
        MarksRow(
            q=r.question,
            parts={label: getattr(r, f"part_{label}") for label in PART_LABELS},
        )
        for r in records
    ]


def to_read(script: AnswerScript) -> AnswerScriptRead:
    return AnswerScriptRead(
        id=script.id,
        roll_no=script.roll_no,
        subject_code=script.subject_code,
        submission_date=script.submission_date,
        status=script.status,
        has_grievance=script.has_grievance,
        grievance_text=script.grievance_text,
        grievance_date=script.grievance_date,
        marks=records_to_marks(script.marks_rows),
    )


def recheck_status(script: AnswerScript) -> RecheckStatus:
    if script.has_grievance:
        return "under-review"
    if script.recheck_outcome in ("updated", "unchanged"):
        return script.recheck_outcome
    return "not-submitted"


class EvaluationStore:
    """
    Answer scripts and the results-publication flag.

    Scripts are addressed by their natural key (roll number, subject code);
    subject codes match in any case. Everything handed out is a pydantic
    copy, so callers can't reach into the session.

    Each operation is one transaction, committed (or rolled back) before the
    next one may start on any session. Mutators on an unknown key change
    nothing and return False.
    """

    def __init__(self, db: Session) -> None:
        self.db = db

    @contextmanager
    def _transaction(self):
        with _store_lock:
            try:
                yield
                self.db.commit()
            except Exception:
                self.db.rollback()
                raise

    def _find(self, roll_no: str, subject_code: str) -> Optional[AnswerScript]:
        return (
            self.db.query(AnswerScript)
            .filter(
                AnswerScript.roll_no == roll_no,
                AnswerScript.subject_code == canonical_code(subject_code),
            )
            .first()
        )

    # ---- lookup ----

    def list_scripts(self) -> list[AnswerScriptRead]:
        with self._transaction():
            scripts = self.db.query(AnswerScript).order_by(AnswerScript.id.asc()).all()
            return [to_read(s) for s in scripts]

    def get_script(self, roll_no: str, subject_code: str) -> Optional[AnswerScriptRead]:
        with self._transaction():
            script = self._find(roll_no, subject_code)
            return to_read(script) if script else None

    # ---- faculty / student actions ----

    def save_marks(self, roll_no: str, subject_code: str, marks: list[MarksRow]) -> bool:
        with self._transaction():
            script = self._find(roll_no, subject_code)
            if not script:
                logger.warning("save_marks: no script for %s/%s", roll_no, subject_code)
                return False

            script.marks_rows = marks_to_records(marks)
            script.status = "graded"

        logger.info("Marks saved for %s/%s", roll_no, canonical_code(subject_code))
        return True

    def submit_grievance(self, roll_no: str, subject_code: str, text: str) -> bool:
        with self._transaction():
            script = self._find(roll_no, subject_code)
            if not script:
                logger.warning("submit_grievance: no script for %s/%s", roll_no, subject_code)
                return False

            script.has_grievance = True
            script.grievance_text = text
            script.grievance_date = datetime.now(timezone.utc).strftime(GRIEVANCE_DATE_FORMAT)
            script.recheck_outcome = None

        logger.info("Grievance filed for %s/%s", roll_no, canonical_code(subject_code))
        return True

    def accept_grievance(
        self,
        roll_no: str,
        subject_code: str,
        updated_marks: list[MarksRow],
        require_open: bool = False,
    ) -> bool:
        """
        Re-score and close the grievance in one step.

        With require_open, a script without an open grievance is left alone
        and the call returns False, same as an unknown key.
        """
        with self._transaction():
            script = self._find(roll_no, subject_code)
            if not script:
                logger.warning("accept_grievance: no script for %s/%s", roll_no, subject_code)
                return False
            if require_open and not script.has_grievance:
                logger.warning("accept_grievance: nothing open for %s/%s", roll_no, subject_code)
                return False

            before = compute_total(records_to_marks(script.marks_rows))
            after = compute_total(updated_marks)

            script.marks_rows = marks_to_records(updated_marks)
            self._clear_grievance(script)
            script.recheck_outcome = "updated" if after != before else "unchanged"

        logger.info("Grievance accepted for %s/%s (total %d -> %d)", roll_no, canonical_code(subject_code), before, after)
        return True

    def reject_grievance(self, roll_no: str, subject_code: str, require_open: bool = False) -> bool:
        with self._transaction():
            script = self._find(roll_no, subject_code)
            if not script:
                logger.warning("reject_grievance: no script for %s/%s", roll_no, subject_code)
                return False
            if require_open and not script.has_grievance:
                logger.warning("reject_grievance: nothing open for %s/%s", roll_no, subject_code)
                return False

            self._clear_grievance(script)
            script.recheck_outcome = "unchanged"

        logger.info("Grievance rejected for %s/%s", roll_no, canonical_code(subject_code))
        return True

    @staticmethod
    def _clear_grievance(script: AnswerScript) -> None:
        script.has_grievance = False
        script.grievance_text = None
        script.grievance_date = None

    # ---- derived views ----

    def get_student_results(self, roll_no: str) -> list[StudentResult]:
        with self._transaction():
            scripts = (
                self.db.query(AnswerScript)
                .filter(AnswerScript.roll_no == roll_no)
                .order_by(AnswerScript.id.asc())
                .all()
            )

            return [
                StudentResult(
                    subject_code=s.subject_code,
                    subject_name=subject_name(s.subject_code),
                    marks=compute_total(records_to_marks(s.marks_rows)) if s.status == "graded" else None,
                    recheck_status=recheck_status(s),
                )
                for s in scripts
            ]

    def dashboard_stats(self) -> FacultyDashboardStats:
        with self._transaction():
            scripts = self.db.query(AnswerScript).all()
            graded = sum(1 for s in scripts if s.status == "graded")
            return FacultyDashboardStats(
                assigned=len(scripts),
                graded=graded,
                pending=len(scripts) - graded,
                open_grievances=sum(1 for s in scripts if s.has_grievance),
            )

    # ---- publication flag ----

    def results_published(self) -> bool:
        with self._transaction():
            setting = self.db.get(PortalSetting, 1)
            return bool(setting and setting.results_published)

    def set_results_published(self, published: bool) -> None:
        with self._transaction():
            setting = self.db.get(PortalSetting, 1)
            if setting is None:
                setting = PortalSetting(id=1)
                self.db.add(setting)
            setting.results_published = published

        logger.info("Results %s", "published" if published else "unpublished")
