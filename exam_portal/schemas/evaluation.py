from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator

from exam_portal.core.config import GRIEVANCE_TEXT_MAX_LENGTH, PART_LABELS, QUESTION_LABELS

ScriptStatus = Literal["pending", "graded"]
RecheckStatus = Literal["not-submitted", "under-review", "updated", "unchanged"]


class MarksRow(BaseModel):
    q: str
    parts: dict[str, str]

    @field_validator("parts")
    @classmethod
    def parts_are_a_to_e(cls, v: dict[str, str]) -> dict[str, str]:
        if set(v) != set(PART_LABELS):
            raise ValueError(f"parts must have exactly the keys {', '.join(PART_LABELS)}")
        # keep a stable a..e ordering regardless of input order
        return {label: v[label] for label in PART_LABELS}


class AnswerScriptRead(BaseModel):
    id: int
    roll_no: str
    subject_code: str
    submission_date: str
    status: ScriptStatus
    has_grievance: bool
    grievance_text: Optional[str] = None
    grievance_date: Optional[str] = None
    marks: list[MarksRow]


class EvaluationView(AnswerScriptRead):
    subject_name: str
    row_totals: dict[str, int]
    total_marks: int


class StudentResult(BaseModel):
    subject_code: str
    subject_name: str
    marks: Optional[int] = None  # None = not graded (or not published)
    recheck_status: RecheckStatus


class MarksUpdate(BaseModel):
    marks: list[MarksRow] = Field(
        min_length=len(QUESTION_LABELS),
        max_length=len(QUESTION_LABELS),
    )


class GrievanceCreate(BaseModel):
    text: str = Field(max_length=GRIEVANCE_TEXT_MAX_LENGTH)


class PublicationState(BaseModel):
    published: bool


class FacultyDashboardStats(BaseModel):
    assigned: int
    graded: int
    pending: int
    open_grievances: int


class SubjectRead(BaseModel):
    code: str
    name: str
