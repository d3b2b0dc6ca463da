from sqlalchemy import Boolean, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from exam_portal.db.base_class import Base


class AnswerScript(Base):
    __tablename__ = "answer_scripts"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)

    roll_no: Mapped[str] = mapped_column(String(32), nullable=False, index=True)
    # always stored upper-case
    subject_code: Mapped[str] = mapped_column(String(16), nullable=False, index=True)
    submission_date: Mapped[str] = mapped_column(String(10), nullable=False)

    status: Mapped[str] = mapped_column(String(16), nullable=False, default="pending")

    # Grievance sub-state: text and date are set iff has_grievance
    has_grievance: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    grievance_text: Mapped[str | None] = mapped_column(Text)
    grievance_date: Mapped[str | None] = mapped_column(String(16))

    # "updated" | "unchanged" once a grievance has been resolved
    recheck_outcome: Mapped[str | None] = mapped_column(String(16))

    __table_args__ = (
        UniqueConstraint("roll_no", "subject_code", name="uq_answer_scripts_roll_subject"),
    )

    marks_rows = relationship(
        "MarksRowRecord",
        back_populates="script",
        cascade="all, delete-orphan",
        order_by="MarksRowRecord.position",
    )
