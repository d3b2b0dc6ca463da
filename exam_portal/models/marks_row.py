from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from exam_portal.db.base_class import Base


class MarksRowRecord(Base):
    __tablename__ = "marks_rows"

    id = Column(Integer, primary_key=True, index=True)
    script_id = Column(
        Integer, ForeignKey("answer_scripts.id", ondelete="CASCADE"), nullable=False, index=True
    )
    position = Column(Integer, nullable=False)

    question = Column(String(16), nullable=False)

    # raw score strings as entered ("4", "-", or whatever faculty typed)
    part_a = Column(String, nullable=False, default="0")
    part_b = Column(String, nullable=False, default="0")
    part_c = Column(String, nullable=False, default="0")
    part_d = Column(String, nullable=False, default="0")
    part_e = Column(String, nullable=False, default="0")

    script = relationship("AnswerScript", back_populates="marks_rows")
