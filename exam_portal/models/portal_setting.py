from sqlalchemy import Boolean
from sqlalchemy.orm import Mapped, mapped_column

from exam_portal.db.base_class import Base


class PortalSetting(Base):
    """Single-row table holding process-wide portal switches."""

    __tablename__ = "portal_settings"

    id: Mapped[int] = mapped_column(primary_key=True)
    results_published: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
