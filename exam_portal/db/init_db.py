import logging

from sqlalchemy.orm import Session

from exam_portal.db.base_class import Base
from exam_portal.db.seed import seed_roster
from exam_portal.db.session import SessionLocal, engine

# import models so SQLAlchemy registers them
from exam_portal.models import answer_script, marks_row, portal_setting  # noqa: F401

logger = logging.getLogger(__name__)


def create_schema(bind) -> None:
    Base.metadata.create_all(bind=bind)


def init_db(session_factory=SessionLocal, bind=engine) -> None:
    create_schema(bind)

    db: Session = session_factory()
    try:
        created = seed_roster(db)
    finally:
        db.close()

    logger.info("Evaluation store ready (%d scripts seeded)", created)
