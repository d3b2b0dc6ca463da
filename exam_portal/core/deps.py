from fastapi import Depends
from sqlalchemy.orm import Session

from exam_portal.db.session import SessionLocal
from exam_portal.services.evaluation_store import EvaluationStore


# every request that needs DB will get a fresh session, and it will always close.
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_store(db: Session = Depends(get_db)) -> EvaluationStore:
    return EvaluationStore(db)
