from fastapi import APIRouter, Depends

from exam_portal.core.deps import get_store
from exam_portal.core.subjects import SUBJECTS
from exam_portal.schemas.evaluation import FacultyDashboardStats, SubjectRead
from exam_portal.services.evaluation_store import EvaluationStore

router = APIRouter(tags=["faculty"])


@router.get("/faculty/dashboard", response_model=FacultyDashboardStats)
def faculty_dashboard(store: EvaluationStore = Depends(get_store)):
    return store.dashboard_stats()


@router.get("/subjects", response_model=list[SubjectRead], tags=["subjects"])
def list_subjects():
    return [SubjectRead(code=code, name=name) for code, name in SUBJECTS.items()]
