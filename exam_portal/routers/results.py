from fastapi import APIRouter, Depends

from exam_portal.core.deps import get_store
from exam_portal.schemas.evaluation import PublicationState, StudentResult
from exam_portal.services.evaluation_store import EvaluationStore

router = APIRouter()


@router.get("/students/{roll_no}/results", response_model=list[StudentResult])
def student_results(
    roll_no: str,
    store: EvaluationStore = Depends(get_store),
):
    results = store.get_student_results(roll_no)

    # totals stay hidden from students until faculty publish
    if not store.results_published():
        for r in results:
            r.marks = None

    return results


@router.get("/results/publication", response_model=PublicationState)
def get_publication(store: EvaluationStore = Depends(get_store)):
    return PublicationState(published=store.results_published())


@router.put("/results/publication", response_model=PublicationState)
def set_publication(
    payload: PublicationState,
    store: EvaluationStore = Depends(get_store),
):
    store.set_results_published(payload.published)
    return PublicationState(published=store.results_published())
