from fastapi import APIRouter, Depends, HTTPException, status

from exam_portal.core.deps import get_store
from exam_portal.core.subjects import viewer_subject_name
from exam_portal.schemas.evaluation import (
    AnswerScriptRead,
    EvaluationView,
    GrievanceCreate,
    MarksUpdate,
)
from exam_portal.services.evaluation_store import EvaluationStore
from exam_portal.services.scoring import compute_total, row_total

router = APIRouter()


def _evaluation_view(script: AnswerScriptRead) -> EvaluationView:
    return EvaluationView(
        **script.model_dump(),
        subject_name=viewer_subject_name(script.subject_code),
        row_totals={row.q: row_total(row) for row in script.marks},
        total_marks=compute_total(script.marks),
    )


def _ensure_script_exists(store: EvaluationStore, roll_no: str, subject_code: str) -> AnswerScriptRead:
    script = store.get_script(roll_no, subject_code)
    if not script:
        raise HTTPException(status_code=404, detail="Answer script not found")
    return script


def _refuse_resolution(store: EvaluationStore, roll_no: str, subject_code: str) -> None:
    # scripts are never removed, so a refused resolve is either a miss or a closed grievance
    _ensure_script_exists(store, roll_no, subject_code)
    raise HTTPException(status_code=409, detail="No open grievance for this script")


@router.get("", response_model=list[AnswerScriptRead])
def list_scripts(store: EvaluationStore = Depends(get_store)):
    return store.list_scripts()


@router.get("/{roll_no}/{subject_code}", response_model=EvaluationView)
def view_script(
    roll_no: str,
    subject_code: str,
    store: EvaluationStore = Depends(get_store),
):
    return _evaluation_view(_ensure_script_exists(store, roll_no, subject_code))


@router.put("/{roll_no}/{subject_code}/marks", response_model=EvaluationView)
def save_marks(
    roll_no: str,
    subject_code: str,
    payload: MarksUpdate,
    store: EvaluationStore = Depends(get_store),
):
    if not store.save_marks(roll_no, subject_code, payload.marks):
        raise HTTPException(status_code=404, detail="Answer script not found")
    return _evaluation_view(_ensure_script_exists(store, roll_no, subject_code))


@router.post(
    "/{roll_no}/{subject_code}/grievance",
    response_model=EvaluationView,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"description": "Grievance text is blank"},
        404: {"description": "Answer script not found"},
    },
)
def submit_grievance(
    roll_no: str,
    subject_code: str,
    payload: GrievanceCreate,
    store: EvaluationStore = Depends(get_store),
):
    text = payload.text.strip()
    if not text:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Please enter your grievance details.",
        )

    if not store.submit_grievance(roll_no, subject_code, text):
        raise HTTPException(status_code=404, detail="Answer script not found")
    return _evaluation_view(_ensure_script_exists(store, roll_no, subject_code))


@router.post(
    "/{roll_no}/{subject_code}/grievance/accept",
    response_model=EvaluationView,
    responses={409: {"description": "No open grievance for this script"}},
)
def accept_grievance(
    roll_no: str,
    subject_code: str,
    payload: MarksUpdate,
    store: EvaluationStore = Depends(get_store),
):
    if not store.accept_grievance(roll_no, subject_code, payload.marks, require_open=True):
        _refuse_resolution(store, roll_no, subject_code)
    return _evaluation_view(_ensure_script_exists(store, roll_no, subject_code))


@router.post(
    "/{roll_no}/{subject_code}/grievance/reject",
    response_model=EvaluationView,
    responses={409: {"description": "No open grievance for this script"}},
)
def reject_grievance(
    roll_no: str,
    subject_code: str,
    store: EvaluationStore = Depends(get_store),
):
    if not store.reject_grievance(roll_no, subject_code, require_open=True):
        _refuse_resolution(store, roll_no, subject_code)
    return _evaluation_view(_ensure_script_exists(store, roll_no, subject_code))
