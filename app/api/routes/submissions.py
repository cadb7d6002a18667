from fastapi import APIRouter, Depends, Query

from app.api.deps import get_store, http_error_for
from app.core.errors import StoreOperationFailure
from app.core.status import ALL_STATUSES, SubmissionStatus
from app.schemas.submission import (
    SubmissionListOut,
    SubmissionOut,
    SubmissionStats,
    SubmissionStatusUpdate,
)
from app.services.store import SubmissionStore
from app.services.triage import TriageBoard

router = APIRouter(
    prefix="/admin/submissions",
    tags=["Submissions"],
)

"""
SUBMISSION ROUTES => ADMIN TRIAGE DASHBOARD

Each request loads the full set from the store into a TriageBoard and
answers from it. Search and status filtering happen over the loaded set,
counts are always over the full set.
"""

StatusFilterParam = Query(
    ALL_STATUSES,
    pattern="^(" + "|".join([ALL_STATUSES] + [s.value for s in SubmissionStatus]) + ")$",
)


def _load_board(store: SubmissionStore) -> TriageBoard:
    board = TriageBoard(store)
    if not board.refresh():
        raise http_error_for(board.error)
    return board


#List the visible subset (newest first) together with counts over everything
@router.get("/", response_model=SubmissionListOut)
def list_submissions(
    q: str = Query(""),
    status: str = StatusFilterParam,
    store: SubmissionStore = Depends(get_store),
):
    board = _load_board(store)
    board.set_search(q)
    board.set_status_filter(status)

    return SubmissionListOut(
        submissions=board.visible,
        stats=board.stats,
    )


#Return status counts for the dashboard cards
@router.get("/stats", response_model=SubmissionStats)
def submission_stats(store: SubmissionStore = Depends(get_store)):
    return _load_board(store).stats


#Return a single submission for the detail view
@router.get("/{submission_id}", response_model=SubmissionOut)
def get_submission(
    submission_id: str,
    store: SubmissionStore = Depends(get_store),
):
    try:
        return store.get(submission_id)
    except StoreOperationFailure as e:
        raise http_error_for(e) from e


#Move a submission to any status; same-status updates are still written
@router.patch("/{submission_id}/status", response_model=SubmissionOut)
def update_submission_status(
    submission_id: str,
    payload: SubmissionStatusUpdate,
    store: SubmissionStore = Depends(get_store),
):
    board = TriageBoard(store)

    updated = board.update_status(submission_id, SubmissionStatus(payload.status))
    if updated is None:
        raise http_error_for(board.error)

    return updated
