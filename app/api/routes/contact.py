from fastapi import APIRouter, Depends

from app.api.deps import get_store, http_error_for
from app.schemas.submission import SubmissionCreate, SubmissionOut
from app.services.intake import IntakeForm
from app.services.store import SubmissionStore

router = APIRouter(
    prefix="/contact",
    tags=["Contact"],
)

"""
CONTACT ROUTES => PUBLIC INQUIRY FORM

No auth and no rate limiting. Consent is checked before anything is
written; a rejected or failed submit persists nothing.
"""

# =========================
# 🔓 PUBLIC: submit inquiry
# =========================
@router.post("/", response_model=SubmissionOut, status_code=201)
def submit_contact(
    payload: SubmissionCreate,
    store: SubmissionStore = Depends(get_store),
):
    form = IntakeForm(
        store,
        name=payload.name,
        phone=payload.phone or "",
        email=payload.email or "",
        message=payload.message,
        agreed=payload.agreed,
    )

    submission = form.submit()
    if submission is None:
        raise http_error_for(form.error)

    return submission
