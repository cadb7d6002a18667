from fastapi import Depends, HTTPException
from sqlalchemy.orm import Session

from app.core.errors import InquiryDeskError, SubmissionNotFound, ValidationFailure
from app.db.session import get_db
from app.services.store import SubmissionStore


#Request-scoped store bound to the request's database session
def get_store(db: Session = Depends(get_db)) -> SubmissionStore:
    return SubmissionStore(db)


#Translate a failed intake/triage operation into a generic HTTP error
def http_error_for(error: InquiryDeskError) -> HTTPException:
    if isinstance(error, ValidationFailure):
        return HTTPException(status_code=400, detail=str(error))

    if isinstance(error, SubmissionNotFound):
        return HTTPException(status_code=404, detail="Submission not found")

    return HTTPException(
        status_code=503,
        detail="The request could not be completed. Please try again.",
    )
