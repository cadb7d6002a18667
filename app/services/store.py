from typing import List, Optional

import structlog
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.errors import StoreOperationFailure, SubmissionNotFound
from app.core.status import SubmissionStatus
from app.db.models import ContactSubmission, utcnow
from app.schemas.submission import SubmissionOut

logger = structlog.get_logger(__name__)

"""
SUBMISSION STORE => THE ONLY CODE THAT TOUCHES contact_submissions

Every database failure is rolled back and re-raised as
StoreOperationFailure. Records leave the store as SubmissionOut so
callers never hold on to session-bound rows.
"""


class SubmissionStore:

    def __init__(self, db: Session):
        self.db = db

    #Persist a new submission in "new" status
    def insert(
        self,
        name: str,
        message: str,
        phone: Optional[str] = None,
        email: Optional[str] = None,
    ) -> SubmissionOut:
        submission = ContactSubmission(
            name=name,
            phone=phone or None,
            email=email or None,
            message=message,
            status=SubmissionStatus.NEW.value,
        )

        try:
            self.db.add(submission)
            self.db.commit()
            self.db.refresh(submission)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception("store.insert_failed")
            raise StoreOperationFailure("Could not save submission") from e

        logger.info("submission.created", submission_id=submission.id)
        return SubmissionOut.model_validate(submission)

    #Load every submission, newest first
    def select_all(self) -> List[SubmissionOut]:
        try:
            rows = (
                self.db.query(ContactSubmission)
                .order_by(ContactSubmission.created_at.desc())
                .all()
            )
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception("store.select_failed")
            raise StoreOperationFailure("Could not load submissions") from e

        return [SubmissionOut.model_validate(row) for row in rows]

    def get(self, submission_id: str) -> SubmissionOut:
        try:
            row = (
                self.db.query(ContactSubmission)
                .filter(ContactSubmission.id == submission_id)
                .first()
            )
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception("store.get_failed", submission_id=submission_id)
            raise StoreOperationFailure("Could not load submission") from e

        if not row:
            raise SubmissionNotFound(submission_id)

        return SubmissionOut.model_validate(row)

    #Set the status of one submission. The UPDATE is issued even when the
    #status is unchanged, so updated_at is always refreshed.
    def update_status(self, submission_id: str, status: SubmissionStatus) -> None:
        status = SubmissionStatus(status)

        try:
            matched = (
                self.db.query(ContactSubmission)
                .filter(ContactSubmission.id == submission_id)
                .update(
                    {
                        ContactSubmission.status: status.value,
                        ContactSubmission.updated_at: utcnow(),
                    },
                    synchronize_session=False,
                )
            )
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception("store.update_failed", submission_id=submission_id)
            raise StoreOperationFailure("Could not update submission status") from e

        if not matched:
            raise SubmissionNotFound(submission_id)

        logger.info(
            "submission.status_changed",
            submission_id=submission_id,
            status=status.value,
        )
