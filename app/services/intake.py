from typing import List, Optional

import structlog

from app.core.errors import InquiryDeskError, StoreOperationFailure, ValidationFailure
from app.schemas.notice import Notice
from app.schemas.submission import SubmissionOut
from app.services.store import SubmissionStore

logger = structlog.get_logger(__name__)

"""
CONTACT FORM STATE => PUBLIC INQUIRY INTAKE

Holds what the visitor typed and turns a submit into exactly one store
insert. Consent and required fields are checked before the store is
contacted. On success the form is cleared, on failure the input is kept
so the visitor can try again.
"""


class IntakeForm:

    def __init__(
        self,
        store: SubmissionStore,
        name: str = "",
        phone: str = "",
        email: str = "",
        message: str = "",
        agreed: bool = False,
    ):
        self.store = store
        self.name = name
        self.phone = phone
        self.email = email
        self.message = message
        self.agreed = agreed

        self.is_loading = False
        self.error: Optional[InquiryDeskError] = None
        self.notices: List[Notice] = []

    def reset(self) -> None:
        self.name = ""
        self.phone = ""
        self.email = ""
        self.message = ""
        self.agreed = False

    #Validate locally, then insert once. Returns the new submission or None.
    def submit(self) -> Optional[SubmissionOut]:
        self.error = None

        if not self.agreed:
            self.error = ValidationFailure("Consent not given")
            self.notices.append(
                Notice(
                    title="Consent required",
                    description="Please agree to the privacy policy.",
                    variant="destructive",
                )
            )
            return None

        if not self.name.strip() or not self.message.strip():
            self.error = ValidationFailure("Name and message are required")
            self.notices.append(
                Notice(
                    title="Missing information",
                    description="Please enter your name and message.",
                    variant="destructive",
                )
            )
            return None

        self.is_loading = True
        try:
            submission = self.store.insert(
                name=self.name,
                phone=self.phone or None,
                email=self.email or None,
                message=self.message,
            )
        except StoreOperationFailure as e:
            logger.warning("intake.submit_failed", error=str(e))
            self.error = e
            self.notices.append(
                Notice(
                    title="Something went wrong",
                    description="Please try again.",
                    variant="destructive",
                )
            )
            return None
        finally:
            self.is_loading = False

        self.notices.append(
            Notice(
                title="Your inquiry has been received",
                description="We will get back to you shortly.",
            )
        )
        self.reset()
        return submission
