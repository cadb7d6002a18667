import uuid
from datetime import datetime, timezone

from sqlalchemy import (
    Column,
    String,
    DateTime,
    Enum,
    Text,
)
from app.db.base import Base
from app.core.status import SubmissionStatus


# =========================================================
# SHARED ENUMS:
# =========================================================


#Triage state for contact submissions
SubmissionStatusEnum = Enum(
    *[status.value for status in SubmissionStatus],
    name="submission_status_enum",
)


def _new_id() -> str:
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


# =========================================================
# CONTACT SUBMISSIONS (public contact form):
# =========================================================


#Represents a single customer inquiry sent through the contact form
class ContactSubmission(Base):
    __tablename__ = "contact_submissions"

    #Store-assigned identity
    id = Column(String(36), primary_key=True, default=_new_id)

    #Customer-provided details
    name = Column(String, nullable=False)
    phone = Column(String, nullable=True)
    email = Column(String, nullable=True)
    message = Column(Text, nullable=False)

    #Triage state
    status = Column(SubmissionStatusEnum, nullable=False, default=SubmissionStatus.NEW.value)

    #Creation and last mutation timestamps
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, index=True)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)
