from pydantic import BaseModel, EmailStr, Field, computed_field, field_validator
from typing import List, Optional
from datetime import datetime

from app.core.status import SubmissionStatus

"""
SUBMISSION SCHEMA
"""


#Payload posted by the public contact form
class SubmissionCreate(BaseModel):
    name: str = Field(min_length=1)
    phone: Optional[str] = None
    email: Optional[EmailStr] = None
    message: str = Field(min_length=1)
    agreed: bool = False

    #Empty optional inputs are stored as absent
    @field_validator("phone", "email", mode="before")
    @classmethod
    def blank_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("name", "message")
    @classmethod
    def not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value


#Payload used to move a submission to another status
class SubmissionStatusUpdate(BaseModel):
    status: SubmissionStatus


#A submission as shown in the dashboard table and detail view
class SubmissionOut(BaseModel):
    id: str
    name: str
    phone: Optional[str] = None
    email: Optional[str] = None
    message: str
    status: SubmissionStatus
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}

    @computed_field
    @property
    def status_label(self) -> str:
        return self.status.label

    @computed_field
    @property
    def status_badge(self) -> str:
        return self.status.badge


#Aggregate counts over every loaded submission
class SubmissionStats(BaseModel):
    total: int = 0
    new: int = 0
    in_progress: int = 0
    completed: int = 0


#Dashboard list response: the visible subset plus counts over the full set
class SubmissionListOut(BaseModel):
    submissions: List[SubmissionOut]
    stats: SubmissionStats
