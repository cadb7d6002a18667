"""
DOMAIN ERRORS

Two kinds of failure end an intake or triage operation:

- ValidationFailure: rejected locally, the store was never contacted
- StoreOperationFailure: the store rejected or failed the call

Neither is retried. Routes map them to HTTP status codes.
"""


class InquiryDeskError(Exception):
    """Base class for errors raised by the intake and triage flows."""


class ValidationFailure(InquiryDeskError):
    pass


class StoreOperationFailure(InquiryDeskError):
    pass


#Raised when an update or lookup targets an id the store does not hold
class SubmissionNotFound(StoreOperationFailure):
    def __init__(self, submission_id: str):
        super().__init__(f"Submission {submission_id} not found")
        self.submission_id = submission_id
