from enum import Enum
from typing import Dict, Literal, Optional

"""
SUBMISSION STATUS

A flat three-value classification. Any status may move to any other,
there is no ordering and no terminal state.
"""


class SubmissionStatus(str, Enum):
    NEW = "new"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"

    @property
    def label(self) -> str:
        return STATUS_LABELS[self]

    @property
    def badge(self) -> str:
        return STATUS_BADGES[self]


BadgeVariant = Literal["default", "secondary", "destructive", "outline"]


#Display label for each status, shown in the dashboard table and filters
STATUS_LABELS: Dict[SubmissionStatus, str] = {
    SubmissionStatus.NEW: "New",
    SubmissionStatus.IN_PROGRESS: "In progress",
    SubmissionStatus.COMPLETED: "Completed",
}


#Badge variant used when rendering a status in the dashboard
STATUS_BADGES: Dict[SubmissionStatus, BadgeVariant] = {
    SubmissionStatus.NEW: "default",
    SubmissionStatus.IN_PROGRESS: "secondary",
    SubmissionStatus.COMPLETED: "outline",
}


for _mapping in (STATUS_LABELS, STATUS_BADGES):
    _missing = set(SubmissionStatus) - set(_mapping)
    if _missing:
        raise RuntimeError(f"Status display mapping incomplete: {sorted(s.value for s in _missing)}")


#Value of the status filter that disables status filtering
ALL_STATUSES = "all"


#Parse a stored or user-supplied status, unknown values raise ValueError
def parse_status(value: str) -> SubmissionStatus:
    return SubmissionStatus(value)


#Parse a status filter value; "all" becomes None (no filtering)
def parse_status_filter(value: str) -> Optional[SubmissionStatus]:
    if value == ALL_STATUSES:
        return None
    return parse_status(value)
