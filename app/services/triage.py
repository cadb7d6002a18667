from typing import Iterable, List, Optional

import structlog

from app.core.errors import InquiryDeskError, StoreOperationFailure
from app.core.status import ALL_STATUSES, SubmissionStatus, parse_status_filter
from app.schemas.notice import Notice
from app.schemas.submission import SubmissionOut, SubmissionStats
from app.services.store import SubmissionStore

logger = structlog.get_logger(__name__)

"""
TRIAGE BOARD => ADMIN DASHBOARD STATE

Keeps the full set of submissions as last loaded from the store and a
visible subset derived from the search text and status filter. Counts are
always taken over the full set. Every successful status change reloads
the full set from the store instead of patching it locally.
"""


#Search over name and email (case-insensitive) and phone (exact substring)
def matches_search(submission: SubmissionOut, query: str) -> bool:
    if not query:
        return True

    needle = query.lower()

    if needle in submission.name.lower():
        return True
    if submission.email and needle in submission.email.lower():
        return True
    if submission.phone and query in submission.phone:
        return True

    return False


def matches_status(submission: SubmissionOut, status: Optional[SubmissionStatus]) -> bool:
    return status is None or submission.status == status


#Keep the input order; filtering never reorders
def filter_submissions(
    submissions: Iterable[SubmissionOut],
    query: str = "",
    status_filter: str = ALL_STATUSES,
) -> List[SubmissionOut]:
    status = parse_status_filter(status_filter)
    return [
        submission
        for submission in submissions
        if matches_search(submission, query) and matches_status(submission, status)
    ]


def compute_stats(submissions: Iterable[SubmissionOut]) -> SubmissionStats:
    stats = SubmissionStats()

    for submission in submissions:
        stats.total += 1
        if submission.status == SubmissionStatus.NEW:
            stats.new += 1
        elif submission.status == SubmissionStatus.IN_PROGRESS:
            stats.in_progress += 1
        elif submission.status == SubmissionStatus.COMPLETED:
            stats.completed += 1

    return stats


class TriageBoard:

    def __init__(self, store: SubmissionStore):
        self.store = store

        self.submissions: List[SubmissionOut] = []
        self.visible: List[SubmissionOut] = []
        self.search_query = ""
        self.status_filter = ALL_STATUSES

        self.selected: Optional[SubmissionOut] = None
        self.is_detail_open = False

        self.is_loading = True
        self.error: Optional[InquiryDeskError] = None
        self.notices: List[Notice] = []

    @property
    def stats(self) -> SubmissionStats:
        return compute_stats(self.submissions)

    def _recompute(self) -> None:
        self.visible = filter_submissions(
            self.submissions,
            self.search_query,
            self.status_filter,
        )

    #Replace the full set with what the store holds now
    def refresh(self) -> bool:
        self.error = None
        self.is_loading = True
        try:
            submissions = self.store.select_all()
        except StoreOperationFailure as e:
            logger.warning("triage.refresh_failed", error=str(e))
            self.error = e
            self.notices.append(
                Notice(title="Failed to load submissions", variant="destructive")
            )
            return False
        finally:
            self.is_loading = False

        self.submissions = list(submissions)
        self._recompute()
        return True

    def set_search(self, query: str) -> None:
        self.search_query = query or ""
        self._recompute()

    #Unknown filter values raise ValueError and leave the filter unchanged
    def set_status_filter(self, status_filter: str) -> None:
        parse_status_filter(status_filter)
        self.status_filter = status_filter
        self._recompute()

    def find(self, submission_id: str) -> Optional[SubmissionOut]:
        for submission in self.submissions:
            if submission.id == submission_id:
                return submission
        return None

    def open_detail(self, submission_id: str) -> Optional[SubmissionOut]:
        submission = self.find(submission_id)
        if submission is None:
            return None

        self.selected = submission
        self.is_detail_open = True
        return submission

    def close_detail(self) -> None:
        self.is_detail_open = False

    #Move one submission to any status, then reload from the store.
    #Returns the reloaded submission, or None when the update failed.
    def update_status(
        self,
        submission_id: str,
        status: SubmissionStatus,
    ) -> Optional[SubmissionOut]:
        status = SubmissionStatus(status)
        self.error = None

        try:
            self.store.update_status(submission_id, status)
        except StoreOperationFailure as e:
            logger.warning(
                "triage.update_status_failed",
                submission_id=submission_id,
                error=str(e),
            )
            self.error = e
            self.notices.append(
                Notice(title="Failed to update status", variant="destructive")
            )
            return None

        self.notices.append(Notice(title="Status updated"))

        reloaded = self.refresh()

        if self.selected is not None and self.selected.id == submission_id:
            fresh = self.find(submission_id) if reloaded else None
            self.selected = fresh or self.selected.model_copy(update={"status": status})

        if not reloaded:
            return None

        return self.find(submission_id)
