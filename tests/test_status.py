"""Tests for the submission status enumeration."""

import pytest

from app.core.status import (
    STATUS_BADGES,
    STATUS_LABELS,
    SubmissionStatus,
    parse_status,
    parse_status_filter,
)


class TestSubmissionStatus:
    """Test status parsing and display mapping."""

    def test_every_status_has_label_and_badge(self) -> None:
        """Test that the display mappings cover every status."""
        assert set(STATUS_LABELS) == set(SubmissionStatus)
        assert set(STATUS_BADGES) == set(SubmissionStatus)

    def test_labels(self) -> None:
        assert SubmissionStatus.NEW.label == "New"
        assert SubmissionStatus.IN_PROGRESS.label == "In progress"
        assert SubmissionStatus.COMPLETED.label == "Completed"

    def test_badges(self) -> None:
        assert SubmissionStatus.NEW.badge == "default"
        assert SubmissionStatus.IN_PROGRESS.badge == "secondary"
        assert SubmissionStatus.COMPLETED.badge == "outline"

    def test_unknown_status_is_an_error(self) -> None:
        """Test that unknown values are not silently mapped to "new"."""
        with pytest.raises(ValueError):
            parse_status("archived")

    def test_parse_status_filter(self) -> None:
        assert parse_status_filter("all") is None
        assert parse_status_filter("in_progress") is SubmissionStatus.IN_PROGRESS

        with pytest.raises(ValueError):
            parse_status_filter("everything")
