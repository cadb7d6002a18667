"""Tests for the public contact form state."""

from app.core.errors import StoreOperationFailure, ValidationFailure
from app.core.status import SubmissionStatus
from app.services.intake import IntakeForm

from conftest import RecordingStore


def filled_form(store, **overrides) -> IntakeForm:
    values = {
        "name": "Kim",
        "phone": "010-1111-2222",
        "email": "a@x.com",
        "message": "Please call me back.",
        "agreed": True,
    }
    values.update(overrides)
    return IntakeForm(store, **values)


def form_values(form: IntakeForm) -> tuple:
    return (form.name, form.phone, form.email, form.message, form.agreed)


class TestIntakeForm:
    """Test submit behavior of IntakeForm."""

    def test_without_consent_store_is_never_called(self) -> None:
        store = RecordingStore()
        form = filled_form(store, agreed=False)

        assert form.submit() is None

        assert store.calls == []
        assert isinstance(form.error, ValidationFailure)
        assert form.notices[-1].title == "Consent required"
        assert form.name == "Kim"

    def test_blank_required_fields_are_rejected_locally(self) -> None:
        store = RecordingStore()
        form = filled_form(store, message="   ")

        assert form.submit() is None

        assert store.calls == []
        assert isinstance(form.error, ValidationFailure)

    def test_success_inserts_once_and_clears_form(self) -> None:
        store = RecordingStore()
        form = filled_form(store)

        submission = form.submit()

        assert submission.status is SubmissionStatus.NEW
        assert store.count("insert") == 1
        assert form_values(form) == ("", "", "", "", False)
        assert form.error is None
        assert not form.is_loading
        assert form.notices[-1].variant == "default"

    def test_blank_optional_fields_are_sent_as_absent(self) -> None:
        store = RecordingStore()
        form = filled_form(store, phone="", email="")

        submission = form.submit()

        assert store.calls == [("insert", "Kim", "Please call me back.", None, None)]
        assert submission.phone is None
        assert submission.email is None

    def test_failure_keeps_input(self) -> None:
        store = RecordingStore()
        store.failing.add("insert")
        form = filled_form(store)
        before = form_values(form)

        assert form.submit() is None

        assert form_values(form) == before
        assert isinstance(form.error, StoreOperationFailure)
        assert store.rows == []
        assert not form.is_loading
        assert form.notices[-1].title == "Something went wrong"

    def test_resubmit_after_failure(self) -> None:
        store = RecordingStore()
        store.failing.add("insert")
        form = filled_form(store)
        form.submit()

        store.failing.clear()
        assert form.submit() is not None
        assert form.error is None
        assert store.count("insert") == 2
        assert len(store.rows) == 1
