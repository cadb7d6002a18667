"""Pytest configuration for Inquiry Desk tests."""

import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("ADMIN_ACCESS", "open")

import uuid
from datetime import datetime, timedelta, timezone
from typing import List, Optional

import pytest
from fastapi.testclient import TestClient

from app.core.errors import StoreOperationFailure, SubmissionNotFound
from app.core.status import SubmissionStatus
from app.db.base import Base
from app.db.session import SessionLocal, engine
from app.main import app
from app.schemas.submission import SubmissionOut
from app.services.store import SubmissionStore

BASE_TIME = datetime(2026, 1, 10, 9, 0, tzinfo=timezone.utc)


def make_submission(
    name: str,
    *,
    email: Optional[str] = None,
    phone: Optional[str] = None,
    message: str = "Hello",
    status: str = "new",
    minutes_ago: int = 0,
) -> SubmissionOut:
    """Build a submission as the store would return it."""
    created = BASE_TIME - timedelta(minutes=minutes_ago)
    return SubmissionOut(
        id=str(uuid.uuid4()),
        name=name,
        email=email,
        phone=phone,
        message=message,
        status=SubmissionStatus(status),
        created_at=created,
        updated_at=created,
    )


class RecordingStore:
    """In-memory store that records every call made to it."""

    def __init__(self, submissions: Optional[List[SubmissionOut]] = None) -> None:
        self.rows: List[SubmissionOut] = list(submissions or [])
        self.calls: list = []
        self.failing: set = set()

    def _check(self, operation: str) -> None:
        if operation in self.failing:
            raise StoreOperationFailure(f"{operation} failed")

    def insert(self, name, message, phone=None, email=None) -> SubmissionOut:
        self.calls.append(("insert", name, message, phone, email))
        self._check("insert")
        now = datetime.now(timezone.utc)
        submission = SubmissionOut(
            id=str(uuid.uuid4()),
            name=name,
            phone=phone,
            email=email,
            message=message,
            status=SubmissionStatus.NEW,
            created_at=now,
            updated_at=now,
        )
        self.rows.append(submission)
        return submission

    def select_all(self) -> List[SubmissionOut]:
        self.calls.append(("select_all",))
        self._check("select_all")
        return sorted(self.rows, key=lambda s: s.created_at, reverse=True)

    def update_status(self, submission_id, status) -> None:
        self.calls.append(("update_status", submission_id, status))
        self._check("update_status")
        for index, row in enumerate(self.rows):
            if row.id == submission_id:
                self.rows[index] = row.model_copy(
                    update={"status": status, "updated_at": datetime.now(timezone.utc)}
                )
                return
        raise SubmissionNotFound(submission_id)

    def count(self, operation: str) -> int:
        return sum(1 for call in self.calls if call[0] == operation)


@pytest.fixture
def kim_and_lee() -> List[SubmissionOut]:
    return [
        make_submission(
            "Kim", email="a@x.com", phone="010-1111-2222", status="new", minutes_ago=0
        ),
        make_submission(
            "Lee", email="b@x.com", phone="010-3333-4444", status="completed", minutes_ago=5
        ),
    ]


@pytest.fixture
def recording_store(kim_and_lee) -> RecordingStore:
    return RecordingStore(kim_and_lee)


@pytest.fixture
def db_session():
    """Fresh tables on the shared in-memory engine for each test."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def store(db_session) -> SubmissionStore:
    return SubmissionStore(db_session)


@pytest.fixture
def client(db_session):
    with TestClient(app) as test_client:
        yield test_client
