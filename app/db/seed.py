import structlog
from sqlalchemy.orm import Session

from app.db.models import ContactSubmission

logger = structlog.get_logger(__name__)


DEMO_SUBMISSIONS = [
    {
        "name": "Kim Minji",
        "phone": "010-1111-2222",
        "email": "minji@example.com",
        "message": "Could you send me a quote for the premium plan?",
        "status": "new",
    },
    {
        "name": "Lee Junho",
        "phone": "010-3333-4444",
        "email": None,
        "message": "Please call me back about my order.",
        "status": "in_progress",
    },
    {
        "name": "Park Seoyeon",
        "phone": None,
        "email": "seoyeon@example.com",
        "message": "Thanks, the issue has been resolved.",
        "status": "completed",
    },
]


#Insert demo submissions for local development when the table is empty
def seed_demo_submissions(db: Session) -> int:
    existing = db.query(ContactSubmission).first()
    if existing:
        return 0

    db.add_all([ContactSubmission(**data) for data in DEMO_SUBMISSIONS])
    db.commit()

    logger.info("seed.demo_submissions_created", count=len(DEMO_SUBMISSIONS))
    return len(DEMO_SUBMISSIONS)
