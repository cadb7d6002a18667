from dotenv import load_dotenv
load_dotenv()

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import settings
from app.core.logging import setup_logging
from app.db.session import engine, SessionLocal
from app.db.base import Base
from app.db import models  # noqa: F401 (ensures models are registered)
from app.api.router import api_router
from app.api.admin_deps import admin_access_is_open
from app.db.seed import seed_demo_submissions


setup_logging(settings.LOG_LEVEL, settings.LOG_JSON)
logger = structlog.get_logger(__name__)


#Create application instance
app = FastAPI(title=settings.APP_NAME)


#configure CORS for the contact form and dashboard frontends
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.FRONTEND_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


#Create all database tables on application startup
Base.metadata.create_all(bind=engine)


#Report the admin gate mode and optionally seed demo data
@app.on_event("startup")
def startup():
    if admin_access_is_open():
        logger.warning("admin_gate.open", detail="admin routes accept unauthenticated requests")

    if not settings.SEED_DEMO_DATA:
        return

    db = SessionLocal()
    try:
        seed_demo_submissions(db)
    finally:
        db.close()


@app.get("/health", tags=["Health"])
def health():
    return {"status": "ok"}


#Register all API routes under the main application
app.include_router(api_router)
