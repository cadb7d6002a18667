from typing import Optional

import structlog
from fastapi import Header, HTTPException

from app.core.config import settings

logger = structlog.get_logger(__name__)

"""
ADMIN REQUEST GATE

ADMIN_ACCESS=open lets every admin request through unchanged.
ADMIN_ACCESS=api_key requires the X-Admin-Key header to match ADMIN_API_KEY.
"""


def admin_access_is_open() -> bool:
    return settings.ADMIN_ACCESS == "open"


def require_admin(x_admin_key: Optional[str] = Header(None)):
    if admin_access_is_open():
        return

    if not settings.ADMIN_API_KEY:
        logger.error("admin_gate.missing_api_key")
        raise HTTPException(status_code=503, detail="Admin access is not configured")

    if x_admin_key != settings.ADMIN_API_KEY:
        raise HTTPException(status_code=403, detail="Admin access required")
