from fastapi import APIRouter, Depends

from app.api.routes import contact, submissions
from app.api.admin_deps import require_admin

api_router = APIRouter()

# 🔓 Public routes
api_router.include_router(contact.router)

# 🔒 Admin routes (gate mode set by ADMIN_ACCESS)
api_router.include_router(
    submissions.router,
    dependencies=[Depends(require_admin)],
)
