"""API v1 router initialization."""

from fastapi import APIRouter, Depends

from app.api.v1.about_us import router as about_us_router
from app.api.v1.auth import router as auth_router
from app.api.v1.billboards import router as billboards_router
from app.api.v1.events import router as events_router
from app.api.v1.users import router as users_router
from app.core.deps import get_current_user_required

router = APIRouter()

# Content management requires a signed-in administrator
admin_only = [Depends(get_current_user_required)]

router.include_router(auth_router, prefix="/auth", tags=["Auth"])
router.include_router(users_router, prefix="/users", tags=["Users"])
router.include_router(events_router, prefix="/events", tags=["Events"], dependencies=admin_only)
router.include_router(about_us_router, prefix="/about-us", tags=["About Us"], dependencies=admin_only)
router.include_router(billboards_router, prefix="/billboards", tags=["Billboards"], dependencies=admin_only)
