"""HTTP routes."""

from fastapi import APIRouter, status

from app.adapters.inbound.http import activity, dashboard, email, franchises, imports, leads, pipeline, users

router = APIRouter()


@router.get("/health", status_code=status.HTTP_200_OK)
async def health_check() -> dict[str, str]:
    """
    Health check endpoint for liveness/readiness.

    Returns:
        Health status
    """
    return {"status": "ok"}


router.include_router(leads.router)
router.include_router(activity.router)
router.include_router(pipeline.router)
router.include_router(franchises.router)
router.include_router(users.router)
router.include_router(email.router)
router.include_router(dashboard.router)
router.include_router(imports.router)
