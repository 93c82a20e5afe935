import datetime
from fastapi import APIRouter
from family_budget.config.setting import settings

router = APIRouter()


@router.get("/health")
async def health_check():
    """
    Liveness probe.
    """
    return {
        "status": "OK",
        "message": f"{settings.app_name} API is running",
        "timestamp": datetime.datetime.now(datetime.timezone.utc).isoformat(),
    }


@router.get("/test")
async def test_endpoint():
    return {
        "message": "Hello from Family Budget API!",
        "environment": settings.environment,
    }
