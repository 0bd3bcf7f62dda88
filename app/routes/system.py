from fastapi import APIRouter

from app.schemas.system import HealthCheckResponse

router = APIRouter(tags=["System"])


@router.get("/health", response_model=HealthCheckResponse)
def health_check():
    """Liveness probe."""
    return HealthCheckResponse(status="OK")
