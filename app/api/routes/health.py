from fastapi import APIRouter, Response

from app.pricing.providers import LLM_PROVIDERS


router = APIRouter()


@router.get("/health")
def health() -> dict:
    """Liveness check: always returns 200 if app is running."""
    return {"status": "ok"}


@router.get("/ready")
def readiness(response: Response) -> dict:
    """
    Readiness check. The price table is a static module constant, so once the app has
    imported it this mirrors /health; the 503 branch only guards an empty table.
    """
    if not LLM_PROVIDERS:
        response.status_code = 503
        return {"status": "not_ready", "error": "price table is empty"}
    return {"status": "ready"}
