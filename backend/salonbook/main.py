import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy import text

from .config import settings
from .database import SessionLocal
from .errors import AvailabilityError, RateLimitError
from .redis_client import redis_client
from .routers import availability

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title="Salon Booking Availability API")

app.include_router(availability.router)


@app.exception_handler(AvailabilityError)
async def availability_error_handler(request: Request, exc: AvailabilityError):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    headers = None
    if isinstance(exc, RateLimitError) and exc.retry_after:
        headers = {"Retry-After": str(exc.retry_after)}
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "error": exc.message},
        headers=headers,
    )


def _check_database() -> bool:
    db = SessionLocal()
    try:
        db.execute(text("SELECT 1"))
        return True
    except Exception:
        logger.exception("Health check: database unreachable")
        return False
    finally:
        db.close()


def _check_redis() -> bool:
    try:
        return bool(redis_client.ping())
    except Exception as e:
        logger.warning(f"Health check: redis unreachable: {e}")
        return False


@app.get("/health")
def health():
    checks = {
        "database": _check_database(),
        "redis": _check_redis(),
    }
    return {
        "status": "healthy" if all(checks.values()) else "degraded",
        **checks,
    }
