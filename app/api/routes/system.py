from fastapi import APIRouter, Request

from api.dependencies.rate_limits import SYSTEM_RATE_LIMIT, get_limiter
from infrastructure.services import CacheBackendDep, SettingsDep

router = APIRouter(tags=["System"])
limiter = get_limiter()


@router.get("/version")
@limiter.limit(SYSTEM_RATE_LIMIT)
def get_version(request: Request, settings: SettingsDep):  # pylint: disable=unused-argument
    """Get the version of the application."""
    return {"version": settings.GIT_SHA}


@router.get("/health")
@limiter.limit(SYSTEM_RATE_LIMIT)
def get_health(request: Request, cache_backend: CacheBackendDep):  # pylint: disable=unused-argument
    """Healthcheck endpoint.

    Reports whether multilingual content is being served. A missing cache
    degrades the service but does not make it unhealthy.
    """
    return {
        "status": "ok",
        "multilingual": cache_backend.capability.value,
        "cache": cache_backend.cache.get_stats(),
    }
