from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.dependencies.rate_limits import setup_rate_limiter
from api.router import api_router
from infrastructure.errors import (
    ConflictError,
    MultilingualUnavailableError,
    NotFoundError,
    ServiceError,
    ValidationError,
)
from infrastructure.logging import bind_request_context, get_module_logger
from infrastructure.services import get_settings
from server.lifespan import lifespan

logger = get_module_logger()

ERROR_STATUS_CODES = {
    ValidationError: 400,
    NotFoundError: 404,
    ConflictError: 409,
    MultilingualUnavailableError: 503,
}


def status_code_for(error: ServiceError) -> int:
    """HTTP status for a domain error; unknown subclasses map to 500."""
    for error_type, status_code in ERROR_STATUS_CODES.items():
        if isinstance(error, error_type):
            return status_code
    return 500


async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    """Render a domain error with the status its type maps to."""
    status_code = status_code_for(exc)
    log = logger.warning if status_code < 500 else logger.error
    log(
        "request_failed",
        path=request.url.path,
        method=request.method,
        status_code=status_code,
        error_code=exc.code,
    )
    return JSONResponse(status_code=status_code, content={"error": exc.to_dict()})


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Reshape request schema failures into the service error body."""
    errors = [
        {
            "field": ".".join(str(part) for part in error.get("loc", ())),
            "message": error.get("msg", ""),
        }
        for error in exc.errors()
    ]
    logger.warning(
        "request_validation_failed",
        path=request.url.path,
        method=request.method,
        errors=errors,
    )
    body = ValidationError("Invalid request", details={"errors": errors})
    return JSONResponse(status_code=400, content={"error": body.to_dict()})


handler = FastAPI(title="Site Metadata Service", lifespan=lifespan)
setup_rate_limiter(handler)

handler.add_exception_handler(ServiceError, service_error_handler)
handler.add_exception_handler(RequestValidationError, request_validation_handler)


@handler.middleware("http")
async def request_context_middleware(request: Request, call_next):
    """Bind a request id to every log line of the request and echo it back."""
    with bind_request_context(
        request_id=request.headers.get("X-Request-ID"),
        path=request.url.path,
        method=request.method,
    ) as request_id:
        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        return response


handler.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().server.allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["X-Content-Language", "X-Request-ID"],
)


handler.include_router(api_router)
