"""Scoped log context for requests and content lookups.

``bind_request_context`` is entered once per HTTP request by the server
middleware. ``bind_content_context`` wraps a localized configuration read so
cache and store entries emitted underneath name the configuration and the
language being served.
"""

import uuid
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Optional

import structlog


@contextmanager
def _bound(context: Dict[str, Any]) -> Iterator[None]:
    # Only keys this block introduced are removed; outer bindings stay intact
    previous = structlog.contextvars.get_contextvars()
    added = [key for key in context if key not in previous]
    structlog.contextvars.bind_contextvars(**context)
    try:
        yield
    finally:
        structlog.contextvars.unbind_contextvars(*added)
        restored = {key: previous[key] for key in context if key in previous}
        if restored:
            structlog.contextvars.bind_contextvars(**restored)


@contextmanager
def bind_request_context(
    request_id: Optional[str] = None,
    path: Optional[str] = None,
    method: Optional[str] = None,
) -> Iterator[str]:
    """Bind request fields to every log entry inside the block.

    Args:
        request_id: Value of the inbound ``X-Request-ID`` header; a UUID is
            generated when absent.
        path: Request path.
        method: HTTP method.

    Yields:
        The request id in effect, for echoing back to the client.
    """
    request_id = request_id or str(uuid.uuid4())
    context: Dict[str, Any] = {"request_id": request_id}
    if path is not None:
        context["path"] = path
    if method is not None:
        context["method"] = method

    with _bound(context):
        yield request_id


@contextmanager
def bind_content_context(config_id: Optional[int], language: Optional[str]) -> Iterator[None]:
    """Bind the configuration and requested language for a localized read."""
    with _bound({"config_id": config_id, "language": language}):
        yield
