"""Structured logging for the site metadata service."""

from infrastructure.logging.context import bind_content_context, bind_request_context
from infrastructure.logging.setup import configure_logging, get_module_logger

__all__ = [
    "bind_content_context",
    "bind_request_context",
    "configure_logging",
    "get_module_logger",
]
