"""Logging helpers that attach context to error reports."""

import logging
import traceback
from typing import Optional, Any

logger = logging.getLogger("FeedbackAPI")


def debug_log(message: str, *args, **kwargs) -> None:
    """
    Log a debug message only if the app runs in debug mode.

    Debug mode is the DEBUG level that configure_logging sets on the
    FeedbackAPI logger.

    Args:
        message: Log message (supports % formatting)
        *args: Positional arguments for message formatting
        **kwargs: Keyword arguments (level, exc_info, etc.)
    """
    if logger.isEnabledFor(logging.DEBUG):
        level = kwargs.pop("level", logging.DEBUG)
        logger.log(level, message, *args, **kwargs)


def error_log(
    message: str,
    exc: Optional[Exception] = None,
    context: Optional[dict] = None,
) -> None:
    """
    Log an error, optionally with context and the exception that caused it.

    Args:
        message: Error message
        exc: Optional exception object
        context: Optional dictionary with additional context (path, method, ...)
    """
    parts = [message]

    if context:
        parts.append("Context: " + ", ".join(f"{k}={v}" for k, v in context.items()))

    if exc:
        parts.append(f"Exception: {type(exc).__name__}: {exc}")
        if logger.isEnabledFor(logging.DEBUG):
            parts.append(f"Traceback:\n{''.join(traceback.format_exception(type(exc), exc, exc.__traceback__))}")

    full_message = " | ".join(parts)

    if exc:
        logger.error(full_message, exc_info=exc)
    else:
        logger.error(full_message)


def log_exception_with_context(
    exc: Exception,
    context: Optional[dict] = None,
    message: Optional[str] = None
) -> None:
    """Log an exception with whatever context the caller has."""
    msg = message or f"Unhandled exception: {type(exc).__name__}"
    error_log(msg, exc=exc, context=context)


def request_context(request: Any) -> dict:
    """Path, method and user agent of a request, as far as they can be read."""
    context = {}
    url = getattr(request, "url", None)
    if url is not None:
        context["path"] = getattr(url, "path", str(url))
    method = getattr(request, "method", None)
    if method:
        context["method"] = method
    headers = getattr(request, "headers", None)
    if headers is not None:
        context["user_agent"] = headers.get("user-agent", "unknown")
    return context


def log_request_error(
    request: Any,
    exc: Exception,
    message: Optional[str] = None
) -> None:
    """
    Log an error with request context.

    Args:
        request: Request object (should have url, method, headers)
        exc: The exception
        message: Optional custom message
    """
    log_exception_with_context(exc, context=request_context(request), message=message)
