"""Liveness endpoint."""

from datetime import datetime, timezone

from litestar import get


@get("/api/health", sync_to_thread=False)
def health() -> dict:
    return {
        "status": "ok",
        "message": "Contact Form API is running",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
