"""Health check endpoints.

- /health is a liveness probe
- /healthz reports request log connectivity and completion service status
"""

import json
from typing import Any

from fastapi import APIRouter, Response
from sqlalchemy import text

from backend.app.config import Settings, get_settings
from backend.app.db.engine import get_async_engine

router = APIRouter()


async def check_request_log(settings: Settings) -> tuple[bool, str]:
    """Check request log connectivity.

    Returns:
        (is_ok, status_message)
    """
    if settings.request_log_backend == "memory":
        return (True, "memory")

    try:
        async with get_async_engine().connect() as conn:
            await conn.execute(text("SELECT 1"))
        return (True, "ok")
    except Exception as e:
        return (False, f"error: {type(e).__name__}")


async def check_completion_service(settings: Settings) -> tuple[bool, str]:
    """Report whether assisted generation can run.

    Never fails the probe: template generation covers an absent service.

    Returns:
        (is_ok, status_message)
    """
    if settings.generation_policy == "deterministic":
        return (True, "disabled")

    api_key = settings.openai_api_key
    if api_key and api_key.get_secret_value():
        return (True, "configured")
    return (True, "not_configured")


@router.get("/health")
async def health() -> dict[str, str]:
    """Simple health check for Docker/k8s.

    Returns:
        200 OK always (application is running)
    """
    return {"status": "ok"}


@router.get("/healthz", response_model=None)
async def healthz() -> dict[str, Any] | Response:
    """Health check endpoint.

    Returns:
        200 with component status if the request log is reachable
        503 otherwise
    """
    settings = get_settings()

    log_ok, log_status = await check_request_log(settings)
    _, llm_status = await check_completion_service(settings)

    response_body = {
        "status": "ok" if log_ok else "degraded",
        "components": {
            "request_log": log_status,
            "completion_service": llm_status,
        },
    }

    if not log_ok:
        return Response(
            content=json.dumps(response_body),
            status_code=503,
            media_type="application/json",
        )

    return response_body
