"""Liveness endpoint for load balancers and uptime checks."""

from fastapi import APIRouter, Request
from fastapi.responses import Response

from envelope_api.api.response import ResResult

router = APIRouter(tags=["System"])


@router.get("/health")
async def health_check(request: Request) -> Response:
    """Report liveness together with the running app's title and version."""
    app = request.app
    return ResResult.with_success_msg(
        {"status": "ok", "service": app.title, "version": app.version},
        "healthy",
    )
