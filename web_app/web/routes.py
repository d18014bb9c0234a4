"""Redirect and health check routes."""

from datetime import datetime, timezone

from fastapi import APIRouter, Request, HTTPException, status
from fastapi.responses import RedirectResponse

from tinylink import __version__
from tinylink.errors import StoreUnavailableError
from ..api.schemas import HealthResponse

router = APIRouter()


@router.get("/healthz", response_model=HealthResponse, tags=["Health Check"])
async def health_check(request: Request):
    """Health check endpoint for load balancers and monitoring."""
    service = request.app.state.service

    health = await service.health_check()

    return HealthResponse(
        ok=health["store"],
        version=__version__,
        timestamp=datetime.now(timezone.utc),
        database="connected" if health["database_connected"] else "disconnected",
        backend=health["backend"],
    )


@router.get("/{short_code}", include_in_schema=False)
async def redirect_to_url(request: Request, short_code: str):
    """Redirect to the original URL, counting one click."""
    service = request.app.state.service

    try:
        link = await service.resolve(short_code)
    except StoreUnavailableError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=f"Storage unavailable: {e}",
        )

    if link is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Link not found",
        )

    # 302 rather than 301 so browsers come back and every visit is counted
    return RedirectResponse(url=link.original_url, status_code=status.HTTP_302_FOUND)
