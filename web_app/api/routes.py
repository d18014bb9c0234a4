"""API routes implementation."""

from typing import List

from fastapi import APIRouter, Request, HTTPException, status

from .schemas import (
    CreateLinkRequest,
    CreateLinkResponse,
    LinkResponse,
    MessageResponse,
    ErrorResponse,
)
from tinylink.common.url_builder import build_short_url
from tinylink.common.headers import build_base_url
from tinylink.errors import (
    AllocationExhaustedError,
    CodeTakenError,
    DuplicateKeyError,
    InvalidFormatError,
    InvalidURLError,
    NotFoundError,
    StoreUnavailableError,
)

router = APIRouter()


def store_unavailable(e: StoreUnavailableError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        detail=f"Storage unavailable: {e}",
    )


def link_not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="Link not found",
    )


@router.get(
    "/links",
    response_model=List[LinkResponse],
    summary="List links",
    description="List every short link, newest first.",
)
async def list_links(request: Request):
    """List all links."""
    service = request.app.state.service

    try:
        links = await service.list_links()
    except StoreUnavailableError as e:
        raise store_unavailable(e)

    return [LinkResponse.model_validate(link, from_attributes=True) for link in links]


@router.get(
    "/links/{short_code}",
    response_model=LinkResponse,
    responses={
        404: {"model": ErrorResponse, "description": "Short code not found"},
    },
    summary="Get link statistics",
    description="Get a link with its click count and last click time.",
)
async def get_link(request: Request, short_code: str):
    """Get information about a link without counting a click."""
    service = request.app.state.service

    try:
        link = await service.get_link(short_code)
    except NotFoundError:
        raise link_not_found()
    except StoreUnavailableError as e:
        raise store_unavailable(e)

    return LinkResponse.model_validate(link, from_attributes=True)


@router.post(
    "/links",
    response_model=CreateLinkResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid URL or short code"},
        409: {"model": ErrorResponse, "description": "Short code already exists"},
        500: {"model": ErrorResponse, "description": "No free short code found"},
        503: {"model": ErrorResponse, "description": "Storage unavailable"},
    },
    summary="Create short link",
    description="Create a short link. Optionally provide a custom short code.",
)
async def create_link(request: Request, body: CreateLinkRequest):
    """Create a short link."""
    service = request.app.state.service
    config = request.app.state.config

    # An all-blank custom code means "generate one"; anything else is validated as sent
    custom_code = body.custom_code
    if custom_code is not None and not custom_code.strip():
        custom_code = None

    try:
        link = await service.create_link(
            original_url=body.original_url,
            custom_code=custom_code,
        )
    except (InvalidURLError, InvalidFormatError) as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except (CodeTakenError, DuplicateKeyError):
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Short code already exists",
        )
    except AllocationExhaustedError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e),
        )
    except StoreUnavailableError as e:
        raise store_unavailable(e)

    base_url = build_base_url(
        headers=dict(request.headers),
        fallback_base_url=config.base_url,
        request_scheme=request.url.scheme,
        request_host=request.headers.get("host"),
    )

    short_url = build_short_url(
        short_code=link.short_code,
        base_url=base_url,
        path_prefix=config.path_prefix,
    )

    return CreateLinkResponse(
        short_code=link.short_code,
        original_url=link.original_url,
        short_url=short_url,
        clicks=link.clicks,
        created_at=link.created_at,
    )


@router.delete(
    "/links/{short_code}",
    response_model=MessageResponse,
    responses={
        404: {"model": ErrorResponse, "description": "Short code not found"},
    },
    summary="Delete link",
)
async def delete_link(request: Request, short_code: str):
    """Delete a link."""
    service = request.app.state.service

    try:
        await service.delete_link(short_code)
    except NotFoundError:
        raise link_not_found()
    except StoreUnavailableError as e:
        raise store_unavailable(e)

    return MessageResponse(message="Link deleted successfully")
