"""Profile API routes."""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request, status

from api.dependencies.origin import ViewerOrigin
from api.v1.dependencies import get_profile_service
from api.v1.schemas.common import ErrorResponse
from api.v1.schemas.profile import (
    ProfileDetailResponse,
    ProfileListResponse,
    ProfileResponse,
)
from core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from domain.services.profile_service import ProfileLookupService

router = APIRouter(prefix="/profiles", tags=["profiles"])


@router.get(
    "",
    response_model=ProfileListResponse,
    summary="Get several profiles by id",
    responses={
        200: {"description": "Profiles found, unknown ids skipped"},
        503: {"model": ErrorResponse, "description": "Storage temporarily unavailable"},
    },
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_profiles_by_id(
    request: Request,
    ids: list[UUID] = Query([], description="Profile ids; repeat the parameter for each"),
    service: ProfileLookupService = Depends(get_profile_service),
) -> ProfileListResponse:
    """Get the profiles matching the given ids, in request order."""
    profiles = await service.find_by_ids(ids)
    data = [ProfileResponse.from_entity(p) for p in profiles]
    return ProfileListResponse(data=data, meta={"total": len(data)})


@router.get(
    "/{wallet_id}",
    response_model=ProfileDetailResponse,
    summary="Get a profile",
    responses={
        200: {"description": "Profile found"},
        404: {"model": ErrorResponse, "description": "Profile not found"},
        503: {"model": ErrorResponse, "description": "Storage temporarily unavailable"},
    },
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_profile(
    request: Request,
    wallet_id: str,
    origin: ViewerOrigin,
    increment_views: bool = Query(
        False, description="Record a view of this profile and return the view count"
    ),
    viewer: str | None = Query(None, description="Wallet address of the visitor"),
    ignore_cache: bool = Query(False, description="Read from the database, skipping the cache"),
    service: ProfileLookupService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Get a profile by wallet address.

    With ``increment_views`` the view is recorded (at most once per origin
    within the dedup window) and ``views_count`` holds the total. Otherwise
    ``views_count`` is 0 and the response may be served from cache.
    """
    result = await service.find(
        wallet_id,
        increment_view=increment_views,
        viewer=viewer,
        viewer_origin=origin,
        bypass_cache=ignore_cache,
    )
    return ProfileDetailResponse(data=ProfileResponse.from_lookup(result))


@router.post(
    "/{wallet_id}/review-request",
    response_model=ProfileDetailResponse,
    status_code=status.HTTP_200_OK,
    summary="Request verification review",
    responses={
        200: {"description": "Review requested"},
        404: {"model": ErrorResponse, "description": "Profile not found"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def request_review(
    request: Request,
    wallet_id: str,
    service: ProfileLookupService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Flag a profile for verification review."""
    profile = await service.request_review(wallet_id)
    return ProfileDetailResponse(data=ProfileResponse.from_entity(profile))
