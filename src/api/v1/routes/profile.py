"""Profile API routes."""

from fastapi import APIRouter, Depends, status

from api.v1.dependencies import get_profile_service
from api.v1.schemas.common import ErrorResponse
from api.v1.schemas.profile import (
    ProfileCreate,
    ProfileDetailResponse,
    ProfileResponse,
    ProfileUpdate,
    ProfileWriteResponse,
)
from domain.entities.profile import ProfileLinks, Project
from domain.services.profile_service import ProfileService

router = APIRouter(prefix="/profile", tags=["profile"])


@router.get(
    "",
    response_model=ProfileDetailResponse,
    summary="Get the profile",
    responses={
        404: {"model": ErrorResponse, "description": "No profile has been created"},
    },
)
async def get_profile(
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Fetch the portfolio profile."""
    profile = await service.get_profile()
    return ProfileDetailResponse(data=ProfileResponse.model_validate(profile))


@router.post(
    "",
    response_model=ProfileWriteResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create the profile",
    responses={
        201: {"description": "Profile created successfully"},
        400: {
            "model": ErrorResponse,
            "description": "Profile already exists, invalid data or duplicate email",
        },
    },
)
async def create_profile(
    body: ProfileCreate,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileWriteResponse:
    """Create the portfolio profile. Only one profile can exist."""
    profile = await service.create_profile(
        name=body.name,
        email=body.email,
        education=body.education,
        skills=body.skills,
        projects=[
            Project(title=p.title, description=p.description, links=p.links)
            for p in body.projects
        ],
        work=body.work,
        links=ProfileLinks(**body.links.model_dump()),
    )
    return ProfileWriteResponse(
        message="Profile created successfully",
        data=ProfileResponse.model_validate(profile),
    )


@router.put(
    "",
    response_model=ProfileWriteResponse,
    summary="Update the profile",
    responses={
        200: {"description": "Profile updated successfully"},
        400: {"model": ErrorResponse, "description": "Invalid data"},
        404: {"model": ErrorResponse, "description": "No profile has been created"},
    },
)
async def update_profile(
    body: ProfileUpdate,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileWriteResponse:
    """
    Update the portfolio profile.

    Each top-level field present in the body replaces the stored value;
    lists such as `skills` or `projects` are replaced as a whole. Fields
    left out are unchanged.
    """
    profile = await service.update_profile(body.model_dump(exclude_unset=True))
    return ProfileWriteResponse(
        message="Profile updated successfully",
        data=ProfileResponse.model_validate(profile),
    )
