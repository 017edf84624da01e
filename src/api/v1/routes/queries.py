"""Query API routes: projects by skill, top skills and search."""

from fastapi import APIRouter, Depends, Query

from api.v1.dependencies import get_profile_service
from api.v1.schemas.common import ErrorResponse
from api.v1.schemas.profile import ProjectResponse
from api.v1.schemas.query import (
    ProjectsBySkillResponse,
    SearchMatches,
    SearchResponse,
    TopSkillsResponse,
)
from domain.services.profile_service import ProfileService

router = APIRouter(tags=["queries"])

_NOT_FOUND = {"model": ErrorResponse, "description": "No profile has been created"}


@router.get(
    "/projects",
    response_model=ProjectsBySkillResponse,
    summary="Find projects by skill",
    responses={
        400: {"model": ErrorResponse, "description": "Missing skill parameter"},
        404: _NOT_FOUND,
    },
)
async def projects_by_skill(
    skill: str | None = Query(None, description="Skill to look for, case-insensitive"),
    service: ProfileService = Depends(get_profile_service),
) -> ProjectsBySkillResponse:
    """
    List projects whose title or description mentions the skill.

    `hasSkill` reports whether the skill also appears in the profile's
    skills list.
    """
    match = await service.projects_by_skill(skill)
    return ProjectsBySkillResponse(
        skill=match.skill,
        has_skill=match.has_skill,
        count=match.count,
        data=[ProjectResponse.model_validate(p) for p in match.projects],
    )


@router.get(
    "/skills/top",
    response_model=TopSkillsResponse,
    summary="Get top skills",
    responses={404: _NOT_FOUND},
)
async def top_skills(
    limit: str | None = Query(
        None,
        description="Number of skills to return. Omitted or non-numeric returns all.",
    ),
    service: ProfileService = Depends(get_profile_service),
) -> TopSkillsResponse:
    """Return the first `limit` skills in the order they were entered."""
    result = await service.top_skills(limit)
    return TopSkillsResponse(total=result.total, count=result.count, data=result.skills)


@router.get(
    "/search",
    response_model=SearchResponse,
    summary="Search the profile",
    responses={
        400: {"model": ErrorResponse, "description": "Missing q parameter"},
        404: _NOT_FOUND,
    },
)
async def search(
    q: str | None = Query(None, description="Text to search for, case-insensitive"),
    service: ProfileService = Depends(get_profile_service),
) -> SearchResponse:
    """Search skills, projects, education and work history."""
    results = await service.search(q)
    return SearchResponse(
        query=results.query,
        total_matches=results.total_matches,
        data=SearchMatches(
            skills=results.skills,
            projects=[ProjectResponse.model_validate(p) for p in results.projects],
            education=results.education,
            work=results.work,
        ),
    )
