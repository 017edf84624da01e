"""Pydantic schemas for the profile query endpoints."""

from pydantic import BaseModel, Field

from api.v1.schemas.profile import ProjectResponse


class ProjectsBySkillResponse(BaseModel):
    """Projects that mention a skill."""

    success: bool = True
    skill: str
    has_skill: bool = Field(serialization_alias="hasSkill")
    count: int
    data: list[ProjectResponse]


class TopSkillsResponse(BaseModel):
    """Leading skills in priority order."""

    success: bool = True
    total: int
    count: int
    data: list[str]


class SearchMatches(BaseModel):
    """Matches grouped by the profile field they were found in."""

    skills: list[str]
    projects: list[ProjectResponse]
    education: list[str]
    work: list[str]


class SearchResponse(BaseModel):
    """Free-text search results."""

    success: bool = True
    query: str
    total_matches: int = Field(serialization_alias="totalMatches")
    data: SearchMatches
