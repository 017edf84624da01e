"""Pydantic schemas for Profile API."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ProjectIn(BaseModel):
    """A project as submitted by the client."""

    model_config = ConfigDict(extra="forbid")

    title: str = Field(..., max_length=255)
    description: str
    links: list[str] = Field(default_factory=list)


class LinksIn(BaseModel):
    """Profile links as submitted by the client."""

    model_config = ConfigDict(extra="forbid")

    github: str | None = None
    linkedin: str | None = None
    portfolio: str | None = None


class ProfileCreate(BaseModel):
    """Schema for creating the Profile.

    Presence and types are checked here; trimming, email format and
    non-empty rules are enforced by the domain entity.
    """

    model_config = ConfigDict(
        extra="forbid",
        json_schema_extra={
            "example": {
                "name": "Alex Rivera",
                "email": "alex.rivera@example.com",
                "education": ["BSc Computer Science - Stanford University (2019-2023)"],
                "skills": ["Python", "React", "AWS"],
                "projects": [
                    {
                        "title": "Task Management API",
                        "description": "RESTful API built with Python and FastAPI.",
                        "links": ["https://github.com/alexrivera/task-api"],
                    }
                ],
                "work": ["Software Engineer Intern - Tech Startup Inc. (Summer 2022)"],
                "links": {"github": "https://github.com/alexrivera"},
            }
        },
    )

    name: str = Field(..., max_length=255)
    email: str = Field(..., max_length=255)
    education: list[str] = Field(default_factory=list)
    skills: list[str] = Field(default_factory=list)
    projects: list[ProjectIn] = Field(default_factory=list)
    work: list[str] = Field(default_factory=list)
    links: LinksIn = Field(default_factory=LinksIn)


class ProfileUpdate(BaseModel):
    """Schema for updating the Profile (every field optional).

    Only the fields present in the request body are replaced.
    """

    model_config = ConfigDict(extra="forbid")

    name: str | None = Field(None, max_length=255)
    email: str | None = Field(None, max_length=255)
    education: list[str] | None = None
    skills: list[str] | None = None
    projects: list[ProjectIn] | None = None
    work: list[str] | None = None
    links: LinksIn | None = None


class ProjectResponse(BaseModel):
    """Schema for Project response."""

    model_config = ConfigDict(from_attributes=True)

    title: str
    description: str
    links: list[str]


class LinksResponse(BaseModel):
    """Schema for profile links."""

    model_config = ConfigDict(from_attributes=True)

    github: str | None = None
    linkedin: str | None = None
    portfolio: str | None = None


class ProfileResponse(BaseModel):
    """Schema for Profile response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    education: list[str]
    skills: list[str]
    projects: list[ProjectResponse]
    work: list[str]
    links: LinksResponse
    created_at: datetime = Field(serialization_alias="createdAt")
    updated_at: datetime = Field(serialization_alias="updatedAt")


class ProfileDetailResponse(BaseModel):
    """Schema for a fetched Profile."""

    success: bool = True
    data: ProfileResponse


class ProfileWriteResponse(BaseModel):
    """Schema for a created or updated Profile."""

    success: bool = True
    message: str
    data: ProfileResponse
