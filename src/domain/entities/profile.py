"""Profile domain entity.

The portfolio holds exactly one profile. Its identity is a fixed key
(``SINGLETON_PROFILE_ID``) rather than a generated one, so the store can
reject a second profile with an ordinary primary key constraint.
"""

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable

from core.exceptions import ProfileValidationError

SINGLETON_PROFILE_ID = 1

EMAIL_PATTERN = re.compile(r"^\S+@\S+\.\S+$")


def _trim(value: str | None) -> str | None:
    return value.strip() if isinstance(value, str) else value


def _trim_all(values: Iterable[str]) -> list[str]:
    return [value.strip() for value in values]


@dataclass
class ProfileLinks:
    """External links shown on the portfolio. URLs are not validated."""

    github: str | None = None
    linkedin: str | None = None
    portfolio: str | None = None

    def __post_init__(self) -> None:
        self.github = _trim(self.github)
        self.linkedin = _trim(self.linkedin)
        self.portfolio = _trim(self.portfolio)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> "ProfileLinks":
        data = data or {}
        return cls(
            github=data.get("github"),
            linkedin=data.get("linkedin"),
            portfolio=data.get("portfolio"),
        )


@dataclass
class Project:
    """A piece of work owned by the profile. Has no identity of its own."""

    title: str
    description: str
    links: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        # Description is stored verbatim; only title and links are trimmed.
        self.title = _trim(self.title)  # type: ignore[assignment]
        self.links = _trim_all(self.links)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Project":
        return cls(
            title=data.get("title", ""),
            description=data.get("description", ""),
            links=list(data.get("links") or []),
        )

    def searchable_text(self) -> str:
        """Title and description joined the way skill filtering matches them."""
        return f"{self.title} {self.description}"


@dataclass
class Profile:
    """Domain entity for the single portfolio profile."""

    name: str
    email: str
    education: list[str] = field(default_factory=list)
    skills: list[str] = field(default_factory=list)
    projects: list[Project] = field(default_factory=list)
    work: list[str] = field(default_factory=list)
    links: ProfileLinks = field(default_factory=ProfileLinks)
    id: int = SINGLETON_PROFILE_ID
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self) -> None:
        self.normalize()
        if self.updated_at < self.created_at:
            self.updated_at = self.created_at

    def normalize(self) -> None:
        """Trim free text and lower-case the email."""
        self.name = _trim(self.name)  # type: ignore[assignment]
        email = _trim(self.email)
        self.email = email.lower() if email else email  # type: ignore[assignment]
        self.education = _trim_all(self.education)
        self.skills = _trim_all(self.skills)
        self.work = _trim_all(self.work)

    def validate(self) -> None:
        """Raise ProfileValidationError listing every rule the profile breaks."""
        errors: list[str] = []

        if not self.name:
            errors.append("Name is required")

        if not self.email:
            errors.append("Email is required")
        elif not EMAIL_PATTERN.match(self.email):
            errors.append("Please provide a valid email")

        for index, project in enumerate(self.projects):
            if not project.title:
                errors.append(f"Project {index + 1}: title is required")
            if not project.description:
                errors.append(f"Project {index + 1}: description is required")

        if errors:
            raise ProfileValidationError(errors)

    def touch(self) -> None:
        """Mark the profile as modified now."""
        self.updated_at = datetime.utcnow()


def _string_list(field_name: str, value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str) or not isinstance(value, Iterable):
        raise ProfileValidationError([f"{field_name} must be a list of strings"])
    items = list(value)
    if not all(isinstance(item, str) for item in items):
        raise ProfileValidationError([f"{field_name} must be a list of strings"])
    return items


def _project_list(value: Any) -> list[Project]:
    if value is None:
        return []
    projects = []
    for item in value:
        projects.append(item if isinstance(item, Project) else Project.from_mapping(item))
    return projects


def _links(value: Any) -> ProfileLinks:
    if isinstance(value, ProfileLinks):
        return value
    return ProfileLinks.from_mapping(value)


# Every field a client may change, with the function that produces its new
# value. Lists and nested records are replaced wholesale, never merged.
_FIELD_UPDATERS: dict[str, Callable[[Any], Any]] = {
    "name": lambda value: value,
    "email": lambda value: value,
    "education": lambda value: _string_list("education", value),
    "skills": lambda value: _string_list("skills", value),
    "projects": _project_list,
    "work": lambda value: _string_list("work", value),
    "links": _links,
}

UPDATABLE_FIELDS = tuple(_FIELD_UPDATERS)


def apply_profile_update(profile: Profile, changes: Mapping[str, Any]) -> Profile:
    """Replace each top-level field present in ``changes`` on ``profile``.

    Unknown keys are rejected. The profile is normalized and validated after
    all fields have been applied.
    """
    unknown = sorted(set(changes) - set(_FIELD_UPDATERS))
    if unknown:
        raise ProfileValidationError([f"Unknown field: {key}" for key in unknown])

    for key, value in changes.items():
        setattr(profile, key, _FIELD_UPDATERS[key](value))

    profile.normalize()
    profile.validate()
    return profile
