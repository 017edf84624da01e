"""Profile service layer with business logic."""

from collections.abc import Mapping
from typing import Any, Callable, Optional

import structlog

from core.exceptions import ProfileAlreadyExistsError, ProfileNotFoundError
from domain.entities.profile import Profile, ProfileLinks, Project, apply_profile_update
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services.profile_queries import (
    SearchResults,
    SkillMatch,
    TopSkills,
    filter_projects_by_skill,
    require_term,
    search_profile,
)
from domain.services.profile_queries import top_skills as slice_top_skills

logger = structlog.get_logger()


class ProfileService:
    """Service layer for the singleton profile.

    Every call opens its own unit of work, so each request sees a fresh
    snapshot of the stored profile.
    """

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def get_profile(self) -> Profile:
        """Get the profile or raise ProfileNotFoundError."""
        async with self._uow_factory() as uow:
            return await self._require_profile(uow)

    async def create_profile(
        self,
        name: str,
        email: str,
        education: Optional[list[str]] = None,
        skills: Optional[list[str]] = None,
        projects: Optional[list[Project]] = None,
        work: Optional[list[str]] = None,
        links: Optional[ProfileLinks] = None,
    ) -> Profile:
        """Create the profile.

        The insert itself is the existence check: the store rejects a second
        profile atomically and that rejection surfaces as
        ProfileAlreadyExistsError.
        """
        profile = Profile(
            name=name,
            email=email,
            education=list(education or []),
            skills=list(skills or []),
            projects=list(projects or []),
            work=list(work or []),
            links=links or ProfileLinks(),
        )
        profile.validate()

        async with self._uow_factory() as uow:
            try:
                created = await uow.profiles.create(profile)
            except ProfileAlreadyExistsError:
                logger.info("profile_create_conflict")
                raise
            await uow.commit()

        logger.info(
            "profile_created",
            skills=len(created.skills),
            projects=len(created.projects),
        )
        return created

    async def update_profile(self, changes: Mapping[str, Any]) -> Profile:
        """Replace the given top-level fields on the stored profile."""
        async with self._uow_factory() as uow:
            profile = await self._require_profile(
                uow, "Profile not found. Use POST to create."
            )

            apply_profile_update(profile, changes)
            profile.touch()

            updated = await uow.profiles.update(profile)
            await uow.commit()

        logger.info("profile_updated", fields=sorted(changes))
        return updated

    async def projects_by_skill(self, skill: str | None) -> SkillMatch:
        """Projects mentioning ``skill`` on the current profile."""
        require_term(skill, "skill", "Skill query parameter is required")
        profile = await self.get_profile()
        return filter_projects_by_skill(profile, skill)

    async def top_skills(self, limit: str | int | None = None) -> TopSkills:
        """Leading skills of the current profile."""
        profile = await self.get_profile()
        return slice_top_skills(profile, limit)

    async def search(self, query: str | None) -> SearchResults:
        """Search every text field of the current profile."""
        require_term(query, "q", "Search query parameter (q) is required")
        profile = await self.get_profile()
        return search_profile(profile, query)

    async def _require_profile(
        self, uow: IUnitOfWork, message: str = "Profile not found"
    ) -> Profile:
        """Load the profile or raise ProfileNotFoundError."""
        profile = await uow.profiles.get()
        if not profile:
            raise ProfileNotFoundError(message)
        return profile
