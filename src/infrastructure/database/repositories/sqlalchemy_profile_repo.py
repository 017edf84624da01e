"""SQLAlchemy implementation of Profile repository."""

from dataclasses import asdict

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from core.exceptions import DuplicateEmailError, ProfileAlreadyExistsError
from domain.entities.profile import SINGLETON_PROFILE_ID, Profile, ProfileLinks, Project
from infrastructure.database.models import ProfileModel, ProjectModel


def _is_email_violation(exc: IntegrityError) -> bool:
    """Whether the violated constraint is the email unique index, not the singleton key."""
    detail = str(exc.orig).lower()
    if "profiles_pkey" in detail or "profiles.id" in detail:
        return False
    return "email" in detail


class SQLAlchemyProfileRepository:
    """SQLAlchemy implementation of IProfileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self) -> Profile | None:
        """Get the profile by its singleton key."""
        model = await self._get_model()
        return self._to_entity(model) if model else None

    async def create(self, profile: Profile) -> Profile:
        """Insert the profile; constraint violations become domain errors."""
        model = self._to_model(profile)
        self._session.add(model)
        try:
            await self._session.flush()
        except IntegrityError as exc:
            if _is_email_violation(exc):
                raise DuplicateEmailError(profile.email) from exc
            raise ProfileAlreadyExistsError() from exc
        return self._to_entity(model)

    async def update(self, profile: Profile) -> Profile:
        """Update the stored profile, replacing its projects wholesale."""
        model = await self._get_model()

        if not model:
            raise ValueError(f"Profile {profile.id} not found")

        model.name = profile.name
        model.email = profile.email
        model.education = list(profile.education)
        model.skills = list(profile.skills)
        model.work = list(profile.work)
        model.links = asdict(profile.links)
        model.projects = self._to_project_models(profile.projects)
        model.updated_at = profile.updated_at

        try:
            await self._session.flush()
        except IntegrityError as exc:
            raise DuplicateEmailError(profile.email) from exc
        return self._to_entity(model)

    async def delete(self) -> bool:
        """Delete the profile and its projects."""
        model = await self._get_model()

        if not model:
            return False

        await self._session.delete(model)
        await self._session.flush()
        return True

    async def _get_model(self) -> ProfileModel | None:
        stmt = select(ProfileModel).where(ProfileModel.id == SINGLETON_PROFILE_ID)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _to_entity(self, model: ProfileModel) -> Profile:
        """Convert ORM model to domain entity."""
        return Profile(
            id=model.id,
            name=model.name,
            email=model.email,
            education=list(model.education or []),
            skills=list(model.skills or []),
            work=list(model.work or []),
            links=ProfileLinks.from_mapping(model.links),
            projects=[
                Project(
                    title=project.title,
                    description=project.description,
                    links=list(project.links or []),
                )
                for project in model.projects
            ],
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: Profile) -> ProfileModel:
        """Convert domain entity to ORM model."""
        return ProfileModel(
            id=entity.id,
            name=entity.name,
            email=entity.email,
            education=list(entity.education),
            skills=list(entity.skills),
            work=list(entity.work),
            links=asdict(entity.links),
            projects=self._to_project_models(entity.projects),
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )

    def _to_project_models(self, projects: list[Project]) -> list[ProjectModel]:
        return [
            ProjectModel(
                position=position,
                title=project.title,
                description=project.description,
                links=list(project.links),
            )
            for position, project in enumerate(projects)
        ]
