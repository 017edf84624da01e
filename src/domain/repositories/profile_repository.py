"""Profile repository protocol."""

from typing import Protocol

from domain.entities.profile import Profile


class IProfileRepository(Protocol):
    """Repository interface for the singleton Profile entity."""

    async def get(self) -> Profile | None:
        """Get the profile, or None if it has not been created."""
        ...

    async def create(self, profile: Profile) -> Profile:
        """Insert the profile.

        Raises ProfileAlreadyExistsError if a profile is already stored and
        DuplicateEmailError if the email collides with a stored one.
        """
        ...

    async def update(self, profile: Profile) -> Profile:
        """Persist changes to the stored profile, replacing its projects."""
        ...

    async def delete(self) -> bool:
        """Delete the profile and return whether one existed."""
        ...
