"""Read-only queries over a profile snapshot.

Everything here is a pure function of the profile it is given: nothing is
fetched, cached or mutated. Callers are responsible for loading the profile
(and reporting a missing one) first.
"""

from dataclasses import dataclass

from core.exceptions import MissingQueryParameterError
from domain.entities.profile import Profile, Project


@dataclass(frozen=True, slots=True)
class SkillMatch:
    """Projects mentioning a skill, and whether the skill is listed."""

    skill: str
    has_skill: bool
    projects: list[Project]

    @property
    def count(self) -> int:
        return len(self.projects)


@dataclass(frozen=True, slots=True)
class TopSkills:
    """Leading slice of the skills list plus the full skill count."""

    total: int
    skills: list[str]

    @property
    def count(self) -> int:
        return len(self.skills)


@dataclass(frozen=True, slots=True)
class SearchResults:
    """Per-field matches for a free-text search."""

    query: str
    skills: list[str]
    projects: list[Project]
    education: list[str]
    work: list[str]

    @property
    def total_matches(self) -> int:
        return len(self.skills) + len(self.projects) + len(self.education) + len(self.work)


def require_term(value: str | None, parameter: str, message: str | None = None) -> str:
    """Return ``value`` or raise if it is absent or empty."""
    if not value:
        raise MissingQueryParameterError(parameter, message)
    return value


def parse_limit(raw: str | int | None) -> int | None:
    """Parse a client-supplied limit. Anything that is not an integer means no limit."""
    if raw is None or isinstance(raw, int):
        return raw
    try:
        return int(raw.strip())
    except ValueError:
        return None


def _contains(haystack: str, needle_lower: str) -> bool:
    return needle_lower in haystack.lower()


def filter_projects_by_skill(profile: Profile, skill: str | None) -> SkillMatch:
    """Find projects whose title or description mentions ``skill``.

    Matching is a case-insensitive substring test against the title and
    description joined by a space. Project order is preserved.
    """
    skill = require_term(skill, "skill", "Skill query parameter is required")
    needle = skill.lower()

    matches = [
        project for project in profile.projects if _contains(project.searchable_text(), needle)
    ]
    has_skill = any(_contains(entry, needle) for entry in profile.skills)

    return SkillMatch(skill=skill, has_skill=has_skill, projects=matches)


def top_skills(profile: Profile, limit: str | int | None = None) -> TopSkills:
    """Return the first ``limit`` skills in their stored priority order.

    A missing or non-numeric limit returns every skill. Numeric limits are
    clamped to ``[0, len(skills)]``.
    """
    total = len(profile.skills)
    parsed = parse_limit(limit)
    count = total if parsed is None else max(0, min(parsed, total))
    return TopSkills(total=total, skills=profile.skills[:count])


def search_profile(profile: Profile, query: str | None) -> SearchResults:
    """Case-insensitive substring search across skills, projects, education and work."""
    query = require_term(query, "q", "Search query parameter (q) is required")
    needle = query.lower()

    return SearchResults(
        query=query,
        skills=[skill for skill in profile.skills if _contains(skill, needle)],
        projects=[
            project
            for project in profile.projects
            if _contains(project.title, needle) or _contains(project.description, needle)
        ],
        education=[entry for entry in profile.education if _contains(entry, needle)],
        work=[entry for entry in profile.work if _contains(entry, needle)],
    )
