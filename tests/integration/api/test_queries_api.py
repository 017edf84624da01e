"""Integration tests for the query endpoints."""

import pytest
from httpx import AsyncClient


class TestProjectsBySkill:
    @pytest.mark.asyncio
    async def test_missing_skill_is_400_even_without_profile(
        self, client: AsyncClient
    ) -> None:
        response = await client.get("/api/projects")

        assert response.status_code == 400
        body = response.json()
        assert body["error_code"] == "MISSING_QUERY_PARAMETER"
        assert body["message"] == "Skill query parameter is required"

    @pytest.mark.asyncio
    async def test_not_found_without_profile(self, client: AsyncClient) -> None:
        response = await client.get("/api/projects", params={"skill": "react"})

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_case_insensitive_match(self, seeded_client: AsyncClient) -> None:
        response = await seeded_client.get("/api/projects", params={"skill": "REACT"})

        assert response.status_code == 200
        body = response.json()
        assert body["skill"] == "REACT"
        assert body["hasSkill"] is True
        assert body["count"] == 1
        assert body["data"][0]["title"] == "E-Commerce Platform"

    @pytest.mark.asyncio
    async def test_skill_not_listed(self, seeded_client: AsyncClient) -> None:
        response = await seeded_client.get("/api/projects", params={"skill": "fastapi"})

        body = response.json()
        assert body["hasSkill"] is False
        assert [p["title"] for p in body["data"]] == ["Task Management API"]

    @pytest.mark.asyncio
    async def test_no_matches(self, seeded_client: AsyncClient) -> None:
        response = await seeded_client.get("/api/projects", params={"skill": "haskell"})

        assert response.status_code == 200
        assert response.json()["count"] == 0
        assert response.json()["data"] == []


class TestTopSkills:
    @pytest.mark.asyncio
    async def test_limit(self, seeded_client: AsyncClient) -> None:
        response = await seeded_client.get("/api/skills/top", params={"limit": "2"})

        assert response.status_code == 200
        body = response.json()
        assert body["data"] == ["Python", "React"]
        assert body["total"] == 3
        assert body["count"] == 2

    @pytest.mark.asyncio
    async def test_without_limit_returns_all(self, seeded_client: AsyncClient) -> None:
        response = await seeded_client.get("/api/skills/top")

        assert response.json()["data"] == ["Python", "React", "AWS"]

    @pytest.mark.asyncio
    async def test_non_numeric_limit_returns_all(self, seeded_client: AsyncClient) -> None:
        response = await seeded_client.get("/api/skills/top", params={"limit": "many"})

        assert response.status_code == 200
        assert response.json()["count"] == 3

    @pytest.mark.asyncio
    async def test_limit_past_end(self, seeded_client: AsyncClient) -> None:
        response = await seeded_client.get("/api/skills/top", params={"limit": "50"})

        assert response.json()["count"] == 3

    @pytest.mark.asyncio
    async def test_not_found_without_profile(self, client: AsyncClient) -> None:
        response = await client.get("/api/skills/top")

        assert response.status_code == 404


class TestSearch:
    @pytest.mark.asyncio
    async def test_missing_query(self, seeded_client: AsyncClient) -> None:
        response = await seeded_client.get("/api/search")

        assert response.status_code == 400
        assert response.json()["message"] == "Search query parameter (q) is required"

    @pytest.mark.asyncio
    async def test_empty_query(self, client: AsyncClient) -> None:
        response = await client.get("/api/search", params={"q": ""})

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_matches_across_fields(self, seeded_client: AsyncClient) -> None:
        response = await seeded_client.get("/api/search", params={"q": "python"})

        assert response.status_code == 200
        body = response.json()
        assert body["query"] == "python"
        assert body["data"]["skills"] == ["Python"]
        assert [p["title"] for p in body["data"]["projects"]] == ["Task Management API"]
        assert body["data"]["education"] == []
        assert body["data"]["work"] == []
        assert body["totalMatches"] == 2

    @pytest.mark.asyncio
    async def test_single_project_match(self, seeded_client: AsyncClient) -> None:
        response = await seeded_client.get("/api/search", params={"q": "MongoDB"})

        assert response.json()["totalMatches"] == 1

    @pytest.mark.asyncio
    async def test_education_and_work(self, seeded_client: AsyncClient) -> None:
        response = await seeded_client.get("/api/search", params={"q": "stanford"})

        body = response.json()
        assert len(body["data"]["education"]) == 1
        assert body["data"]["work"] == []
