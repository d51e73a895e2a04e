import pytest
from httpx import ASGITransport, AsyncClient

from fakes import InMemoryVacancyStore, StaticPermissions
from main import app
from router import vacancies
from util.app_config import config, parse_origins


@pytest.mark.asyncio
async def test_vacancies_are_mounted_under_api_prefix():
    app.dependency_overrides[vacancies.get_vacancy_store] = lambda: InMemoryVacancyStore()
    app.dependency_overrides[vacancies.get_permission_checker] = lambda: StaticPermissions()
    try:
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            response = await ac.get(f"{config.API_PREFIX}/vacancies")
            assert response.status_code == 200
            assert response.json() == []

            response = await ac.get("/")
            assert response.status_code == 200
    finally:
        app.dependency_overrides.clear()


def test_parse_origins():
    assert parse_origins("https://a.example, https://b.example") == [
        "https://a.example",
        "https://b.example",
    ]
    assert parse_origins("   ") == ["*"]
    assert parse_origins("*") == ["*"]
