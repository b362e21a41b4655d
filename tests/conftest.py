"""Shared test fixtures and configuration."""
import pytest
import httpx
from pathlib import Path
from fastapi.testclient import TestClient

from qrmenu.main import app
from qrmenu.client.menu_api import MenuApiClient
from qrmenu.core.dependencies import get_menu_repository
from qrmenu.core.config import Settings
from qrmenu.services.menu.repository import MenuRepository
from qrmenu.services.menu.in_memory_menu import InMemoryMenuProvider


TEST_BASE_URL = "http://testserver"


@pytest.fixture
def test_settings():
    """Settings with test-only placeholder images."""
    return Settings(
        app_name="Test Menu",
        default_drink_image="https://example.com/default-drink.jpg",
        default_food_image="https://example.com/default-food.jpg",
        default_food_set_image="https://example.com/default-food-set.jpg",
        api_base_url=TEST_BASE_URL,
        request_timeout=10.0,
    )


@pytest.fixture
def test_menu_path():
    """Return path to test menu YAML file."""
    return Path(__file__).parent / "fixtures" / "test_menu.yaml"


@pytest.fixture
def test_menu_repository(test_menu_path):
    """Create menu repository seeded with 2 drinks, 3 foods and 1 food set."""
    provider = InMemoryMenuProvider(menu_file=str(test_menu_path))
    return MenuRepository(provider)


@pytest.fixture
def empty_menu_repository(tmp_path):
    """Create menu repository whose seed file does not exist."""
    provider = InMemoryMenuProvider(menu_file=str(tmp_path / "missing.yaml"))
    return MenuRepository(provider)


@pytest.fixture
def override_get_menu_repository(test_menu_repository):
    """Override get_menu_repository dependency with test menu."""
    def _override_get_menu_repository():
        return test_menu_repository
    return _override_get_menu_repository


@pytest.fixture
def test_client(override_get_menu_repository):
    """Create FastAPI test client with overrides."""
    app.dependency_overrides[get_menu_repository] = override_get_menu_repository

    client = TestClient(app)

    yield client

    # Clear overrides
    app.dependency_overrides.clear()


@pytest.fixture
def menu_api_client(override_get_menu_repository):
    """Create a MenuApiClient that calls the app in-process."""
    app.dependency_overrides[get_menu_repository] = override_get_menu_repository

    yield MenuApiClient(
        base_url=TEST_BASE_URL,
        transport=httpx.ASGITransport(app=app),
    )

    app.dependency_overrides.clear()


@pytest.fixture
def latte_request():
    """Request body for a drink without an image."""
    return {"name": "Latte", "size": "M", "price": "4.5", "category": "DRINK"}
