"""Shared test fixtures."""

from datetime import UTC, date, datetime

import pytest
from fastapi.testclient import TestClient

from studio_projects.adapters.memory_project_repository import (
    InMemoryProjectRepository,
)
from studio_projects.adapters.memory_user_repository import InMemoryUserRepository
from studio_projects.api.app import create_app
from studio_projects.config import Settings
from studio_projects.containers import AppContainer, build_container
from studio_projects.domain.models import Project, User
from studio_projects.services.auth import AuthContext
from studio_projects.services.ids import IdGenerator
from studio_projects.services.projects import ProjectService
from studio_projects.services.users import UserService


def make_user(user_id: str = "u1", role: str = "photographer", **overrides) -> User:
    values = {
        "id": user_id,
        "email": f"{user_id}@studio.test",
        "login": user_id,
        "password": "secret",
        "name": f"User {user_id}",
        "role": role,
        "created_at": datetime(2024, 1, 1, tzinfo=UTC),
    }
    values.update(overrides)
    return User(**values)


def make_project(project_id: str = "p1", **overrides) -> Project:
    values = {
        "id": project_id,
        "title": "Wedding",
        "album_type": "Свадебный альбом",
        "description": "Premium album",
        "status": "planning",
        "deadline": date(2024, 3, 15),
        "created_at": datetime(2024, 2, 1, tzinfo=UTC),
        "updated_at": datetime(2024, 2, 1, tzinfo=UTC),
    }
    values.update(overrides)
    return Project(**values)


class StepClock:
    """Clock returning a fixed millisecond value."""

    def __init__(self, value: int = 1_700_000_000_000) -> None:
        self.value = value

    def __call__(self) -> int:
        return self.value


@pytest.fixture
def settings() -> Settings:
    return Settings(seed_demo_data=True)


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def project_repository() -> InMemoryProjectRepository:
    return InMemoryProjectRepository()


@pytest.fixture
def context(
    user_repository: InMemoryUserRepository,
    project_repository: InMemoryProjectRepository,
) -> AuthContext:
    ids = IdGenerator()
    return AuthContext(
        user_service=UserService(user_repository, ids),
        project_service=ProjectService(project_repository, ids),
    )


@pytest.fixture
def team(user_repository: InMemoryUserRepository) -> dict[str, User]:
    members = {
        "admin": make_user("a1", role="admin", name="Admin"),
        "photographer": make_user("ph1", role="photographer", name="Photo One"),
        "designer": make_user("d1", role="designer", name="Design One"),
    }
    user_repository.users = list(members.values())
    return members


@pytest.fixture
def container(settings: Settings) -> AppContainer:
    return build_container(settings)


@pytest.fixture
def client(container: AppContainer) -> TestClient:
    return TestClient(create_app(container))
