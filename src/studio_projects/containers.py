"""Dependency container wiring for the application."""

from dataclasses import dataclass

from studio_projects.adapters.memory_project_repository import (
    InMemoryProjectRepository,
)
from studio_projects.adapters.memory_user_repository import InMemoryUserRepository
from studio_projects.config import Settings
from studio_projects.demo_data import demo_projects, demo_users
from studio_projects.services.auth import AuthContext
from studio_projects.services.ids import IdGenerator
from studio_projects.services.project_detail import ProjectDetailRegistry
from studio_projects.services.projects import ProjectService
from studio_projects.services.users import UserService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    auth_context: AuthContext
    project_details: ProjectDetailRegistry


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    user_repository = InMemoryUserRepository()
    project_repository = InMemoryProjectRepository()
    if resolved_settings.seed_demo_data:
        user_repository.users = demo_users()
        project_repository.projects = demo_projects(user_repository.users)
    ids = IdGenerator()
    auth_context = AuthContext(
        user_service=UserService(user_repository, ids),
        project_service=ProjectService(project_repository, ids),
    )
    return AppContainer(
        settings=resolved_settings,
        auth_context=auth_context,
        project_details=ProjectDetailRegistry(auth_context),
    )
