"""Authentication state and the shared user/project context."""

import logging
import secrets
from dataclasses import dataclass

from studio_projects.domain.models import Project, ProjectFile, User
from studio_projects.services.projects import ProjectService
from studio_projects.services.records import check_fields
from studio_projects.services.users import UserService

logger = logging.getLogger(__name__)

_REGISTRATION_FIELDS = (
    "email",
    "login",
    "password",
    "name",
    "role",
    "department",
    "position",
    "salary",
    "phone",
    "telegram",
)


@dataclass
class AuthContext:
    """Holds the signed-in user alongside the user and project lists.

    Lookups on unknown ids return None and mutations on unknown ids do
    nothing.
    """

    user_service: UserService
    project_service: ProjectService
    user: User | None = None

    @property
    def users(self) -> list[User]:
        return self.user_service.list_users()

    @property
    def projects(self) -> list[Project]:
        return self.project_service.list_projects()

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    def login(self, identifier: str, password: str) -> bool:
        """Sign in by login or email; return True on success."""
        found = self.user_service.find_by_identifier(identifier)
        if found is None or not secrets.compare_digest(
            found.password.encode(), password.encode()
        ):
            logger.info("Login rejected", extra={"identifier": identifier})
            return False
        self.user = found
        logger.info("User signed in", extra={"user_id": found.id})
        return True

    def logout(self) -> None:
        """Clear the signed-in user."""
        self.user = None

    def register(self, user_data: dict[str, object]) -> bool:
        """Create an account and sign it in; False if the login is taken."""
        check_fields(User, user_data)
        login = str(user_data.get("login", ""))
        if self.user_service.find_by_login(login) is not None:
            logger.info("Registration rejected, login taken", extra={"login": login})
            return False
        payload = {
            name: user_data.get(name)
            for name in _REGISTRATION_FIELDS
            if name in user_data
        }
        created = self.user_service.add_user(payload)
        self.user = created
        logger.info("User registered", extra={"user_id": created.id})
        return True

    def get_user(self, user_id: str) -> User | None:
        return self.user_service.get_user(user_id)

    def users_with_role(self, role: str) -> list[User]:
        return self.user_service.users_with_role(role)

    def add_user(self, user_data: dict[str, object]) -> User:
        """Add a studio member without signing them in."""
        return self.user_service.add_user(user_data)

    def update_user(self, user_id: str, changes: dict[str, object]) -> None:
        """Update a user, keeping the signed-in copy in sync."""
        updated = self.user_service.update_user(user_id, changes)
        if updated is not None and self.user is not None and self.user.id == user_id:
            self.user = updated

    def delete_user(self, user_id: str) -> None:
        """Delete a user, signing out if it is the current one."""
        self.user_service.delete_user(user_id)
        if self.user is not None and self.user.id == user_id:
            logger.info("Signed-in user deleted", extra={"user_id": user_id})
            self.user = None

    def get_project(self, project_id: str) -> Project | None:
        return self.project_service.get_project(project_id)

    def add_project(self, project_data: dict[str, object]) -> Project:
        return self.project_service.add_project(project_data)

    def update_project(self, project_id: str, changes: dict[str, object]) -> None:
        self.project_service.update_project(project_id, changes)

    def delete_project(self, project_id: str) -> None:
        self.project_service.delete_project(project_id)

    def add_file_to_project(
        self, project_id: str, file_data: dict[str, object]
    ) -> ProjectFile | None:
        return self.project_service.add_file(project_id, file_data)

    def remove_file_from_project(self, project_id: str, file_id: str) -> None:
        self.project_service.remove_file(project_id, file_id)
