"""User-related business logic."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Protocol

from studio_projects.domain.models import User
from studio_projects.services.ids import IdGenerator
from studio_projects.services.records import check_fields, merge


class UserRepository(Protocol):
    """Storage interface for user records."""

    def list_users(self) -> list[User]:
        """Return all users in insertion order."""

    def add_user(self, user: User) -> None:
        """Append a user."""

    def replace_user(self, user: User) -> None:
        """Replace the user with the same id."""

    def delete_user(self, user_id: str) -> None:
        """Remove the user with the given id."""


@dataclass
class UserService:
    """Application service for the studio member list."""

    repository: UserRepository
    ids: IdGenerator = field(default_factory=IdGenerator)

    def list_users(self) -> list[User]:
        """Return all users."""
        return self.repository.list_users()

    def get_user(self, user_id: str) -> User | None:
        """Return the user with the given id, if present."""
        return next(
            (user for user in self.repository.list_users() if user.id == user_id),
            None,
        )

    def find_by_identifier(self, identifier: str) -> User | None:
        """Return the first user whose login or email matches."""
        return next(
            (
                user
                for user in self.repository.list_users()
                if identifier in (user.login, user.email)
            ),
            None,
        )

    def find_by_login(self, login: str) -> User | None:
        """Return the user registered under a login, if present."""
        return next(
            (user for user in self.repository.list_users() if user.login == login),
            None,
        )

    def users_with_role(self, role: str) -> list[User]:
        """Return users holding the given role."""
        return [user for user in self.repository.list_users() if user.role == role]

    def add_user(self, user_data: dict[str, object]) -> User:
        """Create a user with a fresh id and creation time."""
        check_fields(User, user_data)
        payload = {
            key: value
            for key, value in user_data.items()
            if key not in {"id", "created_at"}
        }
        user = User(
            id=self.ids.next_id(),
            created_at=datetime.now(tz=UTC),
            **payload,
        )
        self.repository.add_user(user)
        return user

    def update_user(self, user_id: str, changes: dict[str, object]) -> User | None:
        """Merge changes into a user; unknown ids are ignored."""
        existing = self.get_user(user_id)
        if existing is None:
            return None
        updated = merge(existing, changes, protected={"id"})
        self.repository.replace_user(updated)
        return updated

    def delete_user(self, user_id: str) -> None:
        """Remove a user; unknown ids are ignored."""
        self.repository.delete_user(user_id)
