"""In-memory user repository."""

from dataclasses import dataclass, field

from studio_projects.domain.models import User
from studio_projects.services.users import UserRepository


@dataclass
class InMemoryUserRepository(UserRepository):
    """Keeps users in a list that is replaced on every write."""

    users: list[User] = field(default_factory=list)

    def list_users(self) -> list[User]:
        """Return a copy of the user list."""
        return list(self.users)

    def add_user(self, user: User) -> None:
        """Append a user to the list."""
        self.users = [*self.users, user]

    def replace_user(self, user: User) -> None:
        """Swap in the new record for the matching id."""
        self.users = [user if item.id == user.id else item for item in self.users]

    def delete_user(self, user_id: str) -> None:
        """Filter out the user with the given id."""
        self.users = [item for item in self.users if item.id != user_id]
