"""Domain models for the studio project tracker."""

from dataclasses import dataclass, field
from datetime import date, datetime

ROLES = ("photographer", "designer", "admin")
PROJECT_STATUSES = ("planning", "in-progress", "review", "completed")


@dataclass(frozen=True)
class User:
    """Represents a studio member account."""

    id: str
    email: str
    login: str
    password: str
    name: str
    role: str
    created_at: datetime
    department: str | None = None
    position: str | None = None
    salary: float | None = None
    phone: str | None = None
    telegram: str | None = None
    avatar: str | None = None


@dataclass(frozen=True)
class ProjectFile:
    """A file attached to a project."""

    id: str
    name: str
    type: str
    size: int
    uploaded_by: str
    uploaded_at: datetime


@dataclass(frozen=True)
class Project:
    """An album project with its assigned team.

    Assignees are copies of the user records taken at assignment time.
    """

    id: str
    title: str
    album_type: str
    description: str
    status: str
    deadline: date
    created_at: datetime
    updated_at: datetime
    manager: User | None = None
    photographer: User | None = None
    designer: User | None = None
    photos_count: int = 0
    designs_count: int = 0
    files: tuple[ProjectFile, ...] = field(default_factory=tuple)
