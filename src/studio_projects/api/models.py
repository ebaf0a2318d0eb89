"""Pydantic models for API request payloads."""

from datetime import date
from typing import Literal

from pydantic import BaseModel, Field, field_validator

Role = Literal["photographer", "designer", "admin"]
Status = Literal["planning", "in-progress", "review", "completed"]


class LoginRequest(BaseModel):
    """Credentials for signing in by login or email."""

    login: str
    password: str


class UserCreate(BaseModel):
    """Payload for registering or adding a user."""

    email: str
    login: str
    password: str
    name: str
    role: Role
    department: str | None = None
    position: str | None = None
    salary: float | None = Field(default=None, ge=0)
    phone: str | None = None
    telegram: str | None = None
    avatar: str | None = None


class UserUpdate(BaseModel):
    """Partial user update."""

    email: str | None = None
    login: str | None = None
    password: str | None = None
    name: str | None = None
    role: Role | None = None
    department: str | None = None
    position: str | None = None
    salary: float | None = Field(default=None, ge=0)
    phone: str | None = None
    telegram: str | None = None
    avatar: str | None = None

    @field_validator("email", "login", "password", "name", "role", mode="before")
    @classmethod
    def reject_null(cls, value: object) -> object:
        """Refuse explicit nulls for fields the record requires."""
        if value is None:
            raise ValueError("must not be null")
        return value


class ProjectCreate(BaseModel):
    """Payload for creating a project; assignees are given by user id."""

    title: str
    album_type: str
    description: str = ""
    status: Status = "planning"
    deadline: date
    manager_id: str | None = None
    photographer_id: str | None = None
    designer_id: str | None = None
    photos_count: int = Field(default=0, ge=0)
    designs_count: int = Field(default=0, ge=0)


class ProjectUpdate(BaseModel):
    """Partial project update."""

    title: str | None = None
    album_type: str | None = None
    description: str | None = None
    status: Status | None = None
    deadline: date | None = None
    manager_id: str | None = None
    photographer_id: str | None = None
    designer_id: str | None = None
    photos_count: int | None = Field(default=None, ge=0)
    designs_count: int | None = Field(default=None, ge=0)

    @field_validator(
        "title",
        "album_type",
        "description",
        "status",
        "deadline",
        "photos_count",
        "designs_count",
        mode="before",
    )
    @classmethod
    def reject_null(cls, value: object) -> object:
        """Refuse explicit nulls for fields the record requires."""
        if value is None:
            raise ValueError("must not be null")
        return value


class FileCreate(BaseModel):
    """Metadata for a file uploaded to a project."""

    name: str
    type: str
    size: int = Field(ge=0)
    uploaded_by: str


class EditFormChange(BaseModel):
    """Edit form fields as submitted by the detail screen.

    Assignee fields carry a user id or an empty string for "not assigned".
    """

    title: str | None = None
    album_type: str | None = None
    description: str | None = None
    status: str | None = None
    deadline: str | None = None
    manager: str | None = None
    photographer: str | None = None
    designer: str | None = None

    @field_validator("title", "album_type", "description", "status", mode="before")
    @classmethod
    def reject_null(cls, value: object) -> object:
        """Refuse explicit nulls for fields the record requires."""
        if value is None:
            raise ValueError("must not be null")
        return value
