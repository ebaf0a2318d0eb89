"""Services for managing studio projects and their files."""

from dataclasses import dataclass, field, replace
from datetime import UTC, datetime
from typing import Protocol

from studio_projects.domain.models import Project, ProjectFile
from studio_projects.services.ids import IdGenerator
from studio_projects.services.records import check_fields, merge


class ProjectRepository(Protocol):
    """Storage interface for project records."""

    def list_projects(self) -> list[Project]:
        """Return all projects in insertion order."""

    def add_project(self, project: Project) -> None:
        """Append a project."""

    def replace_project(self, project: Project) -> None:
        """Replace the project with the same id."""

    def delete_project(self, project_id: str) -> None:
        """Remove the project with the given id."""


@dataclass
class ProjectService:
    """Application service for project operations."""

    repository: ProjectRepository
    ids: IdGenerator = field(default_factory=IdGenerator)

    def list_projects(self) -> list[Project]:
        """Return all projects."""
        return self.repository.list_projects()

    def get_project(self, project_id: str) -> Project | None:
        """Return a project by id, if present."""
        return next(
            (
                project
                for project in self.repository.list_projects()
                if project.id == project_id
            ),
            None,
        )

    def add_project(self, project_data: dict[str, object]) -> Project:
        """Create a project stamped with the current time."""
        check_fields(Project, project_data)
        payload = {
            key: value
            for key, value in project_data.items()
            if key not in {"id", "created_at", "updated_at"}
        }
        payload["files"] = tuple(payload.get("files") or ())
        now = datetime.now(tz=UTC)
        project = Project(
            id=self.ids.next_id(),
            created_at=now,
            updated_at=now,
            **payload,
        )
        self.repository.add_project(project)
        return project

    def update_project(
        self, project_id: str, changes: dict[str, object]
    ) -> Project | None:
        """Merge changes into a project and refresh its update time."""
        existing = self.get_project(project_id)
        if existing is None:
            return None
        if "files" in changes:
            changes = {**changes, "files": tuple(changes["files"] or ())}
        updated = merge(existing, changes, protected={"id", "created_at"})
        updated = replace(updated, updated_at=datetime.now(tz=UTC))
        self.repository.replace_project(updated)
        return updated

    def delete_project(self, project_id: str) -> None:
        """Remove a project; unknown ids are ignored."""
        self.repository.delete_project(project_id)

    def add_file(
        self, project_id: str, file_data: dict[str, object]
    ) -> ProjectFile | None:
        """Attach a new file to a project."""
        project = self.get_project(project_id)
        if project is None:
            return None
        check_fields(ProjectFile, file_data)
        payload = {
            key: value
            for key, value in file_data.items()
            if key not in {"id", "uploaded_at"}
        }
        now = datetime.now(tz=UTC)
        new_file = ProjectFile(id=self.ids.next_file_id(), uploaded_at=now, **payload)
        self.repository.replace_project(
            replace(project, files=(*project.files, new_file), updated_at=now)
        )
        return new_file

    def remove_file(self, project_id: str, file_id: str) -> None:
        """Detach a file from a project and refresh its update time."""
        project = self.get_project(project_id)
        if project is None:
            return
        remaining = tuple(item for item in project.files if item.id != file_id)
        self.repository.replace_project(
            replace(project, files=remaining, updated_at=datetime.now(tz=UTC))
        )
