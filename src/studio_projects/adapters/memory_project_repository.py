"""In-memory project repository."""

from dataclasses import dataclass, field

from studio_projects.domain.models import Project
from studio_projects.services.projects import ProjectRepository


@dataclass
class InMemoryProjectRepository(ProjectRepository):
    """Keeps projects in a list that is replaced on every write."""

    projects: list[Project] = field(default_factory=list)

    def list_projects(self) -> list[Project]:
        """Return a copy of the project list."""
        return list(self.projects)

    def add_project(self, project: Project) -> None:
        """Append a project to the list."""
        self.projects = [*self.projects, project]

    def replace_project(self, project: Project) -> None:
        """Swap in the new record for the matching id."""
        self.projects = [
            project if item.id == project.id else item for item in self.projects
        ]

    def delete_project(self, project_id: str) -> None:
        """Filter out the project with the given id."""
        self.projects = [item for item in self.projects if item.id != project_id]
