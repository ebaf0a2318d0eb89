"""View model for the project detail screen with inline editing."""

from dataclasses import dataclass, field
from datetime import date, datetime

from studio_projects.domain.models import (
    PROJECT_STATUSES,
    Project,
    ProjectFile,
    User,
)
from studio_projects.domain.status import ALBUM_TYPES, get_status_info
from studio_projects.services.auth import AuthContext

NOT_ASSIGNED = "Не назначен"
NO_DESCRIPTION = "Описание не указано"
RELATION_FIELDS = ("manager", "photographer", "designer")
EDITABLE_FIELDS = (
    "title",
    "album_type",
    "description",
    "status",
    "deadline",
    *RELATION_FIELDS,
)
_RELATION_ROLES = {
    "manager": "admin",
    "photographer": "photographer",
    "designer": "designer",
}


@dataclass
class ProjectDetail:
    """Edit/view state for a single project."""

    context: AuthContext
    project_id: str
    is_editing: bool = False
    edit_data: dict[str, object] = field(default_factory=dict)

    @property
    def project(self) -> Project | None:
        return self.context.get_project(self.project_id)

    def start_edit(self) -> bool:
        """Load the project into the edit form; False if it no longer exists."""
        project = self.project
        if project is None:
            return False
        self.edit_data = {
            "title": project.title,
            "album_type": project.album_type,
            "description": project.description,
            "status": project.status,
            "deadline": project.deadline.isoformat(),
            "manager": project.manager,
            "photographer": project.photographer,
            "designer": project.designer,
        }
        self.is_editing = True
        return True

    def change(self, field_name: str, value: object) -> None:
        """Set a single form field."""
        if field_name not in EDITABLE_FIELDS:
            raise ValueError(f"Field {field_name!r} is not editable")
        self.edit_data = {**self.edit_data, field_name: value}

    def save(self) -> bool:
        """Commit the form to the project and return to view mode.

        Relation fields hold a user id or a user record and are resolved
        against the current user list; empty or stale values clear the
        assignment.
        """
        project = self.project
        if not self.is_editing or project is None:
            return False
        raw_deadline = self.edit_data.get("deadline")
        changes = {
            **self.edit_data,
            "deadline": _parse_deadline(raw_deadline)
            if raw_deadline
            else project.deadline,
        }
        for name in RELATION_FIELDS:
            changes[name] = self._resolve_user(self.edit_data.get(name))
        self.context.update_project(self.project_id, changes)
        self.cancel()
        return True

    def cancel(self) -> None:
        """Leave edit mode and discard the form."""
        self.is_editing = False
        self.edit_data = {}

    def assignable_users(self, field_name: str) -> list[User]:
        """Return the users that may fill a relation field."""
        return self.context.users_with_role(_RELATION_ROLES[field_name])

    def render(self) -> dict[str, object]:
        """Return the display model for the screen."""
        project = self.project
        if project is None:
            return {
                "found": False,
                "title": "Проект не найден",
                "message": (
                    "Возможно, проект был удален или у вас нет доступа к нему"
                ),
            }
        status = get_status_info(project.status)
        view: dict[str, object] = {
            "found": True,
            "id": project.id,
            "title": project.title,
            "album_type": project.album_type,
            "description": project.description or NO_DESCRIPTION,
            "status": {
                "code": project.status,
                "label": status.label,
                "color": status.color,
                "icon": status.icon,
            },
            "deadline": format_date(project.deadline),
            "manager": _display_name(project.manager),
            "photographer": _display_name(project.photographer),
            "designer": _display_name(project.designer),
            "stats": {
                "photos": project.photos_count,
                "designs": project.designs_count,
                "files": len(project.files),
            },
            "timeline": [
                {"label": "Проект создан", "date": format_date(project.created_at)},
                {
                    "label": "Последнее обновление",
                    "date": format_date(project.updated_at),
                },
                {"label": "Дедлайн", "date": format_date(project.deadline)},
            ],
            "files": [_render_file(item) for item in project.files],
            "is_editing": self.is_editing,
        }
        if self.is_editing:
            view["form"] = self._render_form()
        return view

    def _render_form(self) -> dict[str, object]:
        values = {
            name: value
            for name, value in self.edit_data.items()
            if name not in RELATION_FIELDS
        }
        for name in RELATION_FIELDS:
            values[name] = _relation_id(self.edit_data.get(name))
        return {
            "values": values,
            "options": {
                "album_type": list(ALBUM_TYPES),
                "status": list(PROJECT_STATUSES),
                **{
                    name: [
                        {"id": user.id, "name": user.name}
                        for user in self.assignable_users(name)
                    ]
                    for name in RELATION_FIELDS
                },
            },
        }

    def _resolve_user(self, value: object) -> User | None:
        user_id = _relation_id(value)
        if not user_id:
            return None
        return self.context.get_user(user_id)


@dataclass
class ProjectDetailRegistry:
    """Keeps one detail view per project so edit state survives requests."""

    context: AuthContext
    views: dict[str, ProjectDetail] = field(default_factory=dict)

    def open(self, project_id: str) -> ProjectDetail:
        """Return the detail view for a project, creating it on first use."""
        view = self.views.get(project_id)
        if view is None:
            view = ProjectDetail(self.context, project_id)
            self.views[project_id] = view
        return view

    def discard(self, project_id: str) -> None:
        """Drop the view state for a project."""
        self.views.pop(project_id, None)


def format_date(value: date | datetime) -> str:
    """Format a date the way the studio reads it (DD.MM.YYYY)."""
    return value.strftime("%d.%m.%Y")


def format_size(size: int) -> str:
    """Render a byte count as a short human-readable string."""
    if size < 1024:  # noqa: PLR2004
        return f"{size} B"
    kilobytes = round(size / 1024)
    if kilobytes < 1024:  # noqa: PLR2004
        return f"{kilobytes} KB"
    return f"{size / (1024 * 1024):.1f} MB"


def _parse_deadline(value: object) -> date:
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value))
    except ValueError as exc:
        raise ValueError(f"Invalid deadline: {value!r}") from exc


def _relation_id(value: object) -> str:
    if isinstance(value, User):
        return value.id
    return str(value) if value else ""


def _display_name(user: User | None) -> str:
    return user.name if user else NOT_ASSIGNED


def _render_file(item: ProjectFile) -> dict[str, object]:
    return {
        "id": item.id,
        "name": item.name,
        "type": item.type,
        "icon": "image" if item.type == "image" else "file-text",
        "size": format_size(item.size),
        "uploaded_by": item.uploaded_by,
        "uploaded_at": format_date(item.uploaded_at),
    }
