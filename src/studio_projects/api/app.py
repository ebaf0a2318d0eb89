"""FastAPI application factory."""

import logging

from fastapi import FastAPI, HTTPException, Request, status

from studio_projects.api.models import (
    FileCreate,
    LoginRequest,
    ProjectCreate,
    ProjectUpdate,
    UserCreate,
    UserUpdate,
)
from studio_projects.api.project_detail import router as project_detail_router
from studio_projects.app_logging import configure_logging
from studio_projects.containers import AppContainer
from studio_projects.domain.models import Project, ProjectFile, User
from studio_projects.services.auth import AuthContext

_ASSIGNEE_FIELDS = {
    "manager_id": "manager",
    "photographer_id": "photographer",
    "designer_id": "designer",
}


def create_app(container: AppContainer) -> FastAPI:  # noqa: PLR0915
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Studio Projects")
    app.state.container = container

    app.include_router(project_detail_router)

    def _context(request: Request) -> AuthContext:
        state_container: AppContainer = request.app.state.container
        return state_container.auth_context

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/auth/login")
    async def login(payload: LoginRequest, request: Request) -> dict[str, object]:
        """Sign in with a login or email and password."""
        context = _context(request)
        if not context.login(payload.login, payload.password):
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid login or password",
            )
        return {"user": _serialize_user(context.user)}

    @app.post("/auth/logout")
    async def logout(request: Request) -> dict[str, str]:
        """Sign out the current user."""
        _context(request).logout()
        return {"status": "ok"}

    @app.post("/auth/register", status_code=status.HTTP_201_CREATED)
    async def register(payload: UserCreate, request: Request) -> dict[str, object]:
        """Register a new account and sign it in."""
        context = _context(request)
        if not context.register(payload.model_dump()):
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="Login already registered",
            )
        return {"user": _serialize_user(context.user)}

    @app.get("/auth/me")
    async def me(request: Request) -> dict[str, object]:
        """Return the signed-in user, if any."""
        context = _context(request)
        return {
            "authenticated": context.is_authenticated,
            "user": _serialize_user(context.user) if context.user else None,
        }

    @app.get("/users")
    async def list_users(
        request: Request, role: str | None = None
    ) -> dict[str, object]:
        """Return all users, optionally filtered by role."""
        context = _context(request)
        users = context.users_with_role(role) if role else context.users
        return {"users": [_serialize_user(user) for user in users]}

    @app.post("/users", status_code=status.HTTP_201_CREATED)
    async def add_user(payload: UserCreate, request: Request) -> dict[str, object]:
        """Add a studio member."""
        user = _context(request).add_user(payload.model_dump())
        logger.info("User added", extra={"user_id": user.id})
        return {"user": _serialize_user(user)}

    @app.get("/users/{user_id}")
    async def get_user(user_id: str, request: Request) -> dict[str, object]:
        """Return a single user."""
        return {"user": _serialize_user(_require_user(_context(request), user_id))}

    @app.patch("/users/{user_id}")
    async def update_user(
        user_id: str, payload: UserUpdate, request: Request
    ) -> dict[str, object]:
        """Apply a partial update to a user."""
        context = _context(request)
        _require_user(context, user_id)
        context.update_user(user_id, payload.model_dump(exclude_unset=True))
        return {"user": _serialize_user(_require_user(context, user_id))}

    @app.delete("/users/{user_id}")
    async def delete_user(user_id: str, request: Request) -> dict[str, str]:
        """Delete a user."""
        context = _context(request)
        _require_user(context, user_id)
        context.delete_user(user_id)
        return {"status": "ok"}

    @app.get("/projects")
    async def list_projects(request: Request) -> dict[str, object]:
        """Return all projects."""
        projects = _context(request).projects
        return {"projects": [_serialize_project(project) for project in projects]}

    @app.post("/projects", status_code=status.HTTP_201_CREATED)
    async def add_project(
        payload: ProjectCreate, request: Request
    ) -> dict[str, object]:
        """Create a project."""
        context = _context(request)
        data = _with_assignees(context, payload.model_dump())
        project = context.add_project(data)
        logger.info("Project created", extra={"project_id": project.id})
        return {"project": _serialize_project(project)}

    @app.get("/projects/{project_id}")
    async def get_project(project_id: str, request: Request) -> dict[str, object]:
        """Return a single project."""
        project = _require_project(_context(request), project_id)
        return {"project": _serialize_project(project)}

    @app.patch("/projects/{project_id}")
    async def update_project(
        project_id: str, payload: ProjectUpdate, request: Request
    ) -> dict[str, object]:
        """Apply a partial update to a project."""
        context = _context(request)
        _require_project(context, project_id)
        changes = _with_assignees(context, payload.model_dump(exclude_unset=True))
        context.update_project(project_id, changes)
        return {"project": _serialize_project(_require_project(context, project_id))}

    @app.delete("/projects/{project_id}")
    async def delete_project(project_id: str, request: Request) -> dict[str, str]:
        """Delete a project and any open detail view for it."""
        state_container: AppContainer = request.app.state.container
        context = state_container.auth_context
        _require_project(context, project_id)
        context.delete_project(project_id)
        state_container.project_details.discard(project_id)
        logger.info("Project deleted", extra={"project_id": project_id})
        return {"status": "ok"}

    @app.post("/projects/{project_id}/files", status_code=status.HTTP_201_CREATED)
    async def add_file(
        project_id: str, payload: FileCreate, request: Request
    ) -> dict[str, object]:
        """Attach file metadata to a project."""
        context = _context(request)
        _require_project(context, project_id)
        created = context.add_file_to_project(project_id, payload.model_dump())
        return {"file": _serialize_file(created)}

    @app.delete("/projects/{project_id}/files/{file_id}")
    async def remove_file(
        project_id: str, file_id: str, request: Request
    ) -> dict[str, str]:
        """Detach a file from a project."""
        context = _context(request)
        _require_project(context, project_id)
        context.remove_file_from_project(project_id, file_id)
        return {"status": "ok"}

    return app


def _require_user(context: AuthContext, user_id: str) -> User:
    user = context.get_user(user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return user


def _require_project(context: AuthContext, project_id: str) -> Project:
    project = context.get_project(project_id)
    if project is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return project


def _with_assignees(
    context: AuthContext, data: dict[str, object]
) -> dict[str, object]:
    """Replace assignee ids with copies of the matching user records."""
    resolved = {
        key: value for key, value in data.items() if key not in _ASSIGNEE_FIELDS
    }
    for id_field, relation in _ASSIGNEE_FIELDS.items():
        if id_field not in data:
            continue
        user_id = data[id_field]
        if not user_id:
            resolved[relation] = None
            continue
        user = context.get_user(str(user_id))
        if user is None:
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail=f"Unknown user id for {relation}: {user_id}",
            )
        resolved[relation] = user
    return resolved


def _serialize_user(user: User | None) -> dict[str, object] | None:
    if user is None:
        return None
    return {
        "id": user.id,
        "email": user.email,
        "login": user.login,
        "name": user.name,
        "role": user.role,
        "department": user.department,
        "position": user.position,
        "salary": user.salary,
        "phone": user.phone,
        "telegram": user.telegram,
        "avatar": user.avatar,
        "created_at": user.created_at.isoformat(),
    }


def _serialize_file(item: ProjectFile | None) -> dict[str, object] | None:
    if item is None:
        return None
    return {
        "id": item.id,
        "name": item.name,
        "type": item.type,
        "size": item.size,
        "uploaded_by": item.uploaded_by,
        "uploaded_at": item.uploaded_at.isoformat(),
    }


def _serialize_project(project: Project) -> dict[str, object]:
    return {
        "id": project.id,
        "title": project.title,
        "album_type": project.album_type,
        "description": project.description,
        "status": project.status,
        "manager": _serialize_user(project.manager),
        "photographer": _serialize_user(project.photographer),
        "designer": _serialize_user(project.designer),
        "deadline": project.deadline.isoformat(),
        "created_at": project.created_at.isoformat(),
        "updated_at": project.updated_at.isoformat(),
        "photos_count": project.photos_count,
        "designs_count": project.designs_count,
        "files": [_serialize_file(item) for item in project.files],
    }
