"""Project detail endpoints: display model, HTML page and inline editing."""

from __future__ import annotations

from html import escape
from typing import TYPE_CHECKING

from fastapi import APIRouter, HTTPException, Request, status
from fastapi.responses import HTMLResponse

from studio_projects.api.models import EditFormChange  # noqa: TC001
from studio_projects.domain.status import get_status_info
from studio_projects.services.project_detail import format_date

if TYPE_CHECKING:
    from studio_projects.containers import AppContainer
    from studio_projects.services.project_detail import ProjectDetail

router = APIRouter(prefix="/projects", tags=["project-detail"])


def _open_view(request: Request, project_id: str) -> ProjectDetail:
    container: AppContainer = request.app.state.container
    view = container.project_details.open(project_id)
    if view.project is None:
        container.project_details.discard(project_id)
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=view.render()["message"]
        )
    return view


@router.get("/ui", response_class=HTMLResponse)
async def projects_ui(request: Request) -> HTMLResponse:
    """Project list page linking to each detail page."""
    container: AppContainer = request.app.state.container
    rows = "".join(
        _PROJECT_ROW.format(
            id=escape(project.id),
            title=escape(project.title),
            album_type=escape(project.album_type),
            status=escape(get_status_info(project.status).label),
            deadline=escape(format_date(project.deadline)),
        )
        for project in container.auth_context.projects
    )
    return HTMLResponse(
        _PAGE.format(
            title="Проекты",
            project_id="",
            body=f"<ul>{rows or '<li>Проектов пока нет</li>'}</ul>",
        )
    )


@router.get("/{project_id}/detail")
async def project_detail(project_id: str, request: Request) -> dict[str, object]:
    """Return the display model of the detail screen."""
    return _open_view(request, project_id).render()


@router.post("/{project_id}/edit")
async def start_edit(project_id: str, request: Request) -> dict[str, object]:
    """Switch the screen to edit mode with the current values."""
    view = _open_view(request, project_id)
    view.start_edit()
    return view.render()


@router.patch("/{project_id}/edit")
async def change_fields(
    project_id: str, payload: EditFormChange, request: Request
) -> dict[str, object]:
    """Update edit form fields."""
    view = _open_view(request, project_id)
    if not view.is_editing:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT, detail="Project is not in edit mode"
        )
    for name, value in payload.model_dump(exclude_unset=True).items():
        view.change(name, value)
    return view.render()


@router.post("/{project_id}/edit/save")
async def save_edit(project_id: str, request: Request) -> dict[str, object]:
    """Commit the edit form to the project."""
    view = _open_view(request, project_id)
    try:
        view.save()
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)
        ) from exc
    return view.render()


@router.post("/{project_id}/edit/cancel")
async def cancel_edit(project_id: str, request: Request) -> dict[str, object]:
    """Discard the edit form."""
    view = _open_view(request, project_id)
    view.cancel()
    return view.render()


@router.get("/{project_id}/ui", response_class=HTMLResponse)
async def project_ui(project_id: str, request: Request) -> HTMLResponse:
    """Server-rendered detail page that drives the edit endpoints."""
    container: AppContainer = request.app.state.container
    view = container.project_details.open(project_id).render()
    if not view["found"]:
        container.project_details.discard(project_id)
        return HTMLResponse(
            _PAGE.format(
                title=escape(str(view["title"])),
                project_id=escape(project_id),
                body=f"<p>{escape(str(view['message']))}</p>",
            ),
            status_code=status.HTTP_404_NOT_FOUND,
        )
    return HTMLResponse(
        _PAGE.format(
            title=escape(str(view["title"])),
            project_id=escape(project_id),
            body=_render_body(view),
        )
    )


def _render_body(view: dict[str, object]) -> str:
    if view["is_editing"]:
        return _render_form(view["form"])
    status_info = view["status"]
    stats = view["stats"]
    files = "".join(
        _FILE_ITEM.format(
            **{key: escape(str(value)) for key, value in item.items()}
        )
        for item in view["files"]
    )
    timeline = "".join(
        "<li>{}: {}</li>".format(escape(entry["label"]), escape(entry["date"]))
        for entry in view["timeline"]
    )
    return _VIEW_BODY.format(
        album_type=escape(str(view["album_type"])),
        description=escape(str(view["description"])),
        status_color=escape(status_info["color"]),
        status_label=escape(status_info["label"]),
        deadline=escape(str(view["deadline"])),
        manager=escape(str(view["manager"])),
        photographer=escape(str(view["photographer"])),
        designer=escape(str(view["designer"])),
        photos=stats["photos"],
        designs=stats["designs"],
        file_count=stats["files"],
        files=files or "<li>Файлы еще не загружены</li>",
        timeline=timeline,
    )


def _render_form(form: dict[str, object]) -> str:
    values = form["values"]
    options = form["options"]
    assignees = "".join(
        _select(
            name,
            values.get(name),
            [("", "Не назначен")]
            + [(item["id"], item["name"]) for item in options[name]],
        )
        for name in ("manager", "photographer", "designer")
    )
    return _FORM_BODY.format(
        title=escape(str(values["title"])),
        album_type=_select(
            "album_type",
            values["album_type"],
            [(item, item) for item in options["album_type"]],
        ),
        description=escape(str(values["description"])),
        status=_select(
            "status", values["status"], [(item, item) for item in options["status"]]
        ),
        deadline=escape(str(values["deadline"])),
        assignees=assignees,
    )


def _select(name: str, current: object, choices: list[tuple[str, str]]) -> str:
    rendered = "".join(
        '<option value="{value}"{selected}>{label}</option>'.format(
            value=escape(str(value)),
            selected=" selected" if str(value) == str(current or "") else "",
            label=escape(str(label)),
        )
        for value, label in choices
    )
    return f'<select id="{name}">{rendered}</select>'


_PROJECT_ROW = (
    '<li><a href="/projects/{id}/ui">{title}</a> '
    "{album_type}, {status}, {deadline}</li>"
)

_FILE_ITEM = (
    "<li>{name} ({size}), {uploaded_by}, {uploaded_at} "
    "<button onclick=\"call('DELETE', 'files/{id}')\">Удалить</button></li>"
)

_VIEW_BODY = """
    <p class="muted">{album_type}</p>
    <p>{description}</p>
    <p><span class="badge {status_color}">{status_label}</span>
       Дедлайн: {deadline}</p>
    <p>Менеджер: {manager}<br />
       Фотограф: {photographer}<br />
       Дизайнер: {designer}</p>
    <h2>Статистика</h2>
    <p>Фотографий: {photos}, макетов: {designs}, файлов: {file_count}</p>
    <h2>Файлы проекта</h2>
    <ul>{files}</ul>
    <div class="row">
      <input id="file_name" placeholder="Имя файла" />
      <select id="file_type">
        <option value="image">image</option>
        <option value="document">document</option>
      </select>
      <input id="file_size" type="number" min="0" placeholder="Размер, байт" />
      <input id="file_uploaded_by" placeholder="Кто загрузил" />
      <button onclick="uploadFile()">Загрузить файлы</button>
    </div>
    <h2>Временная шкала</h2>
    <ul>{timeline}</ul>
    <button onclick="call('POST', 'edit')">Редактировать</button>
"""

_FORM_BODY = """
    <div class="row"><input id="title" value="{title}" /></div>
    <div class="row">{album_type}</div>
    <div class="row">
      <textarea id="description" rows="3">{description}</textarea>
    </div>
    <div class="row">{status}</div>
    <div class="row"><input id="deadline" type="date" value="{deadline}" /></div>
    <div class="row">{assignees}</div>
    <button onclick="save()">Сохранить</button>
    <button onclick="call('POST', 'edit/cancel')">Отмена</button>
"""

_PAGE = """<!doctype html>
<html lang="ru">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>{title}</title>
    <style>
      body {{ font-family: ui-sans-serif, system-ui, sans-serif; margin: 2rem; }}
      .muted {{ color: #555; }}
      .row {{ margin-bottom: 1rem; }}
      .badge {{ padding: 0.2rem 0.6rem; border-radius: 999px; background: #eee; }}
      button {{ padding: 0.4rem 0.8rem; margin-right: 0.5rem; }}
    </style>
  </head>
  <body>
    <a href="/projects/ui">Назад к проектам</a>
    <h1>{title}</h1>
    {body}
    <script>
      const base = '/projects/{project_id}/';
      async function call(method, path, body) {{
        const res = await fetch(base + path, {{
          method,
          headers: {{ 'Content-Type': 'application/json' }},
          body: body ? JSON.stringify(body) : undefined
        }});
        if (!res.ok) {{
          alert('Error: ' + res.status);
          return false;
        }}
        window.location.reload();
        return true;
      }}
      async function save() {{
        const fields = ['title', 'album_type', 'description', 'status',
          'deadline', 'manager', 'photographer', 'designer'];
        const body = {{}};
        for (const name of fields) {{
          body[name] = document.getElementById(name).value;
        }}
        await fetch(base + 'edit', {{
          method: 'PATCH',
          headers: {{ 'Content-Type': 'application/json' }},
          body: JSON.stringify(body)
        }});
        await call('POST', 'edit/save');
      }}
      async function uploadFile() {{
        await call('POST', 'files', {{
          name: document.getElementById('file_name').value,
          type: document.getElementById('file_type').value,
          size: Number(document.getElementById('file_size').value || 0),
          uploaded_by: document.getElementById('file_uploaded_by').value
        }});
      }}
    </script>
  </body>
</html>
"""
