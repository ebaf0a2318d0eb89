"""Display metadata for project statuses."""

from dataclasses import dataclass


@dataclass(frozen=True)
class StatusInfo:
    """Label, badge color and icon name for a project status."""

    label: str
    color: str
    icon: str


STATUS_INFO: dict[str, StatusInfo] = {
    "planning": StatusInfo("Планирование", "bg-gray-100 text-gray-800", "clock"),
    "in-progress": StatusInfo("В работе", "bg-blue-100 text-blue-800", "camera"),
    "review": StatusInfo("На проверке", "bg-yellow-100 text-yellow-800", "palette"),
    "completed": StatusInfo(
        "Завершен", "bg-green-100 text-green-800", "check-circle"
    ),
}

ALBUM_TYPES = (
    "Свадебный альбом",
    "Выпускной альбом",
    "Детский альбом",
    "Корпоративный альбом",
    "Семейный альбом",
    "Портретная съемка",
)


def get_status_info(status: str | None) -> StatusInfo:
    """Return display info for a status, falling back to planning."""
    return STATUS_INFO.get(status or "", STATUS_INFO["planning"])
