"""ASGI entrypoint for the studio projects API."""

from studio_projects.api.app import create_app
from studio_projects.containers import build_container

app = create_app(build_container())
