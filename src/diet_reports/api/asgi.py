"""ASGI entrypoint for the diet reports API."""

from diet_reports.api.app import create_app
from diet_reports.containers import build_container

app = create_app(build_container())
