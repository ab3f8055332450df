"""ASGI entrypoint for the body calculator API."""

from bodycalc.api.app import create_app
from bodycalc.containers import build_container

app = create_app(build_container())
