"""ASGI entrypoint for the fishidy API."""

from fishidy.api.app import create_app
from fishidy.containers import build_container

app = create_app(build_container())
