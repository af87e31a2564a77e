"""ASGI entrypoint, e.g. ``uvicorn macro_tracker.api.asgi:app``."""

from macro_tracker.api.app import create_app
from macro_tracker.config import Settings
from macro_tracker.containers import build_container

settings = Settings()
app = create_app(build_container(settings))
