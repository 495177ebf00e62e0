"""ASGI entry point: ``uvicorn salon.app_factory:app``."""
from salon.app import create_app

app = create_app()

__all__ = ["app", "create_app"]
