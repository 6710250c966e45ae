"""FastAPI web app for the redirector."""

from .app_factory import create_app

__all__ = ["create_app"]
