"""Middleware for the redirector web app."""

from .headers import MadeByHeaderMiddleware, MADE_BY_HEADER
from .logging import LoggingMiddleware

__all__ = ["MadeByHeaderMiddleware", "MADE_BY_HEADER", "LoggingMiddleware"]
