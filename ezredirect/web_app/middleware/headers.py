"""Response header middleware."""

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from typing import Callable

MADE_BY_HEADER = "X-EZ-Made-This"


class MadeByHeaderMiddleware(BaseHTTPMiddleware):
    """Mark every response as produced by the redirector."""
    
    async def dispatch(self, request: Request, call_next: Callable):
        response = await call_next(request)
        response.headers[MADE_BY_HEADER] = "true"
        return response
