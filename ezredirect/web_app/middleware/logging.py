"""Logging middleware."""

import itertools
import time
import logging
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from typing import Callable

_request_counter = itertools.count(1)


def next_request_id() -> str:
    """Process-unique request id used to correlate log lines."""
    return f"request-{next(_request_counter)}"


class LoggingMiddleware(BaseHTTPMiddleware):
    """Middleware for request/response logging."""
    
    def __init__(self, app, logger: logging.Logger = None):
        """Initialize logging middleware."""
        super().__init__(app)
        self.logger = logger or logging.getLogger("ezredirect.web")
    
    async def dispatch(self, request: Request, call_next: Callable):
        """Log request and response."""
        request_id = next_request_id()
        request.state.request_id = request_id
        start_time = time.perf_counter()
        
        client_ip = request.client.host if request.client else "unknown"
        self.logger.info(f"[{request_id}] Request: {request.method} {request.url.path} from {client_ip}")
        
        response = await call_next(request)
        
        duration_us = (time.perf_counter() - start_time) * 1_000_000
        self.logger.info(
            f"[{request_id}] Response: {request.method} {request.url.path} - "
            f"Status: {response.status_code}"
        )
        self.logger.debug(f"[{request_id}] Completed in {duration_us:.0f}micros")
        
        return response
