"""Redirect routes: the endpoint the browser's search engine points at."""

from typing import Optional

from fastapi import APIRouter, Request, status
from fastapi.responses import PlainTextResponse, RedirectResponse

from ezredirect.lib.resolver import Redirected

router = APIRouter()

MISSING_QUERY = "Could not find query param q=..."


@router.get("/", include_in_schema=False)
async def redirect(request: Request, q: Optional[str] = None):
    """Resolve ``q`` and redirect to the destination.
    
    Failures come back as 400 with the reason as plain text so the browser
    shows it directly.
    """
    if q is None:
        return PlainTextResponse(MISSING_QUERY, status_code=status.HTTP_400_BAD_REQUEST)
    
    resolver = request.app.state.resolver
    config = request.app.state.config
    
    outcome = resolver.handle(q)
    if isinstance(outcome, Redirected):
        return RedirectResponse(url=outcome.target, status_code=config.redirect_status)
    
    return PlainTextResponse(outcome.reason, status_code=status.HTTP_400_BAD_REQUEST)


@router.get("/health", include_in_schema=False)
async def health_check_web(request: Request):
    """Health check endpoint (simple version for load balancers)."""
    return {"status": "healthy", "rules": len(request.app.state.ruleset)}
