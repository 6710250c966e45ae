"""Read-only JSON API over the loaded rule set."""

from fastapi import APIRouter, Request, HTTPException, status
from datetime import datetime, timezone

from .schemas import (
    RuleInfo,
    RulesResponse,
    ResolveResponse,
    HealthResponse,
    ErrorResponse,
)
from ezredirect.lib.errors import RedirectError
from ezredirect.lib.ruleset import FALLBACK_KEY
from ezredirect.lib.tokenizer import tokenize

router = APIRouter()


@router.get(
    "/rules",
    response_model=RulesResponse,
    summary="List shortcuts",
    description="List every shortcut key in the loaded rule set.",
)
async def list_rules(request: Request):
    """List the loaded rules."""
    ruleset = request.app.state.ruleset
    
    rules = [
        RuleInfo(
            key=key,
            kind=rule.kind,
            target=rule.describe(),
            fallback=key == FALLBACK_KEY,
        )
        for key, rule in sorted(ruleset.items())
    ]
    
    return RulesResponse(
        count=len(rules),
        has_fallback=ruleset.fallback is not None,
        rules=rules,
    )


@router.get(
    "/resolve",
    response_model=ResolveResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Query could not be resolved"},
    },
    summary="Preview a query",
    description="Resolve a query the way the redirect endpoint would, without redirecting.",
)
async def resolve_query(request: Request, q: str):
    """Resolve a query and describe the result."""
    resolver = request.app.state.resolver
    
    try:
        outcome = resolver.resolve_with_key(q)
    except RedirectError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    
    parsed = tokenize(q)
    return ResolveResponse(
        query=q,
        command=parsed.command,
        args=list(parsed.args),
        key=outcome.key,
        fallback=outcome.fallback,
        target=outcome.target,
    )


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Check if the service is healthy.",
)
async def health_check(request: Request):
    """Health check endpoint for monitoring."""
    return HealthResponse(
        status="healthy",
        rules=len(request.app.state.ruleset),
        timestamp=datetime.now(timezone.utc),
    )
