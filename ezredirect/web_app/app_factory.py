"""FastAPI application factory."""

import logging
from typing import Optional

from fastapi import FastAPI

from ezredirect import __version__
from ezredirect.lib.resolver import Resolver
from ezredirect.lib.ruleset import RuleSet
from .api import api_router
from .web import web_router
from .middleware.headers import MadeByHeaderMiddleware
from .middleware.logging import LoggingMiddleware


def create_app(
    ruleset: RuleSet,
    config,
    logger: Optional[logging.Logger] = None,
) -> FastAPI:
    """Create and configure FastAPI application.
    
    Args:
        ruleset: Rule set built at startup; shared read-only by all requests
        config: Configuration instance
        logger: Optional logger
        
    Returns:
        Configured FastAPI app
    """
    logger = logger or logging.getLogger("ezredirect")
    
    app = FastAPI(
        title="ezredirect",
        description="Keyboard shortcuts for your address bar",
        version=__version__,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )
    
    # Store instances in app state for access in routes
    app.state.ruleset = ruleset
    app.state.resolver = Resolver(ruleset, logger=logger.getChild("resolver"))
    app.state.config = config
    app.state.logger = logger
    
    app.add_middleware(MadeByHeaderMiddleware)
    app.add_middleware(LoggingMiddleware, logger=logger.getChild("web"))
    
    app.include_router(api_router, prefix="/api", tags=["API"])
    app.include_router(web_router, tags=["Redirect"])
    
    return app
