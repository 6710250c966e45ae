#!/usr/bin/env python3
"""
Main entry point for the redirector service.

Point the browser's search engine at ``http://127.0.0.1:5050/?q=%s``; typing
``npm file finder`` then lands on the destination configured for ``npm``.

Usage:
    ezredirect example-configs/simple.txt [--port 5050]

Environment variables:
    RULES_FILE - Shortcut config file (used when no path is given)
    HOST - Host to bind to
    PORT - Port to listen on
    BUILTIN_RULES - Set to 'true' to register the built-in code rules
    STRICT_CONFIG - Set to 'false' to skip malformed config lines
    REDIRECT_STATUS - HTTP status for redirects (default 302)
    LOG_LEVEL - Logging level
"""

import argparse
import signal
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from pydantic import ValidationError

from ezredirect import __version__
from ezredirect.config import load_config
from ezredirect.lib.code_rules import builtin_code_rules
from ezredirect.lib.errors import ConfigError
from ezredirect.lib.ruleset import load_ruleset
from ezredirect.lib.common.logging_config import setup_logging
from ezredirect.web_app import create_app


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown."""
    logger = app.state.logger
    ruleset = app.state.ruleset
    
    logger.info(f"Serving {len(ruleset)} shortcuts")
    if ruleset.fallback is None:
        logger.info("No fallback rule: unmatched commands return 400")
    
    yield
    
    logger.info("Redirector stopped")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ezredirect",
        description="Keyboard shortcuts for your address bar",
    )
    parser.add_argument(
        "config",
        nargs="?",
        metavar="FILE",
        help="Path to the config file used to specify shortcuts. "
             "See example-configs/simple.txt for a starter config.",
    )
    parser.add_argument("--host", help="Host to bind to (default 127.0.0.1)")
    parser.add_argument("-p", "--port", type=int, help="Port which ezredirect will run on (default 5050)")
    parser.add_argument("--log-level", help="Logging level")
    parser.add_argument("--log-file", help="Log file path")
    parser.add_argument(
        "--builtin-rules",
        action="store_true",
        default=None,
        help="Register the built-in code rules (g, gmail, cal, npm, yt)",
    )
    parser.add_argument(
        "--no-strict",
        dest="strict_config",
        action="store_false",
        default=None,
        help="Skip malformed config lines instead of refusing to start",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv=None):
    """Main entry point."""
    args = build_parser().parse_args(argv)
    
    try:
        config = load_config(
            rules_file=args.config,
            host=args.host,
            port=args.port,
            log_level=args.log_level,
            log_file=args.log_file,
            builtin_rules=args.builtin_rules,
            strict_config=args.strict_config,
        )
    except ValidationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        sys.exit(2)
    
    logger = setup_logging(
        level=config.log_level,
        log_file=config.log_file,
        json_format=config.log_json,
    )
    
    logger.info("ezredirect")
    logger.info(f"Configuration: {config.model_dump()}")
    
    # The rule set must be complete before serving starts
    code_rules = builtin_code_rules() if config.builtin_rules else []
    try:
        ruleset = load_ruleset(
            config.rules_file,
            strict=config.strict_config,
            code_rules=code_rules,
            logger=logger.getChild("rules"),
        )
    except ConfigError as e:
        logger.error(f"Failed to build rule set: {e}")
        sys.exit(1)
    
    app = create_app(ruleset=ruleset, config=config, logger=logger)
    app.router.lifespan_context = lifespan
    
    uvicorn_config = uvicorn.Config(
        app,
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
        access_log=False,
    )
    
    server = uvicorn.Server(uvicorn_config)
    
    def handle_signal(signum, frame):
        logger.info(f"Received signal {signum}, initiating graceful shutdown...")
        server.should_exit = True
    
    signal.signal(signal.SIGINT, handle_signal)
    signal.signal(signal.SIGTERM, handle_signal)
    
    try:
        logger.info(f"Starting on {config.host}:{config.port}")
        server.run()
    except Exception as e:
        logger.error(f"Server error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
