"""Pytest configuration and fixtures."""

import pytest
from httpx import ASGITransport, AsyncClient

from ezredirect.config import Config
from ezredirect.lib.config_file import parse_config_lines
from ezredirect.lib.resolver import Resolver
from ezredirect.lib.ruleset import build_ruleset
from ezredirect.lib.common.logging_config import setup_logging
from ezredirect.web_app import create_app

SIMPLE_CONFIG = """
m = https://gmail.com/
npm = https://npmjs.com/search?q={ARGS}
_ = https://www.google.com/search?q={ALL}
  """


@pytest.fixture
def logger():
    """Create test logger."""
    return setup_logging(level="DEBUG")


@pytest.fixture
def config_text():
    """Config file contents used by most tests."""
    return SIMPLE_CONFIG


@pytest.fixture
def config_file(tmp_path, config_text):
    """Config file written to a temporary directory."""
    path = tmp_path / "config.txt"
    path.write_text(config_text, encoding="utf-8")
    return path


@pytest.fixture
def ruleset(config_text, logger):
    """Rule set built from the sample config."""
    entries = parse_config_lines(config_text.splitlines(), logger=logger)
    return build_ruleset(entries, logger=logger)


@pytest.fixture
def resolver(ruleset, logger):
    """Resolver over the sample rule set."""
    return Resolver(ruleset, logger=logger)


@pytest.fixture
def app(ruleset, logger):
    """Create test FastAPI app."""
    return create_app(ruleset=ruleset, config=Config(), logger=logger)


@pytest.fixture
async def client(app):
    """Create test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac
