"""Pytest configuration and shared fixtures."""

import pytest

from tests.samples import GITHUB_TOKEN


@pytest.fixture
def valid_env_content():
    """Valid .env file content."""
    return """# Database configuration
DATABASE_URL=postgres://localhost/db
REDIS_URL=redis://localhost:6379

# Server config
HOST=0.0.0.0
PORT=8000
DEBUG=true
"""


@pytest.fixture
def risky_env_content():
    """Env content with empty, duplicate, sensitive and leaked values."""
    return f"""DATABASE_URL=postgres://localhost/db
API_KEY=
GITHUB_TOKEN={GITHUB_TOKEN}
PORT=8000
PORT=9000
"""


@pytest.fixture
def example_env_content():
    """Example file content."""
    return """DATABASE_URL=
REDIS_URL=
HOST=
SENTRY_DSN=
"""


@pytest.fixture
def tmp_env_file(tmp_path, valid_env_content):
    """Create a temporary .env file."""
    env_file = tmp_path / ".env"
    env_file.write_text(valid_env_content)
    return env_file


@pytest.fixture
def tmp_risky_env_file(tmp_path, risky_env_content):
    """Create a temporary .env file with risks."""
    env_file = tmp_path / ".env.risky"
    env_file.write_text(risky_env_content)
    return env_file


@pytest.fixture
def tmp_example_file(tmp_path, example_env_content):
    """Create a temporary .env.example file."""
    example_file = tmp_path / ".env.example"
    example_file.write_text(example_env_content)
    return example_file


@pytest.fixture
def env_file_dev(tmp_path):
    """Create a development .env file."""
    content = """DATABASE_URL=postgres://localhost/dev_db
API_KEY=dev-api-key
DEBUG=true
LOG_LEVEL=DEBUG
APP_NAME=myapp
DEV_ONLY_VAR=dev_value
"""
    env_file = tmp_path / ".env.development"
    env_file.write_text(content)
    return env_file


@pytest.fixture
def env_file_prod(tmp_path):
    """Create a production .env file."""
    content = """DATABASE_URL=postgres://prod-server/prod_db
API_KEY=prod-api-key
DEBUG=false
LOG_LEVEL=WARNING
APP_NAME=myapp
SENTRY_DSN=https://sentry.io/123
"""
    env_file = tmp_path / ".env.production"
    env_file.write_text(content)
    return env_file
