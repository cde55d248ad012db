"""Test configuration shared by the whole suite."""

import os

# Must be set before src.app.runtime.context builds the default config
os.environ.setdefault("APP_ENVIRONMENT", "test")
os.environ.setdefault("DATABASE_URL", "sqlite://")

from tests.fixtures import *  # noqa: E402,F401,F403
