from __future__ import annotations

import os
from typing import Generator
from unittest import mock

import pytest

# Import fixtures from testing/ so they are known by pytest
from testing.connectors import local_connector
from testing.connectors import redis_connector


@pytest.fixture(autouse=True)
def _clean_environment() -> Generator[None, None, None]:
    """Remove $X_ENV and $X_LOCAL so tests do not depend on the host."""
    with mock.patch.dict(os.environ):
        os.environ.pop('X_ENV', None)
        os.environ.pop('X_LOCAL', None)
        yield
