# -*- coding: utf-8 -*-
"""Location: ./tests/conftest.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: ConfigAlchemy Contributors
"""

# Standard
import logging

# Third-Party
from fastapi.testclient import TestClient
import pytest

# First-Party
from configalchemy.config import get_settings
from configalchemy.services.logging_service import ROOT_LOGGER_NAME


@pytest.fixture(autouse=True)
def reset_service_logger():
    """Undo handlers installed by LoggingService.configure so caplog sees records."""
    yield
    root = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(root.handlers):
        root.removeHandler(handler)
    root.propagate = True
    root.setLevel(logging.NOTSET)


@pytest.fixture
def app_settings():
    """Return the cached Settings instance; patch attributes with monkeypatch."""
    return get_settings()


@pytest.fixture
def client():
    """Create a test client for the FastAPI app (lifespan not run)."""
    # First-Party
    from configalchemy.main import app

    return TestClient(app)
