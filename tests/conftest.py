"""
Shared test fixtures: FastAPI test client.
"""

import os
import pytest
from fastapi.testclient import TestClient

# Pin GST home state before importing app modules
os.environ["GST_HOME_STATE"] = "telangana"

from mbcb.main import app


@pytest.fixture
def client():
    """FastAPI test client."""
    return TestClient(app)
