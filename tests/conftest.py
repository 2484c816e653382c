"""Pytest fixtures and configuration."""
import pytest
from fastapi.testclient import TestClient


@pytest.fixture
def client():
    """Create test client for the API."""
    from ergoscore.main import app
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def neutral_reba():
    """REBA observation with every field at its lowest score."""
    return {
        "neck": 1, "trunk": 1, "legs": 1,
        "upperArm": 1, "lowerArm": 1, "wrist": 1,
        "load": 0, "coupling": 0, "activity": 0,
    }


@pytest.fixture
def worst_rula():
    """RULA observation with every field at its highest score."""
    return {
        "upperArm": 6, "lowerArm": 3, "wrist": 4, "wristTwist": 2,
        "neck": 6, "trunk": 6, "legs": 2, "muscle": 1, "force": 3,
    }


@pytest.fixture
def reference_lift():
    """10 kg lift at knuckle height, close to the body, 75 cm of travel."""
    return {
        "weight": 10, "hDist": 25, "vDist": 75, "vOrigin": 75,
        "asymmetry": 0, "coupling": "good",
    }
