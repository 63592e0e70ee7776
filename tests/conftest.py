"""
Test configuration and fixtures for Palette Harmony tests.
"""
import pytest
from fastapi.testclient import TestClient

# Import the main app
from main import app


@pytest.fixture
def test_client():
    """Create test client for the FastAPI app."""
    return TestClient(app)


@pytest.fixture(autouse=True)
def reset_metrics():
    """Reset metrics before each test."""
    from palette_harmony.utils.metrics import reset_metrics
    reset_metrics()


def make_color(hex_value, name, **extra):
    """Build a collection record."""
    return {"hex": hex_value, "name": name, **extra}


@pytest.fixture
def warm_collection():
    """Reds and oranges plus two cyans, in insertion order."""
    return [
        make_color("#FF0000", "Red"),
        make_color("#FF2B00", "Vermilion"),
        make_color("#FF5500", "Orange"),
        make_color("#FF8000", "Amber"),
        make_color("#00FFFF", "Cyan"),
        make_color("#00BFFF", "Sky"),
    ]
