"""
Test health endpoint for Palette Harmony.
"""


def test_health_check(test_client):
    """Health check reports service identity."""
    response = test_client.get("/healthz")

    assert response.status_code == 200
    data = response.json()

    # Check required fields
    assert data["ok"] is True
    assert "version" in data
    assert data["service"] == "palette-harmony"
