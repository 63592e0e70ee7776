"""
Integration tests for the v1 Palette Harmony API.
"""

import pytest

from palette_harmony.services.colors.harmony import HarmonyType
from palette_harmony.services.colors.sorting import SORTERS
from palette_harmony.utils.metrics import get_metrics


RGB_COLLECTION = [
    {"hex": "#FF0000", "name": "Red", "id": 1},
    {"hex": "#00FF00", "name": "Green", "id": 2},
    {"hex": "#0000FF", "name": "Blue", "id": 3},
]


class TestColorEndpoints:
    """Test single-color conversion endpoints."""

    def test_describe_color(self, test_client):
        response = test_client.get("/v1/colors/FF0000")

        assert response.status_code == 200
        data = response.json()
        assert data["hsl"] == {"h": 0, "s": 100, "l": 50}
        assert data["brightness"] == 76
        assert data["complementary_hex"] == "#00FFFF"

    def test_describe_invalid_color(self, test_client):
        response = test_client.get("/v1/colors/GGGGGG")

        assert response.status_code == 400
        assert "Invalid hex color" in response.json()["detail"]

    def test_hsl_to_hex(self, test_client):
        response = test_client.get("/v1/colors/hsl/120/100/50")

        assert response.status_code == 200
        assert response.json() == {"hex": "#00FF00"}

    def test_hsl_out_of_range(self, test_client):
        response = test_client.get("/v1/colors/hsl/120/150/50")
        assert response.status_code == 422

    def test_hsl_request_recorded(self, test_client):
        response = test_client.get("/v1/colors/hsl/360/100/50")

        assert response.json() == {"hex": "#FF0000"}
        counters = get_metrics().get_counters()
        assert counters["palette_requests_total_convert_hsl"] == 1
        assert "convert_hsl_duration_ms" in get_metrics().get_timing_stats()


class TestSortEndpoint:
    """Test collection sorting endpoint."""

    def test_sort_by_hue_keeps_extra_fields(self, test_client):
        colors = [
            {"hex": "#FF002B", "name": "Rose", "id": 1},
            {"hex": "#FF2B00", "name": "Vermilion", "id": 2},
            {"hex": "#00FFFF", "name": "Cyan", "id": 3},
        ]
        response = test_client.post("/v1/palettes/sort?by=hue", json={"colors": colors})

        assert response.status_code == 200
        data = response.json()
        assert data["by"] == "hue"
        assert [c["id"] for c in data["colors"]] == [2, 3, 1]

    def test_sort_by_lightness(self, test_client):
        colors = [
            {"hex": "#FFFFFF", "name": "White"},
            {"hex": "#000000", "name": "Black"},
        ]
        response = test_client.post("/v1/palettes/sort?by=lightness", json={"colors": colors})

        assert [c["name"] for c in response.json()["colors"]] == ["Black", "White"]

    @pytest.mark.parametrize("key", sorted(SORTERS))
    def test_every_sort_key_accepted(self, test_client, key):
        response = test_client.post(f"/v1/palettes/sort?by={key}", json={"colors": RGB_COLLECTION})

        assert response.status_code == 200
        assert response.json()["by"] == key

    def test_unknown_sort_key(self, test_client):
        response = test_client.post("/v1/palettes/sort?by=brightness", json={"colors": []})
        assert response.status_code == 422

    def test_invalid_color_in_collection(self, test_client):
        colors = [{"hex": "#12345", "name": "Broken"}]
        response = test_client.post("/v1/palettes/sort", json={"colors": colors})
        assert response.status_code == 422


class TestHarmonyEndpoint:
    """Test harmony search endpoint."""

    def test_triadic(self, test_client):
        response = test_client.post(
            "/v1/palettes/harmony/triadic",
            json={"colors": RGB_COLLECTION, "base_hex": "#FF0000"}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["relation"] == "triadic"
        assert [m["color"]["id"] for m in data["matches"]] == [1, 2, 3]
        assert [m["score"] for m in data["matches"]] == [0, 0, 0]
        assert data["meta"]["request_id"].startswith("pal-")

    def test_complementary_base_first(self, test_client):
        colors = [
            {"hex": "#00FFFF", "name": "Cyan"},
            {"hex": "#FF0000", "name": "Red"},
        ]
        response = test_client.post(
            "/v1/palettes/harmony/complementary",
            json={"colors": colors, "base_hex": "#FF0000", "count": 2}
        )

        assert response.status_code == 200
        assert [m["color"]["name"] for m in response.json()["matches"]] == ["Red", "Cyan"]

    @pytest.mark.parametrize("relation", [r.value for r in HarmonyType])
    def test_every_relation_accepted(self, test_client, relation):
        response = test_client.post(
            f"/v1/palettes/harmony/{relation}",
            json={"colors": RGB_COLLECTION, "base_hex": "#FF0000"}
        )

        assert response.status_code == 200
        assert response.json()["relation"] == relation

    def test_scores_are_integers(self, test_client):
        colors = [
            {"hex": "#FF0000", "name": "Red"},
            {"hex": "#FF2B00", "name": "Vermilion"},
            {"hex": "#FF5500", "name": "Orange"},
        ]
        response = test_client.post(
            "/v1/palettes/harmony/analogous",
            json={"colors": colors, "base_hex": "#FF0000"}
        )

        scores = [m["score"] for m in response.json()["matches"]]
        assert scores == [0, 10, 20]
        assert all(type(score) is int for score in scores)

    def test_unknown_relation(self, test_client):
        response = test_client.post(
            "/v1/palettes/harmony/tetradic",
            json={"colors": RGB_COLLECTION, "base_hex": "#FF0000"}
        )
        assert response.status_code == 422

    def test_count_above_limit(self, test_client):
        response = test_client.post(
            "/v1/palettes/harmony/analogous",
            json={"colors": RGB_COLLECTION, "base_hex": "#FF0000", "count": 10_000}
        )
        assert response.status_code == 400


class TestSuggestionsEndpoint:
    """Test smart palette suggestions endpoint."""

    def test_suggestions(self, test_client):
        response = test_client.post("/v1/palettes/suggestions", json={"colors": RGB_COLLECTION})

        assert response.status_code == 200
        suggestions = response.json()["suggestions"]
        assert [s["name"] for s in suggestions] == ["Triádica desde Red", "Triádica desde Green"]
        assert all(s["type"] == "triadic" for s in suggestions)
        assert suggestions[0]["base_color"]["id"] == 1

    def test_too_few_colors(self, test_client):
        response = test_client.post(
            "/v1/palettes/suggestions", json={"colors": RGB_COLLECTION[:2]}
        )

        assert response.status_code == 200
        assert response.json()["suggestions"] == []


class TestMetricsEndpoint:
    """Test that requests are reflected in metrics."""

    def test_counters_track_requests(self, test_client):
        test_client.get("/v1/colors/FF0000")
        test_client.get("/v1/colors/ZZZZZZ")

        counters = get_metrics().get_counters()
        assert counters["palette_requests_total_describe_color"] == 1
        assert counters["palette_failed_total_invalid_input"] == 1

        summary = test_client.get("/v1/metrics").json()
        assert "describe_color_duration_ms" in summary["timing_stats"]
