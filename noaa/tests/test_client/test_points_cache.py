"""Tests for the points lookup cache."""

from noaa.client.points_cache import PointsCache
from noaa.models.points import PointsRecord


def _record(grid_x: int = 74) -> PointsRecord:
    return PointsRecord(
        grid_id="LOT",
        grid_x=grid_x,
        grid_y=71,
        forecast="https://x/forecast",
        forecast_hourly="https://x/forecast/hourly",
        forecast_grid_data="https://x",
        observation_stations="https://x/stations",
    )


class TestPointsCache:
    def test_empty(self):
        cache = PointsCache()
        assert len(cache) == 0
        assert cache.get("https://x/points/1,2") is None
        assert "https://x/points/1,2" not in cache

    def test_put_and_get(self):
        cache = PointsCache()
        record = _record()
        cache.put("https://x/points/41.837,-87.685", record)
        assert cache.get("https://x/points/41.837,-87.685") is record
        assert "https://x/points/41.837,-87.685" in cache

    def test_keys_are_literal_strings(self):
        cache = PointsCache()
        cache.put("https://x/points/41.837,-87.685", _record())
        assert cache.get("https://x/points/41.8370,-87.685") is None

    def test_clear(self):
        cache = PointsCache()
        cache.put("a", _record(1))
        cache.put("b", _record(2))
        assert len(cache) == 2
        cache.clear()
        assert len(cache) == 0
