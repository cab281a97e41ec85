"""Process-lifetime memo of /points lookups."""

from noaa.models.points import PointsRecord


class PointsCache:
    """Maps a points endpoint URL to the record it returned.

    Keys are the literal URL strings, so "41.8370" and "41.837" are separate
    entries. Entries never expire and are never written to disk.
    """

    def __init__(self) -> None:
        self._records: dict[str, PointsRecord] = {}

    def get(self, endpoint: str) -> PointsRecord | None:
        return self._records.get(endpoint)

    def put(self, endpoint: str, record: PointsRecord) -> None:
        self._records[endpoint] = record

    def clear(self) -> None:
        self._records.clear()

    def __contains__(self, endpoint: object) -> bool:
        return endpoint in self._records

    def __len__(self) -> int:
        return len(self._records)
