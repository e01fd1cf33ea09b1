"""Zone membership lookup."""

from collections.abc import Iterable
from functools import lru_cache

from zoneguard.domain.models import Zone
from zoneguard.domain.paths import is_ancestor_or_self


def zones_containing(file: str, zones: Iterable[Zone]) -> tuple[Zone, ...]:
    """
    Return every zone with a ``paths`` root that is ancestor-or-self of ``file``.

    Zones may overlap; all matches are returned in configuration order.
    """
    return tuple(
        zone
        for zone in zones
        if any(is_ancestor_or_self(root, file) for root in zone.paths)
    )


class ZoneIndex:
    """Read-only view over a policy's zones."""

    def __init__(self, zones: Iterable[Zone]):
        self.zones = tuple(zones)

    @classmethod
    def of(cls, zones: tuple[Zone, ...]) -> "ZoneIndex":
        """Shared index for a zone tuple; policies are immutable, so one per tuple."""
        return _shared_index(zones)

    def containing(self, file: str) -> tuple[Zone, ...]:
        return zones_containing(file, self.zones)

    def __len__(self) -> int:
        return len(self.zones)


@lru_cache(maxsize=32)
def _shared_index(zones: tuple[Zone, ...]) -> ZoneIndex:
    return ZoneIndex(zones)
