"""Fixed points tables for race and sprint finishing positions."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

RACE_POINTS: Mapping[int, int] = MappingProxyType({
    1: 25, 2: 18, 3: 15, 4: 12, 5: 10,
    6: 8, 7: 6, 8: 4, 9: 2, 10: 1,
})

SPRINT_POINTS: Mapping[int, int] = MappingProxyType({
    1: 8, 2: 7, 3: 6, 4: 5, 5: 4, 6: 3, 7: 2, 8: 1,
})


def race_points(position: int | None, dnf: bool = False) -> int:
    """Return race points for *position*; zero for a DNF or an unscored position."""
    if dnf or position is None:
        return 0
    return RACE_POINTS.get(position, 0)


def sprint_points(position: int | None) -> int:
    """Return sprint points for *position*, or zero."""
    if position is None:
        return 0
    return SPRINT_POINTS.get(position, 0)
