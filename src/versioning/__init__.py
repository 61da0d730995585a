"""Maven version ordering with SNAPSHOT build awareness."""

from .comparable import ComparableVersion, compare_versions
from .version import TimestampLookup, TimestampStatus, Version, compare
from .ranges import filter_by_range, pick_highest

__all__ = [
    "ComparableVersion",
    "compare_versions",
    "TimestampLookup",
    "TimestampStatus",
    "Version",
    "compare",
    "filter_by_range",
    "pick_highest",
]
