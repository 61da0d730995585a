"""SNAPSHOT-aware Maven versions.

A deployed snapshot build is addressed as
``<release>-SNAPSHOT-<timestamp>-<buildNumber>``, for example
``0.4.5-SNAPSHOT-20211215.173200-4``. Two snapshot builds of the same
release that share a timestamp are the same artifact, so they compare
equal even when one of them lacks the build number.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from common.errors import NoSnapshotVersionError, NoTimestampError
from .comparable import ComparableVersion

SNAPSHOT = "SNAPSHOT"
SNAPSHOT_SUFFIX = "-" + SNAPSHOT


class TimestampStatus(Enum):
    """Outcome of looking up the build timestamp of a version."""
    PRESENT = "present"
    NOT_SNAPSHOT = "not_snapshot"
    NOT_PRESENT = "not_present"


@dataclass(frozen=True)
class TimestampLookup:
    """Timestamp of a version, or the reason there is none."""
    status: TimestampStatus
    value: Optional[str] = None

    @property
    def present(self) -> bool:
        return self.status is TimestampStatus.PRESENT


class Version(ComparableVersion):
    """Immutable Maven version with SNAPSHOT build awareness."""

    __slots__ = ("_components",)

    def __init__(self, version: str):
        super().__init__(version)
        self._components: List[str] = self._value.split("-")

    @property
    def components(self) -> List[str]:
        """Hyphen-separated components of the version string."""
        return list(self._components)

    @property
    def release_portion(self) -> str:
        return self._components[0]

    def is_snapshot(self) -> bool:
        return len(self._components) >= 2 and self._components[1] == SNAPSHOT

    def timestamp_lookup(self) -> TimestampLookup:
        if not self.is_snapshot():
            return TimestampLookup(TimestampStatus.NOT_SNAPSHOT)
        if len(self._components) < 3:
            return TimestampLookup(TimestampStatus.NOT_PRESENT)
        return TimestampLookup(TimestampStatus.PRESENT, self._components[2])

    def get_timestamp(self) -> str:
        """Return the build timestamp of a snapshot build.

        Raises:
            NoSnapshotVersionError: the version is not a snapshot.
            NoTimestampError: the snapshot has no timestamp component.
        """
        lookup = self.timestamp_lookup()
        if lookup.status is TimestampStatus.NOT_SNAPSHOT:
            raise NoSnapshotVersionError(self._value)
        if lookup.status is TimestampStatus.NOT_PRESENT:
            raise NoTimestampError(self._value)
        return lookup.value

    def get_build_number(self) -> Optional[str]:
        """Return the build number of a snapshot build, or None when absent."""
        if self.is_snapshot() and len(self._components) >= 4:
            return self._components[3]
        return None

    def without_build_info(self) -> "Version":
        if not self.is_snapshot():
            return self
        return Version(self._components[0] + SNAPSHOT_SUFFIX)

    @property
    def release_identifier(self) -> str:
        """Version string as used in artifact file names (``-SNAPSHOT`` removed)."""
        return self._value.replace(SNAPSHOT_SUFFIX, "")

    def compare_to(self, other: ComparableVersion) -> int:
        if isinstance(other, Version) and self._same_snapshot_build(other):
            return 0
        return super().compare_to(other)

    def _same_snapshot_build(self, other: "Version") -> bool:
        if not (self.is_snapshot() and other.is_snapshot()):
            return False
        left = self.timestamp_lookup()
        right = other.timestamp_lookup()
        if not (left.present and right.present):
            return False
        release_a = ComparableVersion(self._components[0])
        release_b = ComparableVersion(other._components[0])
        return release_a.compare_to(release_b) == 0 and left.value == right.value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ComparableVersion):
            return NotImplemented
        return self.compare_to(other) == 0

    __hash__ = ComparableVersion.__hash__


def compare(a: Version, b: Version) -> int:
    """Total order over versions, returning -1, 0 or 1."""
    return a.compare_to(b)
