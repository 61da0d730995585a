"""Tests for SNAPSHOT-aware version ordering."""

import pytest

from common.errors import NoSnapshotVersionError, NoTimestampError
from versioning.version import TimestampStatus, Version, compare


class TestSnapshotDetection:
    """Snapshot kind and build marker extraction."""

    def test_release_is_not_snapshot(self):
        assert not Version("0.4.5").is_snapshot()

    def test_plain_snapshot(self):
        assert Version("0.4.5-SNAPSHOT").is_snapshot()

    def test_snapshot_marker_is_case_sensitive(self):
        assert not Version("0.4.5-snapshot").is_snapshot()

    def test_marker_must_be_second_component(self):
        assert not Version("0.4.5-rc-SNAPSHOT").is_snapshot()

    def test_timestamped_snapshot(self):
        version = Version("0.4.5-SNAPSHOT-20211208.182235-1")
        assert version.is_snapshot()
        assert version.get_timestamp() == "20211208.182235"
        assert version.get_build_number() == "1"

    def test_timestamp_without_build_number(self):
        version = Version("0.4.5-SNAPSHOT-20211208.182235")
        assert version.get_timestamp() == "20211208.182235"
        assert version.get_build_number() is None

    def test_get_timestamp_of_release_raises(self):
        with pytest.raises(NoSnapshotVersionError):
            Version("0.4.5").get_timestamp()

    def test_get_timestamp_of_plain_snapshot_raises(self):
        with pytest.raises(NoTimestampError):
            Version("0.4.5-SNAPSHOT").get_timestamp()

    def test_timestamp_lookup_never_raises(self):
        assert Version("0.4.5").timestamp_lookup().status is TimestampStatus.NOT_SNAPSHOT
        assert Version("0.4.5-SNAPSHOT").timestamp_lookup().status is TimestampStatus.NOT_PRESENT
        lookup = Version("0.4.5-SNAPSHOT-20211208.182235").timestamp_lookup()
        assert lookup.present
        assert lookup.value == "20211208.182235"


class TestBuildInfo:
    """Stripping build information."""

    def test_release_identity(self):
        version = Version("0.4.5")
        assert version.without_build_info() is version

    def test_snapshot_build_stripped(self):
        assert str(Version("0.4.5-SNAPSHOT-20211208.182235-1").without_build_info()) == "0.4.5-SNAPSHOT"

    def test_plain_snapshot_unchanged(self):
        assert str(Version("0.4.5-SNAPSHOT").without_build_info()) == "0.4.5-SNAPSHOT"

    def test_release_identifier_keeps_build_suffix(self):
        version = Version("0.4.5-SNAPSHOT-20211215.173200-4")
        assert version.release_identifier == "0.4.5-20211215.173200-4"

    def test_release_identifier_of_plain_snapshot(self):
        assert Version("0.4.5-SNAPSHOT").release_identifier == "0.4.5"

    def test_components(self):
        assert Version("1.0-SNAPSHOT-1.2-3").components == ["1.0", "SNAPSHOT", "1.2", "3"]
        assert Version("1.0-SNAPSHOT").release_portion == "1.0"


class TestCompare:
    """Total order including the snapshot timestamp equivalence."""

    @pytest.mark.parametrize("left,right,expected", [
        ("0.4.5", "0.4.6", -1),
        ("0.4.5-SNAPSHOT", "0.4.5", -1),
        ("0.4.4", "0.4.5-SNAPSHOT", -1),
        ("0.4.5-SNAPSHOT-20211208.182235", "0.4.5-SNAPSHOT-20211208.182235-1", 0),
        ("0.4.5-SNAPSHOT-20211208.182235-1", "0.4.5-SNAPSHOT-20211208.182235-7", 0),
        ("0.4.5-SNAPSHOT-20211208.182235", "0.4.6-SNAPSHOT-20211208.182235", -1),
        ("0.4.5-SNAPSHOT-20211208.182235-1", "0.4.5-SNAPSHOT-20211215.173200-4", -1),
        ("0.4.5-SNAPSHOT", "0.4.5-SNAPSHOT-20211208.182235", -1),
        ("0.4.6", "0.4.5-SNAPSHOT-20211208.182235-1", 1),
    ])
    def test_compare(self, left, right, expected):
        assert compare(Version(left), Version(right)) == expected
        assert compare(Version(right), Version(left)) == -expected

    @pytest.mark.parametrize("text", ["0.4.5", "1", "2.0-rc1", "1.0-SNAPSHOT", "1.0-SNAPSHOT-20211208.182235-1"])
    def test_reflexive(self, text):
        assert compare(Version(text), Version(text)) == 0

    def test_equivalent_release_prefixes(self):
        left = Version("1.0-SNAPSHOT-20211208.182235-1")
        right = Version("1.0.0-SNAPSHOT-20211208.182235-2")
        assert left == right

    def test_equality_follows_timestamp_equivalence(self):
        left = Version("0.4.5-SNAPSHOT-20211208.182235")
        right = Version("0.4.5-SNAPSHOT-20211208.182235-1")
        assert left == right
        assert not left < right
        assert left <= right and left >= right
        assert hash(left) == hash(right)
        assert len({left, right}) == 1

    def test_rich_comparisons(self):
        assert Version("1.0-SNAPSHOT") < Version("1.0")
        assert Version("1.1") > Version("1.0")
        assert max(Version(v) for v in ["1.0", "1.2-SNAPSHOT", "1.1"]) == Version("1.2-SNAPSHOT")

    def test_not_equal_to_plain_string(self):
        assert Version("1.0") != "1.0"
