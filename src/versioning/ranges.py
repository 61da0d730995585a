"""Maven version range selection over published versions."""

from __future__ import annotations

from typing import Iterable, List, Optional

from common.errors import InvalidArgumentError
from .version import Version


def filter_by_range(range_spec: str, candidates: Iterable[Version]) -> List[Version]:
    """Filter candidates by a Maven version range specification.

    Supports ``[1.0,2.0)``, ``(,1.5]``, ``[1.2]``, unions such as
    ``[1,2),[3,4]`` and bare versions (treated as exact).
    """
    range_spec = (range_spec or "").strip()
    if not range_spec:
        raise InvalidArgumentError("Empty version range")
    candidates = list(candidates)

    if not any(char in range_spec for char in "[()]"):
        wanted = Version(range_spec)
        return [v for v in candidates if v == wanted]

    ranges = _split_ranges(range_spec)
    matching: List[Version] = []
    for r in ranges:
        for v in _parse_bracket_range(r, candidates):
            if v not in matching:
                matching.append(v)
    return matching


def pick_highest(range_spec: str, candidates: Iterable[Version]) -> Optional[Version]:
    """Return the highest candidate matching the range, or None."""
    matching = filter_by_range(range_spec, candidates)
    if not matching:
        return None
    return max(matching)


def _split_ranges(range_spec: str) -> List[str]:
    """Split ``[1.0,2.0),[3.0,4.0]`` into its bracketed parts."""
    ranges = []
    current = ""
    depth = 0

    for char in range_spec:
        if char in "[(":
            if depth > 0:
                raise InvalidArgumentError(f"Nested brackets in range '{range_spec}'")
            current = char
            depth += 1
        elif char in "])":
            if depth == 0:
                raise InvalidArgumentError(f"Unbalanced range '{range_spec}'")
            depth -= 1
            ranges.append(current + char)
            current = ""
        elif depth > 0:
            current += char
        elif char not in ", ":
            raise InvalidArgumentError(f"Unexpected '{char}' outside brackets in '{range_spec}'")

    if depth != 0:
        raise InvalidArgumentError(f"Unbalanced range '{range_spec}'")
    return ranges


def _parse_bracket_range(range_spec: str, candidates: List[Version]) -> List[Version]:
    """Apply one bracketed range like ``[1.0,2.0)``, ``(1.0,]`` or ``[1.2]``."""
    inner = range_spec[1:-1]
    lower_inclusive = range_spec.startswith("[")
    upper_inclusive = range_spec.endswith("]")
    parts = inner.split(",")

    if len(parts) == 1:
        base = parts[0].strip()
        if not base or not (lower_inclusive and upper_inclusive):
            raise InvalidArgumentError(f"Single-version range must be '[x]', got '{range_spec}'")
        wanted = Version(base)
        return [v for v in candidates if v == wanted]
    if len(parts) != 2:
        raise InvalidArgumentError(f"Range '{range_spec}' must have exactly two bounds")

    lower_str, upper_str = parts[0].strip(), parts[1].strip()
    lower = Version(lower_str) if lower_str else None
    upper = Version(upper_str) if upper_str else None

    matching = []
    for v in candidates:
        if lower is not None:
            if lower_inclusive and v < lower:
                continue
            if not lower_inclusive and v <= lower:
                continue
        if upper is not None:
            if upper_inclusive and v > upper:
                continue
            if not upper_inclusive and v >= upper:
                continue
        matching.append(v)
    return matching
