"""Maven version ordering (ComparableVersion semantics).

Versions are parsed into a tree of items: integers, qualifier strings and
nested lists. ``.`` separates items, ``-`` (or a digit/letter transition)
opens a nested list. Trailing "null" items (0, "", empty list) are dropped
so that ``1``, ``1.0`` and ``1.0.0`` compare equal.

Qualifier order:
    alpha < beta < milestone < rc = cr < snapshot < "" = final = ga = release < sp
Unknown qualifiers sort after ``sp``, lexically among themselves.
"""

from __future__ import annotations

from functools import total_ordering
from typing import List, Optional, Tuple, Union

QUALIFIERS = ["alpha", "beta", "milestone", "rc", "snapshot", "", "sp"]
ALIASES = {"ga": "", "final": "", "release": "", "cr": "rc"}
RELEASE_VERSION_INDEX = str(QUALIFIERS.index(""))


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _comparable_qualifier(qualifier: str) -> str:
    # Unknown qualifiers get a "7-" prefix so they sort after every known one.
    try:
        return str(QUALIFIERS.index(qualifier))
    except ValueError:
        return f"{len(QUALIFIERS)}-{qualifier}"


class IntItem:
    """Numeric version component."""

    __slots__ = ("value",)

    def __init__(self, text: str = "0"):
        self.value = int(text)

    def is_null(self) -> bool:
        return self.value == 0

    def compare_to(self, item: Optional["Item"]) -> int:
        if item is None:
            return 0 if self.value == 0 else 1
        if isinstance(item, IntItem):
            return _sign(self.value - item.value)
        # 1.1 > 1-sp and 1.1 > 1-1
        return 1

    def __str__(self) -> str:
        return str(self.value)


class StringItem:
    """Qualifier version component."""

    __slots__ = ("value",)

    def __init__(self, value: str, followed_by_digit: bool = False):
        if followed_by_digit and len(value) == 1:
            # a1 -> alpha-1, b1 -> beta-1, m1 -> milestone-1
            value = {"a": "alpha", "b": "beta", "m": "milestone"}.get(value, value)
        self.value = ALIASES.get(value, value)

    def is_null(self) -> bool:
        return _comparable_qualifier(self.value) == RELEASE_VERSION_INDEX

    def compare_to(self, item: Optional["Item"]) -> int:
        left = _comparable_qualifier(self.value)
        if item is None:
            # 1-rc < 1, 1-ga == 1, 1-sp > 1
            right = RELEASE_VERSION_INDEX
        elif isinstance(item, StringItem):
            right = _comparable_qualifier(item.value)
        else:
            # 1.any < 1.1 and 1-1 > 1-sp
            return -1
        return (left > right) - (left < right)

    def __str__(self) -> str:
        return self.value


class ListItem(list):
    """Sub-list of version components, opened by a hyphen or a digit/letter transition."""

    def is_null(self) -> bool:
        return len(self) == 0

    def normalize(self) -> None:
        for i in range(len(self) - 1, -1, -1):
            last = self[i]
            if last.is_null():
                del self[i]
            elif not isinstance(last, ListItem):
                break

    def compare_to(self, item: Optional["Item"]) -> int:
        if item is None:
            if len(self) == 0:
                return 0
            return self[0].compare_to(None)
        if isinstance(item, IntItem):
            # 1-1 < 1.0.x
            return -1
        if isinstance(item, StringItem):
            # 1-1 > 1-sp
            return 1

        for index in range(max(len(self), len(item))):
            left = self[index] if index < len(self) else None
            right = item[index] if index < len(item) else None
            if left is None:
                result = 0 if right is None else -1 * right.compare_to(None)
            else:
                result = left.compare_to(right)
            if result != 0:
                return result
        return 0

    def __str__(self) -> str:
        parts: List[str] = []
        for item in self:
            if parts:
                parts.append("-" if isinstance(item, ListItem) else ".")
            parts.append(str(item))
        return "".join(parts)


Item = Union[IntItem, StringItem, ListItem]


def _parse_item(is_digit: bool, text: str) -> Item:
    return IntItem(text) if is_digit else StringItem(text, False)


def parse_items(version: str) -> ListItem:
    """Parse a version string into its normalized item tree."""
    version = version.lower()
    items = ListItem()
    current = items
    stack = [current]
    is_digit = False
    start = 0

    for i, char in enumerate(version):
        if char == ".":
            current.append(IntItem() if i == start else _parse_item(is_digit, version[start:i]))
            start = i + 1
        elif char == "-":
            current.append(IntItem() if i == start else _parse_item(is_digit, version[start:i]))
            start = i + 1
            nested = ListItem()
            current.append(nested)
            current = nested
            stack.append(current)
        elif "0" <= char <= "9":
            if not is_digit and i > start:
                current.append(StringItem(version[start:i], True))
                start = i
                nested = ListItem()
                current.append(nested)
                current = nested
                stack.append(current)
            is_digit = True
        else:
            if is_digit and i > start:
                current.append(_parse_item(True, version[start:i]))
                start = i
                nested = ListItem()
                current.append(nested)
                current = nested
                stack.append(current)
            is_digit = False

    if len(version) > start:
        current.append(_parse_item(is_digit, version[start:]))

    while stack:
        stack.pop().normalize()

    return items


@total_ordering
class ComparableVersion:
    """A version string ordered with Maven semantics.

    >>> ComparableVersion("1.0") == ComparableVersion("1")
    True
    >>> ComparableVersion("1.0-SNAPSHOT") < ComparableVersion("1.0")
    True
    """

    __slots__ = ("_value", "_items", "_canonical")

    def __init__(self, version: str):
        if version is None:
            raise TypeError("version must be a string, not None")
        self._value = str(version)
        self._items = parse_items(self._value)
        self._canonical = str(self._items)

    @property
    def canonical(self) -> str:
        """Normalized form; two versions are equal iff their canonical forms are."""
        return self._canonical

    @property
    def items(self) -> ListItem:
        return self._items

    def leading_numbers(self) -> Tuple[int, ...]:
        """Integer items before the first qualifier or sub-list, trailing zeros removed."""
        numbers: List[int] = []
        for item in self._items:
            if not isinstance(item, IntItem):
                break
            numbers.append(item.value)
        while numbers and numbers[-1] == 0:
            numbers.pop()
        return tuple(numbers)

    def compare_to(self, other: "ComparableVersion") -> int:
        return self._items.compare_to(other._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ComparableVersion):
            return NotImplemented
        return self.compare_to(other) == 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ComparableVersion):
            return NotImplemented
        return self.compare_to(other) < 0

    def __hash__(self) -> int:
        # Subclasses may widen equality beyond canonical form; the leading
        # numeric run is shared by every pair of equal versions.
        return hash(self.leading_numbers())

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"


def compare_versions(left: str, right: str) -> int:
    """Compare two version strings with Maven ordering, returning -1, 0 or 1."""
    return ComparableVersion(left).compare_to(ComparableVersion(right))
