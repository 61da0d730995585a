"""Parsing of ``maven-metadata.xml`` documents."""
from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import List, Optional

from common.errors import MetadataParseError, MissingFieldError

RELEASE = "versioning/release"
LATEST = "versioning/latest"
VERSIONS = "versioning/versions/version"
SNAPSHOT_TIMESTAMP = "versioning/snapshot/timestamp"
SNAPSHOT_BUILD_NUMBER = "versioning/snapshot/buildNumber"


def _strip_namespaces(root: ET.Element) -> None:
    # Some repositories publish <metadata xmlns="http://maven.apache.org/METADATA/1.1.0">
    for el in root.iter():
        if isinstance(el.tag, str) and el.tag.startswith("{"):
            el.tag = el.tag.split("}", 1)[1]


class MetadataDocument:
    """A parsed metadata document; lookups are paths relative to ``<metadata>``."""

    def __init__(self, root: ET.Element, url: str = ""):
        self._root = root
        self.url = url

    @classmethod
    def parse(cls, data: bytes, url: str = "") -> "MetadataDocument":
        try:
            root = ET.fromstring(data)
        except ET.ParseError as exc:
            raise MetadataParseError(url, exc) from exc
        _strip_namespaces(root)
        return cls(root, url)

    def find_text(self, path: str) -> Optional[str]:
        """Return the stripped text at ``path``, or None if absent or empty."""
        node = self._root.find(path)
        if node is None or node.text is None:
            return None
        text = node.text.strip()
        return text or None

    def require_text(self, path: str) -> str:
        text = self.find_text(path)
        if text is None:
            raise MissingFieldError(path, self.url)
        return text

    def find_all_text(self, path: str) -> List[str]:
        values = []
        for node in self._root.findall(path):
            if node.text and node.text.strip():
                values.append(node.text.strip())
        return values
