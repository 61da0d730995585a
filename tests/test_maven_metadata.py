"""Tests for maven-metadata.xml parsing."""

import pytest

from common.errors import MetadataParseError, MissingFieldError
from registry.maven import metadata as md
from registry.maven.metadata import MetadataDocument

ARTIFACT_METADATA = b"""<?xml version="1.0" encoding="UTF-8"?>
<metadata>
  <groupId>org.example</groupId>
  <artifactId>demo</artifactId>
  <versioning>
    <latest>0.4.5-SNAPSHOT</latest>
    <release>0.4.5</release>
    <versions>
      <version>0.4.4</version>
      <version> 0.4.5 </version>
      <version></version>
      <version>0.4.5-SNAPSHOT</version>
    </versions>
    <lastUpdated>20211215173200</lastUpdated>
  </versioning>
</metadata>
"""

NAMESPACED_SNAPSHOT_METADATA = b"""<?xml version="1.0" encoding="UTF-8"?>
<metadata xmlns="http://maven.apache.org/METADATA/1.1.0" modelVersion="1.1.0">
  <versioning>
    <snapshot>
      <timestamp>20211215.173200</timestamp>
      <buildNumber>4</buildNumber>
    </snapshot>
  </versioning>
</metadata>
"""


class TestMetadataDocument:
    """Named child lookups."""

    def test_release_and_latest(self):
        doc = MetadataDocument.parse(ARTIFACT_METADATA)
        assert doc.find_text(md.RELEASE) == "0.4.5"
        assert doc.find_text(md.LATEST) == "0.4.5-SNAPSHOT"

    def test_versions_skip_empty_and_strip(self):
        doc = MetadataDocument.parse(ARTIFACT_METADATA)
        assert doc.find_all_text(md.VERSIONS) == ["0.4.4", "0.4.5", "0.4.5-SNAPSHOT"]

    def test_namespace_ignored(self):
        doc = MetadataDocument.parse(NAMESPACED_SNAPSHOT_METADATA)
        assert doc.require_text(md.SNAPSHOT_TIMESTAMP) == "20211215.173200"
        assert doc.require_text(md.SNAPSHOT_BUILD_NUMBER) == "4"

    def test_missing_field(self):
        doc = MetadataDocument.parse(ARTIFACT_METADATA, "https://repo/x/maven-metadata.xml")
        assert doc.find_text(md.SNAPSHOT_TIMESTAMP) is None
        with pytest.raises(MissingFieldError) as exc_info:
            doc.require_text(md.SNAPSHOT_TIMESTAMP)
        assert exc_info.value.field_path == "versioning/snapshot/timestamp"
        assert exc_info.value.url == "https://repo/x/maven-metadata.xml"

    def test_empty_element_counts_as_missing(self):
        doc = MetadataDocument.parse(b"<metadata><versioning><release>  </release></versioning></metadata>")
        with pytest.raises(MissingFieldError):
            doc.require_text(md.RELEASE)

    def test_malformed_xml(self):
        with pytest.raises(MetadataParseError) as exc_info:
            MetadataDocument.parse(b"<metadata><versioning>", "https://repo/x/maven-metadata.xml")
        assert exc_info.value.url == "https://repo/x/maven-metadata.xml"
        assert exc_info.value.__cause__ is not None
