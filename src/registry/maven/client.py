"""Maven repository client: version resolution and artifact download."""
from __future__ import annotations

import logging
import os
import tempfile
from typing import List, Optional

from constants import Constants
from common import http_client
from common.errors import (
    InvalidArgumentError,
    FilesystemError,
    MissingFieldError,
    NoSnapshotVersionError,
)
from common.logging_utils import extra_context, is_debug_enabled, Timer, safe_url
from versioning.ranges import pick_highest
from versioning.version import Version
from .coordinates import BasicTokenAuth, Credentials, RepositoryCoordinates
from . import metadata as md


logger = logging.getLogger(__name__)


class RepositoryClient:
    """Resolves versions of one artifact and downloads its files.

    Holds no mutable state after construction; every call issues its own
    requests sequentially.
    """

    def __init__(
        self,
        coordinates: RepositoryCoordinates,
        credentials: Optional[Credentials] = None,
    ):
        self.coordinates = coordinates
        self.credentials = credentials
        self._auth = BasicTokenAuth(credentials)

    @classmethod
    def for_artifact(
        cls,
        repository: str,
        group_id: str,
        artifact_id: str,
        username: Optional[str] = None,
        token: Optional[str] = None,
    ) -> "RepositoryClient":
        credentials = Credentials(username, token) if (username or token) else None
        return cls(RepositoryCoordinates(repository, group_id, artifact_id), credentials)

    # Resolution

    def get_latest_release_version(self) -> Version:
        """Return ``versioning/release`` of the artifact metadata."""
        document = self._fetch_metadata(self.coordinates.base_url)
        return Version(document.require_text(md.RELEASE))

    def get_latest_version(self) -> Version:
        """Return ``versioning/latest``, resolved to a concrete build if it is a snapshot."""
        document = self._fetch_metadata(self.coordinates.base_url)
        latest = Version(document.require_text(md.LATEST))
        if latest.is_snapshot():
            latest = self.get_latest_snapshot_build(latest)
        return latest

    def get_latest_snapshot_build(self, snapshot_version: Version) -> Version:
        """Resolve ``X-SNAPSHOT`` to ``X-SNAPSHOT-<timestamp>-<buildNumber>``.

        Raises:
            NoSnapshotVersionError: ``snapshot_version`` is not a snapshot.
            MissingFieldError: the snapshot metadata lacks timestamp or build number.
        """
        if not snapshot_version.is_snapshot():
            raise NoSnapshotVersionError(str(snapshot_version))
        snapshot_version = snapshot_version.without_build_info()
        document = self._fetch_metadata(f"{self.coordinates.base_url}/{snapshot_version}")
        timestamp = document.require_text(md.SNAPSHOT_TIMESTAMP)
        build_number = document.require_text(md.SNAPSHOT_BUILD_NUMBER)
        resolved = Version(f"{snapshot_version}-{timestamp}-{build_number}")
        logger.info("Resolved %s %s to build %s", self.coordinates, snapshot_version, resolved)
        return resolved

    def get_versions(self) -> List[Version]:
        """Return every published version, ascending."""
        document = self._fetch_metadata(self.coordinates.base_url)
        raw = document.find_all_text(md.VERSIONS)
        if not raw:
            raise MissingFieldError(md.VERSIONS, document.url)
        return sorted(Version(v) for v in dict.fromkeys(raw))

    def get_latest_matching(self, range_spec: str) -> Version:
        """Return the highest published version inside a Maven version range.

        A matching snapshot is resolved to its newest build, as in
        :meth:`get_latest_version`.
        """
        best = pick_highest(range_spec, self.get_versions())
        if best is None:
            raise MissingFieldError(f"{md.VERSIONS}[{range_spec}]", self._metadata_url(self.coordinates.base_url))
        if best.is_snapshot():
            best = self.get_latest_snapshot_build(best)
        return best

    # Download

    def artifact_url(self, version: Version, classifier: Optional[str] = "", extension: str = Constants.DEFAULT_EXTENSION) -> str:
        """Build the URL of an artifact file for a resolved version."""
        if not extension:
            raise InvalidArgumentError("extension is required")
        suffix = f"-{classifier}" if classifier else ""
        return (
            f"{self.coordinates.base_url}/{version.without_build_info()}/"
            f"{self.coordinates.artifact_id}-{version.release_identifier}{suffix}.{extension}"
        )

    def download(
        self,
        version: Version,
        classifier: Optional[str],
        extension: str,
        destination: Optional[str],
    ) -> str:
        """Stream an artifact file to ``destination``, replacing any existing file.

        Returns:
            The destination path.

        Raises:
            InvalidArgumentError: ``destination`` is None or empty.
            FetchError: the file could not be fetched.
            FilesystemError: the destination could not be written.
        """
        if destination is None or str(destination) == "":
            raise InvalidArgumentError("destination path is required")
        destination = os.fspath(destination)
        url = self.artifact_url(version, classifier, extension)

        logger.info("Downloading %s to %s", safe_url(url), destination)
        with Timer() as timer:
            with http_client.open_stream(url, context="download", auth=self._auth) as res:
                parent = os.path.dirname(os.path.abspath(destination))
                try:
                    os.makedirs(parent, exist_ok=True)
                except OSError as exc:
                    raise FilesystemError(parent, exc) from exc
                self._write_atomically(res, url, destination, parent)

        logger.info(
            "Download complete",
            extra=extra_context(
                event="download",
                component="client",
                outcome="success",
                duration_ms=timer.duration_ms(),
                target=safe_url(url),
                path=destination
            )
        )
        return destination

    # Internals

    @staticmethod
    def _write_atomically(res, url: str, destination: str, parent: str) -> None:
        # Stream into a sibling temp file so a failed transfer never clobbers the target.
        try:
            fd, tmp_path = tempfile.mkstemp(prefix=".mvnfetch-", suffix=".part", dir=parent)
        except OSError as exc:
            raise FilesystemError(destination, exc) from exc
        try:
            try:
                with os.fdopen(fd, "wb") as fh:
                    for chunk in http_client.iter_body(res, url, Constants.DOWNLOAD_CHUNK_SIZE):
                        fh.write(chunk)
                os.replace(tmp_path, destination)
            except OSError as exc:
                raise FilesystemError(destination, exc) from exc
        except BaseException:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise

    @staticmethod
    def _metadata_url(directory_url: str) -> str:
        return f"{directory_url}/{Constants.METADATA_FILE}"

    def _fetch_metadata(self, directory_url: str) -> md.MetadataDocument:
        url = self._metadata_url(directory_url)
        if is_debug_enabled(logger):
            logger.debug(
                "Fetching metadata",
                extra=extra_context(
                    event="function_entry",
                    component="client",
                    action="fetch_metadata",
                    target=safe_url(url),
                    authenticated=self._auth_configured
                )
            )
        with http_client.open_stream(url, context="metadata", auth=self._auth) as res:
            body = http_client.read_body(res, url)
        return md.MetadataDocument.parse(body, url)

    @property
    def _auth_configured(self) -> bool:
        return self.credentials is not None and self.credentials.complete
