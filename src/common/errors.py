"""Exception types raised while resolving and downloading Maven artifacts.

Every failure is a ``MavenError``. Request-level failures are split into
transport problems (the server could not be reached or the body could not
be read) and remote rejections (the server answered with 4xx/5xx).
"""
from __future__ import annotations

from typing import Optional

# Canned reasons for the status codes repositories commonly answer with.
STATUS_REASONS = {
    401: "Unauthorized",
    403: "Forbidden",
    404: "Not Found",
}


class MavenError(Exception):
    """Base class for all errors raised by this package."""


class FetchError(MavenError):
    """Fetching or reading a remote document failed."""


class RequestError(FetchError):
    """An HTTP request did not produce a usable response."""

    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message)
        self.url = url


class TransportError(RequestError):
    """Network, DNS, TLS or timeout failure, or an unreadable response body."""

    def __init__(self, url: str, cause: BaseException):
        super().__init__(f"Request to {url} failed: {cause}", url)
        self.cause = cause


class RemoteRejectionError(RequestError):
    """The repository answered with a 4xx or 5xx status code."""

    def __init__(self, status_code: int, url: Optional[str] = None):
        self.status_code = status_code
        self.reason = STATUS_REASONS.get(status_code)
        super().__init__(self.reason or f"Server returned response code {status_code}", url)


class MetadataParseError(FetchError):
    """A metadata document is not well-formed XML."""

    def __init__(self, url: str, cause: BaseException):
        super().__init__(f"Malformed metadata at {url}: {cause}")
        self.url = url
        self.cause = cause


class MissingFieldError(MavenError):
    """An expected metadata element is absent or empty."""

    def __init__(self, field_path: str, url: Optional[str] = None):
        where = f" in {url}" if url else ""
        super().__init__(f"Metadata field '{field_path}' not found{where}")
        self.field_path = field_path
        self.url = url


class VersionError(MavenError):
    """A version was used in a way its kind does not support."""

    def __init__(self, message: str, version: str):
        super().__init__(message)
        self.version = version


class NoSnapshotVersionError(VersionError):
    """The version is not a SNAPSHOT version."""

    def __init__(self, version: str):
        super().__init__(f"Version {version} is no snapshot version!", version)


class NoTimestampError(VersionError):
    """The SNAPSHOT version carries no build timestamp."""

    def __init__(self, version: str):
        super().__init__(f"Version {version} has no build timestamp!", version)


class FilesystemError(MavenError):
    """The download target could not be created or written."""

    def __init__(self, path: str, cause: BaseException):
        super().__init__(f"Cannot write {path}: {cause}")
        self.path = path
        self.cause = cause


class InvalidArgumentError(MavenError, ValueError):
    """An operation was called with an unusable argument."""
