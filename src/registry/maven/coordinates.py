"""Repository coordinates and credentials for Maven artifacts."""
from __future__ import annotations

import base64
from dataclasses import dataclass
from typing import Optional

from requests.auth import AuthBase

from common.errors import InvalidArgumentError


@dataclass(frozen=True)
class Credentials:
    """Username and token (or password) for a repository."""
    username: Optional[str] = None
    token: Optional[str] = None

    @property
    def complete(self) -> bool:
        return bool(self.username) and bool(self.token)

    def authorization_header(self) -> Optional[str]:
        """Return the ``Basic`` header value, or None when credentials are incomplete."""
        if not self.complete:
            return None
        raw = f"{self.username}:{self.token}".encode("utf-8")
        return "Basic " + base64.b64encode(raw).decode("ascii")

    def __repr__(self) -> str:
        return f"Credentials(username={self.username!r}, token={'***' if self.token else None})"


class BasicTokenAuth(AuthBase):
    """Attach a Basic Authorization header only when credentials are complete.

    Always passed to requests, which keeps ``.netrc`` credentials off the
    initial request. A redirect to another host goes through requests'
    ``rebuild_auth`` and may still pick up ``.netrc`` when ``trust_env`` is on.
    """

    def __init__(self, credentials: Optional[Credentials] = None):
        self._header = credentials.authorization_header() if credentials else None

    def __call__(self, r):
        if self._header is not None:
            r.headers["Authorization"] = self._header
        else:
            r.headers.pop("Authorization", None)
        return r


@dataclass(frozen=True)
class RepositoryCoordinates:
    """(repository, groupId, artifactId) identifying an artifact family."""
    repository: str
    group_id: str
    artifact_id: str

    def __post_init__(self):
        if not self.repository or not self.group_id or not self.artifact_id:
            raise InvalidArgumentError("repository, group_id and artifact_id are required")
        if not self.repository.endswith("/"):
            object.__setattr__(self, "repository", self.repository + "/")

    @classmethod
    def parse(cls, repository: str, coordinate: str) -> "RepositoryCoordinates":
        """Build coordinates from a ``groupId:artifactId`` string."""
        parts = coordinate.strip().split(":")
        if len(parts) != 2 or not all(p.strip() for p in parts):
            raise InvalidArgumentError(
                f"Invalid Maven coordinate '{coordinate}'. Expected 'groupId:artifactId'."
            )
        return cls(repository, parts[0].strip(), parts[1].strip())

    @property
    def group_path(self) -> str:
        return self.group_id.replace(".", "/").replace("_", "-")

    @property
    def base_url(self) -> str:
        """URL of the artifact directory, without trailing slash."""
        return f"{self.repository}{self.group_path}/{self.artifact_id}"

    def __str__(self) -> str:
        return f"{self.group_id}:{self.artifact_id}"
