"""Maven repository package.

This package provides access to Maven-layout repositories:
- coordinates.py: repository/groupId/artifactId coordinates and credentials
- metadata.py: maven-metadata.xml parsing and field lookups
- client.py: version resolution and artifact download
"""

from .coordinates import BasicTokenAuth, Credentials, RepositoryCoordinates
from .metadata import MetadataDocument
from .client import RepositoryClient

__all__ = [
    "BasicTokenAuth",
    "Credentials",
    "RepositoryCoordinates",
    "MetadataDocument",
    "RepositoryClient",
]
