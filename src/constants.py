"""Constants used in the project."""

import json
import logging
import os
from enum import Enum
from typing import Any, Dict, Optional

import yaml


class ExitCodes(Enum):
    """Exit codes for the program.

    Args:
        Enum (int): Exit codes for the program.
    """

    SUCCESS = 0
    FILE_ERROR = 1
    CONNECTION_ERROR = 2
    RESOLUTION_ERROR = 3
    USAGE_ERROR = 4


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    REPOSITORY_URL = "https://repo1.maven.org/maven2/"
    METADATA_FILE = "maven-metadata.xml"
    DEFAULT_EXTENSION = "jar"
    LOG_FORMAT = "[%(levelname)s] %(message)s"
    REQUEST_TIMEOUT = 30  # Timeout in seconds for all HTTP requests
    DOWNLOAD_CHUNK_SIZE = 64 * 1024
    USER_AGENT = "mvnfetch/0.3"

    ENV_CONFIG = "MVNFETCH_CONFIG"
    ENV_USERNAME = "MVNFETCH_USERNAME"
    ENV_TOKEN = "MVNFETCH_TOKEN"
    ENV_TOKEN_COMMAND = "MVNFETCH_TOKEN_COMMAND"
    DEFAULT_CONFIG_PATHS = [
        os.path.join("~", ".config", "mvnfetch", "config.yml"),
        os.path.join("~", ".config", "mvnfetch", "config.yaml"),
    ]


def _load_yaml_config(path: Optional[str] = None) -> Dict[str, Any]:
    """Load the configuration file.

    An explicit path must exist. Without one, ``MVNFETCH_CONFIG`` is tried,
    then the default locations; a missing default file yields ``{}``.
    Files ending in ``.json`` are read as JSON, everything else as YAML.

    Raises:
        OSError: the explicit file cannot be read.
        ValueError: the file does not contain a mapping or is malformed.
    """
    if path is None:
        path = os.environ.get(Constants.ENV_CONFIG)
    if path is None:
        for candidate in Constants.DEFAULT_CONFIG_PATHS:
            expanded = os.path.expanduser(candidate)
            if os.path.isfile(expanded):
                path = expanded
                break
        else:
            return {}

    logging.debug("Loading configuration from %s", path)
    with open(path, "r", encoding="utf-8") as fh:
        try:
            if path.lower().endswith(".json"):
                data = json.load(fh)
            else:
                data = yaml.safe_load(fh)
        except (json.JSONDecodeError, yaml.YAMLError) as exc:
            raise ValueError(f"Malformed configuration file {path}: {exc}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Configuration file {path} must contain a mapping")
    return data
