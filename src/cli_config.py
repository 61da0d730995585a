"""Configuration overrides and credential lookup for the CLI.

Precedence, highest first: CLI flags, environment variables, the
configuration file, built-in defaults in ``Constants``.
"""

from __future__ import annotations

import logging
import os
import subprocess
from typing import Any, Dict, Optional

from constants import Constants
from registry.maven.coordinates import Credentials

logger = logging.getLogger(__name__)


def apply_config(cfg: Dict[str, Any]) -> None:
    """Apply ``repository`` and ``http`` sections of a config mapping to Constants.

    Example YAML::

        repository:
          url: https://repo.example.com/maven2/
          username: ci
        http:
          timeout: 60
          chunk_size: 131072
    """
    repo = cfg.get("repository") or {}
    http = cfg.get("http") or {}
    if not isinstance(repo, dict) or not isinstance(http, dict):
        raise ValueError("'repository' and 'http' config sections must be mappings")

    if repo.get("url"):
        Constants.REPOSITORY_URL = str(repo["url"])
    if http.get("timeout") is not None:
        Constants.REQUEST_TIMEOUT = float(http["timeout"])
    if http.get("chunk_size") is not None:
        Constants.DOWNLOAD_CHUNK_SIZE = int(http["chunk_size"])
    if http.get("user_agent"):
        Constants.USER_AGENT = str(http["user_agent"])


def _run_token_command(command: str) -> Optional[str]:
    try:
        result = subprocess.run(
            command,
            shell=True,
            capture_output=True,
            text=True,
            timeout=10,
            check=False,
        )
    except (OSError, subprocess.SubprocessError) as exc:
        logger.warning("Failed to execute token command: %s", exc)
        return None
    if result.returncode != 0:
        logger.warning("Token command exited with status %s", result.returncode)
        return None
    token = (result.stdout or "").strip()
    return token or None


def get_repository_token(cli_token: Optional[str], cfg: Dict[str, Any]) -> Optional[str]:
    """Get the repository token from various sources in priority order.

    Priority:
    1. CLI argument
    2. Environment variable MVNFETCH_TOKEN
    3. Command execution: MVNFETCH_TOKEN_COMMAND env var or config token_command
    4. Config file ``repository.token``
    """
    if cli_token:
        return cli_token

    env_token = os.environ.get(Constants.ENV_TOKEN)
    if env_token and env_token.strip():
        return env_token.strip()

    repo = cfg.get("repository") or {}
    token_command = os.environ.get(Constants.ENV_TOKEN_COMMAND) or repo.get("token_command")
    if token_command:
        token = _run_token_command(token_command)
        if token:
            return token

    return repo.get("token") or None


def resolve_credentials(args, cfg: Dict[str, Any]) -> Optional[Credentials]:
    """Build credentials from CLI args, environment and config; None if no username or token."""
    repo = cfg.get("repository") or {}
    username = (
        getattr(args, "USERNAME", None)
        or os.environ.get(Constants.ENV_USERNAME)
        or repo.get("username")
    )
    token = get_repository_token(getattr(args, "TOKEN", None), cfg)
    if not username and not token:
        return None
    credentials = Credentials(username, token)
    if not credentials.complete:
        logger.warning("Incomplete repository credentials; requests will be sent without authorization.")
    return credentials
