"""mvnfetch: resolve and download artifacts from Maven repositories."""

import logging
import os
import sys

from args import parse_args
from cli_config import apply_config, resolve_credentials
from constants import Constants, ExitCodes, _load_yaml_config
from common.errors import (
    FilesystemError,
    InvalidArgumentError,
    MavenError,
    TransportError,
)
from common.logging_utils import LOG_LEVEL_ENV, configure_logging, extra_context, is_debug_enabled
from registry.maven import RepositoryClient, RepositoryCoordinates
from versioning.version import Version

logger = logging.getLogger(__name__)


def _exit_code_for(exc: MavenError) -> ExitCodes:
    if isinstance(exc, TransportError):
        return ExitCodes.CONNECTION_ERROR
    if isinstance(exc, FilesystemError):
        return ExitCodes.FILE_ERROR
    if isinstance(exc, InvalidArgumentError):
        return ExitCodes.USAGE_ERROR
    return ExitCodes.RESOLUTION_ERROR


def _resolve_named(client: RepositoryClient, name: str) -> Version:
    if name == "latest":
        return client.get_latest_version()
    if name == "release":
        return client.get_latest_release_version()
    return Version(name)


def run(args, client: RepositoryClient) -> None:
    """Execute the selected action and print its result to stdout."""
    if args.action == "release":
        print(client.get_latest_release_version())
    elif args.action == "latest":
        print(client.get_latest_version())
    elif args.action == "snapshot":
        print(client.get_latest_snapshot_build(Version(args.VERSION)))
    elif args.action == "versions":
        for version in client.get_versions():
            print(version)
    elif args.action == "resolve":
        print(client.get_latest_matching(args.RANGE))
    elif args.action == "download":
        version = _resolve_named(client, args.VERSION)
        output = args.OUTPUT or os.path.basename(
            client.artifact_url(version, args.CLASSIFIER, args.EXTENSION)
        )
        print(client.download(version, args.CLASSIFIER, args.EXTENSION, output))


def main(argv=None) -> None:
    """Main function of the program."""
    args = parse_args(argv)
    # Honor CLI --loglevel by passing it to centralized logger via env
    if getattr(args, "LOG_LEVEL", None):
        os.environ[LOG_LEVEL_ENV] = str(args.LOG_LEVEL).upper()
    configure_logging(getattr(args, "LOG_FILE", None))

    if is_debug_enabled(logger):
        logger.debug(
            "CLI start",
            extra=extra_context(event="function_entry", component="cli", action=args.action)
        )

    try:
        cfg = _load_yaml_config(args.CONFIG)
        apply_config(cfg)
    except (OSError, ValueError, TypeError) as e:
        logging.error("Couldn't load configuration: %s", e)
        sys.exit(ExitCodes.FILE_ERROR.value)

    try:
        coordinates = RepositoryCoordinates.parse(args.REPOSITORY or Constants.REPOSITORY_URL, args.coordinate)
        client = RepositoryClient(coordinates, resolve_credentials(args, cfg))
        run(args, client)
    except MavenError as e:
        code = _exit_code_for(e)
        logging.error("%s", e)
        sys.exit(code.value)

    sys.exit(ExitCodes.SUCCESS.value)


if __name__ == "__main__":
    main()
