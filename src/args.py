"""Argument parsing functionality for mvnfetch."""

import argparse
import sys

from constants import Constants, ExitCodes


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that exits with the usage error code instead of 2."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(ExitCodes.USAGE_ERROR.value, f"{self.prog}: error: {message}\n")


def parse_args(argv=None):
    """Parses the arguments passed to the program."""
    parser = _ArgumentParser(
        prog="mvnfetch",
        description=(
            "mvnfetch - Resolve and download artifacts from Maven repositories"
        ),
        add_help=True,
    )

    parser.add_argument("-r", "--repository",
                        dest="REPOSITORY",
                        help="Repository base URL (default from config, else Maven Central)",
                        action="store",
                        type=str)
    parser.add_argument("-u", "--username",
                        dest="USERNAME",
                        help="Repository username",
                        action="store",
                        type=str)
    parser.add_argument("--token",
                        dest="TOKEN",
                        help=f"Repository token or password (or set {Constants.ENV_TOKEN})",
                        action="store",
                        type=str)
    parser.add_argument("-c", "--config",
                        dest="CONFIG",
                        help="Path to configuration file (YAML, YML, or JSON)",
                        action="store",
                        type=str)
    parser.add_argument("--loglevel",
                        dest="LOG_LEVEL",
                        help="Set the logging level",
                        action="store",
                        type=str,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        default='WARNING')
    parser.add_argument("--logfile",
                        dest="LOG_FILE",
                        help="Log output file",
                        action="store",
                        type=str)

    parser.add_argument("coordinate",
                        help="Artifact coordinate, i.e: groupId:artifactId",
                        type=str)

    sub = parser.add_subparsers(dest="action", required=True)

    sub.add_parser("release", help="Print the latest release version")
    sub.add_parser("latest", help="Print the latest version (snapshots resolved to their newest build)")

    snapshot = sub.add_parser("snapshot", help="Resolve a -SNAPSHOT version to its newest build")
    snapshot.add_argument("VERSION", type=str)

    sub.add_parser("versions", help="List all published versions")

    resolve = sub.add_parser("resolve", help="Print the highest version inside a Maven version range")
    resolve.add_argument("RANGE", type=str, help="e.g. '[1.0,2.0)'")

    download = sub.add_parser("download", help="Download an artifact file")
    download.add_argument("VERSION", type=str,
                          help="Version to download; 'latest' and 'release' are resolved first")
    download.add_argument("--classifier",
                          dest="CLASSIFIER",
                          action="store",
                          type=str,
                          default="")
    download.add_argument("-e", "--extension",
                          dest="EXTENSION",
                          action="store",
                          type=str,
                          default=Constants.DEFAULT_EXTENSION)
    download.add_argument("-o", "--output",
                          dest="OUTPUT",
                          help="Destination file (default: artifact file name in the current directory)",
                          action="store",
                          type=str)

    return parser.parse_args(argv)
