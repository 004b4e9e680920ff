import argparse
import os
import sys

from pubspec_bump.exceptions import MissingArgumentError, UsageError
from pubspec_bump.updater import VersionUpdater

DEFAULT_PUBSPEC = "pubspec.yaml"


class ArgumentParser(argparse.ArgumentParser):
    """Raises `UsageError` instead of exiting with status 2."""

    def error(self, message):
        raise UsageError(message)


def build_parser():
    parser = ArgumentParser(
        prog="update-pubspec-version",
        description="Set the pubspec.yaml version and increment its build number.",
    )
    parser.add_argument("version", nargs="?", default="", help="New base version, e.g. 1.2.3")
    parser.add_argument(
        "--pubspec",
        default=None,
        help="Path to pubspec.yaml (default: ./pubspec.yaml)",
    )
    return parser


def main(argv=None, default_pubspec=None):
    """Run the updater from the command line and return the exit code.

    `default_pubspec` lets a wrapper script anchor the target file to its own
    location. `--pubspec` takes precedence over it. Arguments after the
    version are ignored.
    """
    parser = build_parser()
    try:
        args, _ = parser.parse_known_args(argv)
    except UsageError as e:
        print(f"{parser.prog}: error: {e}", file=sys.stderr)
        return 1

    if not args.version:
        print(MissingArgumentError(), file=sys.stderr)
        return 1

    print(f"Updating Flutter version to {args.version}")

    path = args.pubspec or default_pubspec or os.path.join(os.getcwd(), DEFAULT_PUBSPEC)
    try:
        result = VersionUpdater(path).run(args.version)
    except (OSError, ValueError) as e:
        print(f"Error updating version: {e}", file=sys.stderr)
        return 1

    print(f"Updated {os.path.basename(result.path)}: {result.old_version} → {result.new_version}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
