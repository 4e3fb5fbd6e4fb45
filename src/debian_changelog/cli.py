# src/debian_changelog/cli.py

"""Command line driver: walk a changelog, or prepend a new entry to one."""

import argparse
import logging
import sys

import yaml
from pydantic import ValidationError

from .changelog import (
    ChangelogWriteError,
    Entry,
    EntryError,
    append,
    load_draft,
)

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="debian-changelog",
        description="Parse Debian changelogs and prepend new entries to them.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    parse_cmd = subparsers.add_parser("parse", help="Print every entry of a changelog")
    parse_cmd.add_argument("changelog", help="Path to the changelog file")
    parse_cmd.add_argument(
        "--format-only",
        action="store_true",
        help="Print only the re-formatted entries, without the debug view",
    )
    parse_cmd.add_argument(
        "--recover",
        action="store_true",
        help="Report malformed entries and continue with the next header",
    )

    append_cmd = subparsers.add_parser(
        "append", help="Prepend an entry described in a YAML file"
    )
    append_cmd.add_argument("changelog", help="Path to the changelog file")
    append_cmd.add_argument("draft", help="YAML file describing the new entry")

    return parser


def _parse(args: argparse.Namespace) -> int:
    try:
        with open(args.changelog, encoding="utf-8") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as exc:
        print(f"cannot read {args.changelog}: {exc}", file=sys.stderr)
        return 1

    status = 0
    cursor = Entry().iter_from(text, recover=args.recover)
    while True:
        try:
            entry = next(cursor)
        except StopIteration:
            break
        except EntryError as exc:
            print(exc, file=sys.stderr)
            status = 1
            continue

        if args.format_only:
            print(entry, end="\n\n")
        else:
            print(f"Debug: {entry!r}")
            print(f"Format: {entry}")

    return status


def _append(args: argparse.Namespace) -> int:
    try:
        draft = load_draft(args.draft)
    except (OSError, yaml.YAMLError, ValidationError) as exc:
        print(f"invalid entry draft {args.draft}: {exc}", file=sys.stderr)
        return 1

    try:
        append(args.changelog, draft.to_entry())
    except ChangelogWriteError as exc:
        cause = f" ({exc.__cause__})" if exc.__cause__ else ""
        print(f"{exc}{cause}", file=sys.stderr)
        return 1

    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.debug("Running %s on %s", args.command, args.changelog)

    if args.command == "parse":
        return _parse(args)
    return _append(args)


if __name__ == "__main__":
    sys.exit(main())
