# src/debian_changelog/changelog/entry.py

import logging
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from email.utils import format_datetime, parsedate_to_datetime
from typing import TYPE_CHECKING

from .errors import (
    AuthorWithoutEmailError,
    BadDateError,
    BadMetadataError,
    EmailNotEnclosedError,
    NoDateError,
    NoFooterError,
    NoHeaderError,
    NoPackageError,
    NoVersionError,
    VersionRequiresParenthesisError,
)

if TYPE_CHECKING:
    import weakref

    from .iterator import ChangelogIter

logger = logging.getLogger(__name__)

FOOTER_PREFIX = " --"
CHANGE_INDENT = "  "
AUTHOR_DATE_SEPARATOR = "  "

DAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
MONTH_NAMES = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

# [day-name ","] DD Mon YYYY HH:MM[:SS] zone
RFC2822_DATE_RE = re.compile(
    r"^(?:(?P<weekday>" + "|".join(DAY_NAMES) + r"),\s*)?"
    r"\d{1,2}\s+(?:" + "|".join(MONTH_NAMES) + r")\s+\d{4}\s+"
    r"\d{2}:\d{2}(?::\d{2})?\s+"
    r"(?P<zone>[+-]\d{4}|UT|GMT|[ECMP][SD]T)$"
)


def _default_date() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Entry:
    """One changelog entry: header, change lines and footer.

    An Entry is a reusable scratch record. ``parse_from_str`` clears
    ``changes``, ``distributions`` and ``metadata`` before refilling them,
    so the same instance can be reparsed for every entry of a document.
    Fields hold owned strings; an Entry does not keep the source text alive.
    """

    author: str = ""
    email: str = ""
    changes: list[str] = field(default_factory=list)
    distributions: list[str] = field(default_factory=list)
    package: str = ""
    version: str = ""
    metadata: dict[str, str] = field(default_factory=dict)
    date: datetime = field(default_factory=_default_date)
    _cursor: "weakref.ref[ChangelogIter] | None" = field(
        default=None, init=False, repr=False, compare=False
    )

    def set_changes(self, changes: Iterable[str]) -> "Entry":
        self.changes.clear()
        self.changes.extend(changes)
        return self

    def set_distributions(self, distributions: Iterable[str]) -> "Entry":
        self.distributions.clear()
        self.distributions.extend(distributions)
        return self

    def copy(self) -> "Entry":
        """Detached snapshot that later parse steps will not overwrite."""
        return replace(
            self,
            changes=list(self.changes),
            distributions=list(self.distributions),
            metadata=dict(self.metadata),
        )

    def iter_from(self, text: str, **kwargs) -> "ChangelogIter":
        from .iterator import ChangelogIter

        return ChangelogIter(self, text, **kwargs)

    def parse_from_str(self, text: str) -> int:
        """Parse the entry occupying a prefix of ``text`` into this record.

        Returns the number of characters consumed, including blank lines
        trailing the footer, so ``text[consumed:]`` starts at the next header.

        Raises:
            EntryError: on any malformed header or footer, or when the text
                ends before a footer line is found.
        """
        self.changes.clear()
        self.distributions.clear()
        self.metadata.clear()

        lines = _lines(text)

        try:
            header, read = next(lines)
        except StopIteration:
            raise NoHeaderError() from None

        logger.debug("Parsing header: %r", header)
        parse_header(self, header)

        for line, size in lines:
            read += size
            if not line.strip():
                continue

            if line.startswith(FOOTER_PREFIX):
                footer = line[len(FOOTER_PREFIX) :].lstrip()
                logger.debug("Parsing footer: %r", footer)
                parse_footer(self, footer)

                for trailing, size in lines:
                    if trailing.strip():
                        break
                    read += size
                return read

            if line.startswith(CHANGE_INDENT):
                self.changes.append(line[len(CHANGE_INDENT) :].rstrip())

        raise NoFooterError()

    def __str__(self) -> str:
        return format_entry(self)


def _lines(text: str) -> Iterator[tuple[str, int]]:
    """Yield (line without terminator, characters consumed) pairs.

    Only ``\\n`` ends a line; a ``\\r`` before it is dropped from the line
    but counted as consumed.
    """
    start = 0
    length = len(text)
    while start < length:
        end = text.find("\n", start)
        following = end + 1
        if end == -1:
            end = following = length

        line = text[start:end]
        if line.endswith("\r"):
            line = line[:-1]

        yield line, following - start
        start = following


def parse_header(entry: Entry, header: str) -> None:
    """$PACKAGE ($VERSION) $DIST1 $DIST2 $DIST3; urgency=$URGENCY"""
    fields = iter(header.split())

    package = next(fields, None)
    if package is None:
        raise NoPackageError()
    entry.package = package

    version = next(fields, None)
    if version is None:
        raise NoVersionError()
    if len(version) < 2 or not (version.startswith("(") and version.endswith(")")):
        raise VersionRequiresParenthesisError()
    entry.version = version[1:-1]

    for distribution in fields:
        if distribution.endswith(";"):
            entry.distributions.append(distribution[:-1])
            break
        entry.distributions.append(distribution)

    metadata = next(fields, None)
    if metadata is None:
        return

    for pair in metadata.split(","):
        key, sep, value = pair.partition("=")
        if not sep:
            raise BadMetadataError(pair)
        entry.metadata[key] = value


def parse_footer(entry: Entry, footer: str) -> None:
    """$AUTHOR <$EMAIL>  $DATE_RFC2822

    ``footer`` is the text following the `` --`` prefix.
    """
    author, sep, date = footer.partition(AUTHOR_DATE_SEPARATOR)
    if not sep:
        raise NoDateError()
    entry.date = parse_date(date.strip())

    name, bracket, email = author.partition("<")
    if not bracket:
        raise AuthorWithoutEmailError()
    if not email.endswith(">"):
        raise EmailNotEnclosedError()

    entry.author = name.rstrip()
    entry.email = email[:-1].strip()


def parse_footer_line(entry: Entry, line: str) -> None:
    """Parse a whole `` -- $AUTHOR <$EMAIL>  $DATE`` line."""
    line = line.lstrip()
    if not line.startswith("--"):
        raise NoFooterError()
    parse_footer(entry, line[2:].lstrip())


def parse_date(date: str) -> datetime:
    """Parse an RFC 2822 timestamp into an aware UTC datetime.

    The zone is mandatory; ``-0000`` is read as UTC. A day name, when
    present, must match the date.
    """
    match = RFC2822_DATE_RE.match(date)
    if match is None:
        raise BadDateError(date)

    try:
        parsed = parsedate_to_datetime(date)
    except (TypeError, ValueError):
        raise BadDateError(date) from None

    if parsed.tzinfo is None:
        if match.group("zone") != "-0000":
            raise BadDateError(date)
        parsed = parsed.replace(tzinfo=timezone.utc)

    weekday = match.group("weekday")
    if weekday is not None and DAY_NAMES.index(weekday) != parsed.weekday():
        raise BadDateError(date)

    return parsed.astimezone(timezone.utc)


def format_date(date: datetime) -> str:
    if date.tzinfo is None:
        date = date.replace(tzinfo=timezone.utc)
    return format_datetime(date.astimezone(timezone.utc))


def format_entry(entry: Entry) -> str:
    """Render an entry in changelog form, without a trailing newline.

    Metadata pairs are written back to back with no separator between
    them, so an entry with more than one pair does not reparse to the
    same metadata.
    """
    parts = [entry.package, " (", entry.version, ")"]

    for distribution in entry.distributions:
        parts += [" ", distribution]

    parts.append("; ")

    for key, value in entry.metadata.items():
        parts += [key, "=", value]

    parts.append("\n\n")

    for line in entry.changes:
        parts += [CHANGE_INDENT, line, "\n"]

    parts += [
        "\n",
        FOOTER_PREFIX,
        " ",
        entry.author,
        " <",
        entry.email,
        ">",
        AUTHOR_DATE_SEPARATOR,
        format_date(entry.date),
    ]

    return "".join(parts)
