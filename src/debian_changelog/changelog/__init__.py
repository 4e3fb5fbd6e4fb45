# src/debian_changelog/changelog/__init__.py

"""Debian changelog entries: parsing, formatting and multi-entry iteration.

Example:
    >>> from debian_changelog.changelog import Entry
    >>>
    >>> entry = Entry()
    >>> for parsed in entry.iter_from(text):
    ...     print(parsed.package, parsed.version)
"""

from .config import WriterConfig
from .draft import EntryDraft, load_draft
from .entry import (
    Entry,
    format_entry,
    parse_date,
    parse_footer,
    parse_footer_line,
    parse_header,
)
from .errors import (
    AppendError,
    AuthorWithoutEmailError,
    BadDateError,
    BadMetadataError,
    ChangelogWriteError,
    CreateTemporaryError,
    EmailNotEnclosedError,
    EntryError,
    FlushError,
    NoDateError,
    NoFooterError,
    NoHeaderError,
    NoPackageError,
    NoVersionError,
    OpenOriginalError,
    PathNotUtf8Error,
    ReplaceError,
    VersionRequiresParenthesisError,
    WriteError,
)
from .iterator import ChangelogIter, parse_changelog
from .writer import append, append_async

__all__ = [
    # Entry
    "Entry",
    "format_entry",
    "parse_date",
    "parse_footer",
    "parse_footer_line",
    "parse_header",
    # Iteration
    "ChangelogIter",
    "parse_changelog",
    # Writing
    "WriterConfig",
    "append",
    "append_async",
    # Drafts
    "EntryDraft",
    "load_draft",
    # Parse errors
    "EntryError",
    "AuthorWithoutEmailError",
    "BadDateError",
    "BadMetadataError",
    "EmailNotEnclosedError",
    "NoDateError",
    "NoFooterError",
    "NoHeaderError",
    "NoPackageError",
    "NoVersionError",
    "VersionRequiresParenthesisError",
    # Write errors
    "ChangelogWriteError",
    "AppendError",
    "CreateTemporaryError",
    "FlushError",
    "OpenOriginalError",
    "PathNotUtf8Error",
    "ReplaceError",
    "WriteError",
]
