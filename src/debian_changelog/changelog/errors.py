# src/debian_changelog/changelog/errors.py

"""Error taxonomies for changelog parsing and changelog persistence.

The two hierarchies are disjoint: parse failures are ``EntryError``
(a ``ValueError``), file failures are ``ChangelogWriteError``.
"""


class EntryError(ValueError):
    """Base class for every failure to parse a changelog entry."""

    message = "failed to parse changelog entry"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class AuthorWithoutEmailError(EntryError):
    message = "expected an email to be assigned to an author"


class BadDateError(EntryError):
    def __init__(self, date: str) -> None:
        self.date = date
        super().__init__(f"parsed date ({date}) is not in the RFC2822 format")


class BadMetadataError(EntryError):
    def __init__(self, pair: str) -> None:
        self.pair = pair
        super().__init__(f"metadata pair ({pair}) lacks value")


class EmailNotEnclosedError(EntryError):
    message = "author field contains an email which lacks the closing '>'"


class NoDateError(EntryError):
    message = "expected to see a double-spaced separator between author and date"


class NoFooterError(EntryError):
    message = "expected to find a footer, which starts with ` --`"


class NoHeaderError(EntryError):
    message = "expected to find a header, but none were found"


class NoPackageError(EntryError):
    message = "expected package field in header"


class NoVersionError(EntryError):
    message = "expected a version field in header"


class VersionRequiresParenthesisError(EntryError):
    message = "version field in header requires parenthesis"


class ChangelogWriteError(Exception):
    """Base class for failures while prepending an entry to a changelog file.

    The underlying ``OSError`` (when there is one) is chained as ``__cause__``.
    """

    message = "failed to update changelog"

    def __init__(self, path: str, message: str | None = None) -> None:
        self.path = path
        super().__init__(f"{message or self.message}: {path}")


class PathNotUtf8Error(ChangelogWriteError):
    message = "path is not UTF-8"


class CreateTemporaryError(ChangelogWriteError):
    message = "failed to create temporary changelog file"


class OpenOriginalError(ChangelogWriteError):
    message = "failed to open original changelog file"


class WriteError(ChangelogWriteError):
    message = "failed to write new entry to temporary file"


class AppendError(ChangelogWriteError):
    message = "failed to append original changelog to temporary changelog"


class FlushError(ChangelogWriteError):
    message = "failed to flush I/O to temporary changelog"


class ReplaceError(ChangelogWriteError):
    message = "failed to replace changelog with new updated changelog"
