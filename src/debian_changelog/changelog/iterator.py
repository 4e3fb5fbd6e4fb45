# src/debian_changelog/changelog/iterator.py

import logging
import weakref
from time import monotonic

from debian_changelog.observability import names
from debian_changelog.observability.base import MetricsHook, NoOpMetricsHook

from .entry import Entry
from .errors import EntryError

logger = logging.getLogger(__name__)


class ChangelogIter:
    """Cursor that walks successive entries out of one changelog text.

    Every step reparses the same ``Entry`` in place and returns it, so the
    value returned by ``next()`` is only valid until the following step.
    Use ``Entry.copy()`` to keep one around.

    An Entry may be bound to one live cursor at a time; binding a second
    raises ``RuntimeError``. The cursor releases its entry once the text
    is exhausted, after a terminal failure, on ``close()``, or when it is
    garbage collected.

    A parse failure is raised once. By default the rest of the text is
    then dropped and iteration ends. With ``recover=True`` the cursor
    instead skips to the next line that looks like a header and carries on.
    """

    def __init__(
        self,
        entry: Entry,
        text: str,
        *,
        recover: bool = False,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        if entry._cursor is not None and entry._cursor() is not None:
            raise RuntimeError("entry is already bound to an active changelog iterator")

        self._entry = entry
        self._data = text
        self._recover = recover
        self.metrics_hook = metrics_hook
        entry._cursor = weakref.ref(self)

    @property
    def remaining(self) -> str:
        return self._data

    def __iter__(self) -> "ChangelogIter":
        return self

    def __next__(self) -> Entry:
        if not self._data:
            self.close()
            raise StopIteration

        start = monotonic()
        try:
            read = self._entry.parse_from_str(self._data)
        except EntryError as exc:
            self.metrics_hook.increment(
                names.ENTRY_ERRORS_TOTAL, labels={"error": type(exc).__name__}
            )
            if self._recover:
                self._data = _skip_to_next_header(self._data)
                self.metrics_hook.increment(names.ENTRIES_SKIPPED_TOTAL)
                logger.warning(
                    "Skipping malformed changelog entry (%s); %d characters left",
                    exc,
                    len(self._data),
                )
            else:
                self._data = ""
                logger.warning("Stopping changelog scan: %s", exc)
            if not self._data:
                self.close()
            raise

        self._data = self._data[read:]

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.ENTRY_PARSE_DURATION, elapsed_ms)
        self.metrics_hook.increment(names.ENTRIES_PARSED_TOTAL)
        logger.debug(
            "Parsed %s (%s); %d characters left",
            self._entry.package,
            self._entry.version,
            len(self._data),
        )
        return self._entry

    def close(self) -> None:
        """Drop the remaining text and release the entry."""
        self._data = ""
        if self._entry._cursor is not None and self._entry._cursor() is self:
            self._entry._cursor = None

    def __enter__(self) -> "ChangelogIter":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def _skip_to_next_header(text: str) -> str:
    """Drop the first line and everything up to the next unindented line."""
    start = text.find("\n") + 1
    while start:
        end = text.find("\n", start)
        line = text[start:] if end == -1 else text[start:end]
        if line.strip() and not line[0].isspace():
            return text[start:]
        start = end + 1
    return ""


def parse_changelog(
    text: str, *, metrics_hook: MetricsHook = NoOpMetricsHook()
) -> list[Entry]:
    """Parse every entry of ``text`` into detached ``Entry`` copies.

    Raises:
        EntryError: for the first malformed entry.
    """
    with ChangelogIter(Entry(), text, metrics_hook=metrics_hook) as cursor:
        return [entry.copy() for entry in cursor]
