# Changelog
from .changelog import (
    ChangelogIter,
    ChangelogWriteError,
    Entry,
    EntryDraft,
    EntryError,
    WriterConfig,
    append,
    append_async,
    format_entry,
    load_draft,
    parse_changelog,
)

# Observability
from .observability import MetricsHook, NoOpMetricsHook

__all__ = [
    # Changelog
    "ChangelogIter",
    "ChangelogWriteError",
    "Entry",
    "EntryDraft",
    "EntryError",
    "WriterConfig",
    "append",
    "append_async",
    "format_entry",
    "load_draft",
    "parse_changelog",
    # Observability
    "MetricsHook",
    "NoOpMetricsHook",
]
