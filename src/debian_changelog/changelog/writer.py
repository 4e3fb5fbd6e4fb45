# src/debian_changelog/changelog/writer.py

"""Prepend a formatted entry to a changelog file.

The new entry is written to a temporary file next to the changelog, the
original contents are copied after it, and the temporary file then
replaces the changelog in one rename.
"""

import asyncio
import contextlib
import logging
import os
import shutil
from pathlib import Path
from time import monotonic

from debian_changelog.observability import names
from debian_changelog.observability.base import MetricsHook, NoOpMetricsHook

from .config import WriterConfig
from .entry import Entry, format_entry
from .errors import (
    AppendError,
    ChangelogWriteError,
    CreateTemporaryError,
    FlushError,
    OpenOriginalError,
    PathNotUtf8Error,
    ReplaceError,
    WriteError,
)

logger = logging.getLogger(__name__)


def append(
    path: str | Path,
    entry: Entry,
    config: WriterConfig = WriterConfig(),
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> None:
    """Place ``entry`` at the top of the changelog at ``path``.

    Raises:
        ChangelogWriteError: the subclass names the step that failed.
    """
    start = monotonic()
    src_path = os.fspath(path)
    try:
        _write(src_path, entry, config)
    except ChangelogWriteError as exc:
        logger.error("Failed to append entry to %s: %s", src_path, exc)
        metrics_hook.increment(
            names.APPEND_ERRORS_TOTAL, labels={"error": type(exc).__name__}
        )
        raise

    elapsed_ms = 1000 * (monotonic() - start)
    metrics_hook.record_latency(names.APPEND_DURATION, elapsed_ms)
    metrics_hook.increment(names.APPENDS_TOTAL)
    logger.info(
        "Appended %s (%s) to %s in %.0fms",
        entry.package,
        entry.version,
        src_path,
        elapsed_ms,
    )


async def append_async(
    path: str | Path,
    entry: Entry,
    config: WriterConfig = WriterConfig(),
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> None:
    """Same as ``append``, with the blocking file work moved to a thread."""
    await asyncio.to_thread(append, path, entry, config, metrics_hook)


def _write(src_path: str | bytes, entry: Entry, config: WriterConfig) -> None:
    if isinstance(src_path, bytes):
        try:
            src_path = src_path.decode("utf-8")
        except UnicodeDecodeError:
            raise PathNotUtf8Error(os.fsdecode(src_path)) from None
    try:
        src_path.encode("utf-8")
    except UnicodeEncodeError:
        raise PathNotUtf8Error(src_path) from None

    dst_path = src_path + config.backup_suffix
    formatted = (format_entry(entry) + "\n\n").encode(config.encoding)

    try:
        dst_file = open(dst_path, "wb")
    except OSError as exc:
        raise CreateTemporaryError(dst_path) from exc

    try:
        with dst_file:
            try:
                src_file = open(src_path, "rb")
            except OSError as exc:
                raise OpenOriginalError(src_path) from exc

            with src_file:
                try:
                    dst_file.write(formatted)
                except OSError as exc:
                    raise WriteError(dst_path) from exc

                try:
                    shutil.copyfileobj(src_file, dst_file, config.copy_chunk_size)
                except OSError as exc:
                    raise AppendError(dst_path) from exc

            try:
                dst_file.flush()
                os.fsync(dst_file.fileno())
            except OSError as exc:
                raise FlushError(dst_path) from exc

        try:
            os.replace(dst_path, src_path)
        except OSError as exc:
            raise ReplaceError(src_path) from exc
    except ChangelogWriteError:
        with contextlib.suppress(FileNotFoundError):
            os.remove(dst_path)
        raise
