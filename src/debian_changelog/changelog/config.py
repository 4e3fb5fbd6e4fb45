# src/debian_changelog/changelog/config.py

from dataclasses import dataclass


@dataclass(frozen=True)
class WriterConfig:
    """Configuration for prepending entries to a changelog file.

    Immutable. Explicit. No magic defaults from environment.
    """

    backup_suffix: str = ".bak"  # temporary file is <changelog><suffix>
    encoding: str = "utf-8"  # new entry only; existing content is copied as bytes
    copy_chunk_size: int = 8 * 1024
