# src/debian_changelog/changelog/draft.py

import logging
from datetime import datetime
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, field_validator

from .entry import AUTHOR_DATE_SEPARATOR, Entry

logger = logging.getLogger(__name__)


def _single_line(value: str) -> str:
    if "\n" in value or "\r" in value:
        raise ValueError("must be a single line")
    return value


def _single_token(value: str) -> str:
    if not value or any(c.isspace() for c in value):
        raise ValueError("must be a non-empty value without whitespace")
    return value


class EntryDraft(BaseModel):
    """User-authored description of a new changelog entry.

    Loaded from YAML. ``date`` defaults to the moment the entry is built.
    Values are restricted to what formats into a readable changelog entry.
    """

    package: str
    version: str
    distributions: list[str] = Field(default_factory=lambda: ["unstable"])
    metadata: dict[str, str] = Field(default_factory=lambda: {"urgency": "medium"})
    changes: list[str]
    author: str
    email: str
    date: datetime | None = None

    class Config:
        extra = "forbid"

    @field_validator("package", "version")
    @classmethod
    def _check_header_field(cls, value: str) -> str:
        return _single_token(value)

    @field_validator("distributions")
    @classmethod
    def _check_distributions(cls, value: list[str]) -> list[str]:
        for distribution in value:
            _single_token(distribution)
            if ";" in distribution:
                raise ValueError("distribution must not contain ';'")
        return value

    @field_validator("metadata")
    @classmethod
    def _check_metadata(cls, value: dict[str, str]) -> dict[str, str]:
        for key, item in value.items():
            _single_token(key)
            _single_token(item)
            if "=" in key or "," in key or "," in item:
                raise ValueError(f"metadata pair {key}={item} is not a single pair")
        return value

    @field_validator("changes")
    @classmethod
    def _check_changes(cls, value: list[str]) -> list[str]:
        for change in value:
            _single_line(change)
        return value

    @field_validator("author")
    @classmethod
    def _check_author(cls, value: str) -> str:
        _single_line(value)
        if "<" in value or AUTHOR_DATE_SEPARATOR in value:
            raise ValueError("author must not contain '<' or a double space")
        return value

    @field_validator("email")
    @classmethod
    def _check_email(cls, value: str) -> str:
        _single_line(value)
        if "<" in value or AUTHOR_DATE_SEPARATOR in value:
            raise ValueError("email must not contain '<' or a double space")
        return value

    def to_entry(self) -> Entry:
        entry = Entry(
            author=self.author,
            email=self.email,
            package=self.package,
            version=self.version,
            metadata=dict(self.metadata),
        )
        entry.set_changes(self.changes).set_distributions(self.distributions)
        if self.date is not None:
            entry.date = self.date
        return entry


def load_draft(path: str | Path) -> EntryDraft:
    """Read a YAML mapping into an ``EntryDraft``.

    Raises:
        pydantic.ValidationError: when the document is not a mapping or a
            field is missing or invalid.
    """
    logger.debug("Loading entry draft from %s", path)
    with open(path) as f:
        data = yaml.safe_load(f)
    return EntryDraft.model_validate(data)
