from datetime import datetime, timezone

import pytest

from debian_changelog.changelog import Entry

FIRST_ENTRY = """\
pkgname (1.2.3) stable; urgency=low

  * Fix the frobnicator.
  * Add a widget.

 -- Jane Doe <jane@example.com>  Mon, 01 Jan 2024 00:00:00 +0000
"""

SECOND_ENTRY = """\
pkgname (1.2.2) stable testing; urgency=high

  * Initial release.
    Closes: #1234

 -- John Roe <john@example.com>  Sun, 31 Dec 2023 12:30:00 +0200
"""

THIRD_ENTRY = """\
pkgname (1.2.1) unstable; urgency=medium

  * Prerelease.

 -- Jane Doe <jane@example.com>  Sat, 30 Dec 2023 09:00:00 +0000
"""

MALFORMED_ENTRY = """\
pkgname 1.2.2 stable; urgency=high

  * Initial release.

 -- John Roe <john@example.com>  Sun, 31 Dec 2023 12:30:00 +0200
"""


@pytest.fixture
def changelog_text() -> str:
    """Three well-formed entries, newest first."""
    return "\n".join([FIRST_ENTRY, SECOND_ENTRY, THIRD_ENTRY])


@pytest.fixture
def malformed_changelog_text() -> str:
    """Second of three entries has an unparenthesized version."""
    return "\n".join([FIRST_ENTRY, MALFORMED_ENTRY, THIRD_ENTRY])


@pytest.fixture
def new_entry() -> Entry:
    entry = Entry(
        author="Max Mustermann",
        email="max@example.org",
        package="pkgname",
        version="1.2.4",
        metadata={"urgency": "medium"},
        date=datetime(2024, 2, 1, 8, 15, tzinfo=timezone.utc),
    )
    return entry.set_distributions(["unstable"]).set_changes(["* New upstream."])
