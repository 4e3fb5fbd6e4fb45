# src/debian_changelog/observability/names.py

"""Standard metric names for debian-changelog observability.

Use these constants instead of hardcoded strings. All duration metrics
are in milliseconds.
"""

# ============================================================================
# Parsing Metrics
# ============================================================================

# Duration (one parse step of the cursor)
ENTRY_PARSE_DURATION = "changelog_entry_parse_duration"

# Counters
ENTRIES_PARSED_TOTAL = "changelog_entries_parsed_total"
ENTRY_ERRORS_TOTAL = "changelog_entry_errors_total"
ENTRIES_SKIPPED_TOTAL = "changelog_entries_skipped_total"


# ============================================================================
# Writer Metrics
# ============================================================================

# Duration
APPEND_DURATION = "changelog_append_duration"

# Counters
APPENDS_TOTAL = "changelog_appends_total"
APPEND_ERRORS_TOTAL = "changelog_append_errors_total"
