# src/debian_changelog/observability/base.py

from typing import Protocol


class MetricsHook(Protocol):
    """Receives timings and counters from the changelog cursor and writer.

    ``ChangelogIter`` reports one latency per parsed entry and counts parsed,
    failed and skipped entries; ``append`` reports the duration of each
    prepend and counts successes and failures. Failure counters carry an
    ``error`` label naming the exception class. Durations are in
    milliseconds; metric names live in ``observability.names``.
    """

    def record_latency(
        self,
        name: str,
        value_ms: float,
        labels: dict[str, str] | None = None,
    ) -> None: ...

    def increment(
        self,
        name: str,
        value: int = 1,
        labels: dict[str, str] | None = None,
    ) -> None: ...


class NoOpMetricsHook:
    """Default hook for parsing and appending when no backend is wired in."""

    def record_latency(
        self, name: str, value_ms: float, labels: dict[str, str] | None = None
    ) -> None:
        pass

    def increment(
        self, name: str, value: int = 1, labels: dict[str, str] | None = None
    ) -> None:
        pass
