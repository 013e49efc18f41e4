"""Run options consumed by the test pipeline."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeAlias

LineSink: TypeAlias = Callable[[str], None]


def discard(line: str) -> None:
    """Sink that drops every line."""


@dataclass(frozen=True, slots=True)
class RunOptions:
    """Configuration for one test run.

    All fields have defaults. Immutable (frozen dataclass).

    Attributes:
        bail: Stop the whole run at the first failing case.
        log: Sink for status and summary lines.
        err: Sink for failure diagnostics.
        color: Emit ANSI styling through rich. Plain text otherwise.
    """

    bail: bool = False
    log: LineSink = print
    err: LineSink = print
    color: bool = False
