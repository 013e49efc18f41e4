"""Reporter: per-rule status lines, failure details, summary, status code.

Output is line-oriented. Every line goes to RunOptions.log or
RunOptions.err; the reporter never writes to a stream itself.

Markers:
    ⚪ name (0)       no test cases declared
    ⏩ name (N)       every case skipped by exclusive mode
    🔴 name (F/N)     F of N cases failed, details follow
    🟢 name (N)       every case ran and passed
    🟡 name (S/N)     S selected cases passed, the rest skipped
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from rich.console import Console
from rich.text import Text

from lintspec.domain.model.run_options import RunOptions
from lintspec.domain.model.run_stats import RunStats

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from lintspec.domain.model.plan import CaseFailure, PlannedRule
    from lintspec.domain.model.run_options import LineSink

# Returned by a bailed run regardless of counts.
BAIL_STATUS = 1

MARK_EMPTY = "⚪"
MARK_SKIPPED = "⏩"
MARK_FAILING = "🔴"
MARK_PASSING = "🟢"
MARK_PARTIAL = "🟡"

_SKIP_STYLE = "bold white on #0CAAEE"
_PASS_STYLE = "bold white on green"
_FAIL_STYLE = "bold white on red"

# Code continuation lines align under the first line after "   code: ".
_CODE_INDENT = 9
_DETAIL_INDENT = 3


def order(planned: Sequence[PlannedRule]) -> list[PlannedRule]:
    """Stable report order: rules without cases, then fully skipped, then the rest."""
    return sorted(planned, key=lambda rule: (len(rule.total) > 0, len(rule.selected) > 0))


def count(value: int) -> str:
    """Count with thousands separators."""
    return f"{value:,}"


def indent_block(text: str, offset: int, *, numbered: bool = False, hanging: bool = False) -> Text:
    """Indent every line of text by offset spaces.

    Args:
        text: Multi-line text
        offset: Spaces before each line
        numbered: Prefix one-based, right-aligned line numbers
        hanging: Leave the first line flush, for text following a label

    Returns:
        Styled text, line numbers in blue
    """
    lines = text.split("\n")
    width = len(str(len(lines)))
    block = Text()

    for index, line in enumerate(lines):
        first = index == 0
        if not first:
            block.append("\n")
        if not (first and hanging):
            block.append(" " * offset)
        if numbered:
            number = str(index + 1)
            block.append(number if first and hanging else number.rjust(width), style="blue")
            block.append(" ")
        block.append(line)

    return block


def _label(name: str) -> Text:
    return Text.assemble(" " * _DETAIL_INDENT, (name, "underline"), ": ")


class Reporter:
    """Drives execution rule by rule and reports as it goes.

    Example:
        reporter = Reporter(RunOptions(log=lines.append))
        status = reporter.report(planned, executor.run)
    """

    def __init__(self, options: RunOptions | None = None) -> None:
        """Initialize reporter.

        Args:
            options: Run options. Uses defaults if None.
        """
        self._options = options or RunOptions()
        self._console = Console(
            force_terminal=True,
            color_system="standard",
            highlight=False,
            soft_wrap=True,
        )

    def report(
        self,
        planned: Sequence[PlannedRule],
        execute: Callable[[PlannedRule], list[CaseFailure]],
    ) -> int:
        """Execute and report every planned rule in report order.

        Args:
            planned: Planned rules in normalized order
            execute: Runs the selected cases of one rule

        Returns:
            -1 if no rule declared any case, BAIL_STATUS on the first
            failure in bail mode, else failed + skipped
        """
        stats = RunStats()

        for rule in order(planned):
            total = len(rule.total)
            selected = len(rule.selected)

            if total == 0:
                self._log(f"{MARK_EMPTY} {rule.name} (0)")
                continue

            stats.skipped += rule.skipped_count

            if selected == 0:
                self._log(f"{MARK_SKIPPED} {rule.name} ({count(total)})")
                continue

            failures = execute(rule)

            if failures:
                self._err(f"{MARK_FAILING} {rule.name} ({count(len(failures))}/{count(total)})")
                for failure in failures:
                    self._report_failure(failure)
                    if self._options.bail:
                        return BAIL_STATUS
                self._log("")
            elif total == selected:
                self._log(f"{MARK_PASSING} {rule.name} ({count(total)})")
            else:
                self._log(f"{MARK_PARTIAL} {rule.name} ({count(selected)}/{count(total)})")

            stats.passed += selected - len(failures)
            stats.failed += len(failures)

        self._report_summary(stats)
        return stats.status_code()

    def _report_failure(self, failure: CaseFailure) -> None:
        """Render one failure detail block."""
        case = failure.case
        self._err("")

        if case.get("name") is not None:
            self._err(_label("name").append(str(case["name"])))

        code = str(case.get("code", ""))
        self._err(_label("code").append_text(indent_block(code, _CODE_INDENT, numbered=True, hanging=True)))

        if case.get("filename") is not None:
            self._err(_label("filename").append(str(case["filename"])))

        if case.get("options") is not None:
            options = json.dumps(case["options"], indent=2, default=str)
            self._err(_label("options").append_text(indent_block(options, _DETAIL_INDENT, hanging=True)))

        error = indent_block(failure.error, _DETAIL_INDENT)
        error.stylize("red")
        self._err(error)

    def _report_summary(self, stats: RunStats) -> None:
        self._log("")

        if stats.skipped > 0:
            self._log(Text.assemble((" SKIP ", _SKIP_STYLE), f" {count(stats.skipped)}"))

        self._log(Text.assemble((" PASS ", _PASS_STYLE), f" {count(stats.passed)}"))

        if stats.failed > 0:
            self._log(Text.assemble((" FAIL ", _FAIL_STYLE), f" {count(stats.failed)}"))

    def _log(self, line: Text | str) -> None:
        self._emit(self._options.log, line)

    def _err(self, line: Text | str) -> None:
        self._emit(self._options.err, line)

    def _emit(self, sink: LineSink, line: Text | str) -> None:
        text = Text(line) if isinstance(line, str) else line
        if not self._options.color:
            sink(text.plain)
            return

        with self._console.capture() as capture:
            self._console.print(text, end="")
        sink(capture.get())
