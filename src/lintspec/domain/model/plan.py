"""Execution plan per rule and recorded failures."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from lintspec.domain.model.rule_entry import RuleEntry


@dataclass(frozen=True, slots=True)
class PlannedRule:
    """Rule entry with its total and selected test cases.

    Attributes:
        entry: Normalized rule entry
        total: Every declared case, valid first then invalid
        selected: Cases to execute (subset of total)
    """

    entry: RuleEntry
    total: tuple[Mapping[str, Any], ...]
    selected: tuple[Mapping[str, Any], ...]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if len(self.selected) > len(self.total):
            raise ValueError(
                f"selected ({len(self.selected)}) must not exceed total ({len(self.total)})"
            )

    @property
    def name(self) -> str:
        """Rule entry name."""
        return self.entry.name

    @property
    def skipped_count(self) -> int:
        """Number of cases left out by exclusive mode."""
        return len(self.total) - len(self.selected)


@dataclass(frozen=True, slots=True)
class CaseFailure:
    """Failed test case with its rendered error.

    Attributes:
        case: Case fields as submitted to the engine
        error: Assertion message or traceback text
    """

    case: Mapping[str, Any]
    error: str
