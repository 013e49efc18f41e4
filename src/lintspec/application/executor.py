"""Execution engine: one rule tester invocation per selected case.

Cases run in isolation so a failing case cannot hide diagnostics of its
siblings. Exceptions are absorbed per case and recorded as CaseFailure.
"""

from __future__ import annotations

import logging
import traceback
from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from lintspec.domain.model.plan import CaseFailure
from lintspec.domain.ports.rule_tester import CaseSuite

if TYPE_CHECKING:
    from lintspec.domain.model.plan import PlannedRule
    from lintspec.domain.ports.rule_tester import RuleTesterProtocol

logger = logging.getLogger(__name__)

# Used when discovery contributed no configuration: newest grammar, module source.
DEFAULT_CONFIG: Mapping[str, Any] = MappingProxyType(
    {
        "language_options": MappingProxyType({"feature_version": "latest", "mode": "exec"}),
    }
)


def strip_only(case: Mapping[str, Any]) -> dict[str, Any]:
    """Copy of case without the exclusivity flag."""
    return {key: value for key, value in case.items() if key != "only"}


def render_error(error: BaseException) -> str:
    """Text shown for a failed case.

    Assertion failures show their message. Anything else shows the full
    traceback, falling back to str(error).
    """
    if isinstance(error, AssertionError) and str(error):
        return str(error)

    text = "".join(traceback.format_exception(error)).rstrip()
    return text or str(error)


class Executor:
    """Runs the selected cases of a planned rule through a rule tester.

    Example:
        executor = Executor(AstRuleTester(), bail=False)
        failures = executor.run(planned_rule)
    """

    def __init__(self, tester: RuleTesterProtocol, *, bail: bool = False) -> None:
        """Initialize executor.

        Args:
            tester: Rule-testing engine
            bail: Stop at the first failing case
        """
        self._tester = tester
        self._bail = bail

    def run(self, planned: PlannedRule) -> list[CaseFailure]:
        """Run every selected case of planned, one tester call each.

        Args:
            planned: Rule with its selected cases

        Returns:
            Failures in case order (at most one in bail mode)
        """
        config = planned.entry.config or DEFAULT_CONFIG
        failures: list[CaseFailure] = []

        for selected in planned.selected:
            case = strip_only(selected)
            try:
                self._tester.run(planned.name, planned.entry.module, CaseSuite.single(case), config)
            except Exception as error:  # noqa: BLE001
                logger.debug("Case of %r failed: %s: %s", planned.name, type(error).__name__, error)
                failures.append(CaseFailure(case=case, error=render_error(error)))
                if self._bail:
                    break

        return failures
