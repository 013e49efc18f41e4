"""Rule tester protocol: contract for the rule-testing engine.

The engine executes a rule against source snippets and compares produced
diagnostics with expectations. lintspec only orchestrates it.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Protocol


@dataclass(frozen=True, slots=True)
class CaseSuite:
    """Test cases partitioned by expectation.

    Attributes:
        valid: Cases expected to produce no diagnostics
        invalid: Cases carrying an errors expectation
    """

    valid: Sequence[Mapping[str, Any]] = ()
    invalid: Sequence[Mapping[str, Any]] = ()

    @classmethod
    def single(cls, case: Mapping[str, Any]) -> CaseSuite:
        """Suite holding one case, classified by presence of errors."""
        if "errors" in case:
            return cls(invalid=(case,))
        return cls(valid=(case,))


class RuleTesterProtocol(Protocol):
    """Contract for rule-testing engines.

    run() returns normally when every expectation matched.
    Mismatches raise AssertionError. Any other exception is an
    unexpected engine failure and is reported with its traceback.

    Example:
        class MyTester:
            def run(self, rule_name, rule, suite, config) -> None:
                for case in suite.valid:
                    assert not lint(rule, case["code"]), "expected no errors"
    """

    def run(
        self,
        rule_name: str,
        rule: object,
        suite: CaseSuite,
        config: Mapping[str, Any],
    ) -> None:
        """Run suite against rule.

        Args:
            rule_name: Namespaced rule name
            rule: Rule module exposing create()
            suite: Cases to run
            config: Execution configuration (language options, plugins)

        Raises:
            AssertionError: If produced diagnostics do not match expectations
        """
        ...

