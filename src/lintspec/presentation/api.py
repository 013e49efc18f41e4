"""Public API entry point."""

from __future__ import annotations

from typing import TYPE_CHECKING

from lintspec.application.harness import Harness
from lintspec.infrastructure.ast_tester import AstRuleTester

if TYPE_CHECKING:
    from collections.abc import Iterable

    from lintspec.domain.model.artifact import SourceArtifact
    from lintspec.domain.model.run_options import RunOptions
    from lintspec.domain.ports.rule_tester import RuleTesterProtocol


def run_tests(
    artifacts: Iterable[SourceArtifact],
    options: RunOptions | None = None,
    *,
    tester: RuleTesterProtocol | None = None,
) -> int:
    """Run the test cases declared on loaded rules, plugins and configs.

    Args:
        artifacts: Loaded values with their sources
        options: bail, log/err sinks, color. Defaults print plain text.
        tester: Rule-testing engine (default: AstRuleTester)

    Returns:
        -1 if no case was declared, 1 after a bailed failure,
        else failed + skipped (0 means a clean run)

    Raises:
        InvalidArtifactError: If an artifact is not a rule, plugin or config list,
            or a rule declares a malformed test case
    """
    return Harness(tester or AstRuleTester(), options).run(artifacts)
