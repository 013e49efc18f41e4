"""Test harness facade: normalize → plan → execute → report."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from lintspec.application.executor import Executor
from lintspec.application.normalizer import normalize
from lintspec.application.reporter import Reporter
from lintspec.application.selection import plan
from lintspec.domain.model.run_options import RunOptions

if TYPE_CHECKING:
    from collections.abc import Iterable

    from lintspec.domain.model.artifact import SourceArtifact
    from lintspec.domain.ports.rule_tester import RuleTesterProtocol

logger = logging.getLogger(__name__)


class Harness:
    """Runs the declared test cases of loaded rules and plugins.

    Composition-based: accepts the rule tester and run options.
    Stateless between run() calls; statistics live for one run only.

    Example:
        harness = Harness(AstRuleTester(), RunOptions(bail=True))
        status = harness.run([SourceArtifact("rules/no_print.py", no_print)])
    """

    def __init__(self, tester: RuleTesterProtocol, options: RunOptions | None = None) -> None:
        """Initialize harness.

        Args:
            tester: Rule-testing engine
            options: Run options. Uses defaults if None.
        """
        self._tester = tester
        self._options = options or RunOptions()

    def run(self, artifacts: Iterable[SourceArtifact]) -> int:
        """Run every rule found in artifacts.

        Args:
            artifacts: Loaded values with their sources

        Returns:
            Status code: -1 if nothing was declared, 1 after a bailed
            failure, else failed + skipped

        Raises:
            InvalidArtifactError: If an artifact is not a rule, plugin or config list,
                or a rule declares a malformed test case
        """
        entries = normalize(artifacts)
        planned = plan(entries)
        logger.debug("Planned %d rule(s)", len(planned))

        executor = Executor(self._tester, bail=self._options.bail)
        return Reporter(self._options).report(planned, executor.run)
