"""Infrastructure adapters: default rule tester and rule loader."""

from lintspec.infrastructure.ast_tester import AstRuleTester, Diagnostic, RuleContext
from lintspec.infrastructure.loader import load_artifact, load_artifacts

__all__ = [
    "AstRuleTester",
    "Diagnostic",
    "RuleContext",
    "load_artifact",
    "load_artifacts",
]
