"""lintspec domain layer.

Pure domain logic with no external dependencies.
Only imports: typing, dataclasses, types, collections.abc
"""

from lintspec.domain.exceptions import (
    ArtifactLoadError,
    InvalidArtifactError,
    InvalidCaseError,
    LintSpecError,
    NoInputError,
)
from lintspec.domain.model import (
    BareRule,
    CaseFailure,
    ConfigList,
    PlannedRule,
    PluginBundle,
    RuleEntry,
    RunOptions,
    RunStats,
    SourceArtifact,
)
from lintspec.domain.ports import CaseSuite, RuleTesterProtocol

__all__ = [
    # Exceptions
    "LintSpecError",
    "InvalidArtifactError",
    "InvalidCaseError",
    "NoInputError",
    "ArtifactLoadError",
    # Artifacts
    "SourceArtifact",
    "BareRule",
    "PluginBundle",
    "ConfigList",
    # Plan
    "RuleEntry",
    "PlannedRule",
    "CaseFailure",
    # Run
    "RunOptions",
    "RunStats",
    # Ports
    "CaseSuite",
    "RuleTesterProtocol",
]
