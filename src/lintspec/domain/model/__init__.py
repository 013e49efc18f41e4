"""Domain model entities."""

from lintspec.domain.model.artifact import (
    Artifact,
    BareRule,
    ConfigList,
    PluginBundle,
    SourceArtifact,
    get_field,
    is_rule,
)
from lintspec.domain.model.plan import CaseFailure, PlannedRule
from lintspec.domain.model.rule_entry import RuleEntry
from lintspec.domain.model.run_options import LineSink, RunOptions, discard
from lintspec.domain.model.run_stats import NOTHING_RAN, RunStats

__all__ = [
    # Artifacts
    "Artifact",
    "BareRule",
    "ConfigList",
    "PluginBundle",
    "SourceArtifact",
    "get_field",
    "is_rule",
    # Plan
    "RuleEntry",
    "PlannedRule",
    "CaseFailure",
    # Run
    "RunOptions",
    "RunStats",
    "LineSink",
    "NOTHING_RAN",
    "discard",
]
