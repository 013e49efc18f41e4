"""Loaded artifacts and their classified shapes.

A loader yields SourceArtifact pairs. The normalizer classifies each value
into exactly one of BareRule, PluginBundle or ConfigList.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, TypeAlias


def get_field(value: object, name: str) -> Any:
    """Read a field by key from a mapping, by attribute from anything else.

    Rule modules may be Python modules, namespaces or plain dicts.
    Missing fields read as None.
    """
    if isinstance(value, Mapping):
        return value.get(name)
    return getattr(value, name, None)


def is_rule(value: object) -> bool:
    """True if value exposes a callable create() hook."""
    return value is not None and callable(get_field(value, "create"))


@dataclass(frozen=True, slots=True)
class SourceArtifact:
    """Loaded value and where it came from.

    Attributes:
        source: File path or import target (must not be empty)
        value: Whatever the target evaluated to
    """

    source: str
    value: object

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.source:
            raise ValueError("source must not be empty")


@dataclass(frozen=True, slots=True)
class BareRule:
    """Single rule module, named after its source file."""

    source: str
    rule: object


@dataclass(frozen=True, slots=True)
class PluginBundle:
    """Plugin exposing a rules mapping of bare rules."""

    source: str
    plugin: object


@dataclass(frozen=True, slots=True)
class ConfigList:
    """Ordered configuration objects referencing rules through plugins."""

    source: str
    configs: tuple[Mapping[str, Any], ...]


Artifact: TypeAlias = BareRule | PluginBundle | ConfigList
