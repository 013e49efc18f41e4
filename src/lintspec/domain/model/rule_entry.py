"""Rule entry: canonical unit of work."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any


def _empty_config() -> Mapping[str, Any]:
    return MappingProxyType({})


@dataclass(frozen=True, slots=True)
class RuleEntry:
    """Namespaced rule bound to its execution configuration.

    Attributes:
        name: Display and execution key, e.g. "plugin/rule" (must not be empty)
        module: Rule module exposing create() and optional tests
        config: Engine settings inherited from discovery (read-only)
    """

    name: str
    module: object
    config: Mapping[str, Any] = field(default_factory=_empty_config)

    def __post_init__(self) -> None:
        """Validate invariants and freeze config. FAIL-FIRST."""
        if not self.name:
            raise ValueError("name must not be empty")
        if self.module is None:
            raise TypeError("module must not be None")
        frozen = {key: value for key, value in self.config.items() if value is not None}
        object.__setattr__(self, "config", MappingProxyType(frozen))
