"""Domain ports (interfaces/protocols)."""

from lintspec.domain.ports.rule_tester import CaseSuite, RuleTesterProtocol

__all__ = [
    "CaseSuite",
    "RuleTesterProtocol",
]
