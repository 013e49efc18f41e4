"""Selection filter: which test cases run.

Exclusive mode is run-wide. One case marked only=True anywhere restricts
every rule to its own marked cases, so rules without marks are fully
skipped.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, MutableMapping
from typing import TYPE_CHECKING, Any

from lintspec.domain.exceptions import InvalidCaseError
from lintspec.domain.model.artifact import get_field
from lintspec.domain.model.plan import PlannedRule

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from lintspec.domain.model.rule_entry import RuleEntry

logger = logging.getLogger(__name__)

CASE_GROUPS = ("valid", "invalid")


def only(value: Any) -> Any:
    """Mark test cases as exclusive.

    Accepts the same shapes rule authors write:
        only("x = 1")                   → {"code": "x = 1", "only": True}
        only([...])                     → each item marked
        only({"code": ...})             → marked copy, explicit only kept
        only({"valid": [...], ...})     → valid and invalid marked in place
        only(Tests(valid=[...]))        → attributes marked in place

    Anything else is returned unchanged, read-only mappings included.

    Example:
        tests = {
            "valid": [only("x = 1"), "y = 2"],
            "invalid": only([{"code": "print(1)", "errors": 1}]),
        }
    """
    match value:
        case str():
            return {"code": value, "only": True}
        case list() | tuple():
            return [only(item) for item in value]
        case Mapping() if "code" in value:
            marked = value.get("only")
            return {**value, "only": True if marked is None else marked}
        case MutableMapping():
            for key in CASE_GROUPS:
                if isinstance(value.get(key), list | tuple):
                    value[key] = only(value[key])
            return value
        case Mapping():
            return value
        case _:
            for key in CASE_GROUPS:
                cases = getattr(value, key, None)
                if isinstance(cases, list | tuple):
                    setattr(value, key, only(cases))
            return value


def _as_case(case: object) -> dict[str, Any]:
    if isinstance(case, str):
        return {"code": case}
    if isinstance(case, Mapping):
        return dict(case)
    raise TypeError(f"test case must be a str or mapping, got {type(case).__name__}")


def total_cases(module: object) -> tuple[dict[str, Any], ...]:
    """All declared cases of a rule module, valid first then invalid.

    Every case is a new dict. String shorthand becomes {"code": ...}.
    The rule module is never mutated.
    """
    tests = get_field(module, "tests")
    if tests is None:
        return ()

    valid = get_field(tests, "valid") or ()
    invalid = get_field(tests, "invalid") or ()
    return tuple(_as_case(case) for case in (*valid, *invalid))


def is_exclusive(entries: Sequence[RuleEntry]) -> bool:
    """True if any case of any entry is marked only."""
    return _any_marked(_entry_cases(entry) for entry in entries)


def _any_marked(totals: Iterable[tuple[dict[str, Any], ...]]) -> bool:
    return any(case.get("only") for total in totals for case in total)


def _entry_cases(entry: RuleEntry) -> tuple[dict[str, Any], ...]:
    try:
        return total_cases(entry.module)
    except TypeError as e:
        raise InvalidCaseError(entry.name, str(e)) from e


def plan(entries: Sequence[RuleEntry]) -> list[PlannedRule]:
    """Compute total and selected cases for every entry.

    Args:
        entries: Normalized rule entries

    Returns:
        One PlannedRule per entry, same order

    Raises:
        InvalidCaseError: If a rule declares a case that is not code or a mapping
    """
    totals = [_entry_cases(entry) for entry in entries]
    exclusive = _any_marked(totals)
    if exclusive:
        logger.debug("Exclusive mode: running only marked cases")

    planned: list[PlannedRule] = []
    for entry, total in zip(entries, totals, strict=True):
        selected = tuple(case for case in total if case.get("only")) if exclusive else total
        planned.append(PlannedRule(entry=entry, total=total, selected=selected))

    return planned
