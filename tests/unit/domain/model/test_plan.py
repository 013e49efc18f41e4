"""Tests for domain/model/plan.py."""

import pytest

from lintspec.domain.model.plan import PlannedRule
from tests.factories import make_entry, make_planned


class TestPlannedRule:
    """Tests for PlannedRule."""

    def test_name_comes_from_entry(self) -> None:
        assert make_planned("demo/foo").name == "demo/foo"

    def test_skipped_count(self) -> None:
        cases = ({"code": "a"}, {"code": "b", "only": True}, {"code": "c"})
        planned = make_planned(total=cases, selected=cases[1:2])
        assert planned.skipped_count == 2

    def test_nothing_skipped_by_default(self) -> None:
        planned = make_planned(total=({"code": "a"},))
        assert planned.skipped_count == 0

    def test_selected_larger_than_total_raises(self) -> None:
        with pytest.raises(ValueError, match="must not exceed total"):
            PlannedRule(entry=make_entry(), total=(), selected=({"code": "a"},))
