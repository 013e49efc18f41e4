"""Tests for application/harness.py."""

import pytest

from lintspec.application.harness import Harness
from lintspec.domain.exceptions import InvalidArtifactError
from lintspec.domain.model.artifact import SourceArtifact
from lintspec.domain.model.run_options import RunOptions
from tests.factories import RecordingTester, make_rule


def options(log: list[str], err: list[str], *, bail: bool = False) -> RunOptions:
    """RunOptions collecting into lists."""
    return RunOptions(bail=bail, log=log.append, err=err.append)


class TestHarness:
    """Tests for Harness.run() wiring."""

    def test_runs_through_tester(self) -> None:
        tester = RecordingTester()
        log: list[str] = []
        err: list[str] = []
        rule = make_rule({"valid": ["a", "b"]})

        status = Harness(tester, options(log, err)).run([SourceArtifact("rules/foo.py", rule)])

        assert status == 0
        assert [name for name, *_ in tester.calls] == ["foo", "foo"]
        assert log == ["🟢 foo (2)", "", " PASS  2"]

    def test_plugin_config_reaches_tester(self) -> None:
        tester = RecordingTester()
        plugin = {"meta": {"name": "demo"}, "rules": {"foo": make_rule({"valid": ["a"]})}}

        Harness(tester, options([], [])).run([SourceArtifact("p.py", plugin)])

        name, _, _, config = tester.calls[0]
        assert name == "demo/foo"
        assert dict(config) == {"plugins": {"demo": plugin}}

    def test_invalid_artifact_escapes(self) -> None:
        with pytest.raises(InvalidArtifactError):
            Harness(RecordingTester(), options([], [])).run([SourceArtifact("x.py", 42)])

    def test_malformed_case_escapes_as_invalid_artifact(self) -> None:
        rule = make_rule({"valid": ["a", None]})

        with pytest.raises(InvalidArtifactError, match='rule "foo"'):
            Harness(RecordingTester(), options([], [])).run([SourceArtifact("rules/foo.py", rule)])

    def test_runs_are_independent(self) -> None:
        harness = Harness(RecordingTester(), options([], []))
        artifacts = [SourceArtifact("foo.py", make_rule({"valid": ["a"]}))]

        assert harness.run(artifacts) == 0
        assert harness.run(artifacts) == 0

    def test_bail_stops_run(self) -> None:
        tester = RecordingTester({"bad": AssertionError("mismatch")})
        log: list[str] = []
        err: list[str] = []
        artifacts = [
            SourceArtifact("a.py", make_rule({"valid": ["bad", "good"]})),
            SourceArtifact("b.py", make_rule({"valid": ["good"]})),
        ]

        status = Harness(tester, options(log, err, bail=True)).run(artifacts)

        assert status == 1
        assert len(tester.calls) == 1
        assert err[0] == "🔴 a (1/2)"
        assert log == []
