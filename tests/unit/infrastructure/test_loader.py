"""Tests for infrastructure/loader.py."""

import sys
from pathlib import Path

import pytest

from lintspec.application.normalizer import source_stem
from lintspec.domain.exceptions import ArtifactLoadError, NoInputError
from lintspec.domain.model.run_options import RunOptions
from lintspec.infrastructure.loader import load_artifact, load_artifacts, split_target
from lintspec.presentation.api import run_tests

RULE_SOURCE = """\
def create(context):
    return {}

tests = {"valid": ["x = 1"]}
"""

CONFIG_SOURCE = """\
configs = [{"rules": {}}]
"""


def write(tmp_path: Path, name: str, source: str) -> Path:
    """Write source to tmp_path/name and return the path."""
    path = tmp_path / name
    path.write_text(source, encoding="utf-8")
    return path


class TestSplitTarget:
    """Tests for split_target()."""

    def test_plain_path(self) -> None:
        assert split_target("rules/no_print.py") == ("rules/no_print.py", "")

    def test_attribute(self) -> None:
        assert split_target("rules/configs.py:configs") == ("rules/configs.py", "configs")

    def test_module_attribute(self) -> None:
        assert split_target("my_plugin.rules:plugin") == ("my_plugin.rules", "plugin")

    def test_windows_drive_is_not_attribute(self) -> None:
        assert split_target("C:\\rules\\x.py") == ("C:\\rules\\x.py", "")


class TestLoadArtifact:
    """Tests for load_artifact()."""

    def test_file_module(self, tmp_path: Path) -> None:
        path = write(tmp_path, "no_print.py", RULE_SOURCE)

        artifact = load_artifact(str(path))

        assert artifact.source == str(path.resolve())
        assert callable(artifact.value.create)  # type: ignore[attr-defined]
        assert artifact.value.tests == {"valid": ["x = 1"]}  # type: ignore[attr-defined]

    def test_file_attribute(self, tmp_path: Path) -> None:
        path = write(tmp_path, "configs.py", CONFIG_SOURCE)
        artifact = load_artifact(f"{path}:configs")
        assert artifact.value == [{"rules": {}}]
        assert Path(artifact.source).stem == "configs"

    def test_installed_module(self) -> None:
        artifact = load_artifact("json.decoder")
        assert Path(artifact.source).name == "decoder.py"

    def test_package_source_is_directory(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        package = tmp_path / "lintspec_pkg_no_print"
        package.mkdir()
        write(package, "__init__.py", RULE_SOURCE)
        monkeypatch.syspath_prepend(str(tmp_path))
        monkeypatch.delitem(sys.modules, "lintspec_pkg_no_print", raising=False)

        artifact = load_artifact("lintspec_pkg_no_print")

        assert Path(artifact.source) == package
        assert source_stem(artifact.source) == "lintspec_pkg_no_print"

    def test_package_rule_reported_by_package_name(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        package = tmp_path / "lintspec_pkg_reported"
        package.mkdir()
        write(package, "__init__.py", RULE_SOURCE)
        monkeypatch.syspath_prepend(str(tmp_path))
        monkeypatch.delitem(sys.modules, "lintspec_pkg_reported", raising=False)
        lines: list[str] = []

        status = run_tests(load_artifacts(["lintspec_pkg_reported"]), RunOptions(log=lines.append))

        assert status == 0
        assert lines[0] == "🟢 lintspec_pkg_reported (1)"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ArtifactLoadError, match="file not found"):
            load_artifact(str(tmp_path / "missing.py"))

    def test_missing_module(self) -> None:
        with pytest.raises(ArtifactLoadError, match="cannot import module"):
            load_artifact("lintspec_no_such_module_xyz")

    def test_missing_attribute(self, tmp_path: Path) -> None:
        path = write(tmp_path, "rule.py", RULE_SOURCE)
        with pytest.raises(ArtifactLoadError, match="no attribute 'plugin'"):
            load_artifact(f"{path}:plugin")

    def test_module_raising_on_import(self, tmp_path: Path) -> None:
        path = write(tmp_path, "broken.py", "raise RuntimeError('nope')\n")
        with pytest.raises(ArtifactLoadError, match="RuntimeError: nope"):
            load_artifact(str(path))


class TestLoadArtifacts:
    """Tests for load_artifacts()."""

    def test_empty_raises(self) -> None:
        with pytest.raises(NoInputError):
            load_artifacts([])

    def test_keeps_order(self, tmp_path: Path) -> None:
        first = write(tmp_path, "b_rule.py", RULE_SOURCE)
        second = write(tmp_path, "a_rule.py", RULE_SOURCE)

        artifacts = load_artifacts([str(first), str(second)])

        assert [Path(artifact.source).stem for artifact in artifacts] == ["b_rule", "a_rule"]
