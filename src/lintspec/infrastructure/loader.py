"""Rule loader: import targets into SourceArtifact pairs.

A target is a file path or a dotted module name, optionally followed by
":attribute" to pick one object from the module:

    rules/no_print.py               module itself (bare rule or plugin)
    rules/configs.py:configs        a config list defined in the module
    my_plugin                       installed module
"""

from __future__ import annotations

import importlib
import importlib.util
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from lintspec.domain.exceptions import ArtifactLoadError, NoInputError
from lintspec.domain.model.artifact import SourceArtifact

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import ModuleType

logger = logging.getLogger(__name__)

# Modules imported from file paths are registered under this prefix.
FILE_MODULE_PREFIX = "_lintspec_target_"


def split_target(target: str) -> tuple[str, str]:
    """Split "location:attribute". Attribute is "" when absent.

    Only a trailing identifier counts as attribute, so Windows drive
    letters ("C:\\rules\\x.py") stay part of the location.
    """
    location, sep, attribute = target.rpartition(":")
    if not sep or not location or not attribute.isidentifier():
        return target, ""
    return location, attribute


def load_artifacts(targets: Sequence[str]) -> list[SourceArtifact]:
    """Load every target in order.

    Raises:
        NoInputError: If targets is empty
        ArtifactLoadError: If a target cannot be imported
    """
    if not targets:
        raise NoInputError()
    return [load_artifact(target) for target in targets]


def load_artifact(target: str) -> SourceArtifact:
    """Import one target.

    Args:
        target: File path or module name, optionally ":attribute"

    Returns:
        SourceArtifact whose source is the module file when known,
        the package directory for packages

    Raises:
        ArtifactLoadError: If the file, module or attribute is missing
    """
    location, attribute = split_target(target)

    path = Path(location)
    if path.suffix == ".py" or path.is_file():
        module = _import_file(target, path)
    else:
        try:
            module = importlib.import_module(location)
        except ImportError as e:
            raise ArtifactLoadError(target, f"cannot import module {location!r}: {e}") from e

    value: object = module
    if attribute:
        try:
            value = getattr(module, attribute)
        except AttributeError as e:
            raise ArtifactLoadError(target, f"module has no attribute {attribute!r}") from e

    source = _module_source(module, location)
    logger.debug("Loaded %s from %s", target, source)
    return SourceArtifact(source=source, value=value)


def _module_source(module: ModuleType, location: str) -> str:
    """Module file, or the package directory for a package's __init__.py."""
    filename = getattr(module, "__file__", None)
    if not filename:
        return location
    path = Path(filename)
    if path.name == "__init__.py":
        return str(path.parent)
    return filename


def _import_file(target: str, path: Path) -> ModuleType:
    """Import a Python file as a fresh module."""
    resolved = path.resolve()
    if not resolved.is_file():
        raise ArtifactLoadError(target, "file not found")

    name = FILE_MODULE_PREFIX + resolved.stem
    spec = importlib.util.spec_from_file_location(name, resolved)
    if spec is None or spec.loader is None:
        raise ArtifactLoadError(target, "not an importable Python file")

    module = importlib.util.module_from_spec(spec)
    sys.modules[name] = module
    try:
        spec.loader.exec_module(module)
    except Exception as e:
        del sys.modules[name]
        raise ArtifactLoadError(target, f"{type(e).__name__}: {e}") from e

    return module
