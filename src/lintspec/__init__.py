"""lintspec - test harness for declarative lint rule test suites."""

__version__ = "0.1.0"

from lintspec.application.selection import only
from lintspec.domain.exceptions import InvalidArtifactError, LintSpecError
from lintspec.domain.model.artifact import SourceArtifact
from lintspec.domain.model.run_options import RunOptions
from lintspec.presentation.api import run_tests

__all__ = [
    "InvalidArtifactError",
    "LintSpecError",
    "RunOptions",
    "SourceArtifact",
    "__version__",
    "only",
    "run_tests",
]
