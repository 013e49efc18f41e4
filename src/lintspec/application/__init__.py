"""Application layer: the test pipeline."""

from lintspec.application.executor import DEFAULT_CONFIG, Executor, render_error
from lintspec.application.harness import Harness
from lintspec.application.normalizer import classify, normalize, plugin_short_name
from lintspec.application.reporter import Reporter, order
from lintspec.application.selection import is_exclusive, only, plan, total_cases

__all__ = [
    # Input normalizer
    "classify",
    "normalize",
    "plugin_short_name",
    # Selection filter
    "only",
    "is_exclusive",
    "plan",
    "total_cases",
    # Execution engine
    "DEFAULT_CONFIG",
    "Executor",
    "render_error",
    # Reporter
    "Reporter",
    "order",
    # Facade
    "Harness",
]
