"""Command line: lintspec TARGET... [--bail] [--silent] [--no-color]."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TYPE_CHECKING

from rich.console import Console

from lintspec import __version__
from lintspec.domain.exceptions import ArtifactLoadError, InvalidArtifactError, NoInputError
from lintspec.domain.model.run_options import RunOptions, discard
from lintspec.infrastructure.loader import load_artifacts
from lintspec.presentation.api import run_tests

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Argument parser for the lintspec command."""
    parser = argparse.ArgumentParser(
        prog="lintspec",
        description="Run the test cases declared on lint rules and plugins.",
    )
    parser.add_argument(
        "targets",
        nargs="*",
        metavar="TARGET",
        help="rule or plugin file, or module name, optionally suffixed with :attribute",
    )
    parser.add_argument("--bail", action="store_true", help="stop at the first failing test case")
    parser.add_argument("--silent", action="store_true", help="print failures only")
    parser.add_argument("--no-color", action="store_true", help="disable colored output")
    parser.add_argument("-v", "--verbose", action="store_true", help="log pipeline decisions to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command.

    Returns:
        Status code of the run. -1 means no test case was declared.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    options = RunOptions(
        bail=args.bail,
        log=discard if args.silent else print,
        err=print,
        color=not args.no_color and Console().is_terminal,
    )

    try:
        artifacts = load_artifacts(args.targets)
        status = run_tests(artifacts, options)
    except NoInputError as e:
        parser.error(str(e))
    except (ArtifactLoadError, InvalidArtifactError) as e:
        logger.debug("Aborting run", exc_info=e)
        parser.exit(2, f"{parser.prog}: error: {e}\n")

    logger.debug("Run finished with status %d", status)
    return status
