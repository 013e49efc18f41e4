"""Entry point for python -m lintspec."""

from lintspec.presentation.cli import main

raise SystemExit(main())
