"""Domain exceptions: all public errors of lintspec.

Only InvalidArtifactError escapes the test pipeline. Failures raised by a
rule under test are absorbed into the report, never re-raised.
"""


class LintSpecError(Exception):
    """Base for all lintspec error exceptions.

    Allows: except LintSpecError to catch all library errors.
    """


class InvalidArtifactError(LintSpecError, TypeError):
    """Loaded artifact is neither a rule, a plugin, nor a config list.

    Inherits TypeError for semantic correctness (unexpected value shape).

    Attributes:
        source: Path or target the artifact was loaded from.
    """

    def __init__(self, source: str) -> None:
        """Initialize with the offending source."""
        self.source = source
        super().__init__(f'Expected file "{source}" to be a lint plugin or rule.')


class InvalidCaseError(InvalidArtifactError):
    """Rule declares a test case that is neither code nor a case mapping.

    Attributes:
        source: Name of the rule declaring the case.
        reason: Error description.
    """

    def __init__(self, rule: str, reason: str) -> None:
        """Initialize with rule name and reason."""
        self.source = rule
        self.reason = reason
        LintSpecError.__init__(self, f'Expected rule "{rule}" to declare valid test cases: {reason}')


class NoInputError(LintSpecError, ValueError):
    """No plugin or rule targets were given."""

    def __init__(self) -> None:
        """Initialize with fixed message."""
        super().__init__("Expected one or more file arguments of lint plugins or rules.")


class ArtifactLoadError(LintSpecError, ImportError):
    """Target could not be imported.

    Attributes:
        target: Target as given by the caller.
        reason: Error description.
    """

    def __init__(self, target: str, reason: str) -> None:
        """Initialize with target and reason."""
        self.target = target
        self.reason = reason
        super().__init__(f"{target}: {reason}")
