"""Run statistics accumulated during one invocation."""

from dataclasses import dataclass

# Returned when no rule declared any test case.
NOTHING_RAN = -1


@dataclass(slots=True)
class RunStats:
    """Mutable pass/fail/skip counters for a single run.

    Attributes:
        passed: Executed cases the engine accepted
        failed: Executed cases the engine rejected
        skipped: Declared cases left out by exclusive mode
    """

    passed: int = 0
    failed: int = 0
    skipped: int = 0

    @property
    def empty(self) -> bool:
        """True if nothing was counted at all."""
        return self.passed == 0 and self.failed == 0 and self.skipped == 0

    def status_code(self) -> int:
        """Scriptable run status.

        Returns:
            NOTHING_RAN if every counter is zero, else failed + skipped
        """
        if self.empty:
            return NOTHING_RAN
        return self.failed + self.skipped
