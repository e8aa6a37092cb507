"""Model for a TAP test suite."""

from pydantic import Field

from tap_builder.models.base import Model
from tap_builder.models.result import TestResult


class Suite(Model):
    """Named, ordered collection of test results.

    Test names are neither validated nor deduplicated.
    """

    name: str = Field(default="", description="Suite name")
    tests: tuple[TestResult, ...] = Field(
        default=(), description="Test results in insertion order"
    )

    @property
    def passed_count(self) -> int:
        """Number of passing tests."""
        return sum(1 for test in self.tests if test.passed)

    @property
    def failed_count(self) -> int:
        """Number of failing tests."""
        return len(self.tests) - self.passed_count

    @property
    def all_passed(self) -> bool:
        """True when no test failed (an empty suite counts as passing)."""
        return all(test.passed for test in self.tests)
