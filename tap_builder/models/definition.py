"""Models for suite definitions loaded from YAML files."""

from collections.abc import Sequence

from pydantic import Field

from tap_builder.models.base import Model
from tap_builder.models.result import TestResult
from tap_builder.models.suite import Suite
from tap_builder.result_builder import TestBuilder
from tap_builder.suite_builder import SuiteBuilder


class TestDefinition(Model):
    """Declared outcome of a single test."""

    __test__ = False

    name: str = Field(default="", description="Test name")
    passed: bool = Field(default=False, description="Whether the test passed")
    diagnostics: Sequence[str] = Field(
        default_factory=list, description="Diagnostic messages"
    )

    def to_result(self) -> TestResult:
        """Build the TestResult described by this definition."""
        return (
            TestBuilder()
            .name(self.name)
            .passed(self.passed)
            .diagnostics(self.diagnostics)
            .finalize()
        )


class SuiteDefinition(Model):
    """Complete suite definition loaded from a YAML file."""

    name: str = Field(default="", description="Suite name")
    tests: Sequence[TestDefinition] = Field(
        default_factory=list, description="List of tests"
    )

    def to_suite(self) -> Suite:
        """Build the Suite described by this definition, tests in declared order."""
        return (
            SuiteBuilder()
            .name(self.name)
            .tests(test.to_result() for test in self.tests)
            .finalize()
        )
