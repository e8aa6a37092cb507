"""Fluent builder for Suite values."""

import logging
from collections.abc import Iterable
from typing import Self

from tap_builder.models.result import TestResult
from tap_builder.models.suite import Suite

log = logging.getLogger(__name__)


def copy_test_result(result: TestResult) -> TestResult:
    """Return a new TestResult with every field copied from ``result``."""
    return TestResult(
        name=result.name,
        passed=result.passed,
        diagnostics=tuple(diagnostic for diagnostic in result.diagnostics),
    )


class SuiteBuilder:
    """Accumulates a suite name and its ordered test results.

    Example:
        tests = [TestBuilder().name("Example TAP test").passed(True).finalize()]
        suite = SuiteBuilder().name("Example TAP test suite").tests(tests).finalize()

    The finalized suite holds its own copies of the tests, so neither the
    builder nor the caller's collection is referenced by it.
    """

    def __init__(self) -> None:
        self._name = ""
        self._tests: list[TestResult] = []

    def name(self, name: str) -> Self:
        """Set the suite name."""
        self._name = name
        return self

    def tests(self, tests: Iterable[TestResult]) -> Self:
        """Replace the held tests with copies of ``tests``, keeping their order."""
        self._tests = [copy_test_result(test) for test in tests]
        return self

    def finalize(self) -> Suite:
        """Produce the configured Suite.

        Every held test is copied again, so each call returns a suite that
        shares nothing with the builder or with earlier results.
        """
        log.debug("Finalizing suite %r with %d test(s)", self._name, len(self._tests))
        return Suite(
            name=self._name,
            tests=tuple(copy_test_result(test) for test in self._tests),
        )
