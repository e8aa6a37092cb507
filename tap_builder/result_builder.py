"""Fluent builder for TestResult values."""

import logging
from collections.abc import Iterable
from typing import Self

from tap_builder.models.result import TestResult

log = logging.getLogger(__name__)


class TestBuilder:
    """Accumulates the fields of a single test outcome.

    Example:
        result = TestBuilder().name("Example TAP test").passed(True).finalize()

    """

    __test__ = False

    def __init__(self) -> None:
        self._name = ""
        self._passed = False
        self._diagnostics: list[str] = []

    def name(self, name: str) -> Self:
        """Set the test name."""
        self._name = name
        return self

    def passed(self, passed: bool) -> Self:
        """Set the pass/fail flag."""
        self._passed = passed
        return self

    def diagnostics(self, diagnostics: Iterable[str]) -> Self:
        """Replace the diagnostic messages with a copy of ``diagnostics``."""
        self._diagnostics = list(diagnostics)
        return self

    def finalize(self) -> TestResult:
        """Produce the configured TestResult.

        The builder is left untouched and can be finalized again.
        """
        log.debug(
            "Finalizing test %r (passed=%s, %d diagnostic(s))",
            self._name,
            self._passed,
            len(self._diagnostics),
        )
        return TestResult(
            name=self._name,
            passed=self._passed,
            diagnostics=tuple(self._diagnostics),
        )
