"""Model for a single TAP test result."""

from pydantic import Field

from tap_builder.models.base import Model


class TestResult(Model):
    """Outcome of a single test: name, pass/fail flag and diagnostics.

    Diagnostics are stored as a tuple, so a result never shares a mutable
    container with the sequence it was constructed from.
    """

    __test__ = False

    name: str = Field(default="", description="Test name")
    passed: bool = Field(default=False, description="Whether the test passed")
    diagnostics: tuple[str, ...] = Field(
        default=(), description="Diagnostic messages in insertion order"
    )
