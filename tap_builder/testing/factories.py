"""Test factories for generating test data."""

from polyfactory.factories.pydantic_factory import ModelFactory

from tap_builder.models.result import TestResult
from tap_builder.models.suite import Suite


class TestResultFactory(ModelFactory[TestResult]):
    """Factory for TestResult."""

    __test__ = False


class SuiteFactory(ModelFactory[Suite]):
    """Factory for Suite."""
