"""Load suite definitions from YAML files."""

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from tap_builder.models.definition import SuiteDefinition

log = logging.getLogger(__name__)


class SuiteDefinitionError(Exception):
    """Raised when a suite definition file cannot be parsed or validated."""


def load_suite_definition(path: Path) -> SuiteDefinition:
    """Load and validate a suite definition.

    Args:
        path: Path to the YAML file

    Returns:
        The validated suite definition

    Raises:
        OSError: If the file cannot be read (missing, a directory, no access)
        SuiteDefinitionError: If the file is not valid YAML or does not
            describe a suite, or is not UTF-8 text

    """
    log.debug("Loading suite definition from %s", path)
    try:
        content = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise SuiteDefinitionError(f"{path} is not valid UTF-8: {e}") from e

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise SuiteDefinitionError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return SuiteDefinition()

    if not isinstance(data, dict):
        raise SuiteDefinitionError(
            f"Expected a mapping at the top level of {path}, "
            f"got {type(data).__name__}"
        )

    try:
        return SuiteDefinition.model_validate(data)
    except ValidationError as e:
        raise SuiteDefinitionError(f"Invalid suite definition in {path}: {e}") from e
