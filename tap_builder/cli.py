"""CLI entry point for building TAP suites from definition files."""

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from tap_builder.config import ReportConfig
from tap_builder.definition_loader import SuiteDefinitionError, load_suite_definition
from tap_builder.models.suite import Suite

STATUS_SYMBOLS = {
    True: "✓",
    False: "✗",
}


def log_results_summary(log: logging.Logger, suites: Sequence[Suite]) -> None:
    """Log a formatted summary of every suite and its tests."""
    log.info("=" * 80)
    log.info("Suite Results Summary:")
    log.info("=" * 80)

    for suite in suites:
        log.info(
            "%s (%d passed, %d failed)",
            suite.name,
            suite.passed_count,
            suite.failed_count,
        )
        for test in suite.tests:
            log.info("  %s %s", STATUS_SYMBOLS[test.passed], test.name)
            for diagnostic in test.diagnostics:
                log.info("    # %s", diagnostic)


def build_suites(paths: Sequence[Path]) -> Sequence[Suite]:
    """Load every definition file and build its suite, preserving order."""
    return [load_suite_definition(path).to_suite() for path in paths]


def format_output(
    suites: Sequence[Suite], include_diagnostics: bool = True
) -> dict[str, Any]:
    """Format suites for JSON output."""
    formatted: list[dict[str, Any]] = []
    for suite in suites:
        tests: list[dict[str, Any]] = []
        for test in suite.tests:
            entry: dict[str, Any] = {"name": test.name, "passed": test.passed}
            if include_diagnostics:
                entry["diagnostics"] = list(test.diagnostics)
            tests.append(entry)
        formatted.append(
            {
                "name": suite.name,
                "passed": suite.passed_count,
                "failed": suite.failed_count,
                "tests": tests,
            }
        )

    return {
        "total": sum(len(suite.tests) for suite in suites),
        "passed": sum(suite.passed_count for suite in suites),
        "failed": sum(suite.failed_count for suite in suites),
        "suites": formatted,
    }


def run(suite_paths: Sequence[Path], config: ReportConfig) -> int:
    """Build suites from definition files and return exit code."""
    log = logging.getLogger("tap_builder")

    log.info("Loading %d suite definition(s)...", len(suite_paths))
    try:
        suites = build_suites(suite_paths)
    except FileNotFoundError as e:
        log.error("Suite definition not found: %s", e.filename)
        return 2
    except OSError as e:
        log.error("Cannot read suite definition %s: %s", e.filename, e.strerror)
        return 2
    except SuiteDefinitionError as e:
        log.error("%s", e)
        return 2

    log_results_summary(log, suites)

    output = format_output(suites, include_diagnostics=config.include_diagnostics)
    print(json.dumps(output, indent=config.indent))

    return 0 if all(suite.all_passed for suite in suites) else 1


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Build TAP suites from YAML definition files"
    )
    parser.add_argument(
        "suite_files",
        type=Path,
        nargs="+",
        help="Paths to suite definition files (YAML)",
    )
    parser.add_argument(
        "--config",
        default="{}",
        help="JSON configuration for the report",
    )

    args = parser.parse_args()

    try:
        config = ReportConfig.model_validate_json(args.config)
    except ValidationError as e:
        parser.error(f"invalid --config: {e}")

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    sys.exit(run(suite_paths=args.suite_files, config=config))


if __name__ == "__main__":  # pragma: no cover
    main()
