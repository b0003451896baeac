from __future__ import annotations

import json
import logging
from dataclasses import asdict
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import yaml

from matchkit.checks import CheckResult, build_matcher, evaluate_check
from matchkit.config import CheckConfig, CheckFileConfig
from matchkit.reporting.junit import write_junit
from matchkit.verbose import setup_logger


def load_actual(check: CheckConfig) -> Any:
    """Return the value a check is evaluated against."""
    if check.actual_file is None:
        return check.actual
    with open(check.actual_file) as f:
        return yaml.safe_load(f)


class Runner:
    """Evaluates the checks of one check file and writes the run artifacts."""

    def __init__(
        self,
        config: CheckFileConfig,
        output_dir: Path,
        check_filter: str | None = None,
        verbose: bool = False,
        suite_name: str = "matchkit",
    ):
        self.config = config
        self.output_dir = output_dir
        self.check_filter = check_filter
        self.verbose = verbose
        self.suite_name = suite_name
        self.results: list[CheckResult] = []

    def execute(self) -> Path:
        """Run all selected checks. Returns the run directory."""
        checks = self.config.checks
        if self.check_filter:
            checks = [c for c in checks if c.name == self.check_filter]
            if not checks:
                raise ValueError(f"No check named '{self.check_filter}'")

        run_id = datetime.now(timezone.utc).strftime("%Y-%m-%d_%H%M%S")
        run_dir = self.output_dir / run_id
        run_dir.mkdir(parents=True, exist_ok=True)

        logger = setup_logger(
            run_dir / "debug.log",
            verbose=self.verbose,
            logger_name=f"matchkit_{run_id}_{id(self)}",
        )
        logger.debug(f"Starting check run with {len(checks)} check(s)")

        try:
            self.results = [self._run_check(check, logger) for check in checks]
        finally:
            for handler in list(logger.handlers):
                handler.close()
                logger.removeHandler(handler)

        self._write_results(run_dir)
        return run_dir

    @property
    def all_passed(self) -> bool:
        return all(r.passed for r in self.results)

    def _run_check(self, check: CheckConfig, logger: logging.Logger) -> CheckResult:
        matcher = build_matcher(check.matcher)
        actual = load_actual(check)
        result = evaluate_check(check.name, matcher, actual, logger)
        logger.debug(f"Check '{check.name}' finished: {result.message}")
        return result

    def _write_results(self, run_dir: Path) -> None:
        """Write results.json and junit.xml to the run directory."""
        results = [asdict(r) for r in self.results]
        (run_dir / "results.json").write_text(json.dumps(results, indent=2, default=str))
        write_junit(run_dir, self.suite_name, results)
