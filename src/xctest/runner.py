from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import yaml

from xctest.config import RunConfig
from xctest.loader import build_suite
from xctest.reporting.junit import write_junit
from xctest.testing import XCTestSuiteRun
from xctest.verbose import release_logger, setup_logger


class Runner:
    """Builds the configured suite tree, runs it and writes the results."""

    def __init__(
        self,
        config: RunConfig,
        output_dir: Path | None = None,
        verbose: bool = False,
    ):
        self.config = config
        self.output_dir = output_dir or Path(config.output_dir)
        self.verbose = verbose
        self.result: XCTestSuiteRun | None = None

    def execute(self) -> Path:
        """Run the root suite. Returns the run directory."""
        run_id = datetime.now(timezone.utc).strftime("%Y-%m-%d_%H%M%S")
        run_dir = self.output_dir / run_id
        run_dir.mkdir(parents=True, exist_ok=True)

        # Package-level logger: every xctest module logger propagates into it
        logger = setup_logger(
            run_dir / "debug.log", verbose=self.verbose, logger_name="xctest"
        )
        try:
            logger.debug("Starting test run")
            suite = build_suite(self.config)
            print(f"Running {suite.test_case_count} test case(s) in '{suite.name}'...")

            root_run = suite.run()
            self.result = root_run

            logger.debug(
                f"Run finished: {root_run.execution_count} executed, "
                f"{root_run.total_failure_count} failure(s)"
            )
            self._write_results(run_dir, root_run)
        finally:
            release_logger(logger)

        return run_dir

    def _write_results(self, run_dir: Path, root_run: XCTestSuiteRun) -> None:
        """Write junit.xml and meta.yaml to the run directory."""
        write_junit(run_dir, root_run)

        try:
            import importlib.metadata

            xctest_version = importlib.metadata.version("xctest")
        except Exception:
            xctest_version = "unknown"

        meta: dict[str, Any] = {
            "run_id": run_dir.name,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "suite": root_run.test.name,
            "test_case_count": root_run.test_case_count,
            "execution_count": root_run.execution_count,
            "failure_count": root_run.failure_count,
            "unexpected_exception_count": root_run.unexpected_exception_count,
            "duration_seconds": round(root_run.total_duration, 4),
            "xctest_version": xctest_version,
        }

        (run_dir / "meta.yaml").write_text(yaml.dump(meta, default_flow_style=False))
