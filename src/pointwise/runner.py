from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import yaml

from pointwise.assertions.base import AssertionResult
from pointwise.assertions.checks import evaluate_check
from pointwise.config import CheckConfig, SuiteConfig
from pointwise.metrics import summarize
from pointwise.verbose import setup_logger


class Runner:
    """Evaluates a suite of configured checks and writes run artifacts."""

    def __init__(
        self,
        config: SuiteConfig,
        output_dir: Path,
        check_filter: str | None = None,
        verbose: bool = False,
    ):
        self.config = config
        self.output_dir = output_dir
        self.check_filter = check_filter
        self.verbose = verbose
        self.results: list[AssertionResult] = []

    def selected_checks(self) -> list[CheckConfig]:
        """Return the checks named by ``check_filter`` (all checks if unset)."""
        checks = self.config.checks
        if not self.check_filter:
            return list(checks)

        wanted = [name.strip() for name in self.check_filter.split(",") if name.strip()]
        known = {c.name for c in checks}
        unknown = [name for name in wanted if name not in known]
        if unknown:
            raise ValueError(f"Unknown check(s): {', '.join(unknown)}")
        return [c for c in checks if c.name in wanted]

    def execute(self) -> Path:
        """Run all selected checks. Returns the run directory."""
        checks = self.selected_checks()

        run_id = datetime.now(timezone.utc).strftime("%Y-%m-%d_%H%M%S_%f")
        run_dir = self.output_dir / run_id
        run_dir.mkdir(parents=True, exist_ok=True)

        # note: logger name must be unique per run to avoid handler collision
        logger = setup_logger(
            run_dir / "debug.log",
            verbose=self.verbose,
            logger_name=f"pointwise_run_{run_id}",
        )
        logger.debug(f"Starting run {run_id} with {len(checks)} check(s)")

        self.results = [evaluate_check(check, logger=logger) for check in checks]

        summary = summarize(self.results)
        logger.info(
            f"Run complete: {summary['pass_count']} passed, "
            f"{summary['fail_count']} failed, weighted score {summary['weighted_score']}"
        )

        self._write_results(run_dir, checks, summary)
        return run_dir

    def _write_results(
        self, run_dir: Path, checks: list[CheckConfig], summary: dict[str, Any]
    ) -> None:
        """Write junit.xml and meta.yaml to the run directory."""
        from pointwise.reporting.junit import write_junit

        write_junit(run_dir, self.results)

        try:
            import importlib.metadata

            pointwise_version = importlib.metadata.version("pointwise")
        except Exception:
            pointwise_version = "unknown"

        meta: dict[str, Any] = {
            "run_id": run_dir.name,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "checks": [c.name for c in checks],
            "pointwise_version": pointwise_version,
            **summary,
        }
        (run_dir / "meta.yaml").write_text(yaml.dump(meta, default_flow_style=False))
