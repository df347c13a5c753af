"""Run coordinator: config -> audits -> filtering -> reports."""
from __future__ import annotations

import asyncio
import os
import shutil
from pathlib import Path
from typing import List, Sequence

from . import node_bridge, report
from .config import DEFAULT_CONFIG_PATH, load_config
from .errors import MissingEnvironmentError
from .issues import aggregate_results, process_test_result
from .schema import AggregateReport, AuditOptions, AuditReport, TestDescriptor

REQUIRED_ENV = "MW_SERVER"


def require_env() -> None:
    if not os.environ.get(REQUIRED_ENV):
        raise MissingEnvironmentError(
            f"Missing env variable. Please run `export {REQUIRED_ENV}=https://en.wikipedia.org`"
        )


def reset_report_dir(report_dir: str) -> Path:
    """Delete and recreate the report directory."""
    path = Path(report_dir)
    if path.exists():
        shutil.rmtree(path)
    path.mkdir(parents=True)
    return path


async def _audit_one(test: TestDescriptor, defaults: AuditOptions) -> AuditReport:
    options = defaults.merged_with(test.options)
    # Looked up on the module so tests can swap the engine out.
    data = await node_bridge.audit(test.url, options.to_engine())
    return AuditReport.model_validate({**data, "name": test.name})


async def run_audits(tests: Sequence[TestDescriptor], defaults: AuditOptions) -> List[AuditReport]:
    """Audit every test concurrently; results keep the configured order.

    The first failure fails the whole batch.
    """
    tasks = [asyncio.ensure_future(_audit_one(t, defaults)) for t in tests]
    return list(await asyncio.gather(*tasks))


async def run_tests(config_path: str = DEFAULT_CONFIG_PATH, silent: bool = False) -> AggregateReport:
    require_env()
    config = await load_config(config_path)

    reset_report_dir(config.report_dir)

    reports = await run_audits(config.tests, config.defaults)
    results = [process_test_result(r, silent=silent) for r in reports]
    aggregate = aggregate_results(results)

    report.copy_assets(config.report_dir)
    report.write_html_report(results, config.report_dir)
    report.write_csv(aggregate.entries, config.report_dir)
    report.write_results_json(reports, config.report_dir)
    return aggregate


__all__ = ["REQUIRED_ENV", "require_env", "reset_report_dir", "run_audits", "run_tests"]
