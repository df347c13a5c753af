"""a11y_runner

Runs pa11y accessibility audits over a configured list of URLs and reports
color-contrast violations as HTML and CSV.

Primary entrypoints:
 - cli.py (Typer CLI)
 - runner.py (run orchestration)
 - node_bridge.py (pa11y invocation through Node)
 - report.py (HTML + CSV report rendering)
"""

__all__ = [
    "config",
    "issues",
    "node_bridge",
    "report",
    "runner",
]
