"""HTML and CSV reporting for audit runs."""
from __future__ import annotations

import shutil
from pathlib import Path
from typing import List, Sequence

import orjson
import typer
from jinja2 import Template

from .schema import AuditReport, FilteredResult, ReportEntry

_ASSETS_DIR = Path(__file__).resolve().parent / "assets"
REPORT_SCRIPT = "index.js"
HTML_FILE = "report.html"
CSV_FILE = "simplifiedList.csv"
RESULTS_FILE = "results.json"
CSV_HEADER = "Name,Selector,Context"

TEMPLATE = """<!DOCTYPE html>
<html lang=\"en\">
<head>
<meta charset=\"UTF-8\" />
<title>Color Contrast Accessibility Report</title>
<style>
body { font-family: system-ui, sans-serif; line-height:1.4; }
table { border-collapse: collapse; width: 100%; }
th, td { border:1px solid #ccc; padding:4px 6px; vertical-align: top; text-align:left; }
th { background:#f2f2f2; }
code { font-size: 0.85rem; white-space: pre-wrap; word-break: break-all; }
header, main, footer { max-width: 1200px; margin: 0 auto; }
header:focus-within a.skip-link { top: 0; }
a.skip-link { position:absolute; left:0; top:-40px; background:#000; color:#fff; padding:8px; }
details { border: 1px solid #ccc; border-radius: 4px; padding: 0.5rem; margin-bottom: 1rem; }
details summary { cursor: pointer; }
.filter { margin: 1rem 0; }
</style>
</head>
<body>
<a href=\"#main\" class=\"skip-link\">Skip to main content</a>
<header>
<h1>Color Contrast Accessibility Report</h1>
<p>Total color contrast violations: {{ total }}</p>
</header>
<main id=\"main\">
<section aria-labelledby=\"summary-h2\">
<h2 id=\"summary-h2\">Summary</h2>
{% if groups %}
<table>
<thead><tr><th>Test</th><th>Violations</th></tr></thead>
<tbody>
{% for group in groups %}
<tr><th>{{ group.name|e }}</th><td>{{ group.entries|length }}</td></tr>
{% endfor %}
</tbody>
</table>
{% else %}
<p>No color contrast violations found.</p>
{% endif %}
</section>
{% if groups %}
<section aria-labelledby=\"details-h2\">
<h2 id=\"details-h2\">Detailed Results</h2>
<div class=\"filter\">
<label for=\"a11y-filter\">Filter by selector or markup</label>
<input type=\"search\" id=\"a11y-filter\" />
</div>
{% for group in groups %}
<details open>
  <summary><h3 style=\"display:inline-block\">{{ group.name|e }} ({{ group.entries|length }})</h3></summary>
  <table class=\"a11y-issues\">
    <thead><tr><th>Selector</th><th>Context</th></tr></thead>
    <tbody>
    {% for entry in group.entries %}
    <tr><td><code>{{ entry.selector|e }}</code></td><td><code>{{ entry.context|e }}</code></td></tr>
    {% endfor %}
    </tbody>
  </table>
</details>
{% endfor %}
</section>
{% endif %}
</main>
<script src=\"{{ script }}\"></script>
</body>
</html>
"""


def render_html(results: Sequence[FilteredResult]) -> str:
    # One section per test, in configured order, even when names repeat.
    groups = [
        {"name": r.name, "entries": r.simplified_list}
        for r in results
        if r.simplified_list
    ]
    total = sum(len(g["entries"]) for g in groups)
    return Template(TEMPLATE).render(total=total, groups=groups, script=REPORT_SCRIPT)


def write_html_report(results: Sequence[FilteredResult], report_dir: str) -> Path:
    out_html = Path(report_dir) / HTML_FILE
    out_html.write_text(render_html(results), encoding="utf-8")
    return out_html


def format_csv(entries: Sequence[ReportEntry]) -> str:
    # Values are written verbatim; embedded quotes and commas are not escaped.
    rows = "\n".join(f'"{e.name}","{e.selector}","{e.context}"' for e in entries)
    return f"{CSV_HEADER}\n{rows}"


def write_csv(entries: Sequence[ReportEntry], report_dir: str, file_name: str = CSV_FILE) -> Path:
    file_path = Path(report_dir) / file_name
    file_path.write_text(format_csv(entries), encoding="utf-8")
    typer.echo(f"SimplifiedList written to {file_path}")
    return file_path


def copy_assets(report_dir: str) -> Path:
    """Copy the report's client-side script next to report.html."""
    target = Path(report_dir) / REPORT_SCRIPT
    shutil.copyfile(_ASSETS_DIR / REPORT_SCRIPT, target)
    return target


def write_results_json(reports: List[AuditReport], report_dir: str) -> Path:
    out = Path(report_dir) / RESULTS_FILE
    payload = [r.model_dump(by_alias=True) for r in reports]
    out.write_bytes(orjson.dumps(payload, option=orjson.OPT_INDENT_2))
    return out
