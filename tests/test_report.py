from a11y_runner import report
from a11y_runner.schema import AuditReport, FilteredResult, Issue, ReportEntry, SimplifiedIssue


def _result(name, *pairs):
    return FilteredResult(
        name=name,
        simplified_list=[SimplifiedIssue(selector=s, context=c) for s, c in pairs],
        error_count=len(pairs),
    )


def test_csv_exact_output(tmp_path):
    entries = [ReportEntry(name="Home", selector="#logo", context="<img>")]
    path = report.write_csv(entries, str(tmp_path))
    assert path == tmp_path / "simplifiedList.csv"
    assert path.read_text(encoding="utf-8") == 'Name,Selector,Context\n"Home","#logo","<img>"'


def test_csv_header_only_when_empty(tmp_path, capsys):
    path = report.write_csv([], str(tmp_path))
    assert path.read_text(encoding="utf-8").splitlines() == ["Name,Selector,Context"]
    assert f"SimplifiedList written to {path}" in capsys.readouterr().out


def test_csv_values_are_not_escaped():
    entries = [ReportEntry(name="Home", selector="a, b", context='<a href="x">')]
    assert report.format_csv(entries).splitlines()[1] == '"Home","a, b","<a href="x">"'


def test_html_report_escapes_markup_and_references_script(tmp_path):
    results = [
        _result("Home", ("#logo", "<img src=\"logo.png\">"), ("#nav", "<nav>")),
        _result("Search"),
        _result("Talk", ("#t", "<p>")),
    ]
    path = report.write_html_report(results, str(tmp_path))
    html = path.read_text(encoding="utf-8")
    assert path.name == "report.html"
    assert "&lt;img src=&#34;logo.png&#34;&gt;" in html
    assert "<img src=\"logo.png\">" not in html
    assert "Home (2)" in html
    assert "Talk (1)" in html
    assert html.index("Home (2)") < html.index("Talk (1)")
    assert '<script src="index.js"></script>' in html


def test_html_report_without_entries(tmp_path):
    html = report.write_html_report([], str(tmp_path)).read_text(encoding="utf-8")
    assert "No color contrast violations found." in html


def test_copy_assets(tmp_path):
    target = report.copy_assets(str(tmp_path))
    assert target == tmp_path / "index.js"
    assert "a11y-filter" in target.read_text(encoding="utf-8")


def test_write_results_json(tmp_path):
    import orjson

    reports = [AuditReport(name="Home", pageUrl="http://x", issues=[Issue(code="color-contrast", selector="#a")])]
    data = orjson.loads(report.write_results_json(reports, str(tmp_path)).read_bytes())
    assert data[0]["name"] == "Home"
    assert data[0]["pageUrl"] == "http://x"
    assert data[0]["issues"][0]["selector"] == "#a"


def test_html_report_keeps_same_named_tests_apart():
    html = report.render_html([
        _result("Home", ("#a", "<a>")),
        _result("Home", ("#b", "<b>"), ("#c", "<c>")),
    ])
    assert html.count("Home (1)") == 1
    assert html.count("Home (2)") == 1
    assert html.index("Home (1)") < html.index("Home (2)")
    assert "Total color contrast violations: 3" in html
