"""HTML bar-chart reports of leading-digit frequencies."""

from pathlib import Path
from typing import NamedTuple, Union

from jinja2 import Environment, select_autoescape

from shared.logger import get_logger

from .digits import DIGITS, DigitFrequencyTable

logger = get_logger(__name__)

CHART_JS_URL = "https://cdn.jsdelivr.net/npm/chart.js"
PROJECT_URL = "https://github.com/maximal/github-benford"

REPORT_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="utf-8">
    <title>{{ title }}</title>
    <script src="{{ chart_js_url }}"></script>
</head>
<body>
<h1>{{ title }}</h1>
<div><canvas id="digit-chart"></canvas></div>

<script>
    const ctx = document.getElementById('digit-chart');
    new Chart(ctx, {
        type: 'bar',
        data: {
            labels: {{ labels|tojson }},
            datasets: [{
                label: {{ title|tojson }},
                data: {{ counts|tojson }},
                borderWidth: 1
            }]
        },
        options: {
            scales: {
                y: {
                    beginAtZero: true
                }
            }
        }
    });
</script>

<footer>
    <p>
        GitHub Benford law checking
        &middot;
        &copy; MaximAL, Sijeko 2023
        &middot;
        <a href="{{ project_url }}">GitHub repository</a>
    </p>
</footer>
</body>
</html>
"""

_env = Environment(autoescape=select_autoescape(default_for_string=True, default=True))
_template = _env.from_string(REPORT_TEMPLATE)


class ReportRequest(NamedTuple):
    """One report to render."""

    table: DigitFrequencyTable
    destination: Union[str, Path]
    title: str


def build_digit_report(table: DigitFrequencyTable, title: str) -> str:
    """
    Render the HTML document for a digit-frequency table.

    Args:
        table: Mapping of digit -> count
        title: Chart and page title

    Returns:
        Complete HTML document
    """
    labels = [str(digit) for digit in DIGITS]
    counts = [table.get(digit, 0) for digit in DIGITS]

    return _template.render(
        title=title,
        labels=labels,
        counts=counts,
        chart_js_url=CHART_JS_URL,
        project_url=PROJECT_URL,
    )


def render_digit_report(table: DigitFrequencyTable, destination: Union[str, Path], title: str) -> None:
    """
    Write a bar-chart report to ``destination``, replacing any existing file.

    Args:
        table: Mapping of digit -> count
        destination: Output file path
        title: Chart and page title
    """
    html = build_digit_report(table, title)
    Path(destination).write_text(html, encoding="utf-8")
    logger.debug(f"Wrote {destination}")


def render_report(request: ReportRequest) -> None:
    """Render a queued report request."""
    render_digit_report(request.table, request.destination, request.title)
