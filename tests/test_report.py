"""Tests for HTML digit reports."""

import json

from tools.github_benford.digits import compute_leading_digit_frequencies
from tools.github_benford.report import (
    CHART_JS_URL,
    ReportRequest,
    build_digit_report,
    render_digit_report,
    render_report,
)


class TestBuildDigitReport:
    """Test build_digit_report."""

    def test_labels_and_counts(self):
        """Test that labels and counts are embedded in digit order."""
        table = compute_leading_digit_frequencies([1, 1, 1, 2, 30, 40, 500])
        html = build_digit_report(table, "Stars")

        assert json.dumps([str(d) for d in range(1, 10)]) in html
        assert "[3, 1, 1, 1, 1, 0, 0, 0, 0]" in html

    def test_chart_library_referenced(self):
        """Test that the document loads Chart.js."""
        html = build_digit_report(compute_leading_digit_frequencies([]), "Empty")
        assert f'<script src="{CHART_JS_URL}"></script>' in html
        assert "new Chart(" in html

    def test_footer_attribution(self):
        """Test that the footer credits the original authors."""
        html = build_digit_report(compute_leading_digit_frequencies([]), "Empty")
        assert "&copy; MaximAL, Sijeko 2023" in html
        assert '<a href="https://github.com/maximal/github-benford">GitHub repository</a>' in html

    def test_title_escaped(self):
        """Test that the title is escaped for HTML and script contexts."""
        title = "<b>Tom's & Jerry's</b>"
        html = build_digit_report(compute_leading_digit_frequencies([]), title)

        assert "<title>&lt;b&gt;Tom&#39;s &amp; Jerry&#39;s&lt;/b&gt;</title>" in html
        assert '"\\u003cb\\u003eTom\\u0027s \\u0026 Jerry\\u0027s\\u003c/b\\u003e"' in html
        assert "<b>Tom" not in html

    def test_plain_title(self):
        """Test a title without special characters."""
        title = "First digits of IDs over 10 repositories of Python language"
        html = build_digit_report(compute_leading_digit_frequencies([]), title)

        assert f"<title>{title}</title>" in html
        assert f"label: {json.dumps(title)}" in html


class TestRenderDigitReport:
    """Test render_digit_report."""

    def test_writes_file(self, tmp_path):
        """Test that the report is written to the destination."""
        table = compute_leading_digit_frequencies([9, 99, 999])
        destination = tmp_path / "stars.html"

        render_digit_report(table, destination, "Nines")

        html = destination.read_text(encoding="utf-8")
        assert html == build_digit_report(table, "Nines")
        assert "[0, 0, 0, 0, 0, 0, 0, 0, 3]" in html

    def test_overwrites_existing_file(self, tmp_path):
        """Test that an existing file is replaced."""
        destination = tmp_path / "ids.html"
        destination.write_text("stale content that is much longer than nothing" * 100)

        render_digit_report(compute_leading_digit_frequencies([1]), destination, "Fresh")

        html = destination.read_text(encoding="utf-8")
        assert "stale content" not in html
        assert "<title>Fresh</title>" in html

    def test_accepts_string_path(self, tmp_path):
        """Test that destination may be a string."""
        destination = tmp_path / "forks.html"
        render_digit_report(compute_leading_digit_frequencies([2]), str(destination), "Forks")
        assert destination.exists()

    def test_render_request(self, tmp_path):
        """Test rendering a ReportRequest."""
        request = ReportRequest(
            table=compute_leading_digit_frequencies([3]),
            destination=tmp_path / "issues.html",
            title="Issues",
        )
        render_report(request)
        assert "<title>Issues</title>" in request.destination.read_text(encoding="utf-8")
