"""GitHub Benford - Leading-digit statistics of GitHub repository metrics."""

from .digits import compute_leading_digit_frequencies, leading_digit
from .fetcher import GitHubAPIError, GitHubSearch, RepositoryRecord
from .report import ReportRequest, build_digit_report, render_digit_report

__all__ = [
    "GitHubAPIError",
    "GitHubSearch",
    "ReportRequest",
    "RepositoryRecord",
    "build_digit_report",
    "compute_leading_digit_frequencies",
    "leading_digit",
    "render_digit_report",
]
