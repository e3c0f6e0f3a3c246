"""CLI interface for GitHub Benford statistics."""

import re
import sys
import time
from decimal import Decimal
from pathlib import Path
from typing import List, Optional, Tuple

import click

from shared.cli import handle_errors, info, success
from shared.logger import get_logger, setup_logger

from .digits import compute_leading_digit_frequencies
from .fetcher import GitHubSearch
from .report import ReportRequest, render_report

logger = get_logger(__name__)

DEFAULT_COUNT = 1000
MIN_COUNT = 10
MAX_COUNT = 1000

USAGE = (
    "Usage: github-benford  <GitHub access token>  <repo language>"
    f"  [repo count; {MIN_COUNT}...{MAX_COUNT}; default: {DEFAULT_COUNT}]"
)

# (series, file name, title fragment, progress label)
REPORTS = [
    ("ids", "ids.html", "IDs", "IDs"),
    ("stars", "stars.html", "stars count", "stars"),
    ("forks", "forks.html", "forks count", "forks"),
    ("issues", "issues.html", "open issues count", "open issues"),
]

_LEADING_NUMBER = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")
_COUNT_LIMIT = Decimal(sys.maxsize)


def parse_count(value: Optional[str]) -> int:
    """
    Parse the repository count argument leniently.

    A missing value means DEFAULT_COUNT. Otherwise the leading number of
    the trimmed text is used ("12abc" -> 12, "1e3" -> 1000, "12.7" -> 12)
    and text without one gives 0.
    """
    if value is None:
        return DEFAULT_COUNT

    match = _LEADING_NUMBER.match(value.strip())
    if not match:
        return 0

    # Saturate before int() so huge exponents stay cheap
    number = max(min(Decimal(match.group()), _COUNT_LIMIT), -_COUNT_LIMIT)
    return int(number)


def clamp_count(count: int) -> int:
    """Clamp the repository count to [MIN_COUNT, MAX_COUNT], announcing any change."""
    if count < MIN_COUNT:
        info(f"count < {MIN_COUNT}, defaulting to {MIN_COUNT}")
        return MIN_COUNT
    if count > MAX_COUNT:
        info(f"count > {MAX_COUNT}, defaulting to {MAX_COUNT}")
        return MAX_COUNT
    return count


def collect_series(fetcher: GitHubSearch, language: str, count: int) -> Tuple[List[int], List[int], List[int], List[int]]:
    """Split one pass over the search results into id, star, fork and issue series."""
    ids: List[int] = []
    stars: List[int] = []
    forks: List[int] = []
    issues: List[int] = []

    for repo in fetcher.fetch_top_repositories(language, count):
        ids.append(repo.id)
        stars.append(repo.stars)
        forks.append(repo.forks)
        issues.append(repo.open_issues)

    return ids, stars, forks, issues


def run(
    token: Optional[str],
    language: Optional[str],
    count: Optional[str] = None,
    output_dir: Path = Path("."),
    fetcher: Optional[GitHubSearch] = None,
) -> int:
    """
    Fetch repositories and write the four digit reports.

    Args:
        token: GitHub access token
        language: Repository language to search for
        count: Number of repositories, as given on the command line
        output_dir: Directory receiving the HTML reports
        fetcher: Search client (built from ``token`` if omitted)

    Returns:
        Process exit code
    """
    time_start = time.perf_counter()

    if token is None or language is None:
        click.echo(USAGE, err=True)
        return 1

    token = token.strip()
    language = language.strip()
    repo_count = clamp_count(parse_count(count))

    if fetcher is None:
        fetcher = GitHubSearch(token=token)

    ids, stars, forks, issues = collect_series(fetcher, language, repo_count)
    logger.debug(f"Collected {len(ids)} repositories")

    series = {"ids": ids, "stars": stars, "forks": forks, "issues": issues}

    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    for key, filename, title_fragment, label in REPORTS:
        request = ReportRequest(
            table=compute_leading_digit_frequencies(series[key]),
            destination=output_dir / filename,
            title=(
                f"First digits of {title_fragment} over {repo_count} "
                f"repositories of {language} language"
            ),
        )
        info(f"Writing {label} statistics to {request.destination} ...")
        render_report(request)

    info(f"Time: {time.perf_counter() - time_start:.3f} sec.")
    return 0


@click.command(context_settings={"ignore_unknown_options": True})
@click.argument("token", required=False)
@click.argument("language", required=False)
@click.argument("count", required=False)
@click.argument("extra", nargs=-1)
@click.option(
    "--output-dir",
    "-o",
    type=click.Path(file_okay=False, path_type=Path),
    default=".",
    show_default=True,
    help="Directory for the HTML reports",
)
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@handle_errors
def main(
    token: Optional[str],
    language: Optional[str],
    count: Optional[str],
    extra: tuple,
    output_dir: Path,
    verbose: bool,
):
    """
    GitHub Benford - Check leading digits of repository metrics against Benford's Law.

    Fetches the top COUNT repositories of LANGUAGE (10 to 1000, default 1000)
    and writes ids.html, stars.html, forks.html and issues.html bar charts.
    Further arguments are ignored.

    Examples:

        \b
        # Top 1000 Python repositories
        github-benford ghp_xxx python

        \b
        # Top 200 Rust repositories into ./reports
        github-benford ghp_xxx rust 200 --output-dir reports
    """
    # Setup logging
    log_level = "DEBUG" if verbose else "INFO"
    setup_logger(__name__, level=log_level)

    exit_code = run(token, language, count, output_dir=output_dir)
    if exit_code == 0:
        success("Reports written!")
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
