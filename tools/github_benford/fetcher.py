"""Paginated GitHub repository search."""

import json
from dataclasses import dataclass
from typing import Any, Iterator, List, Optional

import httpx

from shared.cli import error, info
from shared.logger import get_logger

logger = get_logger(__name__)

SEARCH_URL = "https://api.github.com/search/repositories"
PAGE_SIZE = 100
API_VERSION = "2022-11-28"
USER_AGENT = "Repository statistics"


class GitHubAPIError(Exception):
    """Raised when a search response cannot be decoded."""


@dataclass(frozen=True)
class RepositoryRecord:
    """Numeric attributes of a repository from a search result."""

    id: int
    stars: int
    forks: int
    open_issues: int

    @classmethod
    def from_api(cls, item: Any) -> "RepositoryRecord":
        """
        Build a record from a search result item.

        Args:
            item: Repository object from the ``items`` array

        Returns:
            RepositoryRecord

        Raises:
            ValueError: If the item is not an object, has no id, or holds
                non-integer values
        """
        if not isinstance(item, dict):
            raise ValueError(f"Expected a repository object, got: {type(item).__name__}")
        if item.get("id") is None:
            raise ValueError("Repository object has no id")

        return cls(
            id=_as_int(item, "id"),
            stars=_as_int(item, "stargazers_count"),
            forks=_as_int(item, "forks"),
            open_issues=_as_int(item, "open_issues"),
        )


def _as_int(item: dict, key: str) -> int:
    value = item.get(key)
    if value is None:
        return 0
    if isinstance(value, bool):
        raise ValueError(f"Field '{key}' is not an integer: {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValueError(f"Field '{key}' is not an integer: {value!r}") from None


class GitHubSearch:
    """
    Fetch top repositories of a language from the GitHub search API.

    Uses GitHub API v3 (REST), one request per page of 100 results.
    """

    def __init__(
        self,
        token: str,
        client: Optional[httpx.Client] = None,
        timeout: float = 10.0,
    ):
        """
        Initialize the search client.

        Args:
            token: GitHub personal access token
            client: Preconfigured HTTP client (a new one is opened per fetch if omitted)
            timeout: Request timeout in seconds
        """
        self.token = token
        self.client = client
        self.timeout = timeout

        self.headers = {
            "Authorization": f"Bearer {self.token}",
            "User-Agent": USER_AGENT,
            "Content-Type": "application/json; charset=utf-8",
            "Accept": "application/json",
            "X-GitHub-Api-Version": API_VERSION,
        }

    def fetch_top_repositories(self, language: str, count: int) -> Iterator[RepositoryRecord]:
        """
        Yield the top repositories of a language in search rank order.

        Pages are requested lazily, only once the previous page has been
        consumed. Iteration ends after ``count`` records or on the first
        page holding fewer than PAGE_SIZE items.

        Args:
            language: Programming language to search for
            count: Maximum number of records to yield

        Yields:
            RepositoryRecord objects

        Raises:
            GitHubAPIError: If a response body is not a search result
        """
        logger.info(f"Fetching top {count} {language} repositories")

        if self.client is not None:
            yield from self._paginate(self.client, language, count)
            return

        with httpx.Client(timeout=self.timeout) as client:
            yield from self._paginate(client, language, count)

    def _paginate(self, client: httpx.Client, language: str, count: int) -> Iterator[RepositoryRecord]:
        total = 0
        page = 1

        while total < count:
            items = self._get_page(client, language, page)

            for item in items:
                try:
                    record = RepositoryRecord.from_api(item)
                except ValueError as e:
                    raise GitHubAPIError(f"Malformed repository on page {page}: {e}") from e

                yield record
                total += 1
                if total >= count:
                    break

            if len(items) < PAGE_SIZE:
                logger.debug(f"Page {page} held {len(items)} items, end of results")
                break

            page += 1

        logger.info(f"Fetched {total} repositories")

    def _get_page(self, client: httpx.Client, language: str, page: int) -> List[Any]:
        """Request one search page and return its ``items`` array."""
        params = {
            "q": f"language:{language}",
            "per_page": PAGE_SIZE,
            "page": page,
        }
        request = client.build_request("GET", SEARCH_URL, params=params, headers=self.headers)
        logger.debug(f"Requesting page {page}")

        info(f"Getting: {request.url} ...", end="")
        response = client.send(request, follow_redirects=True)
        info(f" {response.status_code}")

        if not response.is_success:
            error(f"Response code: {response.status_code}")
            error(f"Response body: {response.text}")

        return self._decode_items(response)

    @staticmethod
    def _decode_items(response: httpx.Response) -> List[Any]:
        try:
            data = response.json()
        except json.JSONDecodeError as e:
            raise GitHubAPIError(
                f"Invalid JSON in response ({response.status_code}): {e}"
            ) from e

        items = data.get("items") if isinstance(data, dict) else None
        if not isinstance(items, list):
            message = data.get("message") if isinstance(data, dict) else None
            raise GitHubAPIError(
                f"Unexpected search response ({response.status_code}): {message or 'no items'}"
            )

        return items
