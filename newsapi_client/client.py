"""News API client.

Every endpoint method issues exactly one GET request and either returns
the typed response or raises a NewsApiError subclass:
- TransportError: no response was received
- HttpStatusError: the service answered with a non-2xx status
- DecodeError: a 2xx body did not have the expected shape
"""

import logging
from collections.abc import Callable
from typing import Any, TypeVar
from urllib.parse import quote

import requests

from .config import (
    ALL_NEWS_PATH,
    API_TOKEN_PARAM,
    ARTICLE_BY_ID_PATH,
    BASE_URL,
    HEADLINES_PATH,
    SIMILAR_NEWS_PATH,
    SOURCES_PATH,
    TOP_STORIES_PATH,
    UNREADABLE_BODY_TEXT,
    get_api_config,
)
from .models import (
    ArticleByIdResponse,
    ArticlesResponse,
    DecodeError,
    HeadlinesResponse,
    HttpStatusError,
    SourcesResponse,
    TransportError,
)
from .params import (
    AllNewsParams,
    ArticleByIdParams,
    HeadlinesParams,
    SimilarNewsParams,
    SourcesParams,
    TopStoriesParams,
)
from .query import build_query

logger = logging.getLogger(__name__)

T = TypeVar("T")


class NewsApiClient:
    """Client for the News API.

    The client keeps no per-call state. Requests go through one
    requests.Session held for the client's lifetime, which pools
    connections across calls.
    """

    def __init__(self, api_token: str) -> None:
        """Initialize NewsApiClient.

        Args:
            api_token: API token from the News API account dashboard
        """
        self._api_token = api_token
        self._session = requests.Session()

    def get_headlines(self, params: HeadlinesParams | None = None) -> HeadlinesResponse:
        """Get the latest headlines, grouped by category."""
        return self._get(
            BASE_URL + HEADLINES_PATH,
            params or HeadlinesParams(),
            HeadlinesResponse.from_dict,
        )

    def get_top_stories(self, params: TopStoriesParams | None = None) -> ArticlesResponse:
        """Get top stories."""
        return self._get(
            BASE_URL + TOP_STORIES_PATH,
            params or TopStoriesParams(),
            ArticlesResponse.from_dict,
        )

    def get_all_news(self, params: AllNewsParams | None = None) -> ArticlesResponse:
        """Search all news articles."""
        return self._get(
            BASE_URL + ALL_NEWS_PATH,
            params or AllNewsParams(),
            ArticlesResponse.from_dict,
        )

    def get_similar_news(
        self, uuid: str, params: SimilarNewsParams | None = None
    ) -> ArticlesResponse:
        """Get articles similar to the article with the given UUID.

        Args:
            uuid: UUID of the base article
            params: Optional filters for the similar articles

        Returns:
            ArticlesResponse with pagination details

        Raises:
            NewsApiError: If the request fails
        """
        url = BASE_URL + SIMILAR_NEWS_PATH.format(uuid=quote(uuid, safe=""))
        return self._get(
            url,
            params or SimilarNewsParams(),
            ArticlesResponse.from_dict,
        )

    def get_article_by_id(self, uuid: str) -> ArticleByIdResponse:
        """Get a single article by its UUID.

        Args:
            uuid: UUID of the article

        Returns:
            ArticleByIdResponse for the article

        Raises:
            NewsApiError: If the request fails
        """
        url = BASE_URL + ARTICLE_BY_ID_PATH.format(uuid=quote(uuid, safe=""))
        return self._get(url, ArticleByIdParams(), ArticleByIdResponse.from_dict)

    def get_sources(self, params: SourcesParams | None = None) -> SourcesResponse:
        """Get the sources available to headlines, top stories and all news."""
        return self._get(
            BASE_URL + SOURCES_PATH,
            params or SourcesParams(),
            SourcesResponse.from_dict,
        )

    def _get(self, url: str, params: Any, parse: Callable[[Any], T]) -> T:
        """Perform one GET request and parse the response body.

        Args:
            url: Full endpoint URL
            params: Parameter dataclass to encode into the query string
            parse: Converts the decoded JSON body into the response type

        Returns:
            The parsed response

        Raises:
            TransportError: If no response was received
            HttpStatusError: If the status is outside 200-299
            DecodeError: If the body does not match the expected shape
        """
        query = build_query(params, self._api_token)
        logger.debug(
            "GET %s with params %s",
            url,
            [key for key in query if key != API_TOKEN_PARAM],
        )

        try:
            response = self._session.get(url, params=query)
        except requests.RequestException as e:
            logger.warning("Request to %s failed: %s", url, e)
            raise TransportError(url=url, cause=e) from e

        if not 200 <= response.status_code < 300:
            body = self._read_text(response)
            logger.warning("Request to %s returned HTTP %s", url, response.status_code)
            raise HttpStatusError(url=url, status_code=response.status_code, body=body)

        try:
            payload = response.json()
        except ValueError as e:
            # requests.JSONDecodeError is a ValueError
            logger.warning("Response from %s is not valid JSON: %s", url, e)
            raise DecodeError(url=url, cause=e) from e
        except requests.RequestException as e:
            logger.warning("Reading response from %s failed: %s", url, e)
            raise TransportError(url=url, cause=e) from e

        try:
            return parse(payload)
        except (KeyError, TypeError, ValueError) as e:
            logger.warning("Unexpected response shape from %s: %r", url, e)
            raise DecodeError(url=url, cause=e) from e

    @staticmethod
    def _read_text(response: requests.Response) -> str:
        """Read an error response body, substituting a placeholder if unreadable."""
        try:
            return response.text
        except (requests.RequestException, RuntimeError, UnicodeDecodeError):
            return UNREADABLE_BODY_TEXT


def create_client() -> NewsApiClient:
    """Create a NewsApiClient with the token from the environment.

    Convenience for deployments that keep the token outside the code.
    Constructing NewsApiClient(api_token) directly is the primary way
    to build a client.

    Returns:
        Configured NewsApiClient

    Raises:
        ValueError: If no API token is configured
    """
    config = get_api_config()
    if not config.api_token:
        raise ValueError(
            "News API token not configured: set THENEWSAPI_API_TOKEN "
            "or THENEWSAPI_SECRET_NAME"
        )
    return NewsApiClient(api_token=config.api_token)
