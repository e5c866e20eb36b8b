"""Data models for the News API client.

This module defines the structures returned by the client:
- Article / SimilarArticle / Source: content records
- Meta: pagination details of list endpoints
- HeadlinesResponse / ArticlesResponse / SourcesResponse / ArticleByIdResponse:
  endpoint response envelopes
- NewsApiError and its subclasses: errors raised by every endpoint call

Each record is built with ``from_dict`` from the decoded JSON body.
``from_dict`` raises KeyError, TypeError or ValueError when the body does
not have the expected shape; the client turns these into DecodeError.
Timestamps such as ``published_at`` are kept as the service sends them.
"""

from dataclasses import dataclass
from typing import Any, Literal

ErrorType = Literal["api_error", "transport_error", "http_status", "decode_error"]


def _expect_object(data: Any, name: str) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise TypeError(f"{name} must be a JSON object, got {type(data).__name__}")
    return data


def _require_str(data: dict[str, Any], key: str) -> str:
    value = data[key]
    if not isinstance(value, str):
        raise TypeError(f"'{key}' must be a string, got {type(value).__name__}")
    return value


def _optional_str(data: dict[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise TypeError(f"'{key}' must be a string or null, got {type(value).__name__}")
    return value


def _require_str_list(data: dict[str, Any], key: str) -> list[str]:
    value = data[key]
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise TypeError(f"'{key}' must be a list of strings")
    return value


def _require_count(data: dict[str, Any], key: str) -> int:
    value = data[key]
    # bool is an int subclass but never a valid count
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"'{key}' must be an integer, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"'{key}' must not be negative, got {value}")
    return value


def _require_list(data: dict[str, Any], key: str) -> list[Any]:
    value = data[key]
    if not isinstance(value, list):
        raise TypeError(f"'{key}' must be a list, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class SimilarArticle:
    """An article listed as similar to another article.

    Attributes:
        uuid: Unique identifier of the article
        title: Article title
        description: Article meta description
        keywords: Article meta keywords
        snippet: First 60 characters of the article body
        url: URL to the article
        image_url: URL to the article image
        language: Language of the source
        published_at: Publish datetime as sent by the service
        source: Domain of the source
        categories: Categories the source is classified as
        locale: Locale of the source
    """

    uuid: str
    title: str
    description: str
    keywords: str | None
    snippet: str
    url: str
    image_url: str | None
    language: str
    published_at: str
    source: str
    categories: list[str]
    locale: str | None = None

    @classmethod
    def from_dict(cls, data: Any) -> "SimilarArticle":
        data = _expect_object(data, "similar article")
        return cls(
            uuid=_require_str(data, "uuid"),
            title=_require_str(data, "title"),
            description=_require_str(data, "description"),
            keywords=_optional_str(data, "keywords"),
            snippet=_require_str(data, "snippet"),
            url=_require_str(data, "url"),
            image_url=_optional_str(data, "image_url"),
            language=_require_str(data, "language"),
            published_at=_require_str(data, "published_at"),
            source=_require_str(data, "source"),
            categories=_require_str_list(data, "categories"),
            locale=_optional_str(data, "locale"),
        )


@dataclass(frozen=True)
class Article:
    """A news article.

    Same fields as SimilarArticle, plus the articles similar to this one
    when the request asked for them.
    """

    uuid: str
    title: str
    description: str
    keywords: str | None
    snippet: str
    url: str
    image_url: str | None
    language: str
    published_at: str
    source: str
    categories: list[str]
    locale: str | None = None
    similar: list[SimilarArticle] | None = None

    @classmethod
    def from_dict(cls, data: Any) -> "Article":
        data = _expect_object(data, "article")
        similar = data.get("similar")
        if similar is not None:
            if not isinstance(similar, list):
                raise TypeError("'similar' must be a list or null")
            similar = [SimilarArticle.from_dict(s) for s in similar]
        return cls(
            uuid=_require_str(data, "uuid"),
            title=_require_str(data, "title"),
            description=_require_str(data, "description"),
            keywords=_optional_str(data, "keywords"),
            snippet=_require_str(data, "snippet"),
            url=_require_str(data, "url"),
            image_url=_optional_str(data, "image_url"),
            language=_require_str(data, "language"),
            published_at=_require_str(data, "published_at"),
            source=_require_str(data, "source"),
            categories=_require_str_list(data, "categories"),
            locale=_optional_str(data, "locale"),
            similar=similar,
        )


@dataclass(frozen=True)
class Source:
    """A news source feed.

    Attributes:
        source_id: Unique ID of the source feed
        domain: Domain of the source
        language: Source language
        locale: Source locale
        categories: Categories the source is classified as
    """

    source_id: str
    domain: str
    language: str
    locale: str | None
    categories: list[str]

    @classmethod
    def from_dict(cls, data: Any) -> "Source":
        data = _expect_object(data, "source")
        return cls(
            source_id=_require_str(data, "source_id"),
            domain=_require_str(data, "domain"),
            language=_require_str(data, "language"),
            locale=_optional_str(data, "locale"),
            categories=_require_str_list(data, "categories"),
        )


@dataclass(frozen=True)
class Meta:
    """Pagination details of a list response.

    Attributes:
        found: Number of results found for the request
        returned: Number of results returned on this page
        limit: Limit applied from the limit parameter
        page: Page number from the page parameter
    """

    found: int
    returned: int
    limit: int
    page: int

    @classmethod
    def from_dict(cls, data: Any) -> "Meta":
        data = _expect_object(data, "meta")
        return cls(
            found=_require_count(data, "found"),
            returned=_require_count(data, "returned"),
            limit=_require_count(data, "limit"),
            page=_require_count(data, "page"),
        )


@dataclass(frozen=True)
class HeadlinesResponse:
    """Headlines grouped by category label."""

    data: dict[str, list[Article]]

    @classmethod
    def from_dict(cls, data: Any) -> "HeadlinesResponse":
        data = _expect_object(data, "headlines response")
        groups = _expect_object(data["data"], "'data'")
        return cls(
            data={
                category: [Article.from_dict(a) for a in _require_list(groups, category)]
                for category in groups
            }
        )


@dataclass(frozen=True)
class ArticlesResponse:
    """Paginated list of articles (top stories, all news, similar news)."""

    meta: Meta
    data: list[Article]

    @classmethod
    def from_dict(cls, data: Any) -> "ArticlesResponse":
        data = _expect_object(data, "articles response")
        return cls(
            meta=Meta.from_dict(data["meta"]),
            data=[Article.from_dict(a) for a in _require_list(data, "data")],
        )


@dataclass(frozen=True)
class SourcesResponse:
    """Paginated list of sources."""

    meta: Meta
    data: list[Source]

    @classmethod
    def from_dict(cls, data: Any) -> "SourcesResponse":
        data = _expect_object(data, "sources response")
        return cls(
            meta=Meta.from_dict(data["meta"]),
            data=[Source.from_dict(s) for s in _require_list(data, "data")],
        )


@dataclass(frozen=True)
class ArticleByIdResponse:
    """A single article looked up by UUID.

    Carries neither similar articles nor the source locale.
    """

    uuid: str
    title: str
    description: str
    keywords: str | None
    snippet: str
    url: str
    image_url: str | None
    language: str
    published_at: str
    source: str
    categories: list[str]

    @classmethod
    def from_dict(cls, data: Any) -> "ArticleByIdResponse":
        data = _expect_object(data, "article")
        return cls(
            uuid=_require_str(data, "uuid"),
            title=_require_str(data, "title"),
            description=_require_str(data, "description"),
            keywords=_optional_str(data, "keywords"),
            snippet=_require_str(data, "snippet"),
            url=_require_str(data, "url"),
            image_url=_optional_str(data, "image_url"),
            language=_require_str(data, "language"),
            published_at=_require_str(data, "published_at"),
            source=_require_str(data, "source"),
            categories=_require_str_list(data, "categories"),
        )


class NewsApiError(Exception):
    """Error for a failed News API call.

    Attributes:
        url: The endpoint URL that was requested
        error_type: Category of the error
        message: Human-readable error description
    """

    error_type: ErrorType = "api_error"

    def __init__(self, url: str, message: str) -> None:
        self.url = url
        self.message = message
        super().__init__(message)


class TransportError(NewsApiError):
    """The request failed before a response was received.

    Attributes:
        cause: The underlying transport exception
    """

    error_type: ErrorType = "transport_error"

    def __init__(self, url: str, cause: BaseException) -> None:
        self.cause = cause
        super().__init__(url, f"Request to {url} failed: {cause}")


class HttpStatusError(NewsApiError):
    """The service answered with a status outside the 2xx range.

    Attributes:
        status_code: HTTP status code of the response
        body: Response body text
    """

    error_type: ErrorType = "http_status"

    def __init__(self, url: str, status_code: int, body: str) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(url, f"HTTP {status_code}: {body}")


class DecodeError(NewsApiError):
    """A successful response body did not have the expected shape.

    Attributes:
        cause: The underlying decoding exception
    """

    error_type: ErrorType = "decode_error"

    def __init__(self, url: str, cause: BaseException) -> None:
        self.cause = cause
        super().__init__(url, f"Failed to decode response from {url}: {cause}")
