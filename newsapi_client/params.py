"""Request parameters for News API endpoints.

Each endpoint has its own parameter dataclass. Every field is optional;
fields left as None are omitted from the request.

Comma-separated filters (domains, categories, language, ...) accept either
a single string such as "tech,business" or a list of strings.
"""

from dataclasses import dataclass

ListParam = str | list[str] | tuple[str, ...]


@dataclass(frozen=True)
class HeadlinesParams:
    """Parameters for the headlines endpoint.

    Attributes:
        locale: Comma-separated country codes (e.g. "us,ca")
        domains: Domains to include
        exclude_domains: Domains to exclude
        source_ids: Source IDs to include
        exclude_source_ids: Source IDs to exclude
        language: Comma-separated language codes
        published_on: Only headlines published on this date (Y-m-d)
        headlines_per_category: Number of articles per category (max 10)
        include_similar: Whether to include similar articles
    """

    locale: ListParam | None = None
    domains: ListParam | None = None
    exclude_domains: ListParam | None = None
    source_ids: ListParam | None = None
    exclude_source_ids: ListParam | None = None
    language: ListParam | None = None
    published_on: str | None = None
    headlines_per_category: int | None = None
    include_similar: bool | None = None


@dataclass(frozen=True)
class TopStoriesParams:
    """Parameters for the top stories endpoint.

    Attributes:
        search: Search query (supports the service's boolean operators)
        search_fields: Fields to search in (title, description, keywords, main_text)
        locale: Comma-separated country codes
        categories: Categories to include
        exclude_categories: Categories to exclude
        domains: Domains to include
        exclude_domains: Domains to exclude
        source_ids: Source IDs to include
        exclude_source_ids: Source IDs to exclude
        language: Comma-separated language codes
        published_before: Only articles published before this datetime
        published_after: Only articles published after this datetime
        published_on: Only articles published on this date
        sort: Sort order (published_at or relevance_score)
        limit: Number of articles to return
        page: Page number for pagination
    """

    search: str | None = None
    search_fields: ListParam | None = None
    locale: ListParam | None = None
    categories: ListParam | None = None
    exclude_categories: ListParam | None = None
    domains: ListParam | None = None
    exclude_domains: ListParam | None = None
    source_ids: ListParam | None = None
    exclude_source_ids: ListParam | None = None
    language: ListParam | None = None
    published_before: str | None = None
    published_after: str | None = None
    published_on: str | None = None
    sort: str | None = None
    limit: int | None = None
    page: int | None = None


@dataclass(frozen=True)
class AllNewsParams(TopStoriesParams):
    """Parameters for the all news endpoint (same fields as top stories)."""


@dataclass(frozen=True)
class SimilarNewsParams:
    """Parameters for the similar news endpoint.

    The article UUID is part of the URL path and is passed separately.
    """

    categories: ListParam | None = None
    exclude_categories: ListParam | None = None
    domains: ListParam | None = None
    exclude_domains: ListParam | None = None
    source_ids: ListParam | None = None
    exclude_source_ids: ListParam | None = None
    language: ListParam | None = None
    published_before: str | None = None
    published_after: str | None = None
    published_on: str | None = None
    limit: int | None = None
    page: int | None = None


@dataclass(frozen=True)
class SourcesParams:
    """Parameters for the sources endpoint."""

    categories: ListParam | None = None
    exclude_categories: ListParam | None = None
    language: ListParam | None = None
    page: int | None = None


@dataclass(frozen=True)
class ArticleByIdParams:
    """The article-by-UUID endpoint takes no filters."""
