"""Typed client for the News API (api.thenewsapi.com).

Example:
    from newsapi_client import NewsApiClient, TopStoriesParams

    client = NewsApiClient(api_token="your_api_token")
    response = client.get_top_stories(TopStoriesParams(categories="tech", limit=3))
    for article in response.data:
        print(article.published_at, article.title)
"""

from .client import NewsApiClient, create_client
from .models import (
    Article,
    ArticleByIdResponse,
    ArticlesResponse,
    DecodeError,
    HeadlinesResponse,
    HttpStatusError,
    Meta,
    NewsApiError,
    SimilarArticle,
    Source,
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

__all__ = [
    "NewsApiClient",
    "create_client",
    "build_query",
    "HeadlinesParams",
    "TopStoriesParams",
    "AllNewsParams",
    "SimilarNewsParams",
    "SourcesParams",
    "ArticleByIdParams",
    "Article",
    "SimilarArticle",
    "Source",
    "Meta",
    "HeadlinesResponse",
    "ArticlesResponse",
    "SourcesResponse",
    "ArticleByIdResponse",
    "NewsApiError",
    "TransportError",
    "HttpStatusError",
    "DecodeError",
]
