"""Tests for response models and errors."""

from dataclasses import FrozenInstanceError

import pytest
from newsapi_client.models import (
    Article,
    ArticleByIdResponse,
    ArticlesResponse,
    DecodeError,
    HeadlinesResponse,
    HttpStatusError,
    Meta,
    NewsApiError,
    Source,
    SourcesResponse,
    TransportError,
)


def create_article_payload(uuid: str = "abc-123", **overrides) -> dict:
    """Helper to create an article payload as sent by the service."""
    payload = {
        "uuid": uuid,
        "title": f"Test Article {uuid}",
        "description": "Test description",
        "keywords": "python, news",
        "snippet": "First characters of the article body",
        "url": f"https://example.com/{uuid}",
        "image_url": f"https://example.com/{uuid}.jpg",
        "language": "en",
        "published_at": "2024-01-01T12:00:00.000000Z",
        "source": "example.com",
        "categories": ["tech"],
        "locale": "us",
    }
    payload.update(overrides)
    return payload


class TestArticle:
    """Tests for Article.from_dict."""

    def test_from_dict_with_all_fields(self) -> None:
        """Article should be created from a complete payload."""
        article = Article.from_dict(create_article_payload())

        assert article.uuid == "abc-123"
        assert article.title == "Test Article abc-123"
        assert article.keywords == "python, news"
        assert article.categories == ["tech"]
        assert article.locale == "us"
        assert article.similar is None

    def test_published_at_kept_as_string(self) -> None:
        """Timestamps should be kept exactly as the service sent them."""
        article = Article.from_dict(create_article_payload())

        assert article.published_at == "2024-01-01T12:00:00.000000Z"

    def test_optional_fields_may_be_null_or_missing(self) -> None:
        """keywords, image_url and locale are optional."""
        payload = create_article_payload(keywords=None, image_url=None)
        del payload["locale"]

        article = Article.from_dict(payload)

        assert article.keywords is None
        assert article.image_url is None
        assert article.locale is None

    def test_unknown_fields_are_ignored(self) -> None:
        """Extra fields such as relevance_score should be ignored."""
        article = Article.from_dict(create_article_payload(relevance_score=12.5))

        assert article.uuid == "abc-123"

    def test_similar_articles_are_parsed(self) -> None:
        """Nested similar articles should become SimilarArticle records."""
        payload = create_article_payload(
            similar=[create_article_payload("sim-1"), create_article_payload("sim-2")]
        )

        article = Article.from_dict(payload)

        assert [s.uuid for s in article.similar] == ["sim-1", "sim-2"]

    def test_missing_required_field_raises(self) -> None:
        """A missing required field should raise KeyError."""
        payload = create_article_payload()
        del payload["title"]

        with pytest.raises(KeyError):
            Article.from_dict(payload)

    def test_wrong_type_raises(self) -> None:
        """A required field with the wrong JSON type should raise TypeError."""
        with pytest.raises(TypeError):
            Article.from_dict(create_article_payload(categories="tech"))

    def test_article_is_immutable(self) -> None:
        """Records should be frozen after construction."""
        article = Article.from_dict(create_article_payload())

        with pytest.raises(FrozenInstanceError):
            article.title = "changed"


class TestMeta:
    """Tests for Meta.from_dict."""

    def test_from_dict(self) -> None:
        meta = Meta.from_dict({"found": 120, "returned": 3, "limit": 3, "page": 2})

        assert meta == Meta(found=120, returned=3, limit=3, page=2)

    def test_negative_count_raises(self) -> None:
        with pytest.raises(ValueError):
            Meta.from_dict({"found": -1, "returned": 0, "limit": 3, "page": 1})

    def test_boolean_count_raises(self) -> None:
        with pytest.raises(TypeError):
            Meta.from_dict({"found": True, "returned": 0, "limit": 3, "page": 1})


class TestResponses:
    """Tests for response envelopes."""

    def test_headlines_grouped_by_category(self) -> None:
        """Headlines should map category labels to article lists."""
        response = HeadlinesResponse.from_dict(
            {
                "data": {
                    "general": [create_article_payload("g-1")],
                    "tech": [create_article_payload("t-1"), create_article_payload("t-2")],
                }
            }
        )

        assert set(response.data) == {"general", "tech"}
        assert [a.uuid for a in response.data["tech"]] == ["t-1", "t-2"]

    def test_articles_response(self) -> None:
        response = ArticlesResponse.from_dict(
            {
                "meta": {"found": 10, "returned": 1, "limit": 1, "page": 1},
                "data": [create_article_payload()],
            }
        )

        assert response.meta.found == 10
        assert response.data[0].uuid == "abc-123"

    def test_articles_response_without_meta_raises(self) -> None:
        with pytest.raises(KeyError):
            ArticlesResponse.from_dict({"data": []})

    def test_sources_response(self) -> None:
        response = SourcesResponse.from_dict(
            {
                "meta": {"found": 1, "returned": 1, "limit": 50, "page": 1},
                "data": [
                    {
                        "source_id": "example.com-1",
                        "domain": "example.com",
                        "language": "en",
                        "locale": None,
                        "categories": ["general"],
                    }
                ],
            }
        )

        assert response.data == [
            Source(
                source_id="example.com-1",
                domain="example.com",
                language="en",
                locale=None,
                categories=["general"],
            )
        ]

    def test_article_by_id_ignores_locale_and_similar(self) -> None:
        """The single-article shape carries neither locale nor similar."""
        response = ArticleByIdResponse.from_dict(
            create_article_payload(similar=[create_article_payload("sim-1")])
        )

        assert response.uuid == "abc-123"
        assert not hasattr(response, "similar")
        assert not hasattr(response, "locale")

    def test_non_object_body_raises(self) -> None:
        with pytest.raises(TypeError):
            SourcesResponse.from_dict(["not", "an", "object"])


class TestErrors:
    """Tests for the error hierarchy."""

    def test_http_status_error(self) -> None:
        error = HttpStatusError(
            url="https://api.thenewsapi.com/v1/news/top",
            status_code=429,
            body="rate limited",
        )

        assert isinstance(error, NewsApiError)
        assert error.error_type == "http_status"
        assert error.status_code == 429
        assert error.body == "rate limited"
        assert str(error) == "HTTP 429: rate limited"

    def test_transport_error_keeps_cause(self) -> None:
        cause = ConnectionResetError("reset by peer")
        error = TransportError(url="https://api.thenewsapi.com/v1/sources", cause=cause)

        assert error.error_type == "transport_error"
        assert error.cause is cause
        assert "reset by peer" in error.message

    def test_decode_error_keeps_cause(self) -> None:
        cause = KeyError("title")
        error = DecodeError(url="https://api.thenewsapi.com/v1/sources", cause=cause)

        assert error.error_type == "decode_error"
        assert error.cause is cause
        assert error.url == "https://api.thenewsapi.com/v1/sources"

    def test_base_error_has_default_type(self) -> None:
        error = NewsApiError(url="https://api.thenewsapi.com/v1/sources", message="boom")

        assert error.error_type == "api_error"
        assert str(error) == "boom"
