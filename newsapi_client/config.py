"""Configuration for the News API client.

This module provides the service endpoints and API token resolution,
supporting both local development and AWS deployment.
"""

import logging
import os
from dataclasses import dataclass
from functools import lru_cache

import boto3
from botocore.exceptions import ClientError

logger = logging.getLogger(__name__)

BASE_URL = "https://api.thenewsapi.com"

HEADLINES_PATH = "/v1/news/headlines"
TOP_STORIES_PATH = "/v1/news/top"
ALL_NEWS_PATH = "/v1/news/all"
SIMILAR_NEWS_PATH = "/v1/news/similar/{uuid}"
ARTICLE_BY_ID_PATH = "/v1/news/uuid/{uuid}"
SOURCES_PATH = "/v1/sources"

API_TOKEN_PARAM = "api_token"

# Substituted when the body of an error response cannot be read
UNREADABLE_BODY_TEXT = "Failed to read response text"


@dataclass(frozen=True)
class ApiConfig:
    """News API configuration.

    Attributes:
        api_token: API token from the account dashboard
    """

    api_token: str | None


@lru_cache(maxsize=10)
def _read_api_token_secret(secret_name: str) -> str | None:
    """Read the API token from AWS Secrets Manager.

    Args:
        secret_name: Name of the secret holding the token

    Returns:
        The token, or None if no region is set or the secret is unavailable
    """
    region = os.getenv("AWS_REGION", "")
    if not region:
        logger.warning(
            "THENEWSAPI_SECRET_NAME is set but AWS_REGION is not; skipping %s",
            secret_name,
        )
        return None

    secretsmanager = boto3.client("secretsmanager", region_name=region)
    try:
        secret = secretsmanager.get_secret_value(SecretId=secret_name)
    except ClientError as e:
        logger.warning(
            "Could not read API token secret %s: %s",
            secret_name,
            e.response.get("Error", {}).get("Code", e),
        )
        return None
    return secret.get("SecretString") or None


def get_api_config() -> ApiConfig:
    """Get News API configuration.

    Supports two modes:
    1. Direct environment variable (local development):
       - THENEWSAPI_API_TOKEN
    2. Secrets Manager (AWS deployment):
       - THENEWSAPI_SECRET_NAME → reads from Secrets Manager

    Returns:
        ApiConfig instance
    """
    api_token = os.getenv("THENEWSAPI_API_TOKEN")

    if not api_token:
        secret_name = os.getenv("THENEWSAPI_SECRET_NAME")
        if secret_name:
            api_token = _read_api_token_secret(secret_name)

    return ApiConfig(api_token=api_token or None)
