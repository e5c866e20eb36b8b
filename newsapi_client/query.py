"""Query string encoding for News API requests."""

import logging
from dataclasses import fields
from typing import Any

from .config import API_TOKEN_PARAM

logger = logging.getLogger(__name__)

DATE_FIELDS = frozenset({"published_on", "published_before", "published_after"})


def _format_value(name: str, value: Any) -> str:
    """Convert a single parameter value to its query string form.

    Args:
        name: Parameter name
        value: Parameter value (not None)

    Returns:
        String form expected by the service

    Raises:
        TypeError: If the value has an unsupported type
    """
    if name in DATE_FIELDS:
        # Dates go out exactly as given, e.g. "2024-01-01"
        if not isinstance(value, str):
            raise TypeError(f"{name} must be a date string, got {type(value).__name__}")
        return value
    if isinstance(value, str):
        return value
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, (list, tuple)) and all(isinstance(v, str) for v in value):
        return ",".join(value)
    raise TypeError(f"Unsupported value for {name}: {type(value).__name__}")


def _encode_fields(params: Any) -> dict[str, str]:
    encoded: dict[str, str] = {}
    for field in fields(params):
        value = getattr(params, field.name)
        # An empty list filters nothing, same as an absent field
        if value is None or (isinstance(value, (list, tuple)) and not value):
            continue
        encoded[field.name] = _format_value(field.name, value)
    return encoded


def build_query(params: Any, api_token: str) -> dict[str, str]:
    """Build query parameters for a News API request.

    Absent (None) fields are omitted and the API token is always added.
    If a field cannot be encoded, all filters are dropped and only the
    token is sent.

    Args:
        params: One of the parameter dataclasses from ``newsapi_client.params``
        api_token: API token to authenticate with

    Returns:
        Dictionary of query parameters
    """
    try:
        query = _encode_fields(params)
    except (TypeError, ValueError) as e:
        logger.warning(
            "Could not encode %s, sending request without filters: %s",
            type(params).__name__,
            e,
        )
        query = {}

    query[API_TOKEN_PARAM] = api_token
    return query
