"""Brackets tournament stats client: fetch, decode and normalize API data."""

from brackets.api_client import BracketsAPIClient, describe_error
from brackets.errors import (
    APIError,
    DecodingError,
    DecodingIssue,
    InvalidResponseError,
    InvalidURLError,
    NetworkError,
)
from brackets.images import resolve_image_url
from brackets.settings import Settings

__all__ = [
    "APIError",
    "BracketsAPIClient",
    "DecodingError",
    "DecodingIssue",
    "InvalidResponseError",
    "InvalidURLError",
    "NetworkError",
    "Settings",
    "describe_error",
    "resolve_image_url",
]
