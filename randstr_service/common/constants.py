"""Common constants reused across the data, view model and backend layers."""

from __future__ import annotations

__all__ = [
    "PROVIDER_AUTHORITY",
    "PROVIDER_PATH",
    "CONTENT_URI",
    "DATA_COLUMN",
    "QUERY_ARG_LIMIT",
    "TABLE_NAME",
    "DATE_DISPLAY_FORMAT",
    "NO_DATA_MESSAGE",
    "PARSE_ERROR_MESSAGE",
    "INVALID_LENGTH_MESSAGE",
    "UNKNOWN_ERROR_MESSAGE",
]

PROVIDER_AUTHORITY = "com.iav.contestdataprovider"
PROVIDER_PATH = "text"
CONTENT_URI = f"content://{PROVIDER_AUTHORITY}/{PROVIDER_PATH}"
DATA_COLUMN = "data"
QUERY_ARG_LIMIT = "limit"

TABLE_NAME = "random_string_data"
DATE_DISPLAY_FORMAT = "%b %d, %Y %H:%M:%S"

NO_DATA_MESSAGE = "No data returned from content provider"
PARSE_ERROR_MESSAGE = "Failed to parse response"
INVALID_LENGTH_MESSAGE = "Length must be greater than 0"
UNKNOWN_ERROR_MESSAGE = "Unknown error occurred"
