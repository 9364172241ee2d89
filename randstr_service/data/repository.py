"""Single source of truth for requesting, storing and listing random strings."""

from __future__ import annotations

import json
import logging
from typing import List

from ..backend.schemas import RandomTextResponse
from ..common.constants import (
    CONTENT_URI,
    DATA_COLUMN,
    NO_DATA_MESSAGE,
    PARSE_ERROR_MESSAGE,
    QUERY_ARG_LIMIT,
)
from .dao import RandomStringDao
from .entities import RandomStringData
from .live import LiveQuery
from .provider import ContentProvider

__all__ = ["GenerationError", "RandomStringRepository"]

LOGGER = logging.getLogger(__name__)


class GenerationError(Exception):
    """A generation request failed; ``str(exc)`` is the message shown to the user."""


class RandomStringRepository:
    """Queries the content provider and keeps the results in the local database.

    All methods block on I/O and are meant to be called from a background
    worker, never from the thread driving the UI.
    """

    def __init__(self, provider: ContentProvider, dao: RandomStringDao):
        self.provider = provider
        self.dao = dao

    def get_all_strings(self) -> LiveQuery[RandomStringData]:
        """Live view of every stored string, re-emitted after each write."""
        return self.dao.get_all_strings()

    def get_all_strings_snapshot(self) -> List[RandomStringData]:
        return list(self.dao.get_all_strings().snapshot())

    def generate_random_string(self, length: int) -> RandomStringData:
        """Request a string of at most ``length`` characters and store it.

        Raises:
            GenerationError: the provider failed, returned nothing, or returned
                a payload that could not be decoded. Nothing is stored then.
        """

        try:
            row = self.provider.query(CONTENT_URI, {QUERY_ARG_LIMIT: length})
        except Exception as exc:
            LOGGER.error("Error querying content provider: %s", exc)
            raise GenerationError(str(exc)) from exc

        if not row or DATA_COLUMN not in row:
            raise GenerationError(NO_DATA_MESSAGE)
        json_string = row[DATA_COLUMN]

        try:
            response = RandomTextResponse.model_validate(json.loads(json_string))
        except (TypeError, ValueError) as exc:
            LOGGER.warning("Failed to parse provider response %r: %s", json_string, exc)
            raise GenerationError(PARSE_ERROR_MESSAGE) from None

        random_string = response.to_entity()
        try:
            new_id = self.dao.insert_string(random_string)
        except Exception as exc:
            LOGGER.error("Error storing random string: %s", exc)
            raise GenerationError(str(exc)) from exc

        LOGGER.info("Generated random string id=%s (requested=%d, length=%d)", new_id, length, random_string.length)
        return random_string.with_id(new_id)

    def delete_string(self, random_string: RandomStringData) -> int:
        return self.dao.delete_string(random_string)

    def delete_all_strings(self) -> int:
        return self.dao.delete_all_strings()
