"""Data access object for the ``random_string_data`` table."""

from __future__ import annotations

import logging
from typing import List

from sqlalchemy import delete, select
from sqlalchemy.orm import sessionmaker

from ..backend.database import session_scope
from ..backend.models import RandomStringRow
from .entities import RandomStringData
from .live import LiveQuery

__all__ = ["RandomStringDao"]

LOGGER = logging.getLogger(__name__)


class RandomStringDao:
    """Insert, list and delete generated strings.

    Every committed write invalidates the live query returned by
    ``get_all_strings`` so that subscribers receive the new table contents.
    """

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory
        self._all_strings = LiveQuery(self._load_all)

    def _load_all(self) -> List[RandomStringData]:
        with session_scope(self._session_factory) as db:
            rows = db.execute(select(RandomStringRow)).scalars().all()
            return [row.to_entity() for row in rows]

    def insert_string(self, random_string: RandomStringData) -> int:
        """Insert (or replace, when ``id`` is set) a record and return its id."""

        with session_scope(self._session_factory) as db:
            row = db.merge(RandomStringRow.from_entity(random_string))
            db.flush()
            new_id = row.id
        LOGGER.debug("Stored random string id=%s", new_id)
        self._all_strings.invalidate()
        return new_id

    def get_all_strings(self) -> LiveQuery[RandomStringData]:
        return self._all_strings

    def delete_string(self, random_string: RandomStringData) -> int:
        if random_string.id is None:
            return 0
        with session_scope(self._session_factory) as db:
            result = db.execute(delete(RandomStringRow).where(RandomStringRow.id == random_string.id))
            deleted = result.rowcount
        self._all_strings.invalidate()
        return deleted

    def delete_all_strings(self) -> int:
        with session_scope(self._session_factory) as db:
            deleted = db.execute(delete(RandomStringRow)).rowcount
        self._all_strings.invalidate()
        return deleted
