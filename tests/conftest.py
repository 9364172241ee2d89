"""Shared fixtures for the test suite."""

import json

import pytest

from randstr_service.backend.database import build_engine, build_session_factory
from randstr_service.data.dao import RandomStringDao
from randstr_service.data.entities import RandomStringData

TEST_RANDOM_STRING = RandomStringData(
    id=1,
    value="testString",
    length=10,
    created="2024-10-01T12:00:00Z",
)

TEST_RANDOM_STRINGS = [
    TEST_RANDOM_STRING,
    RandomStringData(
        id=2,
        value="anotherString",
        length=13,
        created="2024-10-01T13:00:00Z",
    ),
]

TEST_JSON_RESPONSE = json.dumps(
    {
        "randomText": {
            "value": "testString",
            "length": 10,
            "created": "2024-10-01T12:00:00Z",
        }
    }
)


@pytest.fixture
def session_factory():
    """Session factory bound to a fresh in-memory SQLite database."""
    engine = build_engine("sqlite://")
    yield build_session_factory(engine)
    engine.dispose()


@pytest.fixture
def dao(session_factory):
    return RandomStringDao(session_factory)


@pytest.fixture
def random_string():
    return TEST_RANDOM_STRING


@pytest.fixture
def random_strings():
    return list(TEST_RANDOM_STRINGS)


@pytest.fixture
def json_response():
    return TEST_JSON_RESPONSE
