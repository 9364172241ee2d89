"""Tests for the random string repository."""

import json
import logging
from unittest.mock import MagicMock

import pytest

from randstr_service.common.constants import CONTENT_URI, QUERY_ARG_LIMIT
from randstr_service.data.dao import RandomStringDao
from randstr_service.data.entities import RandomStringData
from randstr_service.data.live import LiveQuery
from randstr_service.data.repository import GenerationError, RandomStringRepository


@pytest.fixture
def provider():
    return MagicMock()


@pytest.fixture
def mock_dao(random_strings):
    dao = MagicMock(spec=RandomStringDao)
    dao.get_all_strings.return_value = LiveQuery(lambda: random_strings)
    return dao


@pytest.fixture
def repository(provider, mock_dao):
    return RandomStringRepository(provider, mock_dao)


def test_get_all_strings_returns_live_query_from_dao(repository, mock_dao, random_strings):
    """The repository hands out the DAO's live query."""
    result = repository.get_all_strings()

    mock_dao.get_all_strings.assert_called_once_with()
    assert result.snapshot() == tuple(random_strings)


def test_get_all_strings_snapshot(repository, random_strings):
    assert repository.get_all_strings_snapshot() == random_strings


def test_generate_queries_provider_with_bound_limit(repository, provider, mock_dao, json_response, random_string):
    """Length is passed as the ``limit`` query argument and the record is stored."""
    provider.query.return_value = {"data": json_response}
    mock_dao.insert_string.return_value = 1

    result = repository.generate_random_string(10)

    provider.query.assert_called_once_with(CONTENT_URI, {QUERY_ARG_LIMIT: 10})
    assert result == random_string
    assert result.id == 1


def test_generate_inserts_record_without_id(repository, provider, mock_dao, json_response):
    provider.query.return_value = {"data": json_response}
    mock_dao.insert_string.return_value = 42

    result = repository.generate_random_string(25)

    mock_dao.insert_string.assert_called_once_with(
        RandomStringData(value="testString", length=10, created="2024-10-01T12:00:00Z")
    )
    assert result.id == 42


def test_generate_keeps_length_reported_by_provider(repository, provider, mock_dao):
    """The stored length is the one produced, not the one requested."""
    payload = {"randomText": {"value": "abc", "length": 3, "created": "2024-10-01T12:00:00Z"}}
    provider.query.return_value = {"data": json.dumps(payload)}
    mock_dao.insert_string.return_value = 7

    result = repository.generate_random_string(100)

    assert result.value == "abc"
    assert result.length == 3


def test_generate_fails_when_provider_returns_no_data(repository, provider, mock_dao):
    provider.query.return_value = None

    with pytest.raises(GenerationError) as excinfo:
        repository.generate_random_string(10)

    assert str(excinfo.value) == "No data returned from content provider"
    mock_dao.insert_string.assert_not_called()


def test_generate_fails_when_data_column_is_missing(repository, provider, mock_dao):
    provider.query.return_value = {"other": "value"}

    with pytest.raises(GenerationError, match="No data returned from content provider"):
        repository.generate_random_string(10)

    mock_dao.insert_string.assert_not_called()


@pytest.mark.parametrize(
    "payload",
    [
        "invalid json",
        '"invalid json"',
        '{"randomText": {"value": "abc"}}',
        '{"something": "else"}',
        '{"randomText": {"value": "abc", "length": 3, "created": "yesterday"}}',
    ],
)
def test_generate_fails_when_json_parsing_fails(repository, provider, mock_dao, payload):
    provider.query.return_value = {"data": payload}

    with pytest.raises(GenerationError) as excinfo:
        repository.generate_random_string(10)

    assert str(excinfo.value) == "Failed to parse response"
    assert excinfo.value.__cause__ is None
    mock_dao.insert_string.assert_not_called()


def test_parse_failure_detail_is_logged(repository, provider, caplog):
    provider.query.return_value = {"data": "invalid json"}

    with caplog.at_level(logging.WARNING, logger="randstr_service.data.repository"):
        with pytest.raises(GenerationError):
            repository.generate_random_string(10)

    assert "Failed to parse provider response" in caplog.text
    assert "invalid json" in caplog.text


def test_generate_fails_when_provider_raises(repository, provider, mock_dao):
    provider.query.side_effect = RuntimeError("Test exception")

    with pytest.raises(GenerationError) as excinfo:
        repository.generate_random_string(10)

    assert str(excinfo.value) == "Test exception"
    assert isinstance(excinfo.value.__cause__, RuntimeError)
    mock_dao.insert_string.assert_not_called()


def test_generate_fails_when_insert_raises(repository, provider, mock_dao, json_response):
    provider.query.return_value = {"data": json_response}
    mock_dao.insert_string.side_effect = RuntimeError("database is locked")

    with pytest.raises(GenerationError, match="database is locked"):
        repository.generate_random_string(10)


def test_delete_string_calls_dao(repository, mock_dao, random_string):
    mock_dao.delete_string.return_value = 1

    assert repository.delete_string(random_string) == 1
    mock_dao.delete_string.assert_called_once_with(random_string)
    mock_dao.delete_all_strings.assert_not_called()


def test_delete_all_strings_calls_dao(repository, mock_dao):
    mock_dao.delete_all_strings.return_value = 2

    assert repository.delete_all_strings() == 2
    mock_dao.delete_all_strings.assert_called_once_with()
    mock_dao.delete_string.assert_not_called()


def test_generate_persists_to_database(provider, dao, json_response):
    """End to end against SQLite: the stored row matches the returned record."""
    provider.query.return_value = {"data": json_response}
    repository = RandomStringRepository(provider, dao)

    first = repository.generate_random_string(10)
    second = repository.generate_random_string(10)

    assert first.id is not None and second.id is not None
    assert first.id != second.id
    assert repository.get_all_strings_snapshot() == [first, second]


def test_failed_generation_leaves_database_untouched(provider, dao, json_response):
    provider.query.return_value = {"data": json_response}
    repository = RandomStringRepository(provider, dao)
    stored = repository.generate_random_string(10)

    provider.query.return_value = {"data": "invalid json"}
    with pytest.raises(GenerationError):
        repository.generate_random_string(10)

    assert repository.get_all_strings_snapshot() == [stored]


def test_generate_fails_to_parse_null_data_column(repository, provider, mock_dao):
    """A present but null ``data`` column is a decode failure, not an empty result."""
    provider.query.return_value = {"data": None}

    with pytest.raises(GenerationError) as excinfo:
        repository.generate_random_string(10)

    assert str(excinfo.value) == "Failed to parse response"
    mock_dao.insert_string.assert_not_called()


@pytest.mark.parametrize(
    "created",
    ["2024-10-01T12:00:00.123456789Z", "2024-10-01T12:00:00.5Z"],
)
def test_generate_accepts_any_fractional_seconds(repository, provider, mock_dao, created):
    payload = {"randomText": {"value": "abc", "length": 3, "created": created}}
    provider.query.return_value = {"data": json.dumps(payload)}
    mock_dao.insert_string.return_value = 3

    result = repository.generate_random_string(3)

    assert result.created == created
    assert result.id == 3
    mock_dao.insert_string.assert_called_once()
