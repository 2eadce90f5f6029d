import pytest

from engine import InvalidConfiguration
from workload import CITIES, DEFAULT_REQUESTS, format_requests, generate_requests, parse_requests


def test_generate_requests_defaults():
    requests = generate_requests()
    assert len(requests) == 20
    assert set(requests) <= set(CITIES)


def test_generate_requests_is_reproducible_with_seed():
    assert generate_requests(30, seed=7) == generate_requests(30, seed=7)


def test_generate_requests_custom_keys():
    assert generate_requests(5, keys=["only"]) == ["only"] * 5
    assert generate_requests(0) == []


def test_generate_requests_rejects_bad_input():
    with pytest.raises(InvalidConfiguration):
        generate_requests(-1)
    with pytest.raises(InvalidConfiguration):
        generate_requests(3, keys=[])


def test_parse_requests():
    assert parse_requests(" Tokyo, Paris ,,Rome , ") == ["Tokyo", "Paris", "Rome"]
    assert parse_requests("") == []
    assert parse_requests(DEFAULT_REQUESTS)[:4] == ["7", "0", "1", "2"]


def test_format_requests():
    assert format_requests(["A", "B", "C"]) == "A → B → C"
    assert format_requests([]) == ""
