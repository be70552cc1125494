import time

import pytest

from pokedex.cache import Cache


def _wait_until_missing(cache, key, timeout=2.0):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if cache.get(key) is None:
            return True
        time.sleep(0.005)
    return False


@pytest.mark.parametrize(
    "key, val",
    [
        ("https://example.com", b"testdata"),
        ("https://example.com/path", b"moretestdata"),
    ],
)
def test_add_get(key, val):
    with Cache(5) as cache:
        cache.add(key, val)
        assert cache.get(key) == val


def test_get_missing_key_returns_none():
    with Cache(5) as cache:
        assert cache.get("https://example.com") is None


def test_add_replaces_value():
    with Cache(5) as cache:
        cache.add("https://example.com", b"first")
        cache.add("https://example.com", b"second")
        assert cache.get("https://example.com") == b"second"
        assert len(cache) == 1


def test_len_counts_entries():
    with Cache(5) as cache:
        cache.add("https://example.com", b"testdata")
        cache.add("https://example.com/path", b"moretestdata")
        assert len(cache) == 2


def test_empty_value_is_distinct_from_missing():
    with Cache(5) as cache:
        cache.add("https://example.com", b"")
        assert cache.get("https://example.com") == b""


def test_reap_loop():
    base_time = 0.005
    cache = Cache(base_time)
    try:
        cache.add("https://example.com", b"testdata")
        assert cache.get("https://example.com") == b"testdata"
        time.sleep(base_time + 0.005)
        assert _wait_until_missing(cache, "https://example.com")
        assert len(cache) == 0
    finally:
        cache.close()


def test_close_stops_reaping():
    cache = Cache(0.01)
    cache.close()
    cache.add("https://example.com", b"testdata")
    time.sleep(0.05)
    assert cache.get("https://example.com") == b"testdata"


def test_close_is_idempotent():
    cache = Cache(0.01)
    cache.close()
    cache.close()
    cache.add("https://example.com", b"x")
    assert len(cache) == 1


@pytest.mark.parametrize("interval", [0, -1, -0.5])
def test_non_positive_interval_rejected(interval):
    with pytest.raises(ValueError):
        Cache(interval)