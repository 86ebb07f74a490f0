import pytest

from outrun.constants import DB_BUCKET_SESSION_IDS, DB_SESSION_EXPIRY_TIME
from outrun.sessions import (
    assign_session_id,
    is_valid_session_id,
    is_valid_session_time,
    parse_sid_entry,
    purge_all_expired_session_ids,
    purge_session_id,
    purge_session_ids_periodically,
    session_id_for,
)
from outrun.storage import KeyNotFoundError, Store


@pytest.fixture
def store(tmp_path):
    with Store(tmp_path / "sessions.db") as opened:
        yield opened


class _StopOnSecondWait:
    def __init__(self):
        self.calls = 0

    def wait(self, timeout=None):
        self.calls += 1
        return self.calls > 1


def test_session_id_of_empty_id():
    assert session_id_for("") == "OUTRUN_d41d8cd98f00b204e9800998ecf8427e"


def test_session_id_is_stable_and_distinct():
    assert session_id_for("1234567890") == session_id_for("1234567890")
    assert session_id_for("1234567890") != session_id_for("1234567891")


def test_assign_session_id_stores_entry(store):
    sid = assign_session_id(store, "1234567890", now=1000)
    assert sid == session_id_for("1234567890")
    assert store.get(DB_BUCKET_SESSION_IDS, sid) == b"1234567890/1000"


def test_parse_sid_entry():
    assert parse_sid_entry(b"123/456") == ("123", 456)


def test_parse_sid_entry_bad_time_reads_zero():
    assert parse_sid_entry("abc/xyz") == ("abc", 0)


def test_parse_sid_entry_without_separator_raises():
    with pytest.raises(ValueError):
        parse_sid_entry(b"nothing")


def test_session_time_boundary():
    assert is_valid_session_time(1000, now=1000 + DB_SESSION_EXPIRY_TIME) is True
    assert is_valid_session_time(1000, now=1000 + DB_SESSION_EXPIRY_TIME + 1) is False


def test_is_valid_session_id(store):
    sid = assign_session_id(store, "42", now=1000)
    assert is_valid_session_id(store, sid, now=1500) is True
    assert is_valid_session_id(store, sid.encode(), now=1500) is True
    assert is_valid_session_id(store, sid, now=1000 + DB_SESSION_EXPIRY_TIME + 1) is False


def test_is_valid_session_id_unknown(store):
    with pytest.raises(KeyNotFoundError):
        is_valid_session_id(store, "OUTRUN_unknown", now=0)


def test_purge_session_id(store):
    sid = assign_session_id(store, "42", now=1000)
    purge_session_id(store, sid)
    with pytest.raises(KeyNotFoundError):
        store.get(DB_BUCKET_SESSION_IDS, sid)


def test_purge_all_expired(store):
    old = assign_session_id(store, "1", now=0)
    fresh = assign_session_id(store, "2", now=10000)
    assert purge_all_expired_session_ids(store, now=10000) == [old]
    assert store.get(DB_BUCKET_SESSION_IDS, fresh) == b"2/10000"
    with pytest.raises(KeyNotFoundError):
        store.get(DB_BUCKET_SESSION_IDS, old)


def test_purge_all_drops_malformed(store):
    store.set(DB_BUCKET_SESSION_IDS, "OUTRUN_bad", b"garbage")
    assert purge_all_expired_session_ids(store, now=0) == ["OUTRUN_bad"]


def test_periodic_purge_stops_before_first_run(store):
    import threading

    old = assign_session_id(store, "1", now=0)
    stop = threading.Event()
    stop.set()
    purge_session_ids_periodically(store, 0.01, stop)
    assert store.get(DB_BUCKET_SESSION_IDS, old) == b"1/0"


def test_periodic_purge_runs_after_wait(store):
    old = assign_session_id(store, "1", now=0)
    stop = _StopOnSecondWait()
    purge_session_ids_periodically(store, 0.01, stop)
    assert stop.calls == 2
    with pytest.raises(KeyNotFoundError):
        store.get(DB_BUCKET_SESSION_IDS, old)