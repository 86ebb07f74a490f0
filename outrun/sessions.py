"""Session IDs handed to logged-in players, and their expiry."""

from __future__ import annotations

import hashlib
import logging
import threading
import time

from outrun.constants import DB_BUCKET_SESSION_IDS, DB_SESSION_EXPIRY_TIME
from outrun.storage import Store

__all__ = [
    "SESSION_ID_SCHEMA",
    "session_id_for",
    "assign_session_id",
    "parse_sid_entry",
    "is_valid_session_time",
    "is_valid_session_id",
    "purge_session_id",
    "purge_all_expired_session_ids",
    "purge_session_ids_periodically",
]

log = logging.getLogger(__name__)

SESSION_ID_SCHEMA = "OUTRUN_{}"
PURGE_INTERVAL = 10 * 60  # seconds


def _now(now: int | None) -> int:
    return int(time.time()) if now is None else int(now)


def session_id_for(uid: str) -> str:
    """Return the session ID for a player: the MD5 of the ID with a prefix."""
    return SESSION_ID_SCHEMA.format(hashlib.md5(uid.encode("utf-8")).hexdigest())


def assign_session_id(store: Store, uid: str, now: int | None = None) -> str:
    """Record a session for the player, assigned at ``now``, and return its ID."""
    sid = session_id_for(uid)
    store.set(DB_BUCKET_SESSION_IDS, sid, f"{uid}/{_now(now)}".encode("utf-8"))
    return sid


def parse_sid_entry(entry: bytes | str) -> tuple[str, int]:
    """Split a stored session entry into player ID and assignment time.

    A time that is not a number reads as 0; an entry without "/" raises ValueError.
    """
    text = entry.decode("utf-8", errors="replace") if isinstance(entry, bytes) else entry
    parts = text.split("/")
    if len(parts) < 2:
        raise ValueError(f"malformed session entry {text!r}")
    try:
        assigned = int(parts[1])
    except ValueError:
        assigned = 0
    return parts[0], assigned


def is_valid_session_time(session_time: int, now: int | None = None) -> bool:
    """Tell whether a session assigned at ``session_time`` has not yet expired."""
    return not session_time + DB_SESSION_EXPIRY_TIME < _now(now)


def is_valid_session_id(store: Store, sid: str | bytes, now: int | None = None) -> bool:
    """Tell whether a session is still valid; raises KeyNotFoundError if unknown."""
    key = sid.decode("utf-8") if isinstance(sid, bytes) else sid
    _, session_time = parse_sid_entry(store.get(DB_BUCKET_SESSION_IDS, key))
    return is_valid_session_time(session_time, now)


def purge_session_id(store: Store, sid: str) -> None:
    """Forget a session."""
    store.delete(DB_BUCKET_SESSION_IDS, sid)


def purge_all_expired_session_ids(store: Store, now: int | None = None) -> list[str]:
    """Forget every expired or malformed session and return their IDs."""
    moment = _now(now)
    expired = []
    for sid, entry in store.items(DB_BUCKET_SESSION_IDS):
        try:
            _, session_time = parse_sid_entry(entry)
        except ValueError:
            log.warning("Malformed session entry for %s, purging", sid)
            expired.append(sid)
            continue
        if not is_valid_session_time(session_time, moment):
            expired.append(sid)
    for sid in expired:
        purge_session_id(store, sid)
    return expired


def purge_session_ids_periodically(
    store: Store,
    interval: float = PURGE_INTERVAL,
    stop_event: threading.Event | None = None,
) -> None:
    """Purge expired sessions after every interval until the stop event is set."""
    stop = stop_event if stop_event is not None else threading.Event()
    while not stop.wait(interval):
        purge_all_expired_session_ids(store)