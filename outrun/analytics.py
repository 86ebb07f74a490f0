"""Per-player counters of what players do, kept in the analytics bucket."""

from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any

from outrun.constants import DB_BUCKET_ANALYTICS
from outrun.storage import KeyNotFoundError, Store

__all__ = [
    "AnalyticType",
    "Aggregate",
    "DATA_LENGTH",
    "HISTORY_LENGTH",
    "record",
    "fetch",
    "touch_analytics_db",
]

log = logging.getLogger(__name__)

DATA_LENGTH = 75  # must exceed the number of analytic types
HISTORY_LENGTH = 20


class AnalyticType(IntEnum):
    """What a counter measures; its value is the counter's index."""

    LOGINS = 0
    STORY_STARTS = 1
    STORY_ENDS = 2
    TIMED_STARTS = 3
    TIMED_ENDS = 4
    PURCHASE_RINGS = 5
    PURCHASE_ENERGY = 6
    PURCHASE_RED_RINGS = 7
    SPIN_ITEM_ROULETTE = 8
    SPIN_CHAO_ROULETTE = 9
    CHANGE_MAIN_CHARACTER = 10
    CHANGE_SUB_CHARACTER = 11
    CHANGE_MAIN_CHAO = 12
    CHANGE_SUB_CHAO = 13
    AVERAGE_STORY_SCORE = 14
    AVERAGE_TIMED_SCORE = 15
    SPEND_RINGS = 16
    SPEND_RED_RINGS = 17
    REVIVES = 18


def _zeros(length: int) -> list[int]:
    return [0] * length


@dataclass
class Aggregate:
    """All analytics kept for one player."""

    player_id: str
    creation_date: int = 0
    data: list[int] = field(default_factory=lambda: _zeros(DATA_LENGTH))
    historical_story_scores: list[int] = field(default_factory=lambda: _zeros(HISTORY_LENGTH))
    historical_timed_scores: list[int] = field(default_factory=lambda: _zeros(HISTORY_LENGTH))
    login_times: list[int] = field(default_factory=list)

    @classmethod
    def for_player(cls, player_id: str) -> Aggregate:
        """Return an empty aggregate for a player, created now."""
        return cls(player_id=player_id, creation_date=int(time.time()))

    def to_json(self) -> bytes:
        """Serialise with the field names used in storage."""
        return json.dumps(
            {
                "playerID": self.player_id,
                "creationDate": self.creation_date,
                "data": self.data,
                "historicalStoryScores": self.historical_story_scores,
                "historicalTimedScores": self.historical_timed_scores,
                "loginTimes": self.login_times,
            },
            separators=(",", ":"),
        ).encode("utf-8")

    @classmethod
    def from_json(cls, data: bytes | str) -> Aggregate:
        """Parse a stored aggregate; missing fields take their empty defaults."""
        obj = json.loads(data)
        if not isinstance(obj, dict):
            raise ValueError("analytics data must be a JSON object")
        blank = cls(player_id="")
        player_id = obj.get("playerID")
        if player_id is None:
            player_id = ""
        elif not isinstance(player_id, str):
            raise ValueError("'playerID' must be a string")
        return cls(
            player_id=player_id,
            creation_date=_int_field(obj, "creationDate", 0),
            data=_int_list(obj, "data", blank.data),
            historical_story_scores=_int_list(
                obj, "historicalStoryScores", blank.historical_story_scores
            ),
            historical_timed_scores=_int_list(
                obj, "historicalTimedScores", blank.historical_timed_scores
            ),
            login_times=_int_list(obj, "loginTimes", blank.login_times),
        )


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _int_field(obj: dict[str, Any], key: str, default: int) -> int:
    value = obj.get(key)
    if value is None:
        return default
    if not _is_int(value):
        raise ValueError(f"{key!r} must be an integer")
    return value


def _int_list(obj: dict[str, Any], key: str, default: list[int]) -> list[int]:
    value = obj.get(key)
    if value is None:
        return default
    if not isinstance(value, list) or not all(_is_int(v) for v in value):
        raise ValueError(f"{key!r} must be a list of integers")
    return value


def _first_value(args: tuple[int, ...], kind: AnalyticType) -> int:
    if not args:
        raise ValueError(f"{kind.name} needs a score")
    return int(args[0])


def _slide(window: list[int], value: int) -> list[int]:
    return [*window, value][1:]


def _positive_average(scores: list[int]) -> int:
    positive = [score for score in scores if score > 0]
    if not positive:
        raise ValueError("no positive scores to average")
    return sum(positive) // len(positive)


def record(
    store: Store,
    player_id: str,
    analytic_type: int,
    *args: int,
    enabled: bool = True,
) -> bool:
    """Update one counter of a player and save it.

    Average-score types take the new score and keep a running window of
    recent scores; logins also note the time; other types add the given
    amount, or 1. Returns whether the player already had analytics data.
    When analytics are disabled nothing is stored and True is returned.
    """
    if not enabled:
        return True
    kind = AnalyticType(analytic_type)
    found = True
    try:
        raw = store.get(DB_BUCKET_ANALYTICS, player_id)
    except KeyNotFoundError as exc:
        log.warning("Analytics for %s not found (%s), using default", player_id, exc)
        aggregate = Aggregate.for_player(player_id)
        found = False
    else:
        if raw:
            aggregate = Aggregate.from_json(raw)
        else:
            log.warning("Analytics for %s found but empty, using default", player_id)
            aggregate = Aggregate.for_player(player_id)
            found = False

    if kind is AnalyticType.AVERAGE_STORY_SCORE:
        aggregate.historical_story_scores = _slide(
            aggregate.historical_story_scores, _first_value(args, kind)
        )
        aggregate.data[kind] = _positive_average(aggregate.historical_story_scores)
    elif kind is AnalyticType.AVERAGE_TIMED_SCORE:
        aggregate.historical_timed_scores = _slide(
            aggregate.historical_timed_scores, _first_value(args, kind)
        )
        aggregate.data[kind] = _positive_average(aggregate.historical_timed_scores)
    elif kind is AnalyticType.LOGINS:
        aggregate.data[kind] += 1
        aggregate.login_times.append(int(time.time()))
    else:
        aggregate.data[kind] += int(args[0]) if args else 1

    store.set(DB_BUCKET_ANALYTICS, player_id, aggregate.to_json())
    return found


def fetch(store: Store, player_id: str, analytic_type: int) -> int:
    """Return one counter of a player.

    Raises KeyNotFoundError for a player without analytics and ValueError
    for stored data that cannot be read.
    """
    raw = store.get(DB_BUCKET_ANALYTICS, player_id)
    if not raw:
        raise ValueError(f"analytics data for {player_id!r} is empty")
    return Aggregate.from_json(raw).data[int(analytic_type)]


def touch_analytics_db(store: Store) -> None:
    """Make sure the analytics bucket exists; failures are only logged."""
    try:
        store.set(DB_BUCKET_ANALYTICS, "touch", b"")
    except Exception as exc:  # the server keeps running without analytics
        log.error("Unable to touch %s: %s", DB_BUCKET_ANALYTICS, exc)