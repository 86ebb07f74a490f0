"""Turning configured events, information and tickers into what is sent.

Configured start and end times may use special values: -2 for the start
of the current local day, -3 for its end, and -4 for "just started" (a
start time) or "a day from now" (an end time). Other values pass through.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime

from outrun.config import ConfiguredEvent, ConfiguredInfo, ConfiguredTicker

__all__ = [
    "Event",
    "Information",
    "Ticker",
    "resolve_start_time",
    "resolve_end_time",
    "configured_event_to_event",
    "configured_info_to_information",
    "configured_ticker_to_ticker",
]

START_OF_DAY = -2
END_OF_DAY = -3
IMMEDIATE = -4

_DAY_SECONDS = 24 * 60 * 60


@dataclass(frozen=True)
class Event:
    """An event as offered to the client."""

    id: int
    type: int
    start_time: int
    end_time: int
    close_time: int


@dataclass(frozen=True)
class Information:
    """An information entry as offered to the client."""

    id: int
    priority: int
    start_time: int
    end_time: int
    param: str


@dataclass(frozen=True)
class Ticker:
    """A ticker message as offered to the client."""

    id: int
    start_time: int
    end_time: int
    message: str


def _current(now: datetime | None) -> datetime:
    return now if now is not None else datetime.now().astimezone()


def _unix(moment: datetime) -> int:
    return math.floor(moment.timestamp())


def _day_bound(value: int, now: datetime) -> int | None:
    if value == START_OF_DAY:
        return _unix(now.replace(hour=0, minute=0, second=0, microsecond=0))
    if value == END_OF_DAY:
        return _unix(now.replace(hour=23, minute=59, second=59, microsecond=0))
    return None


def resolve_start_time(value: int, now: datetime | None = None) -> int:
    """Return the Unix start time a configured start value stands for."""
    moment = _current(now)
    bound = _day_bound(value, moment)
    if bound is not None:
        return bound
    if value == IMMEDIATE:
        return _unix(moment) - 1
    return value


def resolve_end_time(value: int, now: datetime | None = None) -> int:
    """Return the Unix end time a configured end value stands for."""
    moment = _current(now)
    bound = _day_bound(value, moment)
    if bound is not None:
        return bound
    if value == IMMEDIATE:
        return _unix(moment) + _DAY_SECONDS
    return value


def configured_event_to_event(event: ConfiguredEvent, now: datetime | None = None) -> Event:
    """Build the event the client sees; its ID combines the configured ID and type."""
    moment = _current(now)
    real_type = event.real_type()
    end_time = resolve_end_time(event.end_time, moment)
    return Event(
        id=event.id * 10000 + real_type,
        type=real_type,
        start_time=resolve_start_time(event.start_time, moment),
        end_time=end_time,
        close_time=end_time,
    )


def configured_info_to_information(
    info: ConfiguredInfo, now: datetime | None = None
) -> Information:
    """Build the information entry the client sees."""
    moment = _current(now)
    return Information(
        id=info.id,
        priority=info.priority,
        start_time=resolve_start_time(info.start_time, moment),
        end_time=resolve_end_time(info.end_time, moment),
        param=info.construct_param(),
    )


def configured_ticker_to_ticker(
    index: int, ticker: ConfiguredTicker, now: datetime | None = None
) -> Ticker:
    """Build the ticker the client sees, identified by its position."""
    moment = _current(now)
    return Ticker(
        id=index,
        start_time=resolve_start_time(ticker.start_time, moment),
        end_time=resolve_end_time(ticker.end_time, moment),
        message=ticker.message,
    )