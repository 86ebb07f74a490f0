"""Server, event and information configuration files.

Each loader starts from the defaults and lets the keys present in a JSON
file override them. Keys are matched without regard to case, keys that are
not known are ignored, and a JSON null leaves a value at its default. A
value of the wrong JSON type raises ValueError.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path
from types import MappingProxyType
from typing import Any

from outrun.kinds import EventID

__all__ = [
    "SKIP_VALUE",
    "EVENT_TYPES",
    "DISPLAY_TYPES",
    "INFO_TYPES",
    "ServerConfig",
    "load_server_config",
    "ConfiguredEvent",
    "EventConfig",
    "load_event_config",
    "InfoData",
    "ConfiguredInfo",
    "ConfiguredTicker",
    "InfoConfig",
    "load_info_config",
]

log = logging.getLogger(__name__)

# A part of an information parameter holding this value ends the parameter.
SKIP_VALUE = "~"

EVENT_TYPES = MappingProxyType(
    {
        "specialStage": int(EventID.SPECIAL_STAGE),
        "raidBoss": int(EventID.RAID_BOSS),
        "collectObject": int(EventID.COLLECT_OBJECT),
        "gacha": int(EventID.GACHA),
        "advert": int(EventID.ADVERT),
        "quick": int(EventID.QUICK),
        "bgm": int(EventID.BGM),
    }
)

DISPLAY_TYPES = MappingProxyType(
    {
        "everyDay": "0",
        "once": "1",
        "fullTime": "2",
        "onlyInfoPage": "3",
    }
)

INFO_TYPES = MappingProxyType(
    {
        "text": "0",
        "image": "1",
        "feed": "2",
        "roulette": "10",
        "shop": "11",
        "event": "12",
        "rouletteInfo": "14",  # the banner at the bottom of the menu screen
        "quickInfo": "15",  # a banner across the timed mode button
        "countryText": "16",  # chosen by region code
        "countryImage": "17",  # chosen by region code
    }
)

_KEEP = object()

Reader = Callable[[Any, str], Any]
Spec = tuple[tuple[str, str, Reader], ...]


def _read_str(value: Any, key: str) -> Any:
    if value is None:
        return _KEEP
    if not isinstance(value, str):
        raise ValueError(f"{key!r}: expected a string, got {type(value).__name__}")
    return value


def _read_bool(value: Any, key: str) -> Any:
    if value is None:
        return _KEEP
    if not isinstance(value, bool):
        raise ValueError(f"{key!r}: expected a boolean, got {type(value).__name__}")
    return value


def _read_int(value: Any, key: str) -> Any:
    if value is None:
        return _KEEP
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{key!r}: expected an integer, got {value!r}")
    return value


def _apply(target: Any, data: Any, spec: Spec, where: str) -> None:
    if not isinstance(data, dict):
        raise ValueError(f"{where}: expected a JSON object, got {type(data).__name__}")
    lowered = {key.lower(): value for key, value in data.items()}
    for key, attr, reader in spec:
        if key.lower() not in lowered:
            continue
        result = reader(lowered[key.lower()], key)
        if result is not _KEEP:
            setattr(target, attr, result)


def _builder(cls: type, spec: Spec) -> Reader:
    def build(value: Any, key: str) -> Any:
        obj = cls()
        if value is not None:
            _apply(obj, value, spec, key)
        return obj

    return build


def _list_of(build: Reader) -> Reader:
    def read(value: Any, key: str) -> Any:
        if value is None:
            return []
        if not isinstance(value, list):
            raise ValueError(f"{key!r}: expected a list, got {type(value).__name__}")
        return [build(item, f"{key}[{index}]") for index, item in enumerate(value)]

    return read


def _load_json(filename: str | PathLike[str]) -> Any:
    return json.loads(Path(filename).read_bytes())


def _load_into(target: Any, filename: str | PathLike[str], spec: Spec) -> None:
    data = _load_json(filename)
    if data is not None:
        _apply(target, data, spec, str(filename))


@dataclass
class ServerConfig:
    """Settings of the game server itself."""

    port: str = "9001"
    do_time_logging: bool = True
    log_unknown_requests: bool = True
    log_all_requests: bool = False
    log_all_responses: bool = False
    debug: bool = False
    debug_prints: bool = False
    enable_rpc: bool = False
    rpc_port: str = "23432"
    enable_public_stats: bool = False
    endpoint_prefix: str = ""
    enable_analytics: bool = False
    print_player_names: bool = False
    event_config_filename: str = "event_config.json"
    silence_event_config_errors: bool = True
    info_config_filename: str = "info_config.json"
    silence_info_config_errors: bool = True


_SERVER_SPEC: Spec = (
    ("port", "port", _read_str),
    ("doTimeLogging", "do_time_logging", _read_bool),
    ("logUnknownRequests", "log_unknown_requests", _read_bool),
    ("logAllRequests", "log_all_requests", _read_bool),
    ("logAllResponses", "log_all_responses", _read_bool),
    ("debug", "debug", _read_bool),
    ("debugPrints", "debug_prints", _read_bool),
    ("enableRPC", "enable_rpc", _read_bool),
    ("rpcPort", "rpc_port", _read_str),
    ("enablePublicStats", "enable_public_stats", _read_bool),
    ("endpointPrefix", "endpoint_prefix", _read_str),
    ("enableAnalytics", "enable_analytics", _read_bool),
    ("printPlayerNames", "print_player_names", _read_bool),
    ("eventConfigFilename", "event_config_filename", _read_str),
    ("silenceEventConfigErrors", "silence_event_config_errors", _read_bool),
    ("infoConfigFilename", "info_config_filename", _read_str),
    ("silenceInfoConfigErrors", "silence_info_config_errors", _read_bool),
)


def load_server_config(filename: str | PathLike[str]) -> ServerConfig:
    """Read the server configuration; raises OSError or ValueError on failure."""
    config = ServerConfig()
    _load_into(config, filename, _SERVER_SPEC)
    return config


@dataclass
class ConfiguredEvent:
    """An event as written in the event configuration.

    Start and end times may be -2 (start of today), -3 (end of today) or
    -4 (just started, or ending a day from now).
    """

    id: int = 0
    type: str = ""
    start_time: int = 0
    end_time: int = 0

    def real_type(self) -> int:
        """Return the base event ID of the type, or 0 for an unknown type."""
        return EVENT_TYPES.get(self.type, 0)

    def has_valid_type(self) -> bool:
        """Tell whether the type names a known kind of event."""
        return self.type in EVENT_TYPES


_EVENT_SPEC: Spec = (
    ("id", "id", _read_int),
    ("type", "type", _read_str),
    ("startTime", "start_time", _read_int),
    ("endTime", "end_time", _read_int),
)


@dataclass
class EventConfig:
    """Which events the server offers."""

    allow_events: bool = False
    current_events: list[ConfiguredEvent] = field(default_factory=list)
    enforce_global: bool = False


_EVENT_CONFIG_SPEC: Spec = (
    ("allowEvents", "allow_events", _read_bool),
    ("currentEvents", "current_events", _list_of(_builder(ConfiguredEvent, _EVENT_SPEC))),
    ("enforceGlobal", "enforce_global", _read_bool),
)


def load_event_config(filename: str | PathLike[str]) -> EventConfig:
    """Read the event configuration, dropping events of unknown type."""
    config = EventConfig()
    _load_into(config, filename, _EVENT_CONFIG_SPEC)
    kept = []
    for index, event in enumerate(config.current_events):
        if not event.has_valid_type():
            log.warning("Invalid event type %s at index %d, ignoring", event.type, index)
            continue
        kept.append(event)
    config.current_events = kept
    return config


@dataclass
class InfoData:
    """The content of an information entry, by configuration names."""

    display_type: str = ""
    message: str = ""
    image_id: str = ""
    info_type: str = ""
    extra: str = ""  # region code for country types, a web address otherwise


_INFO_DATA_SPEC: Spec = (
    ("displayType", "display_type", _read_str),
    ("message", "message", _read_str),
    ("imageID", "image_id", _read_str),
    ("infoType", "info_type", _read_str),
    ("extra", "extra", _read_str),
)


@dataclass
class ConfiguredInfo:
    """An information entry as written in the information configuration."""

    id: int = 0
    priority: int = 0
    start_time: int = 0
    end_time: int = 0
    data: InfoData = field(default_factory=InfoData)

    def construct_param(self) -> str:
        """Build the underscore-joined parameter string the client reads.

        The parts are added in order and the first part equal to the skip
        value ends the parameter.
        """
        parts = (
            DISPLAY_TYPES.get(self.data.display_type, ""),
            self.data.message,
            self.data.image_id,
            INFO_TYPES.get(self.data.info_type, ""),
            self.data.extra,
        )
        taken = []
        for part in parts:
            if part == SKIP_VALUE:
                break
            taken.append(part)
        return "_".join(taken)

    def has_valid_display_type(self) -> bool:
        """Tell whether the display type is known."""
        return self.data.display_type in DISPLAY_TYPES

    def has_valid_info_type(self) -> bool:
        """Tell whether the info type is known."""
        return self.data.info_type in INFO_TYPES


_INFO_SPEC: Spec = (
    ("id", "id", _read_int),
    ("priority", "priority", _read_int),
    ("startTime", "start_time", _read_int),
    ("endTime", "end_time", _read_int),
    ("content", "data", _builder(InfoData, _INFO_DATA_SPEC)),
)


@dataclass
class ConfiguredTicker:
    """A ticker message as written in the information configuration."""

    message: str = ""
    start_time: int = 0
    end_time: int = 0


_TICKER_SPEC: Spec = (
    ("message", "message", _read_str),
    ("startTime", "start_time", _read_int),
    ("endTime", "end_time", _read_int),
)


@dataclass
class InfoConfig:
    """Information entries and tickers shown to players."""

    enable_infos: bool = False
    infos: list[ConfiguredInfo] = field(default_factory=list)
    enable_tickers: bool = False
    tickers: list[ConfiguredTicker] = field(default_factory=list)
    hide_watermark_ticker: bool = False


_INFO_CONFIG_SPEC: Spec = (
    ("enableInformation", "enable_infos", _read_bool),
    ("infos", "infos", _list_of(_builder(ConfiguredInfo, _INFO_SPEC))),
    ("enableTickers", "enable_tickers", _read_bool),
    ("tickers", "tickers", _list_of(_builder(ConfiguredTicker, _TICKER_SPEC))),
    ("hideWatermarkTicker", "hide_watermark_ticker", _read_bool),
)


def load_info_config(filename: str | PathLike[str]) -> InfoConfig:
    """Read the information configuration, dropping entries of unknown type."""
    config = InfoConfig()
    _load_into(config, filename, _INFO_CONFIG_SPEC)
    kept = []
    for index, info in enumerate(config.infos):
        if not info.has_valid_display_type():
            log.warning(
                "Invalid information display type %s at index %d, ignoring",
                info.data.display_type,
                index,
            )
            continue
        if not info.has_valid_info_type():
            log.warning(
                "Invalid information info type %s at index %d, ignoring",
                info.data.info_type,
                index,
            )
            continue
        kept.append(info)
    config.infos = kept
    return config


def _mapping_keys(mapping: Mapping[str, Any]) -> list[str]:
    return list(mapping)