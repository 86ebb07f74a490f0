import json

import pytest

from outrun.config import (
    DISPLAY_TYPES,
    EVENT_TYPES,
    INFO_TYPES,
    ConfiguredEvent,
    ConfiguredInfo,
    EventConfig,
    InfoConfig,
    InfoData,
    ServerConfig,
    load_event_config,
    load_info_config,
    load_server_config,
)
from outrun.kinds import EventID


def _write(tmp_path, data, name="config.json"):
    path = tmp_path / name
    path.write_text(data if isinstance(data, str) else json.dumps(data))
    return path


def test_server_defaults_from_empty_object(tmp_path):
    config = load_server_config(_write(tmp_path, {}))
    assert config == ServerConfig()
    assert config.port == "9001"
    assert config.rpc_port == "23432"
    assert config.event_config_filename == "event_config.json"
    assert config.info_config_filename == "info_config.json"
    assert config.do_time_logging is True
    assert config.debug is False


def test_server_overrides_and_ignores_unknown_keys(tmp_path):
    path = _write(tmp_path, {"port": "1234", "debug": True, "unknownKey": 5})
    config = load_server_config(path)
    assert config.port == "1234"
    assert config.debug is True
    assert config.log_unknown_requests is True


def test_server_keys_match_without_case(tmp_path):
    config = load_server_config(_write(tmp_path, {"ENDPOINTPREFIX": "/api"}))
    assert config.endpoint_prefix == "/api"


def test_server_null_keeps_default(tmp_path):
    config = load_server_config(_write(tmp_path, {"port": None}))
    assert config.port == "9001"


def test_server_null_document_keeps_defaults(tmp_path):
    assert load_server_config(_write(tmp_path, "null")) == ServerConfig()


def test_server_wrong_type_raises(tmp_path):
    with pytest.raises(ValueError):
        load_server_config(_write(tmp_path, {"port": 9001}))


def test_server_non_object_raises(tmp_path):
    with pytest.raises(ValueError):
        load_server_config(_write(tmp_path, [1, 2]))


def test_server_malformed_json_raises(tmp_path):
    with pytest.raises(ValueError):
        load_server_config(_write(tmp_path, "{not json"))


def test_server_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_server_config(tmp_path / "absent.json")


def test_event_types_map_to_event_ids():
    assert ConfiguredEvent(id=1, type="bgm").real_type() == EventID.BGM
    assert ConfiguredEvent(id=1, type="specialStage").real_type() == EventID.SPECIAL_STAGE
    assert len(EVENT_TYPES) == len(EventID)
    for name in EVENT_TYPES:
        event = ConfiguredEvent(id=1, type=name)
        assert event.has_valid_type() is True
        assert event.real_type() == EVENT_TYPES[name]


def test_configured_event_type_checks():
    good = ConfiguredEvent(id=1, type="quick")
    bad = ConfiguredEvent(id=1, type="nonsense")
    assert good.has_valid_type() is True
    assert good.real_type() == EventID.QUICK
    assert bad.has_valid_type() is False
    assert bad.real_type() == 0


def test_event_config_filters_invalid_types(tmp_path):
    path = _write(
        tmp_path,
        {
            "allowEvents": True,
            "currentEvents": [
                {"id": 1, "type": "raidBoss", "startTime": -2, "endTime": -3},
                {"id": 2, "type": "nonsense", "startTime": 0, "endTime": 0},
                {"id": 3, "type": "gacha"},
            ],
        },
    )
    config = load_event_config(path)
    assert config.allow_events is True
    assert config.enforce_global is False
    assert [event.id for event in config.current_events] == [1, 3]
    assert config.current_events[0] == ConfiguredEvent(1, "raidBoss", -2, -3)
    assert config.current_events[1].start_time == 0


def test_event_config_defaults(tmp_path):
    assert load_event_config(_write(tmp_path, {})) == EventConfig()


def test_event_config_rejects_float_id(tmp_path):
    with pytest.raises(ValueError):
        load_event_config(_write(tmp_path, {"currentEvents": [{"id": 1.5, "type": "bgm"}]}))


def _info(display="once", message="hello", image="-1", info_type="image", extra="x"):
    return ConfiguredInfo(
        id=5,
        priority=1,
        data=InfoData(display, message, image, info_type, extra),
    )


def test_construct_param_full():
    assert _info().construct_param() == "1_hello_-1_1_x"


def test_construct_param_stops_at_skip_value():
    full = _info().construct_param()
    assert _info(message="~").construct_param() == "1"
    cut_image = _info(image="~").construct_param()
    cut_extra = _info(extra="~").construct_param()
    assert full.startswith(cut_image)
    assert full.startswith(cut_extra)
    assert cut_extra.count("_") == 3
    assert cut_image.count("_") == 1


def test_info_type_checks():
    assert _info().has_valid_display_type() is True
    assert _info().has_valid_info_type() is True
    assert _info(display="never").has_valid_display_type() is False
    assert _info(info_type="video").has_valid_info_type() is False
    assert DISPLAY_TYPES["everyDay"] == "0"
    assert INFO_TYPES["countryImage"] == "17"


def test_info_config_filters_and_reads_tickers(tmp_path):
    path = _write(
        tmp_path,
        {
            "enableInformation": True,
            "infos": [
                {
                    "id": 10,
                    "priority": 2,
                    "startTime": -4,
                    "endTime": -4,
                    "content": {
                        "displayType": "fullTime",
                        "message": "hi",
                        "imageID": "7",
                        "infoType": "text",
                        "extra": "~",
                    },
                },
                {"id": 11, "content": {"displayType": "bogus", "infoType": "text"}},
                {"id": 12, "content": {"displayType": "once", "infoType": "bogus"}},
            ],
            "enableTickers": True,
            "tickers": [{"message": "welcome", "startTime": 1, "endTime": 2}],
            "hideWatermarkTicker": True,
        },
    )
    config = load_info_config(path)
    assert config.enable_infos is True
    assert [info.id for info in config.infos] == [10]
    assert config.infos[0].data.image_id == "7"
    assert config.infos[0].start_time == -4
    assert config.enable_tickers is True
    assert config.tickers[0].message == "welcome"
    assert config.tickers[0].end_time == 2
    assert config.hide_watermark_ticker is True


def test_info_config_defaults(tmp_path):
    assert load_info_config(_write(tmp_path, {"infos": None})) == InfoConfig()