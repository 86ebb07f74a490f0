import json
import threading
import urllib.error
import urllib.parse
import urllib.request
from pathlib import Path

import pytest

from outrun.config import ServerConfig
from outrun.crypto import ENCRYPTION_KEY, b64_encode, encrypt
from outrun.server import (
    STATS_PATH,
    build_server,
    collect_stats,
    normalize_path,
    unknown_request_path,
    write_unknown_request,
)


@pytest.mark.parametrize(
    "raw, expected",
    [("///Game/actStart/", "/Game/actStart/"), ("", "/"), ("Login/login/", "/Login/login/"), ("/a", "/a")],
)
def test_normalize_path(raw, expected):
    assert normalize_path(raw) == expected


def test_unknown_request_path_replaces_slashes():
    path = unknown_request_path("logs", "/Game/foo/", 1500)
    assert path == Path("logs") / "-Game-foo-_1500.txt"


def test_write_unknown_request_round_trip(tmp_path):
    target = write_unknown_request(tmp_path / "sub", "/Spin/x", b"payload", 42)
    assert target is not None
    assert target.parent == tmp_path / "sub"
    assert target.read_bytes() == b"payload"


def test_write_unknown_request_failure_returns_none(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("x")
    assert write_unknown_request(blocker, "/a", b"data", 1) is None


def test_collect_stats_shape():
    stats = collect_stats()
    assert set(stats) == {"allocatedMemory", "goroutineCount", "cpuUsages"}
    assert stats["allocatedMemory"] >= 0
    assert stats["goroutineCount"] >= 1
    assert len(stats["cpuUsages"]) >= 1


@pytest.fixture
def serve(tmp_path):
    servers = []

    def start(config):
        server = build_server(config, 0)
        server.unknown_request_directory = tmp_path / "unknown"
        thread = threading.Thread(target=server.serve_forever, daemon=True)
        thread.start()
        servers.append(server)
        return f"http://127.0.0.1:{server.server_address[1]}"

    yield start
    for server in servers:
        server.shutdown()
        server.server_close()


def _post(url, fields):
    data = urllib.parse.urlencode(fields).encode()
    request = urllib.request.Request(
        url, data=data, headers={"Content-Type": "application/x-www-form-urlencoded"}
    )
    with urllib.request.urlopen(request, timeout=5) as response:
        return response.status, response.read()


def test_stats_endpoint(serve):
    base = serve(ServerConfig(enable_public_stats=True))
    with urllib.request.urlopen(base + STATS_PATH, timeout=5) as response:
        body = json.loads(response.read())
    assert set(body) == {"allocatedMemory", "goroutineCount", "cpuUsages"}


def test_unknown_plain_request_is_logged(serve, tmp_path):
    base = serve(ServerConfig())
    status, body = _post(base + "//Game/foo", {"param": "hello"})
    assert status == 200
    assert body == b""
    files = list((tmp_path / "unknown").glob("-Game-foo_*.txt"))
    assert len(files) == 1
    assert files[0].read_bytes() == b"hello"


def test_unknown_secure_request_is_decrypted(serve, tmp_path):
    base = serve(ServerConfig())
    iv = "0123456789abcdef"
    message = b'{"sessionId":"abc"}'
    param = b64_encode(encrypt(message, ENCRYPTION_KEY, iv.encode()))
    status, _ = _post(base + "/Game/bar", {"param": param, "key": iv, "secure": "1"})
    assert status == 200
    files = list((tmp_path / "unknown").glob("-Game-bar_*.txt"))
    assert [f.read_bytes() for f in files] == [message]


def test_not_found_when_logging_disabled(serve):
    base = serve(ServerConfig(log_unknown_requests=False))
    with pytest.raises(urllib.error.HTTPError) as info:
        urllib.request.urlopen(base + STATS_PATH, timeout=5)
    assert info.value.code == 404
    assert info.value.read() == b"404 page not found\n"