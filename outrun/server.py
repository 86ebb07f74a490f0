"""HTTP front end of the game server: path handling, request logging and stats."""

from __future__ import annotations

import argparse
import json
import logging
import os
import threading
import time
from collections.abc import Sequence
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path
from typing import Any
from urllib.parse import parse_qs

import psutil

from outrun.analytics import touch_analytics_db
from outrun.config import (
    ServerConfig,
    load_event_config,
    load_info_config,
    load_server_config,
)
from outrun.constants import DB_FILE_NAME
from outrun.crypto import get_received_message
from outrun.storage import Store

__all__ = [
    "UNKNOWN_REQUEST_DIRECTORY",
    "STATS_PATH",
    "normalize_path",
    "unknown_request_path",
    "write_unknown_request",
    "collect_stats",
    "RequestHandler",
    "OutrunServer",
    "build_server",
    "main",
]

log = logging.getLogger(__name__)

UNKNOWN_REQUEST_DIRECTORY = "logging/unknown_requests/"
STATS_PATH = "/outrunInfo/stats"
_NOT_FOUND = b"404 page not found\n"
_BAD_REQUEST = b"Bad request"


def normalize_path(path: str) -> str:
    """Collapse any run of leading slashes into exactly one."""
    return "/" + path.lstrip("/")


def unknown_request_path(
    directory: str | os.PathLike[str], request_path: str, timestamp: int
) -> Path:
    """Return the file an unknown request to ``request_path`` is logged to."""
    name = request_path.replace("/", "-")
    return Path(directory) / f"{name}_{int(timestamp)}.txt"


def write_unknown_request(
    directory: str | os.PathLike[str],
    request_path: str,
    message: bytes,
    timestamp: int | None = None,
) -> Path | None:
    """Save the message of an unknown request; returns the file, or None on failure."""
    moment = int(time.time()) if timestamp is None else int(timestamp)
    target = unknown_request_path(directory, request_path, moment)
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(bytes(message))
    except OSError as exc:
        log.error("Unable to write unknown request: %s", exc)
        return None
    log.info("Unknown request, output to %s", target)
    return target


def collect_stats() -> dict[str, Any]:
    """Report memory use in megabytes, the thread count and CPU usage."""
    allocated = psutil.Process().memory_info().rss // 1024 // 1024
    try:
        cpus = [float(psutil.cpu_percent(interval=0.01))]
    except (OSError, psutil.Error):
        cpus = [0.0]
    return {
        "allocatedMemory": allocated,
        "goroutineCount": threading.active_count(),
        "cpuUsages": cpus,
    }


class OutrunServer(ThreadingHTTPServer):
    """Threaded HTTP server carrying the server configuration."""

    daemon_threads = True

    def __init__(self, address: tuple[str, int], config: ServerConfig) -> None:
        super().__init__(address, RequestHandler)
        self.config = config
        self.unknown_request_directory: str | os.PathLike[str] = UNKNOWN_REQUEST_DIRECTORY


class RequestHandler(BaseHTTPRequestHandler):
    """Serves the stats endpoint and logs requests nothing else handles."""

    server: OutrunServer

    def do_GET(self) -> None:
        self._handle(b"")

    def do_POST(self) -> None:
        length = int(self.headers.get("Content-Length") or 0)
        body = self.rfile.read(length) if length > 0 else b""
        self._handle(body)

    def log_message(self, format: str, *args: Any) -> None:
        log.debug("%s - %s", self.address_string(), format % args)

    def _split(self) -> tuple[str, str]:
        path, _, query = self.path.partition("?")
        return normalize_path(path), query

    def _form(self, query: str, body: bytes) -> dict[str, list[str]]:
        form: dict[str, list[str]] = {}
        content_type = (self.headers.get("Content-Type") or "").split(";")[0].strip()
        sources = []
        if body and content_type == "application/x-www-form-urlencoded":
            sources.append(body.decode("utf-8", errors="replace"))
        sources.append(query)
        for source in sources:
            for name, values in parse_qs(source, keep_blank_values=True).items():
                form.setdefault(name, []).extend(values)
        return form

    def _send(self, status: int, body: bytes, content_type: str = "text/plain") -> None:
        self.send_response(status)
        self.send_header("Content-Type", content_type)
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def _handle(self, body: bytes) -> None:
        config = self.server.config
        path, query = self._split()
        if config.enable_public_stats and path == STATS_PATH:
            payload = json.dumps(collect_stats(), separators=(",", ":")).encode("utf-8")
            self._send(200, payload, "application/json")
            return
        if config.log_unknown_requests:
            try:
                message = get_received_message(self._form(query, body))
            except ValueError as exc:
                log.error("Unable to read request to %s: %s", path, exc)
                self._send(400, _BAD_REQUEST)
                return
            write_unknown_request(self.server.unknown_request_directory, path, message)
            self._send(200, b"")
            return
        self._send(404, _NOT_FOUND)


def build_server(config: ServerConfig, port: int | str | None = None) -> OutrunServer:
    """Create (but do not start) the HTTP server on the given or configured port."""
    chosen = int(config.port if port is None else port)
    return OutrunServer(("", chosen), config)


def _load_configs(config_file: str) -> ServerConfig:
    try:
        config = load_server_config(config_file)
    except (OSError, ValueError) as exc:
        log.info("Failure loading config file %s (%s), using defaults", config_file, exc)
        config = ServerConfig()
    else:
        log.info("Config file (%s) loaded", config_file)

    try:
        load_event_config(config.event_config_filename)
    except (OSError, ValueError) as exc:
        if not config.silence_event_config_errors:
            log.info(
                "Failure loading event config file %s (%s), using defaults",
                config.event_config_filename,
                exc,
            )
    else:
        log.info("Event config file (%s) loaded", config.event_config_filename)

    try:
        load_info_config(config.info_config_filename)
    except (OSError, ValueError) as exc:
        if not config.silence_info_config_errors:
            log.info(
                "Failure loading info config file %s (%s), using defaults",
                config.info_config_filename,
                exc,
            )
    else:
        log.info("Info config file (%s) loaded", config.info_config_filename)
    return config


def main(argv: Sequence[str] | None = None) -> int:
    """Load the configuration and serve until interrupted."""
    parser = argparse.ArgumentParser(prog="outrun", description="Run the game server.")
    parser.add_argument("--config", default="config.json", help="server configuration file")
    parser.add_argument("--db", default=DB_FILE_NAME, help="database file")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")
    config = _load_configs(args.config)

    store = Store(args.db)
    threading.Thread(target=touch_analytics_db, args=(store,), daemon=True).start()

    server = build_server(config)
    log.info("Starting server on port %s", config.port)
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        log.info("Shutting down")
    finally:
        server.server_close()
        store.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())