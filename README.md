# outrun

Server-side building blocks for an endless-runner mobile game, and a small
HTTP front end that uses them.

The package holds:

- `outrun.ids` and `outrun.kinds`: the game's ID numbers and enumerations
  (characters, Chao, items, events, rarities, leagues and so on). The ID
  enums print as their decimal value, and `id_str()` gives the string form
  the client sends.
- `outrun.constants`: balance values such as `POINT_SCORES`,
  `UPGRADE_INCREASES`, `EPISODE_WITH_CHAPTERS`, `ITEM_PRICES` and the
  roulette costs, plus the storage bucket names.
- `outrun.config`: loaders for the server, event and information
  configuration files.
- `outrun.conversion`: turns configured events, information entries and
  tickers into the `Event`, `Information` and `Ticker` values sent to the
  client, resolving the special times described below.
- `outrun.crypto`: the client's message envelope, AES-128-CBC with PKCS#5
  padding and base64 (`encrypt`, `decrypt`, `get_received_message`,
  `build_response`).
- `outrun.storage`: `Store`, a bucketed key/value store in an SQLite file
  with zlib-compressed values.
- `outrun.sessions`: session IDs (`OUTRUN_` plus the MD5 of the player ID),
  which expire an hour after they are assigned.
- `outrun.analytics`: per-player counters (`record`, `fetch`) kept in the
  analytics bucket.
- `outrun.server`: the HTTP front end and the `outrun` command.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Running the server

```
outrun [--config config.json] [--db outrun.db]
```

`--config` names the server configuration file (default `config.json`),
`--db` the database file (default `outrun.db`). If the configuration file
is missing or cannot be read, the defaults are used and the server still
starts. The event and information files it names are then read and checked
the same way; with the `silence...Errors` options off, a failure to read
them is logged.

The server listens on the configured port and, for every request, GET or
POST:

- with `enablePublicStats` on, answers `/outrunInfo/stats` with JSON
  holding `allocatedMemory` (megabytes), `goroutineCount` (the number of
  running threads) and `cpuUsages`;
- otherwise, with `logUnknownRequests` on, reads the `param`, `key` and
  `secure` form fields (from the query string or a form-encoded body),
  decrypts the message when `secure` is `1`, saves it to
  `logging/unknown_requests/<path>_<unix time>.txt` and answers with an
  empty 200 response;
- otherwise answers 404.

Leading slashes in a request path are collapsed into one. On start the
server also creates the analytics bucket in the database.

### What the server does not do

The game's own endpoints (login, player, character and Chao state, item
and Chao roulettes, shop, leaderboards, events and information lists) are
not served: every such request is treated as unknown, as above. There are
no player accounts and no RPC interface, and the package has no code for
picking roulette prizes. The event and information files are checked on
start but not used for anything further by the server.

### `config.json`

Every key is optional. Keys are matched without regard to case, unknown
keys are ignored, `null` keeps the default, and a value of the wrong JSON
type makes the file count as unreadable.

| Key                        | Default               | Used by the server                                     |
|----------------------------|-----------------------|--------------------------------------------------------|
| `port`                     | `"9001"`              | TCP port to listen on                                  |
| `logUnknownRequests`       | `true`                | save unhandled requests as described above            |
| `enablePublicStats`        | `false`               | serve `/outrunInfo/stats`                              |
| `eventConfigFilename`      | `"event_config.json"` | event configuration file                               |
| `silenceEventConfigErrors` | `true`                | do not log failures to read the event file             |
| `infoConfigFilename`       | `"info_config.json"`  | information configuration file                         |
| `silenceInfoConfigErrors`  | `true`                | do not log failures to read the information file       |

The keys `doTimeLogging` (`true`), `logAllRequests`, `logAllResponses`,
`debug`, `debugPrints`, `enableRPC`, `rpcPort` (`"23432"`),
`enablePublicStats`, `endpointPrefix` (`""`), `enableAnalytics` and
`printPlayerNames` (`false` unless noted) are read into `ServerConfig` but
the server does not act on them.

### Event configuration

```json
{
  "allowEvents": true,
  "enforceGlobal": false,
  "currentEvents": [
    {"id": 7, "type": "quick", "startTime": -4, "endTime": -4}
  ]
}
```

`type` is one of `specialStage`, `raidBoss`, `collectObject`, `gacha`,
`advert`, `quick` or `bgm`; `load_event_config` drops events of any other
type with a warning. `configured_event_to_event` gives the event the ID
`id * 10000` plus the base ID of its type.

### Information configuration

```json
{
  "enableInformation": true,
  "infos": [
    {
      "id": 1,
      "priority": 1,
      "startTime": -2,
      "endTime": -3,
      "content": {
        "displayType": "everyDay",
        "message": "Welcome back!",
        "imageID": "-1",
        "infoType": "text",
        "extra": "~"
      }
    }
  ],
  "enableTickers": false,
  "tickers": [],
  "hideWatermarkTicker": false
}
```

`displayType` is one of `everyDay`, `once`, `fullTime` or `onlyInfoPage`;
`infoType` is one of `text`, `image`, `feed`, `roulette`, `shop`, `event`,
`rouletteInfo`, `quickInfo`, `countryText` or `countryImage`.
`load_info_config` drops entries with other values. `construct_param()`
joins display type, message, image ID, info type and extra with `_`,
stopping at the first part that is `~`.

### Special times

In event, information and ticker entries, `startTime` and `endTime` take
Unix timestamps or one of these values, resolved in local time:

- `-2`: the start of the current day
- `-3`: the end of the current day (23:59:59)
- `-4`: one second ago as a start, 24 hours ahead as an end

## Using the library

```python
import time

from outrun.storage import Store
from outrun.sessions import assign_session_id, is_valid_session_id, purge_all_expired_session_ids
from outrun.analytics import AnalyticType, record, fetch

with Store("outrun.db") as store:
    now = int(time.time())
    sid = assign_session_id(store, "1234567890", now)
    print(sid, is_valid_session_id(store, sid, now))
    purge_all_expired_session_ids(store, now)

    record(store, "1234567890", AnalyticType.STORY_STARTS)
    print(fetch(store, "1234567890", AnalyticType.STORY_STARTS))
```

`Store.get` raises `KeyNotFoundError` for an absent key. Unknown session
IDs raise the same error from `is_valid_session_id`.