# uhppote-core

Building blocks for software that talks to UHPPOTE UT0311-L0x access
controllers. Standard library only, Python 3.10 and later.

## What is in the package

| Module | Contents |
| --- | --- |
| `uhppote_core.hhmm` | `HHmm` time of day, `hhmm_from_string`, `hhmm_from_time` |
| `uhppote_core.pin` | `PIN` keypad code |
| `uhppote_core.date` | `Date`, `parse_date`, `to_date` |
| `uhppote_core.date_time` | `DateTime`, `parse_datetime`, `datetime_now` |
| `uhppote_core.system_date` | `SystemDate` (two digit year) |
| `uhppote_core.system_time` | `SystemTime`, `time_from_string` |
| `uhppote_core.weekdays` | `Weekdays` |
| `uhppote_core.serial_number` | `SerialNumber` |
| `uhppote_core.version` | `Version` firmware version |
| `uhppote_core.mac` | `MacAddress`, `parse_mac` |
| `uhppote_core.addresses` | `BindAddr`, `BroadcastAddr`, `ControllerAddr`, `ListenAddr` and their `parse_*` functions |
| `uhppote_core.card_format` | `CardFormat`, `card_format_from_string` |
| `uhppote_core.card` | `Card` |
| `uhppote_core.segment` | `Segment`, `Segments` |
| `uhppote_core.time_profile` | `TimeProfile` |
| `uhppote_core.task` | `Task`, `TaskType` |
| `uhppote_core.interlock` | `Interlock` |
| `uhppote_core.door` | `ControlState`, `DoorControlState` |
| `uhppote_core.device` | `Device` |
| `uhppote_core.event` | `Event`, `EventIndex`, `EventIndexResult` |
| `uhppote_core.status` | `Status`, `StatusEvent` |
| `uhppote_core.controller_time` | `ControllerTime`, `Result` |
| `uhppote_core.transport` | `UT0311` UDP/TCP transport |

## Wire and JSON encodings

Most value types offer two pairs of conversions:

- `encode()` and the class method `decode(data)` for the controller's binary
  format: packed BCD digits for dates and times, little endian integers for
  PINs and serial numbers, big endian for versions, six raw bytes for MAC
  addresses;
- `to_json()` and the class method `from_json(value)` for the values used in
  JSON documents. They work on already decoded JSON values (strings, dicts,
  lists), so pair them with `json.loads` / `json.dumps`.

```python
from uhppote_core.hhmm import hhmm_from_string
from uhppote_core.pin import PIN
from uhppote_core.date import parse_date

start = hhmm_from_string("08:31")
start.to_json()                           # "08:31"
start.before(hhmm_from_string("09:00"))   # True

PIN(123456).encode()                      # b"\x40\xe2\x01"
PIN(1000000).to_json()                    # "" - PINs above 999999 are not valid

parse_date("2021-02-28").encode()         # b"\x20\x21\x02\x28"
```

`Date()`, `DateTime()` and `SystemDate()` are "zero" (unset) values; check
them with `is_zero()`. Decoding a `Date` or `DateTime` is forgiving: an
invalid BCD value, or the all-zero patterns an uninitialised controller
reports, decodes to the zero value instead of raising. `SystemDate.decode`
and `SystemTime.decode` raise `ValueError` for invalid values.

Errors are raised as `ValueError` for malformed values and `TypeError` for
values of the wrong JSON type.

## Addresses

```python
from uhppote_core.addresses import parse_bind_addr, parse_controller_addr

controller = parse_controller_addr("192.168.1.100")
str(controller)          # "192.168.1.100" - port 60000 is implied
controller.port          # 60000

bind = parse_bind_addr("192.168.1.100:10001")
```

Addresses are numeric only; no name resolution is done.

- `BindAddr` defaults to port 0 and rejects port 60000.
- `BroadcastAddr` and `ControllerAddr` default to port 60000 and reject
  port 0.
- `ListenAddr` needs an explicit port, and rejects 0 and 60000.

Each address type has `is_valid()`, `to_json()`, `from_json()`, `equal()`
(compares the IP address only) and `clone()`.

## Cards, profiles and tasks

```python
from uhppote_core.card import Card

card = Card.from_json({
    "card-number": 12345,
    "start-date": "2020-01-01",
    "end-date": "2020-12-31",
    "doors": {"1": 1, "2": 0, "3": 29, "4": 1},
})
str(card)    # "12345    2020-01-01 2020-12-31 Y N 29 Y"
```

Door permissions are `0` (no access), `1` (access) or `2..254` (a time
profile). A card's start and end dates are required when reading JSON, and a
PIN above 999999 is left out when writing it.

`TimeProfile` holds a date range, `Weekdays` and up to three `Segments`.
`Task` holds a `TaskType`; `TaskType.from_json` accepts the task number
(1..13) or its description, ignoring case, spaces and punctuation, for
example `"trigger once"`, and `TaskType.from_tsv` does the same for text
fields.

## Transport

`UT0311(bind_addr=None, listen_addr=None, timeout=5.0, debug=False)` sends
raw request bytes and returns raw reply bytes:

- `broadcast(addr, request)` returns every reply received within the timeout;
- `broadcast_to(addr, request, callback)` returns the first reply for which
  `callback(reply)` is true, or raises `TimeoutError`;
- `send_udp(addr, request)` exchanges one request and one reply over a
  connected UDP socket;
- `send_tcp(addr, request)` does the same over TCP, going through a SOCKS5
  proxy named by `ALL_PROXY` unless `NO_PROXY` excludes the address;
- `listen(stop, callback)` starts a thread that passes every datagram
  received on `listen_addr` to `callback` until the `threading.Event`
  `stop` is set, and returns that thread.

Requests whose second byte is `0x96` (set IP address) expect no reply. When
a fixed local bind port is used, calls are serialised. With `debug=True` the
requests and replies are printed as hex dumps.

## What the package does not do

It does not build or parse the controller's request and response packets,
and it has no high-level API for operations such as reading cards or setting
the time: the transport works on bytes that the caller has already encoded.
There is no command line tool.

## Tests

The test suite uses pytest, installed with the `test` extra:

```
pip install -e .[test]
pytest
```