"""Binary record codec for the weeklog.

Each record is 17 bytes, big-endian::

    0-7    steamid     u64
    8      category    u8   index into the week's category registry
    9-12   time        u32  run duration in ticks
    13     portals     u8
    14-16  timestamp   u24  seconds since the start of the week

A record with ``time == 0`` and ``portals == 0`` is a tombstone: it erases the
most recent earlier run by the same player in the same category.
"""

from __future__ import annotations

import struct
from collections import Counter
from typing import Any, Iterator, List, Sequence, Tuple, Union

from ..core.errors import CategoryError, CorruptLogError, EncodeError
from ..models import CategoryRegistry, LogEntry

RECORD_SIZE = 17

_HEAD = struct.Struct(">QBIB")
_TIMESTAMP_SIZE = RECORD_SIZE - _HEAD.size

_FIELD_BITS = {
    "steamid": 64,
    "time": 32,
    "portals": 8,
    "timestamp": 24,
}

Categories = Union[CategoryRegistry, Sequence[str]]


def _registry(categories: Categories) -> CategoryRegistry:
    if isinstance(categories, CategoryRegistry):
        return categories
    return CategoryRegistry.from_keys(categories)


def coerce_field(name: str, value: Any) -> int:
    """Turn an int or a decimal digit string into an int for field ``name``."""

    if isinstance(value, bool):
        raise EncodeError(f"{name} must be an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip()
        if text.isascii() and text.isdigit():
            return int(text)
    raise EncodeError(f"{name} must be a non-negative integer, got {value!r}")


def parse_steamid(value: Any) -> int:
    """Parse a SteamID64 without ever routing it through a float."""

    return coerce_field("steamid", value)


def _check_width(name: str, value: int) -> int:
    bits = _FIELD_BITS[name]
    if not 0 <= value < (1 << bits):
        raise EncodeError(f"{name}={value} does not fit in {bits} bits")
    return value


def encode_entry(entry: LogEntry, categories: Categories) -> bytes:
    """Encode ``entry`` into one fixed-width record."""

    registry = _registry(categories)
    index = registry.index(entry.category)

    steamid = _check_width("steamid", parse_steamid(entry.steamid))
    time = _check_width("time", coerce_field("time", entry.time))
    portals = _check_width("portals", coerce_field("portals", entry.portals))
    timestamp = _check_width("timestamp", coerce_field("timestamp", entry.timestamp))

    return _HEAD.pack(steamid, index, time, portals) + timestamp.to_bytes(
        _TIMESTAMP_SIZE, "big"
    )


def iter_records(buffer: bytes) -> Iterator[bytes]:
    """Yield consecutive records, rejecting a torn trailing record."""

    if len(buffer) % RECORD_SIZE:
        raise CorruptLogError(
            f"Log length {len(buffer)} is not a multiple of {RECORD_SIZE} bytes"
        )
    view = memoryview(buffer)
    for offset in range(0, len(buffer), RECORD_SIZE):
        yield bytes(view[offset : offset + RECORD_SIZE])


def record_timestamp(record: bytes) -> int:
    return int.from_bytes(record[_HEAD.size : RECORD_SIZE], "big")


def decode_record(record: bytes, categories: Categories) -> LogEntry:
    """Decode a single 17-byte record."""

    registry = _registry(categories)
    steamid, index, time, portals = _HEAD.unpack_from(record)
    return LogEntry(
        steamid=steamid,
        category=registry.key_at(index),
        time=time,
        portals=portals,
        timestamp=record_timestamp(record),
    )


def decode_log(buffer: bytes, categories: Categories) -> List[LogEntry]:
    """Decode a whole log in file order with tombstones applied.

    Walks the records backwards counting outstanding tombstones per
    ``(steamid, category)``; each visible run met while a count is pending is
    the latest earlier run that tombstone erases. Unmatched tombstones are
    dropped and tombstones themselves are never returned.
    """

    registry = _registry(categories)
    entries = [decode_record(record, registry) for record in iter_records(buffer)]

    pending: Counter[Tuple[int, str]] = Counter()
    visible: List[LogEntry] = []
    for entry in reversed(entries):
        key = (entry.steamid, entry.category)
        if entry.is_tombstone:
            pending[key] += 1
        elif pending[key]:
            pending[key] -= 1
        else:
            visible.append(entry)

    visible.reverse()
    return visible


__all__ = [
    "RECORD_SIZE",
    "coerce_field",
    "decode_log",
    "decode_record",
    "encode_entry",
    "iter_records",
    "parse_steamid",
    "record_timestamp",
]
