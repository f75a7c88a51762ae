"""File-backed weeklog store."""

from __future__ import annotations

import fcntl
import os
import tempfile
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterator, List, Optional

from ..core.errors import ArgsError, CategoryError, CorruptLogError, TimestampError
from ..core.logging import get_logger
from ..models import Leaderboard, LogEntry, WeekContext
from .codec import (
    RECORD_SIZE,
    coerce_field,
    decode_log,
    encode_entry,
    iter_records,
    parse_steamid,
    record_timestamp,
)
from .leaderboard import reconstruct_leaderboard

logger = get_logger(__name__)

SUCCESS = "SUCCESS"


class WeekLog:
    """Append-only binary log of one competition week.

    Mutations are serialized by an in-process lock and an exclusive ``flock``
    on a sibling ``.lock`` file. Readers hold a shared ``flock`` while they
    snapshot the bytes, once a writer has created the lock file, and whole-file
    rewrites go through ``os.replace``.
    """

    def __init__(self, path: str | os.PathLike[str], context: WeekContext):
        self.path = Path(path)
        self.context = context
        self._lock_path = self.path.with_name(self.path.name + ".lock")
        self._mutex = threading.Lock()

    # -- locking -------------------------------------------------------------

    @contextmanager
    def _flock(self, operation: int) -> Iterator[None]:
        self._lock_path.parent.mkdir(parents=True, exist_ok=True)
        with self._lock_path.open("a+b") as handle:
            fcntl.flock(handle.fileno(), operation)
            try:
                yield
            finally:
                fcntl.flock(handle.fileno(), fcntl.LOCK_UN)

    @contextmanager
    def _shared(self) -> Iterator[None]:
        # Readers never create the lock file or its directory.
        try:
            handle = self._lock_path.open("rb")
        except (FileNotFoundError, NotADirectoryError):
            yield
            return
        with handle:
            fcntl.flock(handle.fileno(), fcntl.LOCK_SH)
            try:
                yield
            finally:
                fcntl.flock(handle.fileno(), fcntl.LOCK_UN)

    @contextmanager
    def _exclusive(self) -> Iterator[None]:
        with self._mutex, self._flock(fcntl.LOCK_EX):
            yield

    # -- raw bytes -----------------------------------------------------------

    def _read_bytes(self) -> bytes:
        try:
            return self.path.read_bytes()
        except (FileNotFoundError, NotADirectoryError):
            return b""

    def _rewrite(self, data: bytes) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent
        )
        try:
            with os.fdopen(fd, "wb") as handle:
                handle.write(data)
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def snapshot(self) -> bytes:
        """Return the file's bytes as of one consistent point in time."""

        with self._shared():
            return self._read_bytes()

    # -- operations ----------------------------------------------------------

    def ensure_exists(self) -> None:
        """Create an empty log (and its directory) if none exists yet."""

        self.path.parent.mkdir(parents=True, exist_ok=True)
        if not self.path.exists():
            with self._exclusive():
                self.path.touch(exist_ok=True)
            logger.info("weeklog_created", path=str(self.path))

    def read(self) -> List[LogEntry]:
        """Return visible entries in file order, tombstones applied."""

        return decode_log(self.snapshot(), self.context.registry)

    def append(
        self,
        steamid: Any,
        category: Optional[str],
        time: Any,
        portals: Any,
        timestamp: Any = None,
    ) -> str:
        """Encode one run and append it to the end of the log."""

        if timestamp is None:
            timestamp = self.context.seconds_into_week()

        fields = {
            "steamid": steamid,
            "category": category,
            "time": time,
            "portals": portals,
            "timestamp": timestamp,
        }
        missing = [name for name, value in fields.items() if value is None]
        if missing:
            raise ArgsError(
                f"Missing required fields: {', '.join(missing)}",
                args=list(fields.values()),
            )
        if not isinstance(category, str):
            raise CategoryError(f"Unknown category: {category!r}", args=list(fields.values()))

        entry = LogEntry(
            steamid=parse_steamid(steamid),
            category=category,
            time=coerce_field("time", time),
            portals=coerce_field("portals", portals),
            timestamp=coerce_field("timestamp", timestamp),
        )
        record = encode_entry(entry, self.context.registry)

        with self._exclusive():
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("ab") as handle:
                size = os.fstat(handle.fileno()).st_size
                if size % RECORD_SIZE:
                    raise CorruptLogError(
                        f"Refusing to append to {self.path}: length {size} "
                        f"is not a multiple of {RECORD_SIZE}"
                    )
                handle.write(record)
                handle.flush()
                os.fsync(handle.fileno())

        logger.info(
            "weeklog_append",
            steamid=str(entry.steamid),
            category=entry.category,
            time=entry.time,
            portals=entry.portals,
            timestamp=entry.timestamp,
            tombstone=entry.is_tombstone,
        )
        return SUCCESS

    def tombstone(self, steamid: Any, category: Optional[str], timestamp: Any = None) -> str:
        """Erase the player's latest run in ``category`` without rewriting the file."""

        return self.append(steamid, category, 0, 0, timestamp)

    def remove(self, timestamp: Any) -> str:
        """Physically delete the first record whose timestamp matches."""

        if timestamp is None:
            raise ArgsError("Missing required field: timestamp", args=[timestamp])
        target = coerce_field("timestamp", timestamp)

        with self._exclusive():
            buffer = self._read_bytes()
            found = None
            for position, record in enumerate(iter_records(buffer)):
                if record_timestamp(record) == target:
                    found = position * RECORD_SIZE
                    break

            if found is None:
                raise TimestampError(f"No record with timestamp {target}", args=[timestamp])

            self._rewrite(buffer[:found] + buffer[found + RECORD_SIZE :])

        logger.info("weeklog_remove", timestamp=target, offset=found)
        return SUCCESS

    def reconstruct(self) -> Leaderboard:
        """Rebuild the week's leaderboard from the log."""

        context = self.context
        entries = decode_log(self.snapshot(), context.registry)
        return reconstruct_leaderboard(entries, context.registry, context.week_start)

    def reset(self, context: Optional[WeekContext] = None) -> str:
        """Empty the log for a new week, optionally switching to ``context``."""

        with self._exclusive():
            self._rewrite(b"")
            if context is not None:
                self.context = context

        logger.info("weeklog_reset", week_start=self.context.week_start)
        return SUCCESS


__all__ = ["SUCCESS", "WeekLog"]
