"""String command surface over a :class:`WeekLog`.

Mirrors how the weekly workflow drives the log::

    run_command(["add", steamid, category, time, portals], weeklog)
    run_command(["remove", timestamp], weeklog)
    run_command(["read"], weeklog)
    run_command(["reconstruct"], weeklog)
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional, Sequence

from ..core.errors import CommandError
from .store import WeekLog


def _arg(args: Sequence[Any], index: int) -> Optional[Any]:
    if index >= len(args):
        return None
    value = args[index]
    if isinstance(value, str) and not value.strip():
        return None
    return value


def _read(args: Sequence[Any], weeklog: WeekLog) -> Any:
    return weeklog.read()


def _add(args: Sequence[Any], weeklog: WeekLog) -> Any:
    steamid, category, time, portals, timestamp = (_arg(args, i) for i in range(1, 6))
    return weeklog.append(steamid, category, time, portals, timestamp)


def _remove(args: Sequence[Any], weeklog: WeekLog) -> Any:
    return weeklog.remove(_arg(args, 1))


def _reconstruct(args: Sequence[Any], weeklog: WeekLog) -> Any:
    return weeklog.reconstruct()


COMMANDS: Dict[str, Callable[[Sequence[Any], WeekLog], Any]] = {
    "read": _read,
    "add": _add,
    "remove": _remove,
    "reconstruct": _reconstruct,
}


def run_command(args: Sequence[Any], weeklog: WeekLog) -> Any:
    """Dispatch ``args[0]`` to the matching weeklog operation."""

    command = args[0] if args else None
    handler = COMMANDS.get(command) if isinstance(command, str) else None
    if handler is None:
        raise CommandError(f"Unknown command: {command!r}", args=list(args))
    return handler(args, weeklog)


def command_names() -> List[str]:
    return list(COMMANDS)


__all__ = ["COMMANDS", "command_names", "run_command"]
