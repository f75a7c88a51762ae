"""Service layer helpers."""

from .codec import RECORD_SIZE, decode_log, decode_record, encode_entry
from .commands import run_command
from .entries import entry_to_dict, leaderboard_to_dict, result_to_json, run_to_dict
from .leaderboard import player_runs, reconstruct_leaderboard
from .store import SUCCESS, WeekLog

__all__ = [
    "RECORD_SIZE",
    "SUCCESS",
    "WeekLog",
    "decode_log",
    "decode_record",
    "encode_entry",
    "entry_to_dict",
    "leaderboard_to_dict",
    "player_runs",
    "reconstruct_leaderboard",
    "result_to_json",
    "run_command",
    "run_to_dict",
]
