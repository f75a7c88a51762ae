"""Weekly speedrun log and leaderboard service."""
