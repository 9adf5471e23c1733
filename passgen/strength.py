"""
Password strength estimate for a generated passphrase (Dropbox zxcvbn).
"""
from __future__ import annotations

from zxcvbn import zxcvbn

# zxcvbn refuses (or crawls on) very long inputs; anything past this is scored on its prefix
MAX_ANALYSED_LENGTH = 72

CRACK_TIME_SCENARIOS = (
    ("offline_fast_hashing_1e10_per_second", "Crack Time (offline, fastest)"),
    ("online_no_throttling_10_per_second", "Crack Time (online, no limit)"),
    ("online_throttling_100_per_hour", "Crack Time (online, rate-limited)"),
)


def password_stats(passphrase: str) -> dict:
    result = zxcvbn(passphrase[:MAX_ANALYSED_LENGTH])
    displays = result["crack_times_display"]
    return {
        "length": len(passphrase),
        "score": result["score"],
        "guesses": int(result["guesses"]),
        "crack_times": {key: displays[key] for key, _ in CRACK_TIME_SCENARIOS},
    }


def format_password_stats(passphrase: str) -> str:
    stats = password_stats(passphrase)
    lines = [
        "-------------STATS-----------",
        f"Length: {stats['length']}",
        f"Score (higher is better): {stats['score']}/4",
        f"Guesses needed to crack: {stats['guesses']}",
    ]
    for key, label in CRACK_TIME_SCENARIOS:
        lines.append(f"{label}: {stats['crack_times'][key]}")
    lines.append("(Source: Dropbox zxcvbn)")
    lines.append("-----------------------------")
    return "\n".join(lines)
