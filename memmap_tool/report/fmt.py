# report/fmt.py
from __future__ import annotations

from ..config import CRITICAL_THRESHOLD, WARN_THRESHOLD

KB = 1024
MB = 1024 * 1024


def _truncated(n: int, unit: int) -> str:
    # две цифры после точки с отбрасыванием, как bc scale=2
    hundredths = n * 100 // unit
    return f"{hundredths // 100}.{hundredths % 100:02d}"


def format_bytes(n: int) -> str:
    # отрицательные значения (перерасход) всегда печатаются в байтах
    if n < KB:
        return f"{n} bytes"
    if n < MB:
        return f"{_truncated(n, KB)} KB"
    return f"{_truncated(n, MB)} MB"


def threshold_style(percent: int) -> str:
    if percent >= CRITICAL_THRESHOLD:
        return "red"
    if percent >= WARN_THRESHOLD:
        return "yellow"
    return "green"


def progress_bar(percent: int, width: int = 20) -> str:
    """Полоска [███░░░] N% в разметке rich."""
    filled = max(0, min(width, percent * width // 100))
    bar = "█" * filled + "░" * (width - filled)
    style = threshold_style(percent)
    return f"[{style}]\\[{bar}] {percent}%[/{style}]"


def share_of_used(part: int, used: int) -> str:
    # одна цифра после точки с отбрасыванием, как bc scale=1
    if used <= 0:
        return "0.0"
    tenths = part * 1000 // used
    return f"{tenths // 10}.{tenths % 10}"
