# mapfile/memconfig.py
from __future__ import annotations

from typing import List, NamedTuple

from .scanner import State, lines_in


class MemoryConfigEntry(NamedTuple):
    name: str
    origin: int
    length: int
    used: int
    unused: int


def parse_memory_config_line(line: str) -> MemoryConfigEntry | None:
    """Строка таблицы MEMORY CONFIGURATION:

      FLASH                 00000000   0007d000  00003a5c  000795a4  R  X
    """
    parts = line.split()
    if len(parts) < 5 or not parts[0][:1].isupper():
        return None
    try:
        origin, length, used, unused = (int(p, 16) for p in parts[1:5])
    except ValueError:
        return None
    return MemoryConfigEntry(parts[0], origin, length, used, unused)


def read_memory_config(text: str) -> List[MemoryConfigEntry]:
    rows = []
    for line in lines_in(text, State.IN_MEMORY_CONFIG):
        entry = parse_memory_config_line(line)
        if entry is not None:
            rows.append(entry)
    return rows
