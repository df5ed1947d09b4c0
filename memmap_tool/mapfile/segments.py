# mapfile/segments.py
from __future__ import annotations

import re
from typing import List, NamedTuple

from .scanner import State, lines_in

# имя секции в конце строки: .text, .rodata, .TI.bound:foo не подходит
SECTION_NAME_RE = re.compile(r"^\.[a-z][A-Za-z0-9_:]*$")


class SegmentEntry(NamedTuple):
    section: str
    size: int


def parse_segment_line(line: str) -> SegmentEntry | None:
    """Строка SEGMENT ALLOCATION MAP -> (секция, длина) или None.

    Формат:  run origin  load origin  length  init length  attrs  members
    Длина (третье поле) записана в hex; нулевые сегменты пропускаются.
    """
    parts = line.split()
    if len(parts) < 4 or not SECTION_NAME_RE.match(parts[-1]):
        return None
    try:
        size = int(parts[2], 16)
    except ValueError:
        return None
    if size <= 0:
        return None
    return SegmentEntry(parts[-1], size)


def extract_segments(text: str) -> List[SegmentEntry]:
    entries = []
    for line in lines_in(text, State.IN_SEGMENT_MAP):
        entry = parse_segment_line(line)
        if entry is not None:
            entries.append(entry)
    return entries
