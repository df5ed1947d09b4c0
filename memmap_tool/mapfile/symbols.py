# mapfile/symbols.py
"""Топ функций по размеру из листинга секции кода.

Строка листинга:
      00000090    00000c78     rcl_cc23x0r5.a : ble5.c.obj (.text.RCL_Handler_BLE5_adv)
адрес и размер в hex, имя символа берётся из скобок.
"""

from __future__ import annotations

import re
from typing import List, NamedTuple

from ..config import CODE_SECTION, DEFAULT_TOP_COUNT
from .scanner import State, lines_in

ENTRY_RE = re.compile(r"^\s+([0-9a-f]+)\s+([0-9a-f]+)\s")
PAREN_RE = re.compile(r"\(([^)]+)\)")
BARE_SECTION_RE = re.compile(r"^\.[a-z]+$")


class SymbolEntry(NamedTuple):
    size: int
    name: str


def resolve_name(line: str, code_section: str = CODE_SECTION) -> str:
    # 1) (.text.foo) / (.text:foo) -> foo
    member = re.search(r"\(" + re.escape(code_section) + r"[:.]([^)]+)\)", line)
    if member:
        return member.group(1)
    # 2) любая группа в скобках как есть
    group = PAREN_RE.search(line)
    if group:
        return group.group(1)
    # 3) последний токен строки
    parts = line.split()
    return parts[-1] if parts else ""


def parse_symbol_line(line: str, code_section: str = CODE_SECTION) -> SymbolEntry | None:
    m = ENTRY_RE.match(line)
    if not m:
        return None
    size = int(m.group(2), 16)
    name = resolve_name(line, code_section)
    if size <= 0 or not name or BARE_SECTION_RE.match(name):
        return None
    return SymbolEntry(size, name)


def collect_symbols(text: str, code_section: str = CODE_SECTION) -> List[SymbolEntry]:
    found = []
    for line in lines_in(text, State.IN_CODE_SECTION, code_section):
        entry = parse_symbol_line(line, code_section)
        if entry is not None:
            found.append(entry)
    return found


def rank_symbols(text: str, count: int = DEFAULT_TOP_COUNT,
                 code_section: str = CODE_SECTION) -> List[SymbolEntry]:
    if count <= 0:
        return []
    # sorted() устойчив: при равных размерах сохраняется порядок в файле
    ranked = sorted(collect_symbols(text, code_section), key=lambda s: s.size, reverse=True)
    return ranked[:count]
