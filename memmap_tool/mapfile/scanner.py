# mapfile/scanner.py
"""Разбор map-файла TI на области построчно.

Сканер ничего не знает о содержимом строк: он только отслеживает, в какой
части листинга находится строка (таблица MEMORY CONFIGURATION, SEGMENT
ALLOCATION MAP или листинг секции кода). Экстракторы дальше фильтруют строки
по состоянию.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterator, Tuple

from ..config import CODE_SECTION

MEMORY_CONFIG_MARKER = "MEMORY CONFIGURATION"
SEGMENT_MAP_MARKER = "SEGMENT ALLOCATION MAP"
SECTION_MAP_MARKER = "SECTION ALLOCATION MAP"


class State(Enum):
    OUTSIDE = "outside"
    IN_MEMORY_CONFIG = "memory_config"
    IN_SEGMENT_MAP = "segment_map"
    IN_CODE_SECTION = "code_section"


class MapScanner:
    def __init__(self, code_section: str = CODE_SECTION):
        self.code_section = code_section
        self.state = State.OUTSIDE
        self._config_rows = 0

    def step(self, line: str) -> State:
        """Принять одну строку и вернуть состояние, к которому она относится.

        Строки-маркеры (заголовки областей) считаются OUTSIDE.
        """
        if line.startswith(SEGMENT_MAP_MARKER):
            self.state = State.IN_SEGMENT_MAP
            return State.OUTSIDE
        if line.startswith(MEMORY_CONFIG_MARKER):
            self.state = State.IN_MEMORY_CONFIG
            self._config_rows = 0
            return State.OUTSIDE
        if line.startswith(self.code_section):
            self.state = State.IN_CODE_SECTION
            return State.OUTSIDE

        if self.state is State.IN_SEGMENT_MAP:
            if line.startswith(SECTION_MAP_MARKER):
                self.state = State.OUTSIDE
            return self.state

        if self.state is State.IN_CODE_SECTION:
            # новая секция верхнего уровня начинается с первой колонки
            if line.strip() and not line[0].isspace():
                self.state = State.OUTSIDE
            return self.state

        if self.state is State.IN_MEMORY_CONFIG:
            if not line.strip():
                # пустая строка сразу после заголовка таблицу не закрывает
                if self._config_rows:
                    self.state = State.OUTSIDE
                return self.state
            if line.split()[0][:1].isupper():
                self._config_rows += 1
            return self.state

        return self.state

    def scan(self, text: str) -> Iterator[Tuple[State, str]]:
        for line in text.splitlines():
            yield self.step(line), line


def lines_in(text: str, state: State, code_section: str = CODE_SECTION) -> Iterator[str]:
    """Строки map-файла, попадающие в заданную область."""
    for line_state, line in MapScanner(code_section).scan(text):
        if line_state is state:
            yield line
