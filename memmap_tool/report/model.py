# report/model.py
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import List

from ..config import CRITICAL_THRESHOLD, DEFAULT_TOP_COUNT, WARN_THRESHOLD
from ..firmware.regions import FLASH, RAM, Region
from ..mapfile.memconfig import MemoryConfigEntry, read_memory_config
from ..mapfile.segments import extract_segments
from ..mapfile.symbols import SymbolEntry, rank_symbols
from ..mapfile.usage import UsageTotals, aggregate


@dataclass(frozen=True)
class RegionUsage:
    region: Region
    used: int

    @property
    def total(self) -> int:
        return self.region.capacity

    @property
    def percent(self) -> int:
        return self.region.percent(self.used)

    @property
    def free(self) -> int:
        return self.region.free(self.used)

    @property
    def warning(self) -> bool:
        return self.percent >= WARN_THRESHOLD

    @property
    def critical(self) -> bool:
        return self.percent >= CRITICAL_THRESHOLD


@dataclass
class UsageReport:
    map_path: Path
    totals: UsageTotals
    symbols: List[SymbolEntry] = field(default_factory=list)
    memory_config: List[MemoryConfigEntry] = field(default_factory=list)
    top: int = DEFAULT_TOP_COUNT
    generated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def flash(self) -> RegionUsage:
        return RegionUsage(FLASH, self.totals.flash_used)

    @property
    def ram(self) -> RegionUsage:
        return RegionUsage(RAM, self.totals.ram_used)

    @property
    def build_name(self) -> str:
        return Path(self.map_path).with_suffix(".out").name

    def warnings(self) -> dict:
        return {
            "flash_critical": self.flash.critical,
            "flash_warning": self.flash.warning,
            "ram_critical": self.ram.critical,
            "ram_warning": self.ram.warning,
        }


def build_report(map_path, text: str, detailed: bool = False,
                 top: int = DEFAULT_TOP_COUNT) -> UsageReport:
    """Прогнать map-файл через конвейер. Символы и таблица памяти нужны
    только подробному отчёту, поэтому без detailed они не разбираются."""
    report = UsageReport(Path(map_path), aggregate(extract_segments(text)), top=top)
    if detailed:
        report.symbols = rank_symbols(text, top)
        report.memory_config = read_memory_config(text)
    return report
