# mapfile/usage.py
"""Суммирование сегментов по корзинам и регионам.

Классификация закрытая: учитываются только секции из SECTION_BUCKETS,
всё остальное в итоги flash/RAM не попадает.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable

from .segments import SegmentEntry


class Bucket(Enum):
    CODE = "text"
    CONST = "rodata"
    CINIT = "cinit"
    DATA = "data"
    BSS = "bss"
    STACK = "stack"


SECTION_BUCKETS = {
    ".text": Bucket.CODE,
    ".rodata": Bucket.CONST,
    ".const": Bucket.CONST,
    ".cinit": Bucket.CINIT,
    ".data": Bucket.DATA,
    ".bss": Bucket.BSS,
    ".stack": Bucket.STACK,
}

# Секции-одиночки присваиваются (последняя побеждает), константы суммируются.
SUMMED_BUCKETS = {Bucket.CONST}

# .data лежит в обоих регионах: образ во flash копируется в RAM при старте.
FLASH_BUCKETS = (Bucket.CODE, Bucket.CONST, Bucket.CINIT, Bucket.DATA)
RAM_BUCKETS = (Bucket.BSS, Bucket.DATA, Bucket.STACK)


def classify(section: str) -> Bucket | None:
    return SECTION_BUCKETS.get(section)


@dataclass
class UsageTotals:
    buckets: Dict[Bucket, int] = field(default_factory=lambda: {b: 0 for b in Bucket})

    def __getitem__(self, bucket: Bucket) -> int:
        return self.buckets.get(bucket, 0)

    @property
    def flash_used(self) -> int:
        return sum(self[b] for b in FLASH_BUCKETS)

    @property
    def ram_used(self) -> int:
        return sum(self[b] for b in RAM_BUCKETS)

    def add(self, entry: SegmentEntry) -> None:
        bucket = classify(entry.section)
        if bucket is None:
            return
        if bucket in SUMMED_BUCKETS:
            self.buckets[bucket] += entry.size
        else:
            self.buckets[bucket] = entry.size


def aggregate(entries: Iterable[SegmentEntry]) -> UsageTotals:
    totals = UsageTotals()
    for entry in entries:
        totals.add(entry)
    return totals
