# firmware/regions.py
from dataclasses import dataclass

from ..config import FLASH_TOTAL, RAM_TOTAL


@dataclass(frozen=True)
class Region:
    name: str
    capacity: int

    def percent(self, used: int) -> int:
        # целочисленно, без ограничения сверху: при переполнении > 100
        return used * 100 // self.capacity

    def free(self, used: int) -> int:
        return self.capacity - used


# Ёмкости задаются константами устройства, из map-файла не читаются.
FLASH = Region("FLASH", capacity=FLASH_TOTAL)
RAM = Region("RAM", capacity=RAM_TOTAL)
