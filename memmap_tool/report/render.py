# report/render.py
"""Вывод отчёта: summary, detailed (summary + топ функций) и json."""

from __future__ import annotations

import json

from rich.console import Console
from rich.markup import escape

from ..config import CRITICAL_THRESHOLD, DEVICE_NAME, WARN_THRESHOLD
from ..errors import UnknownMode
from ..mapfile.usage import Bucket
from .fmt import format_bytes, progress_bar, share_of_used
from .model import RegionUsage, UsageReport

MODES = ("summary", "detailed", "json")

RULE = "=" * 64
THIN_RULE = "-" * 64

# (корзина, подпись) в порядке вывода разбивки
FLASH_BREAKDOWN = [
    (Bucket.CODE, ".text     (code)      "),
    (Bucket.CONST, ".rodata   (constants) "),
    (Bucket.CINIT, ".cinit    (init data) "),
]
RAM_BREAKDOWN = [
    (Bucket.BSS, ".bss      (uninitialized)"),
    (Bucket.DATA, ".data     (initialized)  "),
    (Bucket.STACK, ".stack                   "),
]


def make_console(**kwargs) -> Console:
    # soft_wrap: длинные имена символов не переносятся по ширине терминала
    kwargs.setdefault("highlight", False)
    kwargs.setdefault("soft_wrap", True)
    kwargs.setdefault("emoji", False)
    return Console(**kwargs)


def _region_block(console: Console, title: str, usage: RegionUsage, pad: str, bar_gap: str) -> None:
    console.print(f"{title}:")
    console.print(f"  Total:{pad}{usage.total} bytes ({format_bytes(usage.total)})")
    console.print(f"  Used: {pad}{usage.used} bytes ({format_bytes(usage.used)}){bar_gap}"
                  f"{progress_bar(usage.percent)}")
    console.print(f"  Free: {pad}{usage.free} bytes ({format_bytes(usage.free)})")
    console.print()


def _breakdown(console: Console, report: UsageReport, rows, used: int) -> None:
    shown = [(bucket, label) for bucket, label in rows if report.totals[bucket] > 0]
    if not shown:
        return
    console.print("  Breakdown:")
    for bucket, label in shown:
        size = report.totals[bucket]
        console.print(f"    {label}: {size} bytes  ({share_of_used(size, used):>5}% of used)")
    console.print()


def _warnings(console: Console, report: UsageReport) -> None:
    ram, flash = report.ram, report.flash
    if ram.critical:
        console.print(f"[red]⚠ WARNING: RAM usage is critically high (>{CRITICAL_THRESHOLD}%)[/red]")
        console.print("  Consider optimizing memory usage or reducing buffer sizes.")
        console.print()
    elif ram.warning:
        console.print(f"[yellow]⚠ WARNING: RAM usage is high (>{WARN_THRESHOLD}%)[/yellow]")
        console.print("  Monitor memory usage carefully.")
        console.print()

    # у flash отдельного сообщения для уровня warning нет, только critical
    if flash.critical:
        console.print(f"[red]⚠ WARNING: Flash usage is critically high (>{CRITICAL_THRESHOLD}%)[/red]")
        console.print("  Consider removing unused features or optimizing code size.")
        console.print()


def render_summary(report: UsageReport, console: Console) -> None:
    console.print(RULE)
    console.print(f"  {DEVICE_NAME} Firmware Memory Usage Report")
    console.print(RULE)
    console.print(f"  Build: {escape(report.build_name)}")
    console.print(f"  Date: {report.generated_at.strftime('%a %b %d %H:%M:%S %Z %Y')}")
    console.print()

    _region_block(console, "FLASH Memory", report.flash, "     ", "  ")
    _breakdown(console, report, FLASH_BREAKDOWN, report.flash.used)

    _region_block(console, "SRAM Memory", report.ram, "      ", "   ")
    _breakdown(console, report, RAM_BREAKDOWN, report.ram.used)

    _warnings(console, report)
    console.print(RULE)


def render_detailed(report: UsageReport, console: Console) -> None:
    render_summary(report, console)

    console.print()
    console.print(f"Top {report.top} Functions by Size:")
    console.print(RULE)
    console.print(f"{'Size':<10}  Function")
    console.print(THIN_RULE)
    for sym in report.symbols:
        console.print(f"{format_bytes(sym.size):<10}  {escape(sym.name)}")
    console.print(RULE)

    if report.memory_config:
        console.print()
        console.print("Linker Memory Configuration:")
        console.print(f"{'Name':<12} {'Origin':>10} {'Length':>10} {'Used':>10} {'Unused':>10}")
        console.print(THIN_RULE)
        for row in report.memory_config:
            console.print(f"{escape(row.name):<12} 0x{row.origin:08x} {row.length:>10} "
                          f"{row.used:>10} {row.unused:>10}")
        console.print(RULE)


def _region_json(usage: RegionUsage, sections: dict) -> dict:
    return {
        "total": usage.total,
        "used": usage.used,
        "free": usage.free,
        "percent": usage.percent,
        "sections": sections,
    }


def report_document(report: UsageReport) -> dict:
    totals = report.totals
    return {
        "device": DEVICE_NAME,
        "timestamp": report.generated_at.strftime("%Y-%m-%dT%H:%M:%SZ"),
        "build": report.build_name,
        "flash": _region_json(report.flash, {
            "text": totals[Bucket.CODE],
            "rodata": totals[Bucket.CONST],
            "cinit": totals[Bucket.CINIT],
        }),
        "ram": _region_json(report.ram, {
            "bss": totals[Bucket.BSS],
            "data": totals[Bucket.DATA],
            "stack": totals[Bucket.STACK],
        }),
        "warnings": report.warnings(),
    }


def render_json(report: UsageReport) -> str:
    return json.dumps(report_document(report), indent=2)


def check_mode(mode: str) -> str:
    if mode not in MODES:
        raise UnknownMode(mode, MODES)
    return mode


def render(report: UsageReport, mode: str, console: Console) -> None:
    check_mode(mode)
    if mode == "json":
        # JSON пишется мимо разметки rich, чтобы ничего не испортить
        console.file.write(render_json(report) + "\n")
    elif mode == "detailed":
        render_detailed(report, console)
    else:
        render_summary(report, console)
