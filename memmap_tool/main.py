from __future__ import annotations
import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape

from .config import APP_NAME, DEFAULT_TOP_COUNT
from .errors import MapToolError, MissingMapFile
from .report.model import build_report
from .report.render import MODES, make_console, render

app = typer.Typer(add_completion=False, help=f"{APP_NAME}: отчёт об использовании FLASH/RAM по map-файлу линкера.")


def _log_event(log_file: Optional[Path], kind: str, payload: dict):
    # журнал событий пишется только по явному --log-file
    if log_file is None:
        return
    log_file.parent.mkdir(parents=True, exist_ok=True)
    record = {
        "ts": datetime.now(timezone.utc).isoformat(),
        "kind": kind,
        "payload": payload,
    }
    with open(log_file, "a", encoding="utf-8") as f:
        f.write(json.dumps(record, ensure_ascii=False) + "\n")


@app.command()
def report(
    map_file: Path = typer.Argument(..., help="Map-файл линкера (*.map)"),
    mode: str = typer.Argument("summary", help=f"Формат отчёта: {', '.join(MODES)}"),
    top: int = typer.Option(DEFAULT_TOP_COUNT, "--top", "-n", help="Сколько функций показать в detailed"),
    log_file: Optional[Path] = typer.Option(None, "--log-file", help="Дописывать события в JSONL-журнал"),
):
    """
    Разобрать map-файл и вывести занятость памяти. Предупреждения на код
    возврата не влияют: 0, если отчёт построен, 1 при ошибке.
    """
    console = make_console()
    try:
        if not map_file.is_file():
            raise MissingMapFile(map_file)
        text = map_file.read_text(encoding="utf-8", errors="replace")
        result = build_report(map_file, text, detailed=(mode == "detailed"), top=top)
        render(result, mode, console)
        _log_event(log_file, "analyze", {
            "map": str(map_file),
            "mode": mode,
            "flash_used": result.flash.used,
            "ram_used": result.ram.used,
        })
    except MapToolError as e:
        _log_event(log_file, "error", {"map": str(map_file), "mode": mode, "error": str(e)})
        console.print(f"[red]Error:[/] {escape(str(e))}")
        if e.hint:
            console.print(escape(e.hint))
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
