# errors.py
class MapToolError(Exception):
    """Ошибка, которую CLI показывает пользователю и завершает работу с кодом 1."""
    hint = ""

    def __str__(self):
        return " ".join(str(a) for a in self.args)


class MissingMapFile(MapToolError):
    hint = "Run 'make' first to generate build artifacts."

    def __init__(self, path):
        super().__init__(f"Map file not found: {path}")
        self.path = path


class UnknownMode(MapToolError):
    def __init__(self, mode: str, modes):
        super().__init__(f"Unknown mode '{mode}'")
        self.mode = mode
        self.hint = f"Usage: memmap <map_file> [{'|'.join(modes)}]"
