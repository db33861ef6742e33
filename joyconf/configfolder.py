"""Choice of the folder that holds saved device configurations."""

from __future__ import annotations

from pathlib import Path

CFG_SUFFIX = ".cfg"


def cfg_files_list(dir_path: str | Path) -> list[str]:
    """Names (without ``.cfg``) of the config files in ``dir_path``, sorted case-insensitively."""
    try:
        entries = list(Path(dir_path).iterdir())
    except OSError:
        return []
    names = [
        entry.name[: -len(CFG_SUFFIX)]
        for entry in entries
        if not entry.name.startswith(".")
        and entry.name.lower().endswith(CFG_SUFFIX)
        and entry.is_file()
    ]
    return sorted(names, key=str.casefold)


class ConfigFolder:
    """The configs folder currently in use and the configs it contains."""

    def __init__(self, folder_path: str | Path = "") -> None:
        self.folder_path = str(folder_path)
        self.configs: list[str] = []

    def set_folder_path(self, path: str | Path) -> None:
        """Switch to ``path`` and list its config files; the same path is a no-op."""
        path = str(path)
        if path == self.folder_path:
            return
        self.folder_path = path
        self.configs = cfg_files_list(path)