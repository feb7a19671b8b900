"""FileListConfig: project-local config for a list file.

filelist.toml example:

    [filelist]
    path = "list.txt"        # relative to the directory holding filelist.toml
    encoding = "utf-8"
    line_break = "auto"      # auto (host decides) | cr | crlf
"""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from filelist.reader import FileList

logger = logging.getLogger("filelist.config")

_CONFIG_FILENAME = "filelist.toml"
_DEFAULT_PATH = "list.txt"
_DEFAULT_ENCODING = "utf-8"
_LINE_BREAKS: dict[str, bool | None] = {
    "auto": None,
    "cr": False,
    "crlf": True,
}


@dataclass
class FileListConfig:
    """Resolved configuration for a list file."""

    root: Path                      # directory that contains filelist.toml
    path: str = _DEFAULT_PATH
    encoding: str = _DEFAULT_ENCODING
    line_break: str = "auto"

    @property
    def list_path(self) -> Path:
        return self.root / self.path

    @property
    def windows(self) -> bool | None:
        """Terminator override for FileList.save; None lets the host decide."""
        return _LINE_BREAKS[self.line_break]

    def open_list(self) -> FileList:
        """Load the configured list, or start an empty one bound to its path."""
        if not self.list_path.exists():
            return FileList(self.list_path, encoding=self.encoding, windows=self.windows)
        return FileList.load(self.list_path, encoding=self.encoding, windows=self.windows)


def load_config(root: Path | str | None = None) -> FileListConfig:
    """Load filelist.toml from root (or search upward from cwd if root is None)."""
    root_path = _find_root(Path(root) if root else Path.cwd())
    config_path = root_path / _CONFIG_FILENAME

    raw: dict[str, Any] = {}
    if config_path.exists():
        with config_path.open("rb") as f:
            raw = tomllib.load(f)
        logger.debug("loaded %s", config_path)
    else:
        logger.debug("no %s under %s, using defaults", _CONFIG_FILENAME, root_path)

    section = raw.get("filelist", {})
    line_break = str(section.get("line_break", "auto")).lower()
    if line_break not in _LINE_BREAKS:
        msg = f"Unknown line_break {line_break!r} in {config_path} (expected auto, cr or crlf)"
        raise ValueError(msg)

    return FileListConfig(
        root=root_path,
        path=str(section.get("path", _DEFAULT_PATH)),
        encoding=str(section.get("encoding", _DEFAULT_ENCODING)),
        line_break=line_break,
    )


def _find_root(start: Path) -> Path:
    """Walk upward from start looking for filelist.toml."""
    for directory in (start, *start.parents):
        if (directory / _CONFIG_FILENAME).exists():
            return directory
    return start


def init_config(root: Path, path: str | None = None) -> Path:
    """Write a default filelist.toml at root. Raises if already exists."""
    config_path = root / _CONFIG_FILENAME
    if config_path.exists():
        msg = f"filelist.toml already exists at {config_path}"
        raise FileExistsError(msg)

    content = f"""\
[filelist]
path = "{path or _DEFAULT_PATH}"
# encoding = "utf-8"
# line_break = "auto"   # auto | cr | crlf
"""
    config_path.write_text(content)
    return config_path
