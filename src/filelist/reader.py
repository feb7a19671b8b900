"""Read and write list files.

FileList is the public API:
    fl = FileList.load("/path/to/list.txt")
    fl.add_once("example.com", "mirror")
    fl.remove("old.example.com")
    fl.save()

Line splitting is done over raw bytes: every CR (0x0D) and every LF (0x0A)
ends the current run, and only non-empty runs become lines. A CRLF pair
therefore yields one line, and files written with bare CR (non-Windows
writers) read back the same as CRLF ones.
"""

from __future__ import annotations

from collections import Counter
from datetime import UTC, datetime
from pathlib import Path
from typing import TYPE_CHECKING

from filelist.codec import line_break, make_line, parse_line
from filelist.models import Item

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

_READ_CHUNK = 32 * 1024
_TERMINATORS = b"\r\n"


def read_lines(path: Path | str, encoding: str = "utf-8") -> list[str]:
    """Split a file into non-empty lines on every CR or LF byte."""
    lines: list[str] = []
    line = bytearray()
    total = 0
    with Path(path).open("rb") as f:
        while True:
            try:
                chunk = f.read(_READ_CHUNK)
            except OSError as exc:
                msg = f"read {total} bytes: {exc.strerror or exc}"
                raise OSError(exc.errno, msg, str(path)) from exc
            if not chunk:
                break
            total += len(chunk)
            for byte in chunk:
                if byte in _TERMINATORS:
                    if line:
                        lines.append(line.decode(encoding, errors="surrogateescape"))
                        line = bytearray()
                else:
                    line.append(byte)
    if line:
        lines.append(line.decode(encoding, errors="surrogateescape"))
    return lines


class FileList:
    """Ordered (value, comment) list backed by a flat text file."""

    def __init__(
        self,
        path: Path | str | None = None,
        *,
        encoding: str = "utf-8",
        windows: bool | None = None,
    ) -> None:
        self.path = Path(path) if path is not None else None
        self.encoding = encoding
        self.windows = windows          # None: ask the host at save time
        self._items: list[Item] = []
        self._values: Counter[str] = Counter()
        self._last_modified = datetime.now(UTC)
        self._changed = True

    # ------------------------------------------------------------------
    # Load / save
    # ------------------------------------------------------------------

    @classmethod
    def load(
        cls,
        path: Path | str,
        *,
        encoding: str = "utf-8",
        windows: bool | None = None,
    ) -> FileList:
        """Read a list file. Blank and comment-only lines are dropped."""
        fl = cls(path, encoding=encoding, windows=windows)
        for line in read_lines(path, encoding):
            item = parse_line(line)
            if not item.is_empty:
                fl._items.append(item)
                fl._values[item.value] += 1
        fl._changed = False
        return fl

    def save(self, path: Path | str | None = None, *, windows: bool | None = None) -> None:
        """Write every item, one per line, then clear ``changed``.

        A failed write leaves the file unreliable and ``changed`` set.
        """
        if path is not None:
            self.path = Path(path)
        if self.path is None:
            msg = "No path to save the list to"
            raise ValueError(msg)

        if windows is None:
            windows = self.windows
        brk = line_break(windows)

        with self.path.open("wb") as f:
            for item in self._items:
                line = make_line(item)
                if not line:
                    continue
                f.write((line + brk).encode(self.encoding, errors="surrogateescape"))

        self._changed = False

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def count(self) -> int:
        return len(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(list(self._items))

    def __contains__(self, value: object) -> bool:
        return isinstance(value, str) and self.exists(value)

    @property
    def last_modified(self) -> datetime:
        return self._last_modified

    @property
    def changed(self) -> bool:
        """True after any mutation since the last load or save."""
        return self._changed

    def get_items(self) -> list[Item]:
        return list(self._items)

    def get(self, value: str) -> Item:
        """First item with this value, or ``Item()``."""
        for item in self._items:
            if item.value == value:
                return item
        return Item()

    def get_comment(self, value: str) -> str:
        return self.get(value).comment

    def get_all_with_comment(self, comment: str) -> list[Item]:
        return [item for item in self._items if item.comment == comment]

    def exists(self, value: str) -> bool:
        return self._values[value] > 0

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    def set_items(self, items: Iterable[Item]) -> None:
        """Replace all items and rebuild the value index."""
        new_items = list(items)
        for item in new_items:
            _check_value(item.value)
        self._items = new_items
        self._values = Counter(item.value for item in new_items)
        self._touch()

    def add(self, value: str, comment: str = "") -> None:
        """Append unconditionally; duplicates are allowed."""
        _check_value(value)
        self._items.append(Item(value=value, comment=comment))
        self._values[value] += 1
        self._touch()

    def add_once(self, value: str, comment: str = "") -> None:
        """Append unless present; otherwise update the first match's comment."""
        if not self.exists(value):
            self.add(value, comment)
            return
        for i, item in enumerate(self._items):
            if item.value == value:
                if item.comment != comment:
                    self._items[i] = Item(value=value, comment=comment)
                    self._touch()
                return

    def remove(self, value: str) -> None:
        """Remove the first item with this value. Missing values are ignored."""
        for i, item in enumerate(self._items):
            if item.value == value:
                del self._items[i]
                self._values[value] -= 1
                if self._values[value] <= 0:
                    del self._values[value]
                self._touch()
                return

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _touch(self) -> None:
        self._last_modified = datetime.now(UTC)
        self._changed = True


def _check_value(value: str) -> None:
    if not value:
        msg = "Item value must not be empty"
        raise ValueError(msg)
