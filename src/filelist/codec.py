"""Line codec: one text line <-> one Item.

    value<TAB>//comment
    value
    // full-line comment (dropped)

Parsing is whitespace-tolerant; serialization is canonical (single tab).
"""

from __future__ import annotations

import sys

from filelist.models import Item

COMMENT_STYLE = "//"
LINE_BREAK = "\r"
LINE_BREAK_WINDOWS = "\r\n"


def is_windows() -> bool:
    return sys.platform == "win32"


def line_break(windows: bool | None = None) -> str:
    """Terminator written after every line.

    The writer's platform decides: ``\\r\\n`` on Windows, a bare ``\\r``
    everywhere else. Pass ``windows`` to override the host check.
    """
    if windows is None:
        windows = is_windows()
    return LINE_BREAK_WINDOWS if windows else LINE_BREAK


def parse_line(line: str) -> Item:
    """Parse a raw line. Blank and comment-only lines give ``Item()``."""
    line = line.strip()
    if not line or line.startswith(COMMENT_STYLE):
        return Item()
    if COMMENT_STYLE in line:
        # Only the first marker counts; the comment keeps any later ones.
        value, _, comment = line.partition(COMMENT_STYLE)
        return Item(value=value.strip(), comment=comment.strip())
    return Item(value=line)


def make_line(item: Item) -> str:
    """Serialize an item, or return "" when it has no value."""
    if not item.value:
        return ""
    if item.comment:
        return f"{item.value}\t{COMMENT_STYLE}{item.comment}"
    return item.value
