"""Persistent list manager: ordered (value, comment) pairs in a flat text file.

File format:
    <value><TAB>//<comment>
    <value>
    // full-line comment (dropped on load)

Lines end with CR on non-Windows writers and CRLF on Windows writers; on
read, every CR and every LF byte ends a line and blank lines vanish.
The first // on a line starts the comment; later ones belong to it.
"""

from filelist.codec import COMMENT_STYLE, make_line, parse_line
from filelist.config import FileListConfig, init_config, load_config
from filelist.models import Item
from filelist.reader import FileList, read_lines

__all__ = [
    "COMMENT_STYLE",
    "FileList",
    "FileListConfig",
    "Item",
    "init_config",
    "load_config",
    "make_line",
    "parse_line",
    "read_lines",
]
