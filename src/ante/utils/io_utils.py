"""
Centralized file I/O utilities.

- Single place for encoding and line-splitting rules
- Use Path.read_text() consistently (no raw open/read)
"""

from pathlib import Path
from typing import List, Union

from .config import DEFAULT_FILE_ENCODING


def read_source_file(path: Union[Path, str]) -> str:
    """Read source file with standard encoding."""
    p = Path(path) if not isinstance(path, Path) else path
    return p.read_text(encoding=DEFAULT_FILE_ENCODING)


def split_source_lines(text: str) -> List[str]:
    """
    Split source text into lines.

    Lines end at "\\n" with an optional preceding "\\r" dropped. A trailing
    newline does not start an extra empty line. Unlike str.splitlines(), form
    feeds and other Unicode line breaks stay part of the line so byte columns
    computed by the parser still line up.
    """
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]
