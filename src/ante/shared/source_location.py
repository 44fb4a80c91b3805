"""
Source Location (Span)

A span within a named source file: filename, 1-based start line/column and a
length in bytes. ``Location`` is what compiler passes hand around while they
walk a module; ``OwnedLocation`` is the detached copy a stored diagnostic keeps.
"""

from dataclasses import dataclass
from pathlib import PurePath
from typing import Union

from .paths import format_path


@dataclass(frozen=True)
class Position:
    """1-based line and column of a byte in a source file"""
    line: int
    column: int

    def __post_init__(self) -> None:
        if self.line < 1:
            raise ValueError(f"line must be >= 1, got {self.line}")
        if self.column < 1:
            raise ValueError(f"column must be >= 1, got {self.column}")


class _SpanDisplay:
    """Accessors and ``path:line:column`` display shared by both location kinds"""

    filename: Union[str, PurePath]
    start: Position
    span_length: int

    @property
    def line(self) -> int:
        return self.start.line

    @property
    def column(self) -> int:
        return self.start.column

    def length(self) -> int:
        """Span size in bytes as given by the caller (never negative)"""
        return self.span_length

    def __str__(self) -> str:
        return f"{format_path(self.filename)}:{self.start.line}:{self.start.column}"


def _check_length(length: int) -> None:
    if length < 0:
        raise ValueError(f"span length must be >= 0, got {length}")


@dataclass(frozen=True)
class Location(_SpanDisplay):
    """
    Span referring to the filename object of the module being compiled.

    The filename is shared with whatever owns the module (usually a
    ``ModuleCache`` entry); call ``as_owned`` before storing the span anywhere
    that outlives the pass.

    ``filename`` is displayed as written when it is a ``str``. A ``PurePath``
    has already dropped a leading "./" on construction, so pass the string to
    keep it in the displayed path.
    """
    filename: Union[str, PurePath]
    start: Position
    span_length: int = 0

    def __post_init__(self) -> None:
        _check_length(self.span_length)

    @classmethod
    def at(cls, filename: Union[str, PurePath], line: int, column: int, length: int = 0) -> "Location":
        return cls(filename, Position(line, column), length)

    def as_owned(self) -> "OwnedLocation":
        filename = self.filename
        if isinstance(filename, PurePath):
            # Same flavour, so a Windows-style path keeps its separators
            filename = type(filename)(filename)
        return OwnedLocation(filename, self.start, self.span_length)


@dataclass(frozen=True)
class OwnedLocation(_SpanDisplay):
    """Location holding its own copy of the filename, immutable once created"""
    filename: Union[str, PurePath]
    start: Position
    span_length: int = 0

    def __post_init__(self) -> None:
        _check_length(self.span_length)
