"""
OS-Agnostic Path Display

Hosts disagree on the path separator ("/" on Unix, "\\" on Windows). Diagnostic
text does not need the native form, and keeping one convention lets the same
expected output be asserted on every platform, so paths are printed roughly as
a Unix path would be.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import PurePath
from typing import Iterable, List, Union

from ..utils.config import PATH_SEPARATOR


class ComponentKind(Enum):
    """Kind of a single path component"""
    PREFIX = "prefix"        # Host-specific prefix such as a drive ("C:")
    ROOT = "root"
    CUR_DIR = "cur_dir"      # "."
    PARENT_DIR = "parent_dir"  # ".."
    NORMAL = "normal"


@dataclass(frozen=True)
class PathComponent:
    kind: ComponentKind
    text: str = ""

    @classmethod
    def prefix(cls, text: str) -> "PathComponent":
        return cls(ComponentKind.PREFIX, text)

    @classmethod
    def root(cls) -> "PathComponent":
        return cls(ComponentKind.ROOT)

    @classmethod
    def cur_dir(cls) -> "PathComponent":
        return cls(ComponentKind.CUR_DIR, ".")

    @classmethod
    def parent_dir(cls) -> "PathComponent":
        return cls(ComponentKind.PARENT_DIR, "..")

    @classmethod
    def normal(cls, text: str) -> "PathComponent":
        return cls(ComponentKind.NORMAL, text)


PathLike = Union[str, PurePath]


def _has_leading_cur_dir(raw: str) -> bool:
    # pathlib collapses "./a" to "a"; keep the leading "." the user wrote
    return raw == "." or raw.startswith("./") or raw.startswith(".\\")


def path_components(path: PathLike) -> List[PathComponent]:
    """
    Break a path into components.

    A ``str`` is interpreted with the host's path flavour; pass a
    ``PurePosixPath`` or ``PureWindowsPath`` to pick one explicitly. A "."
    is only kept as the first component, interior ones are dropped.
    """
    raw = path if isinstance(path, str) else None
    pure = PurePath(path) if isinstance(path, str) else path

    components: List[PathComponent] = []
    if pure.drive:
        components.append(PathComponent.prefix(pure.drive))
    if pure.root:
        components.append(PathComponent.root())
    elif raw is not None and not pure.drive and _has_leading_cur_dir(raw):
        components.append(PathComponent.cur_dir())

    parts = pure.parts[1:] if pure.anchor else pure.parts
    for part in parts:
        if part == "..":
            components.append(PathComponent.parent_dir())
        elif part != ".":
            components.append(PathComponent.normal(part))
    return components


def format_components(components: Iterable[PathComponent]) -> str:
    """
    Join components with "/" regardless of host convention.

    A root renders as "/", a prefix renders as nothing, and a separator is
    written before every component except the first and any that directly
    follows a root.
    """
    out: List[str] = []
    display_separator = False
    for component in components:
        if display_separator:
            out.append(PATH_SEPARATOR)

        if component.kind is ComponentKind.ROOT:
            out.append(PATH_SEPARATOR)
        elif component.kind is ComponentKind.PREFIX:
            out.append("")
        else:
            out.append(component.text)

        display_separator = component.kind is not ComponentKind.ROOT
    return "".join(out)


def format_path(path: PathLike) -> str:
    """Format a path for diagnostics using "/" as the only separator."""
    return format_components(path_components(path))
