"""
Module Cache (diagnostics view)

The compiler's module cache owns type-variable bindings and the text of every
module it loaded. Rendering a diagnostic needs two read-only capabilities from
it: naming a type, and fetching the source text of a file.
"""

import logging
from pathlib import PurePath
from typing import Dict, Optional, Union

from .types import FunctionType, PrimitiveType, RefType, Type, TypeVariable
from ..utils.io_utils import read_source_file

logger = logging.getLogger(__name__)


def _variable_name(id: int) -> str:
    """a, b, ..., z, a1, b1, ..."""
    letter = chr(ord('a') + id % 26)
    suffix = id // 26
    return f"{letter}{suffix}" if suffix else letter


class ModuleCache:
    """
    Type bindings and source text shared by all compiler passes.

    Passes bind type variables while inferring; diagnostics only read.
    """

    def __init__(self, sources: Optional[Dict[str, str]] = None):
        self.type_bindings: Dict[int, Type] = {}
        self.source_files: Dict[str, str] = dict(sources or {})

    # ------------------------------------------------------------------
    # Type bindings
    # ------------------------------------------------------------------

    def bind(self, variable: TypeVariable, ty: Type) -> None:
        if variable.id in self.type_bindings:
            raise ValueError(f"type variable {_variable_name(variable.id)} is already bound")
        self.type_bindings[variable.id] = ty

    def find_binding(self, variable: TypeVariable) -> Optional[Type]:
        return self.type_bindings.get(variable.id)

    def follow_bindings(self, ty: Type) -> Type:
        """Resolve a chain of bound type variables to the type at its end"""
        seen = set()
        while isinstance(ty, TypeVariable) and ty.id in self.type_bindings:
            if ty.id in seen:
                raise ValueError(f"cyclic binding for type variable {_variable_name(ty.id)}")
            seen.add(ty.id)
            ty = self.type_bindings[ty.id]
        return ty

    def name_of(self, ty: Type) -> str:
        """Human-readable name of a type. Never mutates the cache."""
        ty = self.follow_bindings(ty)

        if isinstance(ty, PrimitiveType):
            return ty.name
        if isinstance(ty, TypeVariable):
            return _variable_name(ty.id)
        if isinstance(ty, RefType):
            return f"ref {self.name_of(ty.element_type)}"
        if isinstance(ty, FunctionType):
            params = " ".join(self.name_of(p) for p in ty.param_types) or "Unit"
            return f"({params} -> {self.name_of(ty.return_type)})"
        raise TypeError(f"cannot name type {ty!r}")

    # ------------------------------------------------------------------
    # Source text
    # ------------------------------------------------------------------

    def add_source(self, path: Union[str, PurePath], text: str) -> None:
        self.source_files[str(path)] = text

    def source_text(self, path: Union[str, PurePath]) -> str:
        """
        Text of the file at ``path``.

        Sources registered with ``add_source`` are served from memory; any
        other path is read from disk on every call. Read errors propagate.
        """
        key = str(path)
        text = self.source_files.get(key)
        if text is not None:
            logger.debug(f"Source cache hit for {key}")
            return text
        logger.debug(f"Reading {key} from disk")
        return read_source_file(key)
