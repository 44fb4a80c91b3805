"""
Type System (display subset)

Diagnostics only ever need to name a type, so this module carries just enough
of the type representation to do that. All types are immutable; a payload
that stores one keeps a snapshot that later inference cannot change.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class TypeKind(Enum):
    """Type kind"""
    PRIMITIVE = "primitive"  # i32, bool, string, etc.
    FUNCTION = "function"
    REF = "ref"              # Mutable reference: ref a
    VARIABLE = "variable"    # Inference variable, bound in the ModuleCache


@dataclass(frozen=True)
class Type:
    """Base of all types"""
    kind: TypeKind


@dataclass(frozen=True)
class PrimitiveType(Type):
    """Primitive type (Int, Bool, String, etc.)"""
    name: str

    def __init__(self, name: str):
        super().__init__(kind=TypeKind.PRIMITIVE)
        object.__setattr__(self, 'name', name)

    def __repr__(self) -> str:
        return self.name


@dataclass(frozen=True)
class FunctionType(Type):
    """
    Function type (arrow type).

    Parameters are displayed space-separated followed by "->" and the
    return type, as in ``Int Bool -> String``.
    """
    param_types: Tuple[Type, ...]
    return_type: Type

    def __init__(self, param_types: Tuple[Type, ...], return_type: Type):
        super().__init__(kind=TypeKind.FUNCTION)
        object.__setattr__(self, 'param_types', tuple(param_types))
        object.__setattr__(self, 'return_type', return_type)

    @property
    def arity(self) -> int:
        return len(self.param_types)


@dataclass(frozen=True)
class RefType(Type):
    """Mutable reference to a value of ``element_type``"""
    element_type: Type

    def __init__(self, element_type: Type):
        super().__init__(kind=TypeKind.REF)
        object.__setattr__(self, 'element_type', element_type)


@dataclass(frozen=True)
class TypeVariable(Type):
    """Inference variable; its binding (if any) lives in the ModuleCache"""
    id: int

    def __init__(self, id: int):
        super().__init__(kind=TypeKind.VARIABLE)
        object.__setattr__(self, 'id', id)


# Common primitive types
INT = PrimitiveType("Int")
FLOAT = PrimitiveType("Float")
BOOL = PrimitiveType("Bool")
CHAR = PrimitiveType("Char")
STRING = PrimitiveType("String")
UNIT = PrimitiveType("Unit")
