"""
Compilation Messages

Errors, warnings and notes reported by compiler passes. A pass creates a
``CompilationMessage`` the moment it detects an issue and keeps going, so one
run can surface every problem it finds. Messages are rendered later, after
collection, and the process fails iff at least one of them is an error.

Payload helpers (``mismatched_parameters`` and friends) deep-copy every type
they are given, so a stored message stays renderable however inference
continues afterwards.
"""

import copy
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Union

from typing_extensions import TypeAlias

from .source_location import Location, OwnedLocation
from .types import FunctionType, Type

if TYPE_CHECKING:
    from .cache import ModuleCache
    from .styling import Styling


# ============================================================================
# Exception Classes
# ============================================================================

class AnteError(Exception):
    """Base exception for all errors raised by the diagnostics package"""
    def __init__(self, message: str, location: Union[Location, OwnedLocation, None] = None):
        super().__init__(message)
        self.message = message
        self.location = location

    def __str__(self):
        if self.location:
            return f"{self.location}: {self.message}"
        return self.message


class SourceUnavailableError(AnteError):
    """
    The source file named by a diagnostic could not be read while rendering.

    The file was compiled moments ago, so this is a failure of the reporting
    path itself rather than something to show the user as a diagnostic.
    """
    def __init__(self, path: str, reason: str):
        super().__init__(f"could not read source file {path}: {reason}")
        self.path = path


class AnteImplementationError(Exception):
    """
    Missing piece of the compiler (not a problem in the user's program).

    Raised for message kinds whose wording has not been written yet. Kept
    outside the AnteError family so callers can tell "not built yet" apart
    from malformed input.
    """
    def __init__(self, message: str, error_code: str = "E9999"):
        super().__init__(message)
        self.message = message
        self.error_code = error_code

    def __str__(self):
        return f"[{self.error_code}] not implemented: {self.message}"


# ============================================================================
# Payloads
# ============================================================================

class CompilationError:
    """Base of the closed set of error payloads"""

    @staticmethod
    def todo(message: str) -> "CompilationError":
        raise AnteImplementationError(message)


@dataclass(frozen=True)
class MismatchedParameters(CompilationError):
    expected: Type
    got: Type


@dataclass(frozen=True)
class RefRequiredForAssignment(CompilationError):
    got: Type


@dataclass(frozen=True)
class CannotAssignToRef(CompilationError):
    expected: Type
    got: Type


@dataclass(frozen=True)
class ValueIsNotAFunction(CompilationError):
    got: Type


@dataclass(frozen=True)
class InvalidNumberOfParameters(CompilationError):
    function: FunctionType
    got: int
    expected: int

    def __post_init__(self) -> None:
        if self.got < 0 or self.expected < 0:
            raise ValueError("parameter counts must be >= 0")


ERROR_KINDS = (
    MismatchedParameters,
    RefRequiredForAssignment,
    CannotAssignToRef,
    ValueIsNotAFunction,
    InvalidNumberOfParameters,
)


class CompilationWarning(Enum):
    """Warning payloads. Only a placeholder exists so far."""
    TODO = "todo"

    @staticmethod
    def todo(message: str) -> "CompilationWarning":
        raise AnteImplementationError(message)


class CompilationNote(Enum):
    """Note payloads. Only a placeholder exists so far."""
    TODO = "todo"

    @staticmethod
    def todo(message: str) -> "CompilationNote":
        raise AnteImplementationError(message)


Payload: TypeAlias = Union[CompilationError, CompilationWarning, CompilationNote]


def _snapshot(ty: Type) -> Type:
    return copy.deepcopy(ty)


def mismatched_parameters(expected: Type, got: Type) -> MismatchedParameters:
    return MismatchedParameters(expected=_snapshot(expected), got=_snapshot(got))


def ref_required_for_assignment(got: Type) -> RefRequiredForAssignment:
    return RefRequiredForAssignment(got=_snapshot(got))


def cannot_assign_to_ref(expected: Type, got: Type) -> CannotAssignToRef:
    return CannotAssignToRef(expected=_snapshot(expected), got=_snapshot(got))


def value_is_not_a_function(got: Type) -> ValueIsNotAFunction:
    return ValueIsNotAFunction(got=_snapshot(got))


def invalid_number_of_parameters(function: FunctionType, got: int, expected: int) -> InvalidNumberOfParameters:
    return InvalidNumberOfParameters(function=_snapshot(function), got=got, expected=expected)


# ============================================================================
# Messages
# ============================================================================

class Severity(Enum):
    ERROR = "error"
    WARNING = "warning"
    NOTE = "note"

    @property
    def word(self) -> str:
        return self.value


@dataclass(frozen=True)
class MessageType:
    """A payload tagged with its severity"""
    severity: Severity
    payload: Payload

    def __post_init__(self) -> None:
        expected = _PAYLOAD_BASES[self.severity]
        if not isinstance(self.payload, expected):
            raise TypeError(
                f"{self.severity.word} message needs a {expected.__name__} payload, "
                f"got {type(self.payload).__name__}"
            )

    @classmethod
    def error(cls, error: CompilationError) -> "MessageType":
        return cls(Severity.ERROR, error)

    @classmethod
    def warning(cls, warning: CompilationWarning) -> "MessageType":
        return cls(Severity.WARNING, warning)

    @classmethod
    def note(cls, note: CompilationNote) -> "MessageType":
        return cls(Severity.NOTE, note)

    @classmethod
    def of(cls, payload: Union["MessageType", Payload]) -> "MessageType":
        """Wrap a bare payload in the variant matching its class"""
        if isinstance(payload, MessageType):
            return payload
        for severity, base in _PAYLOAD_BASES.items():
            if isinstance(payload, base):
                return cls(severity, payload)
        raise TypeError(f"not a message payload: {payload!r}")


_PAYLOAD_BASES = {
    Severity.ERROR: CompilationError,
    Severity.WARNING: CompilationWarning,
    Severity.NOTE: CompilationNote,
}


@dataclass(frozen=True)
class CompilationMessage:
    """A located, immutable diagnostic"""
    location: OwnedLocation
    message: MessageType

    @classmethod
    def new(cls, location: Union[Location, OwnedLocation], message: Union[MessageType, Payload]) -> "CompilationMessage":
        if isinstance(location, Location):
            location = location.as_owned()
        return cls(location=location, message=MessageType.of(message))

    @property
    def severity(self) -> Severity:
        return self.message.severity

    @property
    def payload(self) -> Payload:
        return self.message.payload

    def is_error(self) -> bool:
        return self.message.severity is Severity.ERROR

    def render(self, cache: "ModuleCache", styling: "Styling") -> str:
        """Full text of this message: header, body, source snippet, markers"""
        from .rendering import render_message
        return render_message(self, cache, styling)
