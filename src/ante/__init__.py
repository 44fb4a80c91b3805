"""
Ante compiler diagnostics: locations, message taxonomy, styling and rendering.
"""

from .compiler.diagnostics import DiagnosticCollection
from .shared import (
    CompilationMessage,
    Location,
    MessageType,
    ModuleCache,
    OwnedLocation,
    Styling,
)

__all__ = [
    "CompilationMessage",
    "DiagnosticCollection",
    "Location",
    "MessageType",
    "ModuleCache",
    "OwnedLocation",
    "Styling",
]
