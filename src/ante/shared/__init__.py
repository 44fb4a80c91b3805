"""
Shared components: locations, types, message taxonomy, styling, rendering.
"""

from .paths import ComponentKind, PathComponent, format_components, format_path, path_components
from .source_location import Location, OwnedLocation, Position
from .types import Type, TypeKind, PrimitiveType, FunctionType, RefType, TypeVariable
from .cache import ModuleCache
from .styling import Style, Styling
from .errors import (
    AnteError, AnteImplementationError, SourceUnavailableError,
    CompilationError, CompilationWarning, CompilationNote,
    MismatchedParameters, RefRequiredForAssignment, CannotAssignToRef,
    ValueIsNotAFunction, InvalidNumberOfParameters,
    mismatched_parameters, ref_required_for_assignment, cannot_assign_to_ref,
    value_is_not_a_function, invalid_number_of_parameters,
    Severity, MessageType, CompilationMessage,
)
from .rendering import highlight_range, render_message
