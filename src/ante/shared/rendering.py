"""
Diagnostic Rendering

Turns a ``CompilationMessage`` into terminal text:

    src/main.an:3:5 | error:
    Mismatched parameters: expected Int, got Bool
    let xx = 1
        ^^^^

The source line is read when the message is rendered, not when it is created.
Columns are UTF-8 byte offsets and one byte is assumed to be one display
column, so carets drift on lines with multi-byte or wide characters.
"""

import logging
from typing import Callable, Dict, Tuple

from typing_extensions import assert_never

from .cache import ModuleCache
from .errors import (
    ERROR_KINDS,
    AnteImplementationError,
    CannotAssignToRef,
    CompilationMessage,
    CompilationNote,
    CompilationWarning,
    InvalidNumberOfParameters,
    MismatchedParameters,
    RefRequiredForAssignment,
    Severity,
    SourceUnavailableError,
    ValueIsNotAFunction,
)
from .styling import Style, Styling
from ..utils.config import DEFAULT_FILE_ENCODING, ERROR_POINTER_CHAR, HEADER_SEPARATOR
from ..utils.io_utils import split_source_lines

logger = logging.getLogger(__name__)

BodyRenderer = Callable[..., str]

_BODY_RENDERERS: Dict[type, BodyRenderer] = {}


def _renders(kind: type) -> Callable[[BodyRenderer], BodyRenderer]:
    def register(fn: BodyRenderer) -> BodyRenderer:
        _BODY_RENDERERS[kind] = fn
        return fn
    return register


# ---------------------------------------------------------------------------
# Message bodies (one line each, trailing newline included)
# ---------------------------------------------------------------------------

@_renders(MismatchedParameters)
def _mismatched_parameters(error: MismatchedParameters, cache: ModuleCache, styling: Styling) -> str:
    return "Mismatched parameters: expected {}, got {}\n".format(
        styling.type_.paint(cache.name_of(error.expected)),
        styling.wrong_type.paint(cache.name_of(error.got)),
    )


@_renders(RefRequiredForAssignment)
def _ref_required_for_assignment(error: RefRequiredForAssignment, cache: ModuleCache, styling: Styling) -> str:
    return "Expression of type {} must be a mutable-reference type to be assigned to\n".format(
        styling.wrong_type.paint(cache.name_of(error.got)),
    )


@_renders(CannotAssignToRef)
def _cannot_assign_to_ref(error: CannotAssignToRef, cache: ModuleCache, styling: Styling) -> str:
    return "Cannot assign expression of type {} to a reference of type {}\n".format(
        styling.wrong_type.paint(cache.name_of(error.got)),
        styling.type_.paint(cache.name_of(error.expected)),
    )


@_renders(ValueIsNotAFunction)
def _value_is_not_a_function(error: ValueIsNotAFunction, cache: ModuleCache, styling: Styling) -> str:
    return "Value being called is not a function, it is a {}\n".format(
        styling.wrong_type.paint(cache.name_of(error.got)),
    )


@_renders(InvalidNumberOfParameters)
def _invalid_number_of_parameters(error: InvalidNumberOfParameters, cache: ModuleCache, styling: Styling) -> str:
    # "parameter" for 0 as well; only 2+ gets the plural
    plural = "" if error.expected < 2 else "s"
    return "Function {} declared to take {} parameter{}, but {} were supplied\n".format(
        styling.wrong_type.paint(cache.name_of(error.function)),
        styling.type_.paint(str(error.expected)),
        plural,
        styling.wrong_type.paint(str(error.got)),
    )


@_renders(CompilationWarning)
def _warning(warning: CompilationWarning, cache: ModuleCache, styling: Styling) -> str:
    if warning is CompilationWarning.TODO:
        raise AnteImplementationError("rendering of warning messages")
    assert_never(warning)


@_renders(CompilationNote)
def _note(note: CompilationNote, cache: ModuleCache, styling: Styling) -> str:
    if note is CompilationNote.TODO:
        raise AnteImplementationError("rendering of note messages")
    assert_never(note)


def _check_renderers() -> None:
    """Every payload kind needs a body renderer; fail at import, not mid-report"""
    missing = [
        kind.__name__
        for kind in ERROR_KINDS + (CompilationWarning, CompilationNote)
        if kind not in _BODY_RENDERERS
    ]
    if missing:
        raise AnteImplementationError(f"no body renderer for {', '.join(missing)}")


_check_renderers()


def render_body(payload, cache: ModuleCache, styling: Styling) -> str:
    renderer = _BODY_RENDERERS.get(type(payload))
    if renderer is None:
        raise TypeError(f"not a message payload: {payload!r}")
    return renderer(payload, cache, styling)


# ---------------------------------------------------------------------------
# Source snippet
# ---------------------------------------------------------------------------

def highlight_range(line_length: int, column: int, length: int) -> Tuple[int, int]:
    """
    Half-open byte range [lo, hi) of a span on a line of ``line_length`` bytes.

    Both ends are clamped into [0, line_length] and lo <= hi.
    """
    lo = min(max(column - 1, 0), line_length)
    hi = min(lo + max(length, 0), line_length)
    return lo, hi


def _is_continuation(raw: bytes, index: int) -> bool:
    return 0 <= index < len(raw) and raw[index] & 0xC0 == 0x80


def _character_bounds(raw: bytes, lo: int, hi: int) -> Tuple[int, int]:
    """Widen [lo, hi) to UTF-8 character boundaries so every piece decodes intact"""
    while _is_continuation(raw, lo):
        lo -= 1
    while _is_continuation(raw, hi):
        hi += 1
    return lo, max(lo, hi)


def _decode(data: bytes) -> str:
    return data.decode(DEFAULT_FILE_ENCODING)


def _paint_nonempty(style: Style, text: str) -> str:
    return style.paint(text) if text else text


def _header_style(severity: Severity, styling: Styling) -> Style:
    if severity is Severity.ERROR:
        return styling.header_error
    if severity is Severity.WARNING:
        return styling.header_warning
    if severity is Severity.NOTE:
        return styling.header_note
    assert_never(severity)


def render_message(message: CompilationMessage, cache: ModuleCache, styling: Styling) -> str:
    """
    Render a message with:
    - the filename, line and column;
    - the message body;
    - the offending source line, highlighted part styled;
    - a caret line under the highlighted part (always with ``underline``,
      otherwise only when the highlighted part is empty).

    Raises SourceUnavailableError if the source file cannot be read.
    """
    location = message.location
    logger.debug(f"Rendering {message.severity.word} at {location}")

    try:
        contents = cache.source_text(location.filename)
    except (OSError, UnicodeDecodeError) as e:
        raise SourceUnavailableError(str(location.filename), str(e)) from e

    lines = split_source_lines(contents)
    index = location.line - 1
    line = lines[index] if index < len(lines) else ""
    raw = line.encode(DEFAULT_FILE_ENCODING)
    lo, hi = highlight_range(len(raw), location.column, location.length())

    # Carets stay on byte offsets; only the text split snaps to characters
    text_lo, text_hi = _character_bounds(raw, lo, hi)

    severity = message.severity
    out = [
        styling.location.paint(str(location))
        + HEADER_SEPARATOR
        + _header_style(severity, styling).paint(f"{severity.word}:")
        + "\n",
        render_body(message.payload, cache, styling),
        _decode(raw[:text_lo])
        + _paint_nonempty(styling.line_wrong_part, _decode(raw[text_lo:text_hi]))
        + _decode(raw[text_hi:])
        + "\n",
    ]

    if styling.underline or lo == hi:
        out.append((ERROR_POINTER_CHAR * (hi - lo)).rjust(hi) + "\n")

    return "".join(out)
