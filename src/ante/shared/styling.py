"""
Diagnostic Styling

ANSI emphasis for each element of a rendered diagnostic. A ``Styling`` is a
plain immutable value: build it once and pass it to every render call.
"""

import logging
import os
import sys
from dataclasses import dataclass
from typing import Optional, TextIO, Tuple

from ..utils.config import (
    COLOR_DISABLED_VALUES,
    COLOR_ENV_VAR,
    COLOR_FORCED_VALUES,
    NO_COLOR_ENV_VAR,
)

logger = logging.getLogger(__name__)

_BOLD   = "\033[1m"
_ITALIC = "\033[3m"
_RED    = "\033[31m"
_GREEN  = "\033[32m"
_YELLOW = "\033[33m"
_BLUE   = "\033[34m"
_PURPLE = "\033[35m"
_RESET  = "\033[0m"


@dataclass(frozen=True)
class Style:
    """A set of ANSI codes; the empty style leaves text untouched"""
    codes: Tuple[str, ...] = ()

    def _with(self, code: str) -> "Style":
        return Style(self.codes + (code,))

    def bold(self) -> "Style":
        return self._with(_BOLD)

    def italic(self) -> "Style":
        return self._with(_ITALIC)

    def red(self) -> "Style":
        return self._with(_RED)

    def green(self) -> "Style":
        return self._with(_GREEN)

    def yellow(self) -> "Style":
        return self._with(_YELLOW)

    def blue(self) -> "Style":
        return self._with(_BLUE)

    def purple(self) -> "Style":
        return self._with(_PURPLE)

    def is_plain(self) -> bool:
        return not self.codes

    def paint(self, text: str) -> str:
        prefix = "".join(self.codes)
        return f"{prefix}{text}{_RESET}" if prefix else text


@dataclass(frozen=True)
class Styling:
    """
    Emphasis per diagnostic element.

    ``underline`` selects the marker strategy: with it set a caret line is
    always printed under the snippet, without it the highlighted part of the
    snippet is coloured instead and carets appear only for empty spans.
    """
    location: Style

    header_error: Style
    header_warning: Style
    header_note: Style

    # Styles used in the message body
    type_: Style
    wrong_type: Style
    trait_: Style

    # Style used in the source line display
    line_wrong_part: Style
    underline: bool

    @classmethod
    def no_color(cls) -> "Styling":
        plain = Style()
        return cls(
            location=plain,
            header_error=plain,
            header_warning=plain,
            header_note=plain,
            type_=plain,
            wrong_type=plain,
            trait_=plain,
            line_wrong_part=plain,
            underline=True,
        )

    @classmethod
    def colored(cls) -> "Styling":
        return cls(
            location=Style().italic(),
            header_error=Style().red().bold(),
            header_warning=Style().yellow().bold(),
            header_note=Style().purple().bold(),
            type_=Style().green(),
            wrong_type=Style().red(),
            trait_=Style().blue(),
            line_wrong_part=Style().red(),
            underline=False,
        )

    @classmethod
    def from_environment(cls, stream: Optional[TextIO] = None) -> "Styling":
        """
        Pick ``colored`` or ``no_color`` for output written to ``stream``.

        NO_COLOR always wins. ANTE_COLOR may force colour on or off;
        otherwise colour is used only when the stream is a terminal.
        """
        stream = stream if stream is not None else sys.stderr
        if os.environ.get(NO_COLOR_ENV_VAR):
            logger.debug(f"{NO_COLOR_ENV_VAR} set, disabling colour")
            return cls.no_color()

        explicit = os.environ.get(COLOR_ENV_VAR, "").lower()
        if explicit in COLOR_DISABLED_VALUES:
            return cls.no_color()
        if explicit in COLOR_FORCED_VALUES:
            return cls.colored()

        isatty = getattr(stream, "isatty", None)
        use_color = bool(isatty and isatty())
        logger.debug(f"Colour {'enabled' if use_color else 'disabled'} for {stream!r}")
        return cls.colored() if use_color else cls.no_color()
