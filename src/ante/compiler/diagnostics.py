"""
Diagnostic Collection

Compiler passes report into a ``DiagnosticCollection`` that the driver owns
and threads through every pass context. Passes never stop at the first
problem; the driver renders everything once passes finish and derives the
exit status from whether any error was collected.

Passes running on separate threads may share one collection (appends are
lock-guarded) or fill their own and have the driver ``merge`` them.
"""

import logging
import sys
import threading
from typing import Iterable, Iterator, List, Optional, TextIO

from ..shared.cache import ModuleCache
from ..shared.errors import CompilationMessage
from ..shared.styling import Styling
from ..utils.config import EXIT_FAILURE, EXIT_SUCCESS

logger = logging.getLogger(__name__)


class DiagnosticCollection:
    """Append-only, thread-safe list of compilation messages"""

    def __init__(self, messages: Optional[Iterable[CompilationMessage]] = None):
        self._lock = threading.Lock()
        self._messages: List[CompilationMessage] = list(messages or [])

    def append(self, message: CompilationMessage) -> None:
        if not isinstance(message, CompilationMessage):
            raise TypeError(f"expected a CompilationMessage, got {type(message).__name__}")
        with self._lock:
            self._messages.append(message)
        logger.debug(f"Collected {message.severity.word} at {message.location}")

    def extend(self, messages: Iterable[CompilationMessage]) -> None:
        for message in messages:
            self.append(message)

    def merge(self, other: "DiagnosticCollection") -> None:
        """Append every message of a per-pass buffer, keeping its order"""
        if other is self:
            raise ValueError("cannot merge a collection into itself")
        batch = other.snapshot()
        with self._lock:
            self._messages.extend(batch)
        logger.debug(f"Merged {len(batch)} message(s)")

    def snapshot(self) -> List[CompilationMessage]:
        with self._lock:
            return list(self._messages)

    def __len__(self) -> int:
        with self._lock:
            return len(self._messages)

    def __iter__(self) -> Iterator[CompilationMessage]:
        return iter(self.snapshot())

    def error_count(self) -> int:
        return sum(1 for message in self.snapshot() if message.is_error())

    def has_errors(self) -> bool:
        return any(message.is_error() for message in self.snapshot())

    def exit_status(self) -> int:
        """Non-zero iff at least one collected message is an error"""
        return EXIT_FAILURE if self.has_errors() else EXIT_SUCCESS

    def render_all(self, cache: ModuleCache, styling: Styling) -> str:
        return "".join(message.render(cache, styling) for message in self.snapshot())

    def emit(self, cache: ModuleCache, styling: Optional[Styling] = None, stream: Optional[TextIO] = None) -> int:
        """
        Write every message to ``stream`` (stderr by default) and return the
        exit status. Colour is picked from the environment when no styling
        is given.
        """
        stream = stream if stream is not None else sys.stderr
        styling = styling if styling is not None else Styling.from_environment(stream)
        for message in self.snapshot():
            stream.write(message.render(cache, styling))
        return self.exit_status()
