#!/usr/bin/env python3
"""
Tests for DiagnosticCollection: collection, exit status and emission.
"""

import io
import threading

import pytest

from ante.compiler.diagnostics import DiagnosticCollection
from ante.shared.cache import ModuleCache
from ante.shared.errors import (
    CompilationMessage,
    CompilationNote,
    CompilationWarning,
    mismatched_parameters,
    value_is_not_a_function,
)
from ante.shared.source_location import Location
from ante.shared.types import BOOL, INT


def _error(line=1):
    return CompilationMessage.new(Location.at("a.x", line, 1, 1), value_is_not_a_function(INT))


def _warning():
    return CompilationMessage.new(Location.at("a.x", 1, 1), CompilationWarning.TODO)


@pytest.fixture
def source_cache():
    return ModuleCache({"a.x": "f 1\ng 2\n"})


class TestCollection:
    def test_starts_empty(self):
        diagnostics = DiagnosticCollection()
        assert len(diagnostics) == 0
        assert not diagnostics.has_errors()
        assert diagnostics.exit_status() == 0

    def test_append_keeps_order(self):
        diagnostics = DiagnosticCollection()
        first, second = _error(1), _error(2)
        diagnostics.append(first)
        diagnostics.append(second)
        assert list(diagnostics) == [first, second]

    def test_rejects_non_messages(self):
        with pytest.raises(TypeError):
            DiagnosticCollection().append("error")

    def test_no_deduplication(self):
        diagnostics = DiagnosticCollection()
        message = _error()
        diagnostics.extend([message, message])
        assert len(diagnostics) == 2
        assert diagnostics.error_count() == 2

    def test_iteration_is_a_snapshot(self):
        diagnostics = DiagnosticCollection([_error()])
        seen = iter(diagnostics)
        diagnostics.append(_error(2))
        assert len(list(seen)) == 1


class TestExitStatus:
    def test_warnings_and_notes_do_not_fail(self):
        diagnostics = DiagnosticCollection([
            _warning(),
            CompilationMessage.new(Location.at("a.x", 1, 1), CompilationNote.TODO),
        ])
        assert not diagnostics.has_errors()
        assert diagnostics.exit_status() == 0

    def test_any_error_fails(self):
        diagnostics = DiagnosticCollection([_warning(), _error()])
        assert diagnostics.has_errors()
        assert diagnostics.error_count() == 1
        assert diagnostics.exit_status() == 1


class TestPerPassBuffers:
    def test_merge(self):
        driver = DiagnosticCollection([_error(1)])
        pass_buffer = DiagnosticCollection([_error(2)])
        driver.merge(pass_buffer)
        assert [m.location.line for m in driver] == [1, 2]
        assert len(pass_buffer) == 1

    def test_merge_into_self_rejected(self):
        diagnostics = DiagnosticCollection()
        with pytest.raises(ValueError):
            diagnostics.merge(diagnostics)

    def test_concurrent_appends(self):
        diagnostics = DiagnosticCollection()

        def run_pass():
            for _ in range(200):
                diagnostics.append(_error())

        threads = [threading.Thread(target=run_pass) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        assert len(diagnostics) == 1600


class TestReporting:
    def test_render_all(self, source_cache, no_color):
        diagnostics = DiagnosticCollection([_error(1), _error(2)])
        out = diagnostics.render_all(source_cache, no_color)
        assert out == (
            "a.x:1:1 | error:\n"
            "Value being called is not a function, it is a Int\n"
            "f 1\n"
            "^\n"
            "a.x:2:1 | error:\n"
            "Value being called is not a function, it is a Int\n"
            "g 2\n"
            "^\n"
        )

    def test_emit_returns_exit_status(self, source_cache, no_color):
        stream = io.StringIO()
        message = CompilationMessage.new(Location.at("a.x", 2, 3, 1), mismatched_parameters(INT, BOOL))
        status = DiagnosticCollection([message]).emit(source_cache, no_color, stream)
        assert status == 1
        assert stream.getvalue().startswith("a.x:2:3 | error:\nMismatched parameters")

    def test_emit_picks_styling_from_stream(self, source_cache, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.delenv("ANTE_COLOR", raising=False)
        stream = io.StringIO()
        DiagnosticCollection([_error()]).emit(source_cache, stream=stream)
        assert "\x1b" not in stream.getvalue()
        assert stream.getvalue().endswith("f 1\n^\n")

    def test_emit_nothing(self, source_cache, no_color):
        stream = io.StringIO()
        assert DiagnosticCollection().emit(source_cache, no_color, stream) == 0
        assert stream.getvalue() == ""
