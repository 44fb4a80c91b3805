"""
Driver-side glue: collecting messages from passes and reporting them.
"""

from .diagnostics import DiagnosticCollection

__all__ = ["DiagnosticCollection"]
