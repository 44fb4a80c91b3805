"""
Ante diagnostics utilities package
"""

from .io_utils import read_source_file, split_source_lines

__all__ = ["read_source_file", "split_source_lines"]
