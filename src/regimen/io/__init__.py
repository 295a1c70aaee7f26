"""Shared file I/O helpers."""

from .json_io import load_json_file, read_text_file, write_json_atomic

__all__ = ["load_json_file", "read_text_file", "write_json_atomic"]
