"""
Crimson Runtime Module
Per-file runtime settings
"""

from .file_flags import parse_file_flags

__all__ = [
    'parse_file_flags',
]
