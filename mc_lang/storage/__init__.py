"""
Storage Layer.

This package decides where fetched files are written on disk.
"""

from .layout import LayoutWriter, OutputLayout, write_version_marker

__all__ = ["LayoutWriter", "OutputLayout", "write_version_marker"]
