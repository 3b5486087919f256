"""
File Transfer Layer.

This package is responsible for all file operations on fetched content,
including downloading, SHA-1 validation, and archive extraction.
"""

from .downloader import Downloader
from .extractor import PRIMARY_LOCALE_ENTRY, extract_entry
from .integrity import FileIntegrityChecker

__all__ = ["Downloader", "FileIntegrityChecker", "PRIMARY_LOCALE_ENTRY", "extract_entry"]
