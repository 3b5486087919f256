"""
Provides SHA-1 checks for downloaded files.
"""

import hashlib
from pathlib import Path


class FileIntegrityChecker:
    """A collection of static methods for validating file integrity."""

    CHUNK_SIZE = 8192

    @staticmethod
    def sha1_file(filepath: Path, chunk_size: int = CHUNK_SIZE) -> str:
        """
        Computes the lowercase hex SHA-1 of a file, reading it in chunks.

        Args:
            filepath: Path to the file.
            chunk_size: Read size in bytes; it has no effect on the digest.

        Returns:
            The 40-character lowercase hex digest.
        """
        digest = hashlib.sha1()  # noqa: S324
        with open(filepath, "rb") as f:
            while chunk := f.read(chunk_size):
                digest.update(chunk)
        return digest.hexdigest()
