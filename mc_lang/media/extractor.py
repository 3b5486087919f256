"""
Extracts single entries from a downloaded client archive.
"""

import logging
import os
import shutil
import zipfile
from pathlib import Path

log = logging.getLogger(__name__)

PRIMARY_LOCALE_ENTRY = "assets/minecraft/lang/en_us.json"


def extract_entry(archive_path: Path, entry_name: str, destination: Path) -> bool:
    """
    Copies one entry of a ZIP archive to a file, replacing it.

    The entry is written to '<destination>.part' first and renamed into place,
    so a member that fails its CRC check leaves any previous file untouched.

    Returns:
        True if the entry was found and written, False if the archive has no
        such entry.

    Raises:
        zipfile.BadZipFile: If the archive or the entry is corrupt.
    """
    with zipfile.ZipFile(archive_path) as zf:
        try:
            info = zf.getinfo(entry_name)
        except KeyError:
            log.debug(f"'{entry_name}' not present in '{archive_path.name}'")
            return False
        temp_path = destination.with_name(destination.name + ".part")
        try:
            with zf.open(info) as src, open(temp_path, "wb") as dst:
                shutil.copyfileobj(src, dst)
            os.replace(temp_path, destination)
        finally:
            if temp_path.exists():
                temp_path.unlink()
    return True
