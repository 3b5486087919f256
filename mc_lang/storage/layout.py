"""
Derives per-version output directories and writes the files that live next to them.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from pathvalidate import sanitize_filename

from mc_lang.exceptions import ConfigurationError
from mc_lang.models.config import LayoutStrategy

log = logging.getLogger(__name__)

NESTED_PARENT = "full"
MODULE_PREFIX = "lang_"
MODULE_RESOURCE_DIR = Path("src") / "main" / "resources" / "lang"
DESCRIPTOR_FILENAME = "pom.xml"
VERSION_MARKER_FILENAME = "version.txt"

DESCRIPTOR_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<project xmlns="http://maven.apache.org/POM/4.0.0"
         xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance"
         xsi:schemaLocation="http://maven.apache.org/POM/4.0.0 http://maven.apache.org/xsd/maven-4.0.0.xsd">
  <modelVersion>4.0.0</modelVersion>

  <parent>
    <groupId>org.tsob</groupId>
    <artifactId>mc-lang</artifactId>
    <version>1.0.0</version>
  </parent>

  <artifactId>lang_{version_id}</artifactId>
  <name>Minecraft language files {version_id}</name>
  <packaging>jar</packaging>
</project>
"""


def create_dir(directory_path: Path) -> None:
    """Creates a directory if it does not already exist."""
    directory_path.mkdir(parents=True, exist_ok=True)


def underscore_id(version_id: str) -> str:
    """'1.20.4' -> '1_20_4'"""
    return version_id.replace(".", "_")


def safe_component(version_id: str) -> str:
    """Turns a version id from the manifest into a safe single path component."""
    name = "" if version_id.strip() in (".", "..") else sanitize_filename(version_id, platform="auto")
    if not name:
        raise ConfigurationError(f"Version id '{version_id}' cannot be used as a directory name.")
    return name


@dataclass(frozen=True)
class OutputLayout:
    """Where one release's files go."""

    version: str
    output_dir: Path
    module_root: Optional[Path] = None

    @property
    def descriptor_path(self) -> Optional[Path]:
        if self.module_root is None:
            return None
        return self.module_root / DESCRIPTOR_FILENAME


class LayoutWriter:
    """Resolves and prepares output directories for one naming strategy."""

    def __init__(self, root: Path, strategy: LayoutStrategy):
        self.root = root
        self.strategy = strategy

    def resolve(self, version_id: str) -> OutputLayout:
        """Computes the layout for a version without touching the filesystem."""
        if self.strategy is LayoutStrategy.FLAT:
            return OutputLayout(version_id, self.root / safe_component(version_id))

        if self.strategy is LayoutStrategy.NESTED:
            return OutputLayout(
                version_id, self.root / NESTED_PARENT / safe_component(version_id)
            )

        module_root = self.root / safe_component(MODULE_PREFIX + underscore_id(version_id))
        return OutputLayout(
            version_id, module_root / MODULE_RESOURCE_DIR, module_root=module_root
        )

    def prepare(self, version_id: str) -> OutputLayout:
        """Creates the output directory and, for module layouts, the descriptor file."""
        layout = self.resolve(version_id)
        create_dir(layout.output_dir)
        if layout.module_root is not None:
            self.write_descriptor(layout)
        return layout

    def write_descriptor(self, layout: OutputLayout) -> Path:
        """Writes the build descriptor for a module layout, replacing any previous one."""
        path = layout.descriptor_path
        content = DESCRIPTOR_TEMPLATE.format(version_id=underscore_id(layout.version))
        path.write_text(content, encoding="utf-8")
        log.debug(f"Wrote module descriptor {path}")
        return path


def write_version_marker(root: Path, version_id: str) -> Path:
    """Records the version processed by a single-version run in <root>/version.txt."""
    create_dir(root)
    path = root / VERSION_MARKER_FILENAME
    path.write_text(version_id, encoding="utf-8")
    return path
