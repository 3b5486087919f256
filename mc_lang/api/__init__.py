"""
Launcher Metadata Layer.

This package handles all communication with Mojang's launcher metadata service.
"""

from .client import LauncherMetaClient

__all__ = ["LauncherMetaClient"]
