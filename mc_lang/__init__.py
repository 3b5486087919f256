"""
mc-lang: fetches Minecraft localization files from Mojang's distribution network.
"""

__version__ = "0.3.0"
