"""
Config package.

Usage:
    from config import config
"""

from .config import config, GarmentGridConfig

__all__ = ["config", "GarmentGridConfig"]
