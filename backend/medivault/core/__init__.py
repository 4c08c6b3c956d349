"""
Core package initialization.
"""

from medivault.core.config import settings, get_settings

__all__ = [
    "settings",
    "get_settings",
]
