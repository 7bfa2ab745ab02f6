"""
Interface layer for Dex.

Provides the application client.
"""

from dex.interface.client import Dex, StartupError

__all__ = [
    "Dex",
    "StartupError",
]
