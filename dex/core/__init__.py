"""
Core domain model for Dex.

- Pokemon: The immutable creature profile the application displays
"""

from dex.core.models import Pokemon, compute_content_hash, generate_id

__all__ = [
    "Pokemon",
    "compute_content_hash",
    "generate_id",
]
