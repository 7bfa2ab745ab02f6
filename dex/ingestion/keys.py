"""
Key naming conversion for serialized records.

Bundled data uses snake_case keys (`image_reference`); in-memory payloads
use camelCase (`imageReference`). The conversion is a pure string transform
applied uniformly to every key, never a per-field mapping table.
"""

from __future__ import annotations

import re
from typing import Any, Callable


_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")
_WORD_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")


def _split_underscore_padding(key: str) -> tuple[str, str, str]:
    """Split a key into (leading underscores, core, trailing underscores)."""
    stripped = key.strip("_")
    if not stripped:
        return key, "", ""
    start = len(key) - len(key.lstrip("_"))
    end = start + len(stripped)
    return key[:start], stripped, key[end:]


def convert_from_snake_case(key: str) -> str:
    """
    Convert a snake_case key to camelCase.

    Leading and trailing underscores are preserved, repeated underscores
    collapse, and the first word keeps its original casing.

    Examples:
        - "image_reference" -> "imageReference"
        - "special_attack" -> "specialAttack"
        - "name" -> "name"
        - "_private_value" -> "_privateValue"
    """
    leading, core, trailing = _split_underscore_padding(key)
    if "_" not in core:
        return key

    words = [w for w in core.split("_") if w]
    head, rest = words[0], words[1:]
    joined = head + "".join(w[:1].upper() + w[1:].lower() for w in rest)
    return f"{leading}{joined}{trailing}"


def convert_to_snake_case(key: str) -> str:
    """
    Convert a camelCase key to snake_case.

    Runs of capitals are treated as one word ("spriteURL" -> "sprite_url").
    """
    leading, core, trailing = _split_underscore_padding(key)
    if not core:
        return key

    core = _ACRONYM_BOUNDARY.sub(r"\1_\2", core)
    core = _WORD_BOUNDARY.sub(r"\1_\2", core)
    return f"{leading}{core.lower()}{trailing}"


def convert_keys(value: Any, convert: Callable[[str], str]) -> Any:
    """
    Apply a key conversion recursively to every mapping in a JSON value.

    Lists are walked element by element; scalars are returned unchanged.
    """
    if isinstance(value, dict):
        return {
            (convert(k) if isinstance(k, str) else k): convert_keys(v, convert)
            for k, v in value.items()
        }
    if isinstance(value, (list, tuple)):
        return [convert_keys(item, convert) for item in value]
    return value
