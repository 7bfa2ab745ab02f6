"""
Ingestion layer for Dex.

Bundled JSON -> key conversion -> validated Pokemon -> store.
"""

from dex.ingestion.keys import convert_from_snake_case, convert_to_snake_case, convert_keys
from dex.ingestion.loader import (
    DecodeError,
    RecordLoader,
    decode_record,
    encode_record,
    preview_record,
)

__all__ = [
    "convert_from_snake_case",
    "convert_to_snake_case",
    "convert_keys",
    "DecodeError",
    "RecordLoader",
    "decode_record",
    "encode_record",
    "preview_record",
]
