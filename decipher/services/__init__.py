"""Decipher services layer."""

from decipher.services.lookup import resolve_hashes
from decipher.services.formatter import parse_records, format_records, decipher_text
from decipher.services.hash_generator import generate_precomputed_hashes

__all__ = [
    "resolve_hashes",
    "parse_records",
    "format_records",
    "decipher_text",
    "generate_precomputed_hashes",
]
