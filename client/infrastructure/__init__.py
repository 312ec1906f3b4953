"""Client infrastructure layer."""

from client.infrastructure.decipher_client import DecipherClient

__all__ = [
    "DecipherClient",
]
