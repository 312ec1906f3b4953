"""Batch resolution of hashes against the passwords table."""

import logging
from typing import Iterable
from shared.domain.consts import HashDisplay
from decipher.infrastructure.passwords_table import PasswordsTable

logger = logging.getLogger(__name__)


def resolve_hashes(table: PasswordsTable, hashes: Iterable[str]) -> dict[str, str]:
    """
    Resolve a batch of hashes in one pass.
    
    Hashes are expected trimmed and lowercased already. Each distinct hash
    is looked up once, however often it repeats in the batch; empty hashes
    are never looked up.
    
    Returns:
        Dict of distinct hash -> password, containing only the hashes that
        were found. Absence from the result means "not found".
    """
    resolved: dict[str, str] = {}
    
    if not len(table):
        return resolved
    
    distinct = dict.fromkeys(hash_value for hash_value in hashes if hash_value)
    for hash_value in distinct:
        password = table.get(hash_value)
        if password is not None:
            resolved[hash_value] = password
            logger.debug(f"Resolved hash {hash_value[:HashDisplay.PREFIX_LENGTH]}...")
    
    logger.debug(f"Resolved {len(resolved)} of {len(distinct)} distinct hashes")
    return resolved
