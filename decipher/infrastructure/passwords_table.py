"""Read-only table of precomputed hash -> password entries."""

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional, Union
from shared.domain.consts import RecordFormat
from shared.domain.status import LoadStatus

logger = logging.getLogger(__name__)


class PasswordsTable:
    """
    In-memory mapping hash -> password.
    
    Built once (normally at process startup) and never mutated afterwards,
    so concurrent requests read it without locking. Each process loads its
    own copy. Keys are stored lowercase; lookups are case-insensitive.
    """
    
    def __init__(
        self,
        entries: Optional[dict[str, str]] = None,
        source: Optional[Path] = None,
        load_status: LoadStatus = LoadStatus.NOT_LOADED,
    ) -> None:
        """
        Wrap an already-normalized dict (lowercase keys). The table takes
        ownership of it; use from_mapping() for arbitrary input.
        """
        self._entries = MappingProxyType(entries if entries is not None else {})
        self.source = source
        self.load_status = load_status
    
    @classmethod
    def from_mapping(cls, entries: Mapping[str, str]) -> "PasswordsTable":
        """Build a table from any mapping, normalizing keys to trimmed lowercase."""
        normalized = {
            hash_value.strip().lower(): password
            for hash_value, password in entries.items()
        }
        return cls(normalized)
    
    def get(self, hash_value: str) -> Optional[str]:
        """Get password for hash if known."""
        return self._entries.get(hash_value.lower())
    
    @property
    def entries(self) -> Mapping[str, str]:
        """Read-only view of the whole table."""
        return self._entries
    
    @property
    def count(self) -> int:
        """Number of known passwords."""
        return len(self._entries)
    
    def __len__(self) -> int:
        return len(self._entries)
    
    def __contains__(self, hash_value: object) -> bool:
        return isinstance(hash_value, str) and hash_value.lower() in self._entries


def parse_entry(line: str) -> Optional[tuple[str, str]]:
    """
    Split one 'hash:password' line on the first colon.
    
    The password keeps any further colons. Only the line terminator is
    removed from it.
    
    Returns:
        (hash, password) with the hash lowercased, or None for lines without
        a colon or with an empty hash.
    """
    line = line.rstrip(RecordFormat.NEWLINE).rstrip(RecordFormat.CARRIAGE_RETURN)
    hash_value, separator, password = line.partition(RecordFormat.FIELD_SEPARATOR)
    hash_value = hash_value.strip().lower()
    if not separator or not hash_value:
        return None
    return hash_value, password


def load_passwords_table(path: Union[str, Path]) -> PasswordsTable:
    """
    Load the precomputed passwords file into a PasswordsTable.
    
    A missing file gives an empty table (logged as a warning). A file that
    exists but cannot be read also gives an empty table, logged as an error
    with the traceback so it can be alerted on. Duplicate hashes keep the
    password from the last line.
    """
    path = Path(path)
    
    if not path.exists():
        logger.warning(f"Precomputed passwords file not found: {path}")
        return PasswordsTable(source=path, load_status=LoadStatus.MISSING)
    
    logger.info(f"Loading precomputed password hashes from {path}")
    entries: dict[str, str] = {}
    skipped = 0
    
    try:
        with open(path, "r", encoding="utf-8", errors="replace", newline="") as f:
            for line in f:
                entry = parse_entry(line)
                if entry is None:
                    skipped += 1
                    continue
                hash_value, password = entry
                entries[hash_value] = password
    except FileNotFoundError:
        logger.warning(f"Precomputed passwords file disappeared before reading: {path}")
        return PasswordsTable(source=path, load_status=LoadStatus.MISSING)
    except OSError as e:
        logger.error(f"Cannot read precomputed passwords file {path}: {e}", exc_info=True)
        return PasswordsTable(source=path, load_status=LoadStatus.UNREADABLE)
    
    if skipped:
        logger.debug(f"Skipped {skipped} malformed lines in {path}")
    logger.info(f"Loaded {len(entries)} password hashes")
    
    return PasswordsTable(entries, source=path, load_status=LoadStatus.LOADED)
