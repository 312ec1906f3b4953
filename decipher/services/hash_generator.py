"""Build the precomputed hash:password file from plain wordlists."""

import hashlib
import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Optional, Union
from shared.config.config import config
from shared.domain.consts import HashAlgorithm, RecordFormat, Wordlists

logger = logging.getLogger(__name__)


def md5_hex(password: str) -> str:
    """Lowercase MD5 hex digest of a UTF-8 password."""
    return hashlib.new(HashAlgorithm.MD5, password.encode("utf-8")).hexdigest()


def _hash_batch(passwords: list[str]) -> list[tuple[str, str]]:
    """Hash a batch of passwords, keeping input order."""
    return [(md5_hex(password), password) for password in passwords]


def _read_passwords(path: Path) -> list[str]:
    """Non-empty lines of a wordlist, line terminators removed."""
    with open(path, "r", encoding="utf-8", errors="replace", newline="") as f:
        lines = (
            line.rstrip(RecordFormat.NEWLINE).rstrip(RecordFormat.CARRIAGE_RETURN)
            for line in f
        )
        return [line for line in lines if line]


def find_wordlists(wordlist_dir: Path, output_file: Path) -> list[Path]:
    """All wordlist files in the directory except the output file, sorted by name."""
    output_name = output_file.name
    return sorted(
        path
        for path in wordlist_dir.iterdir()
        if path.is_file()
        and path.suffix == Wordlists.EXTENSION
        and path.name != output_name
        and path.name != Wordlists.PRECOMPUTED_FILENAME
    )


def generate_precomputed_hashes(
    wordlist_dir: Union[str, Path],
    output_file: Union[str, Path],
    num_threads: Optional[int] = None,
    batch_size: Optional[int] = None,
) -> int:
    """
    Hash every password in every wordlist and write 'hash:password' lines.
    
    When the same hash comes from several wordlists (or lines), the first
    password seen wins. Batches of lines are hashed on a thread pool sized
    by config.WORKER_THREADS.
    
    Returns:
        Number of unique hashes written.
        
    Raises:
        FileNotFoundError: If wordlist_dir does not exist.
    """
    wordlist_dir = Path(wordlist_dir)
    output_file = Path(output_file)
    num_threads = max(1, num_threads or config.WORKER_THREADS)
    batch_size = max(1, batch_size or config.GENERATOR_BATCH_SIZE)
    
    if not wordlist_dir.is_dir():
        raise FileNotFoundError(f"Wordlist directory not found: {wordlist_dir}")
    
    wordlists = find_wordlists(wordlist_dir, output_file)
    total_files = len(wordlists)
    hashes: dict[str, str] = {}
    
    with ThreadPoolExecutor(max_workers=num_threads) as executor:
        for idx, path in enumerate(wordlists, 1):
            logger.info(f"[{idx}/{total_files}] Processing {path.name}...")
            
            passwords = _read_passwords(path)
            batches = [
                passwords[start:start + batch_size]
                for start in range(0, len(passwords), batch_size)
            ]
            
            # map() yields batches in submission order, so first-seen is kept
            for batch_hashes in executor.map(_hash_batch, batches):
                for hash_value, password in batch_hashes:
                    hashes.setdefault(hash_value, password)
            
            logger.info(f"  -> {len(hashes)} unique hashes so far")
    
    logger.info(f"Writing {len(hashes)} unique hashes to {output_file}")
    output_file.parent.mkdir(parents=True, exist_ok=True)
    with open(output_file, "w", encoding="utf-8", newline="") as f:
        for hash_value, password in hashes.items():
            f.write(f"{hash_value}{RecordFormat.FIELD_SEPARATOR}{password}{RecordFormat.NEWLINE}")
    
    return len(hashes)
