"""Configuration loaded from environment variables."""

import os


def _get_env_int(key: str, default: str) -> int:
    """Get integer environment variable with validation."""
    try:
        return int(os.getenv(key, default))
    except ValueError:
        raise ValueError(f"Invalid integer value for {key}")


def _get_env_float(key: str, default: str) -> float:
    """Get float environment variable with validation."""
    try:
        return float(os.getenv(key, default))
    except ValueError:
        raise ValueError(f"Invalid float value for {key}")


class Config:
    """Centralized configuration from environment variables."""
    
    # Precomputed dictionary (hash:password per line), loaded once at startup
    PASSWORDS_FILE: str = os.getenv("PASSWORDS_FILE", "wordlists/precomputed_hashes.txt")
    
    # Directory of plain wordlists (*.txt) used to build PASSWORDS_FILE
    WORDLIST_DIR: str = os.getenv("WORDLIST_DIR", "wordlists")
    
    # Generator: threads hashing wordlist batches, and lines per batch
    WORKER_THREADS: int = _get_env_int("WORKER_THREADS", "2")  # 1 = sequential
    GENERATOR_BATCH_SIZE: int = _get_env_int("GENERATOR_BATCH_SIZE", "10000")
    
    # Largest text accepted by POST /decipher (characters)
    MAX_INPUT_LENGTH: int = _get_env_int("MAX_INPUT_LENGTH", "1000000")
    
    # Remote service used by the CLI; empty means decipher in-process
    DECIPHER_URL: str = os.getenv("DECIPHER_URL", "").strip().rstrip("/")
    DECIPHER_REQUEST_TIMEOUT: float = _get_env_float("DECIPHER_REQUEST_TIMEOUT", "5.0")
    
    # Optional file the CLI also writes its result to
    OUTPUT_FILE: str = os.getenv("OUTPUT_FILE", "")


config = Config()
