"""Pytest configuration and fixtures."""

import hashlib
import pytest
from decipher.infrastructure.passwords_table import PasswordsTable, load_passwords_table


HELLO_HASH = hashlib.md5(b"hello").hexdigest()  # 5d41402abc4b2a76b9719d911017c592


@pytest.fixture
def passwords_file(tmp_path):
    """Small precomputed passwords file."""
    path = tmp_path / "precomputed_hashes.txt"
    path.write_text(
        f"{HELLO_HASH}:hello\n"
        f"{hashlib.md5(b'world').hexdigest()}:world\n"
        f"{hashlib.md5(b'a:b').hexdigest()}:a:b\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def passwords_table(passwords_file) -> PasswordsTable:
    """Table loaded from the small passwords file."""
    return load_passwords_table(passwords_file)


@pytest.fixture
def empty_table() -> PasswordsTable:
    """Table with no entries."""
    return PasswordsTable()
