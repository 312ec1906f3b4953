"""Decipher infrastructure layer."""

from decipher.infrastructure.passwords_table import PasswordsTable, load_passwords_table

__all__ = [
    "PasswordsTable",
    "load_passwords_table",
]
