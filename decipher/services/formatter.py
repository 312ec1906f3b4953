"""Parsing submitted text into lookup records and putting it back together."""

import logging
from typing import Optional
from shared.domain.consts import RecordFormat
from shared.domain.models import LookupRecord, DecipherOutcome
from decipher.infrastructure.passwords_table import PasswordsTable
from decipher.services.lookup import resolve_hashes

logger = logging.getLogger(__name__)

_CRLF = RecordFormat.CARRIAGE_RETURN + RecordFormat.NEWLINE


def parse_line(line: str, terminator: str = "") -> LookupRecord:
    """
    Split a line on its last colon into prefix and trailing hash field.
    
    A line without a colon becomes a record whose whole text is the prefix
    and whose hash is empty, so it never matches.
    """
    prefix, separator, raw_hash = line.rpartition(RecordFormat.FIELD_SEPARATOR)
    if not separator:
        return LookupRecord(prefix=line, raw_hash="", has_separator=False, terminator=terminator)
    return LookupRecord(prefix=prefix, raw_hash=raw_hash, terminator=terminator)


def parse_records(text: str) -> list[LookupRecord]:
    """
    Split multi-line text into records, one per line.
    
    Each record remembers its own line terminator ("\\n", "\\r\\n", or a bare
    "\\r" or nothing for the final line). Empty content after the final newline
    produces no record.
    """
    records: list[LookupRecord] = []
    if not text:
        return records
    
    pieces = text.split(RecordFormat.NEWLINE)
    last = len(pieces) - 1
    for index, piece in enumerate(pieces):
        if index == last:
            if piece.endswith(RecordFormat.CARRIAGE_RETURN):
                records.append(parse_line(piece[:-1], RecordFormat.CARRIAGE_RETURN))
            elif piece:
                records.append(parse_line(piece))
            break
        if piece.endswith(RecordFormat.CARRIAGE_RETURN):
            records.append(parse_line(piece[:-1], _CRLF))
        else:
            records.append(parse_line(piece, RecordFormat.NEWLINE))
    
    return records


def format_records(records: list[LookupRecord], resolved: dict[str, str]) -> Optional[str]:
    """
    Reassemble records, replacing the trailing field of every resolved one.
    
    Returns:
        The rebuilt text, or None when there were no records at all.
    """
    if not records:
        return None
    return "".join(record.render(resolved.get(record.key)) for record in records)


def decipher_text(table: PasswordsTable, text: str) -> DecipherOutcome:
    """
    Replace every known trailing hash in text with its password.
    
    Never raises for malformed input: lines that don't parse or don't match
    come back unchanged.
    """
    records = parse_records(text)
    if not records:
        return DecipherOutcome(result=None)
    
    resolved = resolve_hashes(table, (record.key for record in records))
    result = format_records(records, resolved)
    resolved_lines = sum(1 for record in records if record.key in resolved)
    
    logger.info(f"Deciphered {resolved_lines} of {len(records)} lines")
    return DecipherOutcome(result=result, records=len(records), resolved=resolved_lines)
