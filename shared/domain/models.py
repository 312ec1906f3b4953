"""Domain models for lookup records and API payloads."""

from dataclasses import dataclass
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict
from shared.config.config import config
from shared.domain.consts import RecordFormat, ResultStatusLiteral, NO_RESULT_MARKER
from shared.domain.status import LoadStatus


@dataclass
class LookupRecord:
    """One line of submitted text: everything before the last colon, and the trailing field."""
    prefix: str
    raw_hash: str  # original text of the trailing field, untrimmed
    has_separator: bool = True
    terminator: str = ""  # "\n", "\r\n", or "\r" / "" for the final line
    
    @property
    def key(self) -> str:
        """Lookup key: trailing field trimmed and lowercased."""
        return self.raw_hash.strip().lower()
    
    def render(self, replacement: Optional[str] = None) -> str:
        """Rebuild the line, optionally substituting the trailing field."""
        if not self.has_separator:
            return self.prefix + self.terminator
        trailing = self.raw_hash if replacement is None else replacement
        return f"{self.prefix}{RecordFormat.FIELD_SEPARATOR}{trailing}{self.terminator}"


@dataclass
class DecipherOutcome:
    """Result of deciphering one block of text."""
    result: Optional[str]  # None when the text held no records
    records: int = 0
    resolved: int = 0
    
    @property
    def is_empty(self) -> bool:
        """Check if there was nothing to decipher."""
        return self.result is None


class DecipherRequest(BaseModel):
    """Payload for decipher request."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "text": "user@example.com:5d41402abc4b2a76b9719d911017c592",
            }
        }
    )
    
    text: str = Field(
        ...,
        max_length=config.MAX_INPUT_LENGTH,
        description="Multi-line text, each line ending in ':<hash>'",
    )


class DecipherResponse(BaseModel):
    """Result payload for decipher request."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "status": "DECIPHERED",
                "result": "user@example.com:hello",
                "records": 1,
                "resolved": 1,
                "error_message": None
            }
        }
    )
    
    status: ResultStatusLiteral = Field(
        ...,
        description="Result status: DECIPHERED, NO_RESULT, or ERROR"
    )
    result: Optional[str] = Field(
        None,
        description=f"Deciphered text, or '{NO_RESULT_MARKER}' when there was nothing to decipher"
    )
    records: int = Field(0, ge=0, description="Number of lines parsed")
    resolved: int = Field(0, ge=0, description="Number of lines whose hash was replaced")
    error_message: Optional[str] = Field(None, description="Error message if status is ERROR")


class StatsResponse(BaseModel):
    """Passwords table statistics."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "password_count": 14344391,
                "load_status": "LOADED",
            }
        }
    )
    
    password_count: int = Field(..., ge=0, description="Number of known hash:password entries")
    load_status: LoadStatus = Field(..., description="Outcome of loading the passwords file")
