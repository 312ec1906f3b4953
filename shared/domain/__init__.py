"""Domain models and entities."""

from shared.domain.models import (
    LookupRecord,
    DecipherOutcome,
    DecipherRequest,
    DecipherResponse,
    StatsResponse,
)
from shared.domain.status import LoadStatus
from shared.domain.consts import (
    ResultStatus,
    ResultStatusLiteral,
    HashAlgorithm,
    HashDisplay,
    RecordFormat,
    Wordlists,
    NO_RESULT_MARKER,
)

__all__ = [
    "LookupRecord",
    "DecipherOutcome",
    "DecipherRequest",
    "DecipherResponse",
    "StatsResponse",
    "LoadStatus",
    "ResultStatus",
    "ResultStatusLiteral",
    "HashAlgorithm",
    "HashDisplay",
    "RecordFormat",
    "Wordlists",
    "NO_RESULT_MARKER",
]
