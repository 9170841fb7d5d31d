# -*- coding: utf-8 -*-
"""
Enrichment Error Types

Error codes, caller-facing messages and HTTP status per code.
"""

from enum import Enum
from dataclasses import dataclass
from typing import Optional


class EnrichErrorCode(Enum):
    """Enrichment error codes"""

    INVALID_CATALOG = "invalid_catalog"     # catalog missing, not a list, or empty
    MISSING_RAW_DATA = "missing_raw_data"   # raw text missing or blank
    ENRICH_FAILED = "enrich_failed"         # unexpected failure while deriving


ERROR_MESSAGES = {
    EnrichErrorCode.INVALID_CATALOG: "Invalid catalog data",
    EnrichErrorCode.MISSING_RAW_DATA: "Raw data is required",
    EnrichErrorCode.ENRICH_FAILED: "Failed to enrich catalog",
}

ERROR_STATUS = {
    EnrichErrorCode.INVALID_CATALOG: 400,
    EnrichErrorCode.MISSING_RAW_DATA: 400,
    EnrichErrorCode.ENRICH_FAILED: 500,
}


@dataclass
class CatalogError(Exception):
    """Base enrichment error"""

    code: EnrichErrorCode
    message: str
    details: Optional[dict] = None

    def __str__(self) -> str:
        return self.message

    @property
    def status(self) -> int:
        return ERROR_STATUS.get(self.code, 500)

    @classmethod
    def from_code(cls, code: EnrichErrorCode, **kwargs) -> "CatalogError":
        """Build an error from its code, using the message template."""
        template = ERROR_MESSAGES.get(code, "Failed to enrich catalog")
        message = template.format(**kwargs) if kwargs else template
        return cls(code=code, message=message, details=kwargs if kwargs else None)


class ValidationError(CatalogError):
    """Malformed or missing input; no work was done."""


class InternalError(CatalogError):
    """Unexpected failure during derivation."""
