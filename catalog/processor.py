# -*- coding: utf-8 -*-
"""
Enrich Request Processor

Boundary between the HTTP / CLI callers and the enricher: validates the
request body, runs enrichment and maps errors to status codes.
"""

import logging
from dataclasses import dataclass, field
from typing import Any

from catalog.enricher import CatalogError, EnrichErrorCode, ValidationError, enrich

logger = logging.getLogger(__name__)


@dataclass
class EnrichResponse:
    """Status code + JSON body returned to the caller"""

    status: int
    body: dict[str, Any] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.status == 200


def _error_response(error: CatalogError) -> EnrichResponse:
    return EnrichResponse(status=error.status, body={"error": error.message})


def process_enrich_request(payload: Any) -> EnrichResponse:
    """
    處理 enrich 請求。

    Args:
        payload: request body, expected {"catalog": [...], "rawData": "..."}

    Returns:
        EnrichResponse: 200 with enrichedCatalog, 400 on invalid input,
        500 on unexpected failure (cause is logged, not returned)
    """
    if not isinstance(payload, dict):
        payload = {}

    catalog = payload.get("catalog")
    raw_data = payload.get("rawData")

    try:
        enriched_catalog = enrich(catalog, raw_data)
    except ValidationError as e:
        logger.warning(f"Rejected enrich request: {e.message}")
        return _error_response(e)
    except CatalogError as e:
        logger.exception(f"Error enriching catalog: {e.__cause__ or e}")
        return _error_response(e)
    except Exception as e:
        logger.exception(f"Unexpected error enriching catalog: {e}")
        return _error_response(CatalogError.from_code(EnrichErrorCode.ENRICH_FAILED))

    logger.info(f"Enrich request completed: {len(enriched_catalog)} rows")
    return EnrichResponse(status=200, body={"enrichedCatalog": enriched_catalog})
