# -*- coding: utf-8 -*-
"""
Core Enricher Logic

Fills missing fields on every catalog row from the row itself, its raw text
line, or the fallback vocabularies, then adds the per-platform listing
variants. Existing non-empty fields are never overwritten.
"""

import logging
from collections.abc import Mapping
from typing import Sequence

from catalog.parser import (
    split_raw_lines,
    select_raw_info,
    extract_price,
    compute_mrp,
    extract_brand,
    extract_category,
    extract_color,
    extract_size,
    extract_material,
    generate_title,
    generate_description,
)
from catalog.shared.vocabulary import default_value
from .errors import CatalogError, EnrichErrorCode, InternalError, ValidationError
from .platforms import generate_keywords, generate_platform_description, generate_platform_title
from .types import CatalogRow, Platform

logger = logging.getLogger(__name__)


def validate_input(catalog, raw_text) -> None:
    """
    Check the catalog and raw text before any row is touched.

    Raises:
        ValidationError: catalog is not a non-empty list, or raw text is blank
    """
    if not isinstance(catalog, (list, tuple)) or len(catalog) == 0:
        raise ValidationError.from_code(EnrichErrorCode.INVALID_CATALOG)

    if not isinstance(raw_text, str) or not raw_text.strip():
        raise ValidationError.from_code(EnrichErrorCode.MISSING_RAW_DATA)


def enrich_row(row: Mapping, raw_info: str) -> CatalogRow:
    """
    Return a new row with every missing field derived.

    Field order matters: description and the platform variants are built
    before brand/category/color/size/material are resolved, so they only
    see the values the row arrived with.
    """
    if not isinstance(row, Mapping):
        raise TypeError(f"Catalog row must be a mapping, got {type(row).__name__}")

    enriched = dict(row)

    if not enriched.get("product_title"):
        enriched["product_title"] = generate_title(raw_info, row)

    if not enriched.get("description"):
        enriched["description"] = generate_description(raw_info, row)

    if not enriched.get("price"):
        enriched["price"] = extract_price(raw_info) or row.get("price") or ""

    if not enriched.get("mrp"):
        enriched["mrp"] = compute_mrp(enriched["price"])

    for platform in Platform:
        title_key, description_key, keywords_key = platform.fields
        if not enriched.get(title_key):
            enriched[title_key] = generate_platform_title(platform, enriched)
        if not enriched.get(description_key):
            enriched[description_key] = generate_platform_description(platform, enriched)
        if not enriched.get(keywords_key):
            enriched[keywords_key] = generate_keywords(platform, enriched)

    if not enriched.get("brand"):
        enriched["brand"] = extract_brand(raw_info, row)

    if not enriched.get("category"):
        enriched["category"] = extract_category(raw_info, row)

    if not enriched.get("color"):
        enriched["color"] = extract_color(raw_info, row)

    if not enriched.get("size"):
        enriched["size"] = extract_size(raw_info, row)

    if not enriched.get("material"):
        enriched["material"] = extract_material(raw_info, row)

    if not enriched.get("stock_status"):
        enriched["stock_status"] = default_value("stock_status")

    return enriched


def enrich(catalog: Sequence[Mapping], raw_text: str) -> list[CatalogRow]:
    """
    Enrich every catalog row using the raw text line at the same position.

    Args:
        catalog: non-empty list of flat rows
        raw_text: newline-delimited raw product info

    Returns:
        list[CatalogRow]: new rows, same length and order as catalog

    Raises:
        ValidationError: invalid catalog or blank raw text
        InternalError: any failure while deriving fields
    """
    validate_input(catalog, raw_text)

    raw_lines = split_raw_lines(raw_text)
    logger.info(f"Enriching {len(catalog)} rows with {len(raw_lines)} raw lines")

    try:
        enriched = [
            enrich_row(row, select_raw_info(raw_lines, index))
            for index, row in enumerate(catalog)
        ]
    except CatalogError:
        raise
    except Exception as e:
        logger.debug(f"Row enrichment failed: {e}")
        raise InternalError.from_code(EnrichErrorCode.ENRICH_FAILED) from e

    logger.debug(f"Enriched {len(enriched)} rows")
    return enriched
