# -*- coding: utf-8 -*-
"""
Catalog Enrichment Module

負責對 catalog rows 進行補欄位：
- 由 raw text 推導標題、描述、價格、MRP 與屬性
- 產生 amazon / flipkart / meesho / myntra 專屬標題、描述與關鍵字
- 既有非空欄位不可被覆寫
"""

from .enricher import enrich, enrich_row, validate_input
from .errors import CatalogError, EnrichErrorCode, InternalError, ValidationError
from .platforms import generate_keywords, generate_platform_description, generate_platform_title
from .types import BASE_FIELDS, REQUIRED_FIELDS, CatalogRow, Platform

__all__ = [
    "enrich",
    "enrich_row",
    "validate_input",
    "CatalogError",
    "EnrichErrorCode",
    "InternalError",
    "ValidationError",
    "generate_keywords",
    "generate_platform_description",
    "generate_platform_title",
    "BASE_FIELDS",
    "REQUIRED_FIELDS",
    "CatalogRow",
    "Platform",
]
