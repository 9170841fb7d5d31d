# -*- coding: utf-8 -*-
"""
Attribute Extraction

Brand, category, color, size and material lookups against the fixed
vocabularies. Each extractor keeps the row's existing value when present,
otherwise takes the first vocabulary hit in the raw text, otherwise the
configured default.
"""

from typing import Mapping

from catalog.shared.vocabulary import (
    default_value,
    match_vocabulary,
    size_pattern,
    vocabulary,
)


def _lookup(field_name: str, table: str, raw_info: str, row: Mapping) -> str:
    existing = row.get(field_name)
    if existing:
        return existing
    return match_vocabulary(raw_info, vocabulary(table)) or default_value(field_name)


def extract_brand(raw_info: str, row: Mapping) -> str:
    """
    Examples:
        >>> extract_brand("Levi's slim fit", {})
        "Levi's"
        >>> extract_brand("no brand words", {})
        'Generic'
    """
    return _lookup("brand", "brands", raw_info, row)


def extract_category(raw_info: str, row: Mapping) -> str:
    return _lookup("category", "categories", raw_info, row)


def extract_color(raw_info: str, row: Mapping) -> str:
    return _lookup("color", "colors", raw_info, row)


def extract_material(raw_info: str, row: Mapping) -> str:
    return _lookup("material", "materials", raw_info, row)


def extract_size(raw_info: str, row: Mapping) -> str:
    """First standalone size token (XS..XXXL or 28..42), upper-cased."""
    existing = row.get("size")
    if existing:
        return existing
    match = size_pattern().search(raw_info or "")
    if match:
        return match.group(1).upper()
    return default_value("size")
