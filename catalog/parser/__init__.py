# -*- coding: utf-8 -*-
"""
Field extractors for catalog enrichment.

Each extractor reads one row's raw text fragment (and the row itself) and
returns a single field value. The enricher decides when to call them.

Usage:
    from catalog.parser import extract_price, extract_brand
    price = extract_price("Nike Blue T-Shirt ₹1200")
"""

from catalog.parser.raw_lines import split_raw_lines, select_raw_info
from catalog.parser.extract_price import extract_price, compute_mrp, MRP_MARKUP
from catalog.parser.extract_attributes import (
    extract_brand,
    extract_category,
    extract_color,
    extract_size,
    extract_material,
)
from catalog.parser.extract_text import generate_title, generate_description


# Export
__all__ = [
    "split_raw_lines",
    "select_raw_info",
    "extract_price",
    "compute_mrp",
    "MRP_MARKUP",
    "extract_brand",
    "extract_category",
    "extract_color",
    "extract_size",
    "extract_material",
    "generate_title",
    "generate_description",
]
