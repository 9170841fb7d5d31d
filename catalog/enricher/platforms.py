# -*- coding: utf-8 -*-
"""
Platform Variant Generator

Rearranges already-resolved row fields into marketplace-specific title,
description and keyword strings. Nothing new is extracted here.
"""

import re
from typing import Mapping, Union

from catalog.enricher.types import Platform
from catalog.shared.vocabulary import platform_templates, vocabulary

_WHITESPACE = re.compile(r"\s+")


def _platform_key(platform: Union[Platform, str]) -> str:
    if isinstance(platform, Platform):
        return platform.value
    return str(platform).lower()


def _base_title(row: Mapping) -> str:
    return row.get("product_title") or row.get("title") or "Product"


def generate_platform_title(platform: Union[Platform, str], row: Mapping) -> str:
    """
    Examples:
        >>> generate_platform_title("flipkart", {"product_title": "Tee", "brand": "Puma", "color": "Red"})
        'Tee (Puma) - Red'
    """
    base_title = _base_title(row)
    template = platform_templates().get(_platform_key(platform), {}).get("title")
    if not template:
        return base_title

    title = template.format(
        title=base_title,
        brand=row.get("brand") or "",
        color=row.get("color") or "",
        size=row.get("size") or "",
    )
    return _WHITESPACE.sub(" ", title.strip())


def generate_platform_description(platform: Union[Platform, str], row: Mapping) -> str:
    base_desc = row.get("description") or ""
    template = platform_templates().get(_platform_key(platform), {}).get("description")
    if not template:
        return base_desc

    return template.format(
        description=base_desc,
        brand=row.get("brand") or "",
        material=row.get("material") or "",
    )


def generate_keywords(platform: Union[Platform, str], row: Mapping) -> str:
    """Comma-joined brand/category/color/material plus the fixed search terms."""
    keywords = [
        row.get("brand") or "",
        row.get("category") or "",
        row.get("color") or "",
        row.get("material") or "",
        *vocabulary("keywords"),
    ]
    return ", ".join(str(keyword) for keyword in keywords if keyword)
