# -*- coding: utf-8 -*-
"""
Title and description synthesis for catalog rows.
"""

from typing import Mapping

_TITLE_KEYS = ("title", "name", "product_name")
_DESCRIPTION_KEYS = ("description", "desc")

TITLE_MAX_WORDS = 10
DESCRIPTION_RAW_CHARS = 200


def _first_present(row: Mapping, keys) -> str:
    for key in keys:
        value = row.get(key)
        if value:
            return value
    return ""


def generate_title(raw_info: str, row: Mapping) -> str:
    """
    Existing title/name/product_name, else the first 10 words of raw_info,
    else "Product".
    """
    title = _first_present(row, _TITLE_KEYS)
    if title:
        return title

    words = " ".join((raw_info or "").split()[:TITLE_MAX_WORDS])
    return words or "Product"


def generate_description(raw_info: str, row: Mapping) -> str:
    """
    Existing description/desc, else a templated sentence followed by the
    first 200 characters of raw_info.

    Brand and category come from the row as given ("Quality" / "product"
    when missing); values extracted later in the same pass are not used.
    """
    desc = _first_present(row, _DESCRIPTION_KEYS)
    if desc:
        return desc

    brand = row.get("brand") or "Quality"
    category = row.get("category") or "product"
    color = row.get("color") or ""
    material = row.get("material") or ""

    description = f"Premium {brand} {category}"
    if color:
        description += f" in {color} color"
    if material:
        description += f" made with {material}"
    description += f". {(raw_info or '')[:DESCRIPTION_RAW_CHARS]}"
    return description
