# -*- coding: utf-8 -*-
"""
Enrichment Types

Marketplace enum and the field set every enriched row carries.
"""

from enum import Enum
from typing import Dict

# One product record: flat field name -> value table
CatalogRow = Dict[str, str]


class Platform(Enum):
    """Supported marketplaces"""

    AMAZON = "amazon"
    FLIPKART = "flipkart"
    MEESHO = "meesho"
    MYNTRA = "myntra"

    @classmethod
    def from_string(cls, value: str) -> "Platform":
        """從字串轉換為 Platform"""
        try:
            return cls(value.lower())
        except ValueError:
            raise ValueError(f"Unknown platform: {value}")

    @property
    def fields(self) -> tuple[str, str, str]:
        """(title, description, keywords) field names for this platform."""
        return (
            f"{self.value}_title",
            f"{self.value}_description",
            f"{self.value}_keywords",
        )


BASE_FIELDS = (
    "product_title",
    "description",
    "price",
    "mrp",
    "brand",
    "category",
    "color",
    "size",
    "material",
    "stock_status",
)

REQUIRED_FIELDS = BASE_FIELDS + tuple(
    name for platform in Platform for name in platform.fields
)
