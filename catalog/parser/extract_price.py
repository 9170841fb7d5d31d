# -*- coding: utf-8 -*-
"""
Price and MRP Extraction

負責從 raw text 中抽取售價，並以固定加成計算 MRP。
支援格式：
- 純數字：Shirt 499
- 盧比符號：₹1200, ₹ 1,299.00
- 千分位：2,499
"""

import math
import re

# 編譯正則表達式以提升效能
_PRICE_PATTERN = re.compile(r"₹?\s*(\d+(?:,\d+)*(?:\.\d{2})?)", re.ASCII)

# MRP = price * markup
MRP_MARKUP = 1.25


def extract_price(raw_info: str) -> str:
    """
    從文字中抽取第一個價格。

    Args:
        raw_info: 單一商品的 raw text

    Returns:
        去除千分位逗號的數字字串；若無則回傳 ""

    Examples:
        >>> extract_price("Nike Blue T-Shirt ₹1,200")
        '1200'
    """
    if not raw_info:
        return ""
    match = _PRICE_PATTERN.search(raw_info)
    if not match:
        return ""
    return match.group(1).replace(",", "")


def _parse_price(price) -> float:
    """Parse a price value, returning 0.0 when it is not a finite number."""
    if price is None or price == "":
        return 0.0
    try:
        value = float(price)
    except (TypeError, ValueError):
        return 0.0
    return value if math.isfinite(value) else 0.0


def compute_mrp(price) -> str:
    """
    Compute the MRP for a price, formatted with exactly 2 decimals.

    Returns "" when price is not a positive number.

    Examples:
        >>> compute_mrp("1200")
        '1500.00'
        >>> compute_mrp("")
        ''
    """
    value = _parse_price(price)
    if value <= 0:
        return ""
    return f"{value * MRP_MARKUP:.2f}"
