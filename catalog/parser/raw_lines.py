# -*- coding: utf-8 -*-
"""
Raw text pairing.

Raw text is one fragment per line; each catalog row reads the line at its own
index, and rows past the end reuse the first line.
"""

from typing import Sequence


def split_raw_lines(raw_text: str) -> list[str]:
    """Split raw text on newlines, dropping lines that are blank after stripping."""
    if not raw_text:
        return []
    return [line for line in raw_text.split("\n") if line.strip()]


def select_raw_info(raw_lines: Sequence[str], index: int) -> str:
    """
    Pick the raw fragment for the row at index.

    Examples:
        >>> select_raw_info(["a", "b"], 1)
        'b'
        >>> select_raw_info(["a", "b"], 4)
        'a'
        >>> select_raw_info([], 0)
        ''
    """
    if 0 <= index < len(raw_lines):
        return raw_lines[index]
    if raw_lines:
        return raw_lines[0]
    return ""
