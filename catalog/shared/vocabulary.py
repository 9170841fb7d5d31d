# -*- coding: utf-8 -*-
"""
Vocabulary tables used by the attribute extractors and platform templates.

Tables are loaded from YAML (catalog/data/vocabularies.yaml by default, or
VOCABULARY_PATH) and cached for the lifetime of the process.
"""

from __future__ import annotations

import logging
import re
from functools import lru_cache
from pathlib import Path
from typing import Iterable, Optional

import yaml

from catalog import config

logger = logging.getLogger(__name__)


class VocabularyError(ValueError):
    """Raised when the vocabulary file is missing a required table."""


@lru_cache(maxsize=1)
def _load_config_from_yaml() -> dict:
    """Load full vocabulary config from YAML file."""
    config_path = Path(config.VOCABULARY_PATH)
    logger.debug(f"Loading vocabularies from {config_path}")
    with open(config_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def _table(name: str) -> dict | list:
    data = _load_config_from_yaml()
    value = data.get(name) if isinstance(data, dict) else None
    if not value:
        raise VocabularyError(f"Vocabulary table '{name}' is missing or empty")
    return value


def vocabulary(name: str) -> tuple[str, ...]:
    """Return a vocabulary list (brands, categories, colors, materials, sizes, keywords)."""
    return tuple(str(item) for item in _table(name))


def default_value(field_name: str) -> str:
    """Fallback value for a field when nothing matches."""
    defaults = _table("defaults")
    if field_name not in defaults:
        raise VocabularyError(f"No default configured for '{field_name}'")
    return str(defaults[field_name])


def platform_templates() -> dict[str, dict[str, str]]:
    """Per-platform title/description templates, keyed by platform name."""
    return {
        str(name).lower(): {str(k): str(v) for k, v in templates.items()}
        for name, templates in _table("platforms").items()
    }


def match_vocabulary(text: str, candidates: Iterable[str]) -> Optional[str]:
    """
    Return the first candidate found in text (case-insensitive substring).

    Candidates are scanned in the given order; no scoring.

    Examples:
        >>> match_vocabulary("Nike running shoes", ("Adidas", "Nike"))
        'Nike'
    """
    lowered = (text or "").lower()
    for candidate in candidates:
        if candidate.lower() in lowered:
            return candidate
    return None


@lru_cache(maxsize=1)
def size_pattern() -> re.Pattern[str]:
    """Word-bounded, case-insensitive alternation of the size vocabulary."""
    sizes = "|".join(re.escape(size) for size in vocabulary("sizes"))
    return re.compile(rf"\b({sizes})\b", re.IGNORECASE)


def reload_vocabularies() -> None:
    """Drop cached tables (used after VOCABULARY_PATH changes)."""
    _load_config_from_yaml.cache_clear()
    size_pattern.cache_clear()
