from __future__ import annotations

from pathlib import Path

import pytest

from catalog.shared.vocabulary import reload_vocabularies

# tests/<group>/... -> marker applied to every test in that group
_GROUP_MARKERS = {
    "unit": pytest.mark.unit,
    "parser": pytest.mark.unit,
    "enricher": pytest.mark.unit,
    "integration": pytest.mark.integration,
}


def _top_level_tests_group(path: Path) -> str | None:
    parts = path.parts
    try:
        tests_index = parts.index("tests")
    except ValueError:
        return None
    if tests_index + 1 >= len(parts):
        return None
    return parts[tests_index + 1]


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    for item in items:
        marker = _GROUP_MARKERS.get(_top_level_tests_group(Path(str(item.fspath))) or "")
        if marker is not None:
            item.add_marker(marker)


@pytest.fixture(autouse=True)
def _fresh_vocabularies():
    """Vocabulary tables are cached per process; start each test from the packaged file."""
    reload_vocabularies()
    yield
    reload_vocabularies()
