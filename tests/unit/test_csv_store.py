# -*- coding: utf-8 -*-

import io
from datetime import datetime, timezone

from catalog.services.csv_store import export_filename, read_catalog_csv, write_catalog_csv


def test_read_catalog_csv_keeps_strings() -> None:
    sheet = io.StringIO("sku,price,title\n001,499,Tee\n002,,\n,,\n")
    rows = read_catalog_csv(sheet)

    assert rows == [
        {"sku": "001", "price": "499", "title": "Tee"},
        {"sku": "002", "price": "", "title": ""},
    ]


def test_write_catalog_csv_column_union(tmp_path) -> None:
    path = tmp_path / "out.csv"
    write_catalog_csv([{"sku": "1", "brand": "Nike"}, {"sku": "2", "mrp": "125.00"}], path)

    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines == ["sku,brand,mrp", "1,Nike,", "2,,125.00"]


def test_round_trip_preserves_headers(tmp_path) -> None:
    path = tmp_path / "sheet.csv"
    rows = [{"title": "Red Dress", "amazon_description": "Line one\n\nKey Features:\n• x"}]
    write_catalog_csv(rows, path)
    assert read_catalog_csv(path) == rows


def test_export_filename() -> None:
    now = datetime(2026, 1, 1, tzinfo=timezone.utc)
    assert export_filename(now) == "enriched-catalog-1767225600000.csv"


def test_export_filename_defaults_to_now() -> None:
    name = export_filename()
    assert name.startswith("enriched-catalog-") and name.endswith(".csv")
