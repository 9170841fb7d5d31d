# -*- coding: utf-8 -*-

import logging

import pytest

from catalog.processor import process_enrich_request


def test_success_body() -> None:
    response = process_enrich_request({"catalog": [{}], "rawData": "Nike Blue T-Shirt M Cotton ₹1200"})

    assert response.status == 200
    assert response.ok
    [row] = response.body["enrichedCatalog"]
    assert row["mrp"] == "1500.00"


@pytest.mark.parametrize(
    "payload",
    [
        None,
        [],
        {},
        {"catalog": [], "rawData": "x"},
        {"catalog": "a,b", "rawData": "x"},
        {"catalog": {"title": "x"}, "rawData": "x"},
    ],
)
def test_invalid_catalog(payload) -> None:
    response = process_enrich_request(payload)

    assert response.status == 400
    assert response.body == {"error": "Invalid catalog data"}
    assert "enrichedCatalog" not in response.body


@pytest.mark.parametrize("raw_data", [None, "", "  \n  "])
def test_missing_raw_data(raw_data) -> None:
    response = process_enrich_request({"catalog": [{}], "rawData": raw_data})

    assert response.status == 400
    assert response.body == {"error": "Raw data is required"}


def test_internal_error_is_generic_and_logged(caplog) -> None:
    with caplog.at_level(logging.ERROR, logger="catalog.processor"):
        response = process_enrich_request({"catalog": [["not", "a", "row"]], "rawData": "x"})

    assert response.status == 500
    assert response.body == {"error": "Failed to enrich catalog"}
    assert "Catalog row must be a mapping" in caplog.text


def test_unexpected_exception_maps_to_500(mocker) -> None:
    mocker.patch("catalog.processor.enrich", side_effect=RuntimeError("boom"))

    response = process_enrich_request({"catalog": [{}], "rawData": "x"})

    assert response.status == 500
    assert response.body == {"error": "Failed to enrich catalog"}
    assert "boom" not in str(response.body)
