# -*- coding: utf-8 -*-
"""
Unit tests for title / description synthesis and raw line pairing.
"""

from catalog.parser import generate_title, generate_description, split_raw_lines, select_raw_info


class TestGenerateTitle:

    def test_existing_title_preferred(self):
        assert generate_title("some text", {"title": "Red Dress"}) == "Red Dress"

    def test_name_then_product_name(self):
        assert generate_title("x", {"name": "", "product_name": "Tee"}) == "Tee"

    def test_first_ten_words(self):
        raw = "one two  three four five six seven eight nine ten eleven twelve"
        assert generate_title(raw, {}) == "one two three four five six seven eight nine ten"

    def test_fallback(self):
        assert generate_title("   ", {}) == "Product"


class TestGenerateDescription:

    def test_existing_description_preferred(self):
        assert generate_description("raw", {"desc": "Soft tee"}) == "Soft tee"

    def test_defaults(self):
        assert generate_description("Blue jeans", {}) == "Premium Quality product. Blue jeans"

    def test_row_values_used(self):
        row = {"brand": "Puma", "category": "Shoes", "color": "White", "material": "Leather"}
        assert generate_description("x", row) == (
            "Premium Puma Shoes in White color made with Leather. x"
        )

    def test_raw_text_truncated(self):
        raw = "a" * 300
        desc = generate_description(raw, {})
        assert desc == "Premium Quality product. " + "a" * 200


class TestRawLines:

    def test_blank_lines_dropped(self):
        assert split_raw_lines("first\n\n   \nsecond\n") == ["first", "second"]

    def test_lines_not_stripped(self):
        assert split_raw_lines("  padded  ") == ["  padded  "]

    def test_empty(self):
        assert split_raw_lines("") == []

    def test_select_by_index(self):
        assert select_raw_info(["a", "b", "c"], 2) == "c"

    def test_select_falls_back_to_first_line(self):
        lines = ["a", "b"]
        assert [select_raw_info(lines, i) for i in range(5)] == ["a", "b", "a", "a", "a"]

    def test_select_no_lines(self):
        assert select_raw_info([], 3) == ""
