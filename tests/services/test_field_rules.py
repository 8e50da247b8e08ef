# -*- coding: utf-8 -*-
"""
Tests for single-field validation rules.

Tests cover:
- Required / optional text
- Postal code format
- Price parsing with "." or "," separator
- Poster file checks
"""

import pytest

from models.event import ImageAsset
from services.validation.field_rules import (
    RequiredText, OptionalText, PostalCode, Price, ImageFile
)


@pytest.fixture
def price_rule():
    return Price("price.type", "price.min", minimum=0)


@pytest.fixture
def image_rule():
    return ImageFile("image.required", "image.not_file", "image.type",
                     allowed_types=("image/jpeg", "image/png"))


class TestTextRules:
    """Test required and optional text."""

    def test_required_text_is_stripped(self):
        assert RequiredText("name.required").validate("  Concert ") == ("Concert", None)

    @pytest.mark.parametrize("value", [None, "", "   ", "\t\n", 12])
    def test_required_text_rejects_empty(self, value):
        assert RequiredText("name.required").validate(value) == (None, "name.required")

    def test_optional_text_blank_is_none(self):
        rule = OptionalText()
        assert rule.validate("  ") == (None, None)
        assert rule.validate(None) == (None, None)
        assert rule.required is False

    def test_optional_text_keeps_value(self):
        assert OptionalText().validate(" https://example.com ") == ("https://example.com", None)


class TestPostalCode:
    """Test the five-digit postal code rule."""

    @pytest.mark.parametrize("value", ["75001", "00000", "13008"])
    def test_valid_codes(self, value):
        assert PostalCode("zip").is_valid(value)

    @pytest.mark.parametrize("value", ["7500", "750011", "ABCDE", "7500A", " 75001", "", None, 75001])
    def test_invalid_codes(self, value):
        assert PostalCode("zip").validate(value) == (None, "zip")

    def test_non_ascii_digits_rejected(self):
        """Arabic-Indic digits are not postal code digits."""
        assert not PostalCode("zip").is_valid("٧٥٠٠١")


class TestPrice:
    """Test price parsing and minimum."""

    @pytest.mark.parametrize("value, expected", [
        ("12,50", 12.5),
        ("12.50", 12.5),
        ("0", 0.0),
        (" 7 ", 7.0),
        (".5", 0.5),
        (3, 3.0),
        (4.25, 4.25),
    ])
    def test_valid_prices(self, price_rule, value, expected):
        assert price_rule.validate(value) == (expected, None)

    @pytest.mark.parametrize("value", ["abc", "", None, "12abc", "1,2,3", "inf", "nan", True, "1e3"])
    def test_unparsable_prices(self, price_rule, value):
        assert price_rule.validate(value) == (None, "price.type")

    @pytest.mark.parametrize("value", ["-1", "-0.01", -5])
    def test_negative_prices(self, price_rule, value):
        assert price_rule.validate(value) == (None, "price.min")


class TestImageFile:
    """Test poster file checks and their order."""

    def test_valid_png(self, image_rule):
        asset = ImageAsset("a.png", "image/png", b"data")
        assert image_rule.validate(asset) == (asset, None)

    def test_missing_file(self, image_rule):
        assert image_rule.validate(None) == (None, "image.required")
        assert image_rule.validate("") == (None, "image.required")

    def test_not_a_file(self, image_rule):
        assert image_rule.validate("poster.png") == (None, "image.not_file")

    def test_wrong_type(self, image_rule):
        asset = ImageAsset("doc.pdf", "application/pdf", b"%PDF")
        assert image_rule.validate(asset) == (None, "image.type")

    def test_type_check_accepts_absent_value(self, image_rule):
        assert image_rule.has_allowed_type(None)
