# -*- coding: utf-8 -*-
"""
Tests for the step inputs: InputField and DateField.

Tests cover:
- Postal code length limit
- Error border toggled by the step page
- Calendar inputs reading and writing ISO dates
"""

import pytest

from app.config import Config
from services.wizard import EVENT_STEPS
from ui.components.date_field import DateField
from ui.components.input_field import InputField
from ui.wizards.event_form import StepPage


@pytest.fixture
def general_page(qtbot):
    page = StepPage(EVENT_STEPS[0])
    qtbot.addWidget(page)
    return page


@pytest.fixture
def dates_page(qtbot):
    page = StepPage(EVENT_STEPS[1])
    qtbot.addWidget(page)
    return page


class TestInputField:
    """Test the single-line input."""

    def test_zip_code_truncated(self, qapp):
        field = InputField(max_length=Config.ZIP_CODE_MAX_LENGTH)
        field.setText("750011")
        assert field.text() == "75001"

    def test_border_follows_variant(self, qapp):
        field = InputField(placeholder="Paris")
        assert field.variant == "default"
        assert Config.BORDER_COLOR in field.styleSheet()

        field.set_error()
        assert field.variant == "error"
        assert Config.ERROR_COLOR in field.styleSheet()

        field.set_default()
        assert Config.ERROR_COLOR not in field.styleSheet()

    def test_step_page_marks_invalid_field(self, general_page):
        general_page.show_errors({"zipCode": "Le code postal est requis"})

        assert general_page.inputs["zipCode"].variant == "error"
        assert general_page.inputs["city"].variant == "default"
        assert general_page.error_labels["zipCode"].text() == "Le code postal est requis"

        general_page.clear_errors()
        assert general_page.inputs["zipCode"].variant == "default"
        assert Config.BORDER_COLOR in general_page.inputs["zipCode"].styleSheet()
        assert general_page.error_labels["zipCode"].isHidden()


class TestDateField:
    """Test the calendar input."""

    def test_starts_unset(self, qapp):
        field = DateField(placeholder="AAAA-MM-JJ")
        assert not field.is_set()
        assert field.value() is None

    def test_iso_value(self, qapp):
        field = DateField()
        field.set_value("2024-06-01")
        assert field.is_set()
        assert field.value() == "2024-06-01"

    @pytest.mark.parametrize("value", [None, "", "01/06/2024", "1999-12-31"])
    def test_unusable_value_clears(self, qapp, value):
        field = DateField()
        field.set_value("2024-06-01")
        field.set_value(value)
        assert field.value() is None

    def test_error_border(self, dates_page):
        dates_page.show_errors({"startingDate": "Une date de début est requise"})
        assert Config.ERROR_COLOR in dates_page.inputs["startingDate"].styleSheet()

        dates_page.clear_errors()
        assert dates_page.inputs["startingDate"].variant == "default"

    def test_page_round_trip(self, dates_page):
        dates_page.populate_data({"startingDate": "2024-06-01", "endingDate": "2024-06-02"})
        assert dates_page.collect_data() == {"startingDate": "2024-06-01", "endingDate": "2024-06-02"}

        dates_page.populate_data({"startingDate": "2024-06-01", "endingDate": None})
        assert dates_page.collect_data()["endingDate"] is None
