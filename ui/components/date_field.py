# -*- coding: utf-8 -*-
"""
Date Field Component
Calendar date input whose value is an ISO string, or None while unset.
"""

from typing import Optional

from PyQt5.QtWidgets import QDateEdit
from PyQt5.QtCore import QDate

from app.config import Config


_UNSET_DATE = QDate(2000, 1, 1)

_DATE_STYLE = """
    QDateEdit {{
        background-color: #FFFFFF;
        border: 1px solid {border};
        border-radius: 6px;
        padding: 6px 10px;
        color: {text};
    }}
    QDateEdit:focus {{
        border: 1px solid {focus};
    }}
"""


class DateField(QDateEdit):
    """
    Date input with an empty state.

    The lowest date of the range stands for "no date" and shows the
    placeholder instead; `value()` then returns None.

    Usage:
        field = DateField(placeholder="AAAA-MM-JJ")
        field.set_value("2024-06-01")
        field.value()  # "2024-06-01"
    """

    def __init__(self, placeholder: str = "", parent=None):
        super().__init__(parent)
        self.variant = "default"
        self.setCalendarPopup(True)
        self.setDisplayFormat(Config.QT_DATE_FORMAT)
        self.setMinimumDate(_UNSET_DATE)
        self.setSpecialValueText(placeholder or " ")
        self.clear_value()
        self._apply_variant()

    def _apply_variant(self):
        border = Config.ERROR_COLOR if self.variant == "error" else Config.BORDER_COLOR
        self.setStyleSheet(_DATE_STYLE.format(
            border=border, text=Config.TEXT_COLOR, focus=Config.PRIMARY_COLOR
        ))

    def set_error(self):
        self.variant = "error"
        self._apply_variant()

    def set_default(self):
        self.variant = "default"
        self._apply_variant()

    def is_set(self) -> bool:
        return self.date() != self.minimumDate()

    def value(self) -> Optional[str]:
        """Selected date as "YYYY-MM-DD", None when unset."""
        if not self.is_set():
            return None
        return self.date().toString(Config.QT_DATE_FORMAT)

    def set_value(self, value: Optional[str]):
        """Select an ISO date; anything unparsable clears the field."""
        date = QDate.fromString(value, Config.QT_DATE_FORMAT) if value else QDate()
        if date.isValid() and date > self.minimumDate():
            self.setDate(date)
        else:
            self.clear_value()

    def clear_value(self):
        self.setDate(self.minimumDate())
