# -*- coding: utf-8 -*-
"""
Input Field Component
Reusable single-line input with default/error states.
"""

from PyQt5.QtWidgets import QLineEdit

from app.config import Config


_BASE_STYLE = """
    QLineEdit {{
        background-color: #FFFFFF;
        border: 1px solid {border};
        border-radius: 6px;
        padding: 6px 10px;
        color: {text};
    }}
    QLineEdit:focus {{
        border: 1px solid {focus};
    }}
"""


class InputField(QLineEdit):
    """
    Input field component.

    Features:
    - Configurable placeholder and max length
    - Error state (red border) toggled by the owning step page

    Usage:
        field = InputField(placeholder="Paris")
        field.set_error()
    """

    def __init__(self, placeholder: str = "", variant: str = "default",
                 max_length: int = None, parent=None):
        """
        Initialize input field.

        Args:
            placeholder: Placeholder text
            variant: Input variant ("default", "error")
            max_length: Maximum number of characters
            parent: Parent widget
        """
        super().__init__(parent)
        self.variant = variant
        if placeholder:
            self.setPlaceholderText(placeholder)
        if max_length:
            self.setMaxLength(max_length)
        self._apply_variant()

    def _apply_variant(self):
        """Apply variant-specific styling."""
        border = Config.ERROR_COLOR if self.variant == "error" else Config.BORDER_COLOR
        self.setStyleSheet(_BASE_STYLE.format(
            border=border, text=Config.TEXT_COLOR, focus=Config.PRIMARY_COLOR
        ))

    def set_variant(self, variant: str):
        """
        Change input variant dynamically.

        Args:
            variant: New variant ("default", "error")
        """
        self.variant = variant
        self._apply_variant()

    def set_error(self):
        """Set input to error state (convenience method)."""
        self.set_variant("error")

    def set_default(self):
        """Reset input to default state (convenience method)."""
        self.set_variant("default")
