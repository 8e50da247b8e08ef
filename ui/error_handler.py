# -*- coding: utf-8 -*-
"""Message boxes for submission outcomes and unexpected errors."""

from typing import Optional

from PyQt5.QtWidgets import QWidget, QMessageBox

from services.error_mapper import map_exception
from services.translation_manager import tr
from utils.logger import get_logger

logger = get_logger(__name__)


class ErrorHandler:
    """
    Turns exceptions into one translated sentence for the user.

    The technical details stay in the log; the dialog only shows the
    mapped message.
    """

    @staticmethod
    def handle(error: Exception, parent: Optional[QWidget] = None,
               context: Optional[str] = None) -> str:
        """
        Log and map an error, showing a dialog when a parent is given.

        Returns:
            The user-facing message
        """
        logger.error(f"Error in {context or 'unknown'}: {error!r}")
        message = map_exception(error, context)
        if parent is not None:
            ErrorHandler.show_error(parent, message)
        return message

    @staticmethod
    def _show(icon, parent: QWidget, title: str, message: str):
        box = QMessageBox(icon, title, message, QMessageBox.Ok, parent)
        box.exec_()

    @staticmethod
    def show_error(parent: QWidget, message: str, title: str = None):
        ErrorHandler._show(QMessageBox.Critical, parent, title or tr("dialog.error"), message)

    @staticmethod
    def show_success(parent: QWidget, message: str, title: str = None):
        ErrorHandler._show(QMessageBox.Information, parent, title or tr("dialog.success"), message)
