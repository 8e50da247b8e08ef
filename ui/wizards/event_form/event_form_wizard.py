# -*- coding: utf-8 -*-
"""
Event Form Wizard - Qt shell of the event creation wizard.

Provides the wizard UI with:
- Header with progress
- One StepPage per step
- Navigation buttons (Back, Next / Create)
"""

from typing import Optional

from PyQt5.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton,
    QFrame, QStackedWidget, QProgressBar
)
from PyQt5.QtCore import pyqtSignal

from app.config import Config
from controllers.event_form_controller import EventFormController
from services.submission_service import SubmissionResult
from services.translation_manager import tr
from services.wizard import WizardState
from ui.error_handler import ErrorHandler
from utils.logger import get_logger
from .step_page import StepPage

logger = get_logger(__name__)


class EventFormWizard(QWidget):
    """
    Event creation wizard window.

    Renders the active step, forwards Back/Next to the controller and
    reports the final outcome.
    """

    # Signals
    wizard_completed = pyqtSignal(dict)  # created event payload
    submission_failed = pyqtSignal(str)  # user-facing message

    def __init__(self, controller: EventFormController,
                 show_dialogs: bool = True, parent: Optional[QWidget] = None):
        """
        Initialize the wizard.

        Args:
            controller: Controller owning the wizard state machine
            show_dialogs: Show message boxes for results (off in tests)
            parent: Parent widget
        """
        super().__init__(parent)
        self.controller = controller
        self.show_dialogs = show_dialogs
        self.pages = [StepPage(step) for step in controller.steps]

        self.controller.state_changed.connect(self._on_state_changed)
        self.controller.validation_failed.connect(self._on_validation_failed)
        self.controller.loading_changed.connect(self._on_loading_changed)
        self.controller.submission_finished.connect(self._on_submission_finished)
        self.controller.operation_error.connect(self._on_operation_error)

        self._setup_ui()
        self._on_state_changed(self.controller.state)

    # =========================================================================
    # UI Setup
    # =========================================================================

    def _setup_ui(self):
        """Setup the wizard UI."""
        self.setWindowTitle(tr("wizard.title"))
        self.setMinimumSize(Config.WINDOW_MIN_WIDTH, Config.WINDOW_MIN_HEIGHT)

        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)

        main_layout.addWidget(self._create_header())

        separator = QFrame()
        separator.setFrameShape(QFrame.HLine)
        separator.setStyleSheet(f"background-color: {Config.BORDER_COLOR};")
        separator.setFixedHeight(1)
        main_layout.addWidget(separator)

        self.step_container = QStackedWidget()
        for page in self.pages:
            self.step_container.addWidget(page)
        main_layout.addWidget(self.step_container, 1)

        main_layout.addWidget(self._create_footer())

    def _create_header(self) -> QWidget:
        """Create wizard header with progress."""
        header = QWidget()
        header.setStyleSheet(f"background-color: {Config.BACKGROUND_COLOR};")

        layout = QHBoxLayout(header)
        layout.setContentsMargins(20, 16, 20, 16)
        layout.setSpacing(8)

        self.progress_label = QLabel()
        layout.addWidget(self.progress_label)

        self.progress_bar = QProgressBar()
        self.progress_bar.setMaximum(100)
        self.progress_bar.setTextVisible(False)
        self.progress_bar.setFixedHeight(6)
        self.progress_bar.setStyleSheet(f"""
            QProgressBar {{
                border: none;
                background-color: #e9ecef;
                border-radius: 3px;
            }}
            QProgressBar::chunk {{
                background-color: {Config.PRIMARY_COLOR};
                border-radius: 3px;
            }}
        """)
        layout.addWidget(self.progress_bar, 1)

        return header

    def _create_footer(self) -> QWidget:
        """Create wizard footer with navigation buttons."""
        footer = QWidget()
        layout = QHBoxLayout(footer)
        layout.setContentsMargins(20, 16, 20, 16)
        layout.setSpacing(12)

        layout.addStretch()

        self.btn_previous = QPushButton(tr("button.back"))
        self.btn_previous.clicked.connect(self._handle_previous)
        layout.addWidget(self.btn_previous)

        self.btn_next = QPushButton(tr("button.next"))
        self.btn_next.setDefault(True)
        self.btn_next.clicked.connect(self._handle_next)
        layout.addWidget(self.btn_next)

        layout.addStretch()
        return footer

    # =========================================================================
    # Navigation Handlers
    # =========================================================================

    def current_page(self) -> StepPage:
        return self.pages[self.controller.state.step_index]

    def _handle_previous(self):
        """Handle Back button click."""
        page = self.current_page()
        page.clear_errors()
        self.controller.previous_step(page.collect_data())

    def _handle_next(self):
        """Handle Next button click (submits on the last step)."""
        page = self.current_page()
        page.clear_errors()
        self.controller.next_step(page.collect_data())

    # =========================================================================
    # Event Handlers
    # =========================================================================

    def _on_state_changed(self, state: WizardState):
        """Show the active page and refresh progress and buttons."""
        if self.step_container.currentIndex() != state.step_index:
            page = self.pages[state.step_index]
            page.populate_data(self.controller.navigator.values_for_step(state.step_index))
            self.step_container.setCurrentIndex(state.step_index)

        self.progress_label.setText(
            tr("wizard.step_progress", current=state.step_index + 1, total=state.step_count)
        )
        self.progress_bar.setValue(int(round(state.progress * 100)))
        self._update_navigation_buttons(state)

    def _update_navigation_buttons(self, state: WizardState):
        self.btn_previous.setVisible(not state.is_first_step)
        busy = state.is_submitting or self.controller.is_submitting
        self.btn_previous.setEnabled(not busy and not state.is_completed)
        self.btn_next.setEnabled(not busy and not state.is_completed)
        if busy:
            self.btn_next.setText(tr("wizard.submitting"))
        elif state.is_last_step:
            self.btn_next.setText(tr("button.submit"))
        else:
            self.btn_next.setText(tr("button.next"))

    def _on_loading_changed(self, loading: bool):
        self._update_navigation_buttons(self.controller.state)

    def _on_validation_failed(self, errors: dict):
        self.current_page().show_errors(errors)

    def _on_submission_finished(self, result: SubmissionResult):
        self._update_navigation_buttons(self.controller.state)
        if result.success:
            payload = result.record.to_payload()
            logger.info(f"Event created: {payload.get('name')}")
            if self.show_dialogs:
                ErrorHandler.show_success(self, tr("success.event_created"))
            self.wizard_completed.emit(payload)
            return

        message = ErrorHandler.handle(result.error, self if self.show_dialogs else None, context="submit")
        self.submission_failed.emit(message)

    def _on_operation_error(self, operation: str, message: str):
        self._update_navigation_buttons(self.controller.state)
        if self.show_dialogs:
            ErrorHandler.show_error(self, tr("error.api.unknown"))
        self.submission_failed.emit(message)
