# -*- coding: utf-8 -*-
"""
Step Page - Qt rendering of one StepDefinition.

Builds the step's inputs from its FieldSpec list and reports the entered
values back as a plain dict. Holds no validation logic: errors computed by
the wizard core are only displayed.
"""

from typing import Any, Dict, Mapping, Optional

from PyQt5.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QGridLayout, QLabel, QPlainTextEdit,
    QPushButton, QFileDialog
)
from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtGui import QFont

from app.config import Config
from models.event import ImageAsset
from services.translation_manager import tr
from services.wizard import FieldKind, FieldSpec, StepDefinition
from ui.components.date_field import DateField
from ui.components.input_field import InputField
from utils.logger import get_logger

logger = get_logger(__name__)


class ImagePicker(QWidget):
    """Button + file name label holding the selected poster."""

    image_changed = pyqtSignal(object)

    def __init__(self, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self._asset: Optional[ImageAsset] = None

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(8)

        self.button = QPushButton(tr("button.choose_image"))
        self.button.clicked.connect(self.choose_image)
        layout.addWidget(self.button, 0, Qt.AlignCenter)

        self.file_label = QLabel(tr("field.image.none"))
        self.file_label.setAlignment(Qt.AlignCenter)
        self.file_label.setStyleSheet(f"color: {Config.TEXT_LIGHT};")
        layout.addWidget(self.file_label)

    def choose_image(self):
        """Open a file dialog and load the chosen poster."""
        path, _ = QFileDialog.getOpenFileName(self, tr("button.choose_image"), "", tr("field.image.filter"))
        if not path:
            return
        try:
            self.set_image(ImageAsset.from_path(path))
        except OSError as e:
            logger.error(f"Cannot read image {path}: {e}")
            self.set_image(None)

    def set_image(self, asset: Optional[ImageAsset]):
        self._asset = asset
        self.file_label.setText(asset.name if asset else tr("field.image.none"))
        self.image_changed.emit(asset)

    def image(self) -> Optional[ImageAsset]:
        return self._asset


class StepPage(QWidget):
    """
    One page of the event wizard.

    Lifecycle:
    - populate_data(): fill inputs from the accumulated form values
    - collect_data(): read inputs into a dict for the state machine
    - show_errors() / clear_errors(): display field errors
    """

    def __init__(self, step: StepDefinition, parent: Optional[QWidget] = None):
        """
        Initialize the step page.

        Args:
            step: Step definition to render
            parent: Parent widget
        """
        super().__init__(parent)
        self.step = step
        self.inputs: Dict[str, QWidget] = {}
        self.error_labels: Dict[str, QLabel] = {}

        self.main_layout = QVBoxLayout(self)
        self.main_layout.setContentsMargins(20, 20, 20, 20)
        self.main_layout.setSpacing(16)

        self.setup_ui()

    def setup_ui(self):
        """Create the title block and one input per FieldSpec."""
        self.title_label = QLabel(tr(self.step.title_key))
        title_font = QFont()
        title_font.setPointSize(14)
        title_font.setBold(True)
        self.title_label.setFont(title_font)
        self.main_layout.addWidget(self.title_label)

        self.subtitle_label = QLabel(tr(self.step.subtitle_key))
        self.subtitle_label.setStyleSheet(f"color: {Config.TEXT_LIGHT};")
        self.subtitle_label.setWordWrap(True)
        self.main_layout.addWidget(self.subtitle_label)

        grid = QGridLayout()
        grid.setHorizontalSpacing(16)
        grid.setVerticalSpacing(4)

        row, column = 0, 0
        for spec in self.step.render:
            if column + spec.column_span > 4:
                row, column = row + 3, 0
            grid.addWidget(QLabel(tr(spec.label_key)), row, column, 1, spec.column_span)
            grid.addWidget(self._create_input(spec), row + 1, column, 1, spec.column_span)

            error_label = QLabel("")
            error_label.setStyleSheet(f"color: {Config.ERROR_COLOR}; font-size: 11px;")
            error_label.hide()
            grid.addWidget(error_label, row + 2, column, 1, spec.column_span)
            self.error_labels[spec.name] = error_label

            column += spec.column_span

        self.main_layout.addLayout(grid)
        self.main_layout.addStretch()

    def _create_input(self, spec: FieldSpec) -> QWidget:
        placeholder = tr(spec.placeholder_key) if spec.placeholder_key else ""

        if spec.kind == FieldKind.TEXTAREA:
            widget = QPlainTextEdit()
            widget.setPlaceholderText(placeholder)
            widget.setMinimumHeight(120)
            self.inputs[spec.name] = widget
            return widget

        if spec.kind == FieldKind.IMAGE:
            widget = ImagePicker()
            self.inputs[spec.name] = widget
            return widget

        if spec.kind == FieldKind.DATE:
            widget = DateField(placeholder=placeholder)
            self.inputs[spec.name] = widget
            source = self.inputs.get(spec.default_from)
            if isinstance(source, DateField):
                source.dateChanged.connect(lambda _: self._apply_default(source, widget))
            return widget

        field = InputField(placeholder=placeholder, max_length=spec.max_length)
        self.inputs[spec.name] = field

        if not spec.suffix:
            return field

        container = QWidget()
        row = QHBoxLayout(container)
        row.setContentsMargins(0, 0, 0, 0)
        row.addWidget(field, 1)
        row.addWidget(QLabel(spec.suffix))
        return container

    @staticmethod
    def _apply_default(source: DateField, target: DateField):
        """Pre-fill an empty date with the date it defaults from."""
        if source.is_set() and not target.is_set():
            target.set_value(source.value())

    # =========================================================================
    # Data
    # =========================================================================

    def collect_data(self) -> Dict[str, Any]:
        """
        Collect data from the step's inputs.

        Returns:
            Field name -> raw value (text, ISO date or None, ImageAsset for the poster)
        """
        data: Dict[str, Any] = {}
        for name, widget in self.inputs.items():
            if isinstance(widget, ImagePicker):
                data[name] = widget.image()
            elif isinstance(widget, DateField):
                data[name] = widget.value()
            elif isinstance(widget, QPlainTextEdit):
                data[name] = widget.toPlainText()
            else:
                data[name] = widget.text()
        return data

    def populate_data(self, values: Mapping[str, Any]):
        """Populate the inputs with previously entered values."""
        for name, widget in self.inputs.items():
            if name not in values:
                continue
            value = values[name]
            if isinstance(widget, ImagePicker):
                widget.set_image(value if isinstance(value, ImageAsset) else None)
            elif isinstance(widget, DateField):
                widget.set_value(value)
            elif isinstance(widget, QPlainTextEdit):
                widget.setPlainText("" if value is None else str(value))
            else:
                widget.setText("" if value is None else str(value))

    # =========================================================================
    # Errors
    # =========================================================================

    def show_errors(self, errors: Mapping[str, str]):
        """Display field errors (field name -> message)."""
        self.clear_errors()
        for name, message in errors.items():
            label = self.error_labels.get(name)
            if label is None:
                continue
            label.setText(message)
            label.show()
            widget = self.inputs.get(name)
            if isinstance(widget, (InputField, DateField)):
                widget.set_error()

    def clear_errors(self):
        for name, label in self.error_labels.items():
            label.clear()
            label.hide()
            widget = self.inputs.get(name)
            if isinstance(widget, (InputField, DateField)):
                widget.set_default()

    def get_step_title(self) -> str:
        return tr(self.step.title_key)
