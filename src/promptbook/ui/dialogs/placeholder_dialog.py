"""Modal dialog that collects placeholder values and previews the filled prompt."""

from __future__ import annotations

import logging
from typing import Dict, Optional

from PySide6.QtCore import Signal
from PySide6.QtGui import QGuiApplication, QTextCursor
from PySide6.QtWidgets import (
    QComboBox,
    QDialog,
    QFormLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPlainTextEdit,
    QPushButton,
    QScrollArea,
    QTextEdit,
    QVBoxLayout,
    QWidget,
)

from src.promptbook.core.color_schemes import PreviewColorScheme
from src.promptbook.core.placeholders import (
    Placeholder,
    PlaceholderKind,
    build_preview_styles,
    create_annotated_preview,
    extract_placeholders,
    fill_placeholders,
    initial_values,
    missing_keys,
    render_segments_html,
    restore_defaults,
    validate_placeholders,
)

LOGGER = logging.getLogger(__name__)


class PlaceholderDialog(QDialog):
    """Form with one input per placeholder and a live coloured preview."""

    prompt_filled = Signal(str)

    def __init__(
        self,
        prompt_title: str,
        prompt_content: str,
        *,
        color_scheme: Optional[PreviewColorScheme] = None,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle("Prompt Parameters")
        self.resize(720, 640)

        self._content = prompt_content or ""
        self._styles = build_preview_styles(color_scheme)
        self._placeholders = extract_placeholders(self._content)
        self._values: Dict[str, str] = initial_values(self._placeholders)
        self._inputs: Dict[str, QWidget] = {}

        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(16, 16, 16, 16)
        main_layout.setSpacing(10)

        header_row = QHBoxLayout()
        title_label = QLabel(prompt_title)
        title_label.setStyleSheet("font-weight: 600;")
        header_row.addWidget(title_label, stretch=1)
        self._restore_button = QPushButton("Restore defaults")
        self._restore_button.clicked.connect(self.restore_defaults)
        header_row.addWidget(self._restore_button)
        main_layout.addLayout(header_row)

        form_container = QWidget()
        form_layout = QFormLayout(form_container)
        if not self._placeholders:
            form_layout.addRow(QLabel("This prompt has no placeholders."))
        for placeholder in self._placeholders:
            widget = self._create_input(placeholder)
            self._inputs[placeholder.key] = widget
            form_layout.addRow(placeholder.key, widget)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setWidget(form_container)
        main_layout.addWidget(scroll, stretch=1)

        main_layout.addWidget(QLabel("Preview"))
        self._preview_edit = QTextEdit()
        self._preview_edit.setReadOnly(True)
        self._preview_edit.setAcceptRichText(True)
        self._preview_edit.setLineWrapMode(QTextEdit.LineWrapMode.WidgetWidth)
        main_layout.addWidget(self._preview_edit, stretch=1)

        self._status_label = QLabel()
        self._status_label.setWordWrap(True)
        self._status_label.setStyleSheet("color: #666;")
        main_layout.addWidget(self._status_label)

        self._warning_label = QLabel()
        self._warning_label.setWordWrap(True)
        self._warning_label.setStyleSheet("color: #b23; font-weight: 600;")
        warnings = validate_placeholders(self._content)
        if warnings:
            self._warning_label.setText("\n".join(warnings))
        else:
            self._warning_label.hide()
        main_layout.addWidget(self._warning_label)

        button_row = QHBoxLayout()
        button_row.addStretch(1)
        cancel_button = QPushButton("Cancel")
        cancel_button.clicked.connect(self.reject)
        button_row.addWidget(cancel_button)
        self._confirm_button = QPushButton("Done && copy")
        self._confirm_button.setDefault(True)
        self._confirm_button.clicked.connect(self._on_confirm)
        button_row.addWidget(self._confirm_button)
        main_layout.addLayout(button_row)

        self._refresh_preview()

    # ------------------------------------------------------------------
    # Inputs
    # ------------------------------------------------------------------
    def _create_input(self, placeholder: Placeholder) -> QWidget:
        key = placeholder.key
        if placeholder.kind is PlaceholderKind.DROPDOWN:
            combo = QComboBox()
            combo.addItems(list(placeholder.options))
            combo.currentTextChanged.connect(lambda text, key=key: self._set_value(key, text))
            return combo
        if placeholder.kind is PlaceholderKind.MULTILINE_TEXT:
            editor = QPlainTextEdit()
            editor.setPlainText(placeholder.default_value)
            editor.setMinimumHeight(90)
            editor.textChanged.connect(lambda key=key, editor=editor: self._set_value(key, editor.toPlainText()))
            return editor
        line = QLineEdit()
        line.setText(placeholder.default_value)
        line.setPlaceholderText(placeholder.default_value or key)
        line.textChanged.connect(lambda text, key=key: self._set_value(key, text))
        return line

    def _apply_to_inputs(self) -> None:
        for placeholder in self._placeholders:
            widget = self._inputs[placeholder.key]
            value = self._values.get(placeholder.key, "")
            widget.blockSignals(True)
            try:
                if isinstance(widget, QComboBox):
                    index = widget.findText(value)
                    widget.setCurrentIndex(max(index, 0))
                elif isinstance(widget, QPlainTextEdit):
                    widget.setPlainText(value)
                elif isinstance(widget, QLineEdit):
                    widget.setText(value)
            finally:
                widget.blockSignals(False)

    def _set_value(self, key: str, value: str) -> None:
        self._values[key] = value
        self._refresh_preview()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    @property
    def placeholders(self) -> list[Placeholder]:
        return list(self._placeholders)

    def values(self) -> Dict[str, str]:
        return dict(self._values)

    def input_widget(self, key: str) -> Optional[QWidget]:
        return self._inputs.get(key)

    def preview_html(self) -> str:
        return self._preview_edit.toHtml()

    def status_text(self) -> str:
        return self._status_label.text()

    def warning_text(self) -> str:
        return self._warning_label.text()

    def filled_prompt(self) -> str:
        return fill_placeholders(self._content, self._values)

    def restore_defaults(self) -> None:
        restore_defaults(self._values, self._placeholders)
        self._apply_to_inputs()
        self._refresh_preview()

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def _refresh_preview(self) -> None:
        segments = create_annotated_preview(self._content, self._values)
        self._preview_edit.setHtml(self._styles + "<pre>" + render_segments_html(segments) + "</pre>")
        self._preview_edit.moveCursor(QTextCursor.MoveOperation.Start)

        missing = missing_keys(self._placeholders, self._values)
        if missing:
            self._status_label.setText("Empty placeholders: " + ", ".join(missing))
        else:
            self._status_label.setText("All placeholders filled.")

    def _on_confirm(self) -> None:
        filled = self.filled_prompt()
        clipboard = QGuiApplication.clipboard()
        if clipboard is not None:
            clipboard.setText(filled)
        LOGGER.info("Filled prompt with %d placeholder(s) copied to clipboard", len(self._placeholders))
        self.prompt_filled.emit(filled)
        self.accept()


__all__ = ["PlaceholderDialog"]
