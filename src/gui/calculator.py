"""
Calculator grid widget.
One row per quantity: label, numeric input, unit selector and calculate button.
"""
from __future__ import annotations

from typing import Dict, Iterable, Optional

from PyQt6.QtWidgets import (
    QComboBox,
    QGridLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)
from PyQt6.QtCore import Qt, QLocale, pyqtSignal
from PyQt6.QtGui import QDoubleValidator, QKeySequence, QShortcut

from chemcalc import QuantityResolver, format_value
from chemcalc.resolver import DerivationOutcome
from core.model import Quantity, neutral_classification
from gui.dialogs import INSTRUCTIONS
from gui.style import CLASSIFICATION_STYLES


class CalculatorWidget(QWidget):
    """
    Grid of the five quantity rows plus the clear button.
    Reads the inputs into a FieldSet, runs the resolver and paints the
    resulting classification on the row labels.
    """
    calculated = pyqtSignal(object)
    cleared = pyqtSignal()

    def __init__(self, resolver: Optional[QuantityResolver] = None, parent=None) -> None:
        super().__init__(parent)
        self.resolver = resolver or QuantityResolver()
        self.fields, self.classification = self.resolver.clear_all()

        self.labels: Dict[Quantity, QLabel] = {}
        self.inputs: Dict[Quantity, QLineEdit] = {}
        self.unit_boxes: Dict[Quantity, QComboBox] = {}
        self.calc_buttons: Dict[Quantity, QPushButton] = {}

        self._build_ui()
        self._create_shortcuts()
        self._paint_labels()

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)

        grid = QGridLayout()
        grid.setHorizontalSpacing(6)
        grid.setVerticalSpacing(4)

        for row, quantity in enumerate(Quantity):
            label = QLabel(quantity.label)
            label.setAlignment(Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter)
            grid.addWidget(label, row, 0)
            self.labels[quantity] = label

            validator = QDoubleValidator(self)
            validator.setLocale(QLocale.c())
            validator.setBottom(0.0)
            line_edit = QLineEdit()
            line_edit.setValidator(validator)
            line_edit.setMinimumWidth(120)
            line_edit.returnPressed.connect(lambda q=quantity: self._focus_next(q))
            grid.addWidget(line_edit, row, 1)
            self.inputs[quantity] = line_edit

            unit_box = QComboBox()
            for unit in self.resolver.units_for(quantity):
                unit_box.addItem(unit.label)
            unit_box.setCurrentIndex(0)
            grid.addWidget(unit_box, row, 2)
            self.unit_boxes[quantity] = unit_box

            button = QPushButton("Calcular")
            button.clicked.connect(lambda checked=False, q=quantity: self.calculate(q))
            grid.addWidget(button, row, 3)
            self.calc_buttons[quantity] = button

        layout.addLayout(grid)

        instructions = QLabel(INSTRUCTIONS)
        instructions.setWordWrap(True)
        instructions.setAlignment(Qt.AlignmentFlag.AlignHCenter | Qt.AlignmentFlag.AlignTop)
        layout.addWidget(instructions)

        self.clear_button = QPushButton("Limpiar (Ctrl+D)")
        self.clear_button.clicked.connect(self.clear)
        layout.addWidget(self.clear_button, alignment=Qt.AlignmentFlag.AlignHCenter)
        layout.addStretch()

    def _create_shortcuts(self) -> None:
        self.calculate_shortcuts = []
        for sequence in ("Ctrl+Return", "Ctrl+Enter"):
            shortcut = QShortcut(QKeySequence(sequence), self)
            shortcut.activated.connect(self._calculate_focused)
            self.calculate_shortcuts.append(shortcut)
        self.clear_shortcut = QShortcut(QKeySequence("Ctrl+D"), self)
        self.clear_shortcut.activated.connect(self.clear)

    # === ACTIONS ===

    def calculate(self, target: Quantity) -> DerivationOutcome:
        """Derive `target` from the current inputs and refresh the rows."""
        self._read_inputs()
        outcome = self.resolver.derive_fields(target, self.fields)
        self._write_inputs(outcome.values.keys())
        self.classification = outcome.classification
        self._paint_labels()
        self.calculated.emit(outcome)
        return outcome

    def clear(self) -> None:
        """Blank every input and reset the row labels."""
        self.fields.clear()
        self.classification = neutral_classification()
        for line_edit in self.inputs.values():
            line_edit.clear()
        self._paint_labels()
        self.cleared.emit()

    def focused_quantity(self) -> Optional[Quantity]:
        for quantity, line_edit in self.inputs.items():
            if line_edit.hasFocus():
                return quantity
        return None

    # === HELPERS ===

    def _calculate_focused(self) -> None:
        quantity = self.focused_quantity()
        if quantity is not None:
            self.calculate(quantity)

    def _focus_next(self, quantity: Quantity) -> None:
        order = list(Quantity)
        next_quantity = order[(order.index(quantity) + 1) % len(order)]
        self.inputs[next_quantity].setFocus()

    def _read_inputs(self) -> None:
        for quantity in Quantity:
            self.fields.set_unit(quantity, self.unit_boxes[quantity].currentText())
            self.fields.set_raw(quantity, self.inputs[quantity].text())

    def _write_inputs(self, quantities: Iterable[Quantity]) -> None:
        for quantity in quantities:
            value = self.fields[quantity].raw_value
            self.inputs[quantity].setText(format_value(value, self.resolver.options))

    def _paint_labels(self) -> None:
        for quantity, label in self.labels.items():
            style = CLASSIFICATION_STYLES[self.classification[quantity]]
            label.setStyleSheet(style.stylesheet())
