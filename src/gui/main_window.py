"""
Molarity Calculator Main Window
Hosts the calculator grid with a menu bar and a status bar.
"""
from typing import Optional

from PyQt6.QtWidgets import QMainWindow
from PyQt6.QtGui import QAction, QKeySequence

from chemcalc import QuantityResolver, format_value
from chemcalc.resolver import DerivationOutcome
from gui.calculator import CalculatorWidget
from gui.dialogs import QuickStartDialog


class CalculatorWindow(QMainWindow):
    """
    Main window for the molarity calculator.
    """
    def __init__(self, resolver: Optional[QuantityResolver] = None) -> None:
        super().__init__()
        self.setWindowTitle("Calculadora de Molaridad")
        self.resize(520, 320)

        # === CENTRAL WIDGET ===
        self.calculator = CalculatorWidget(resolver)
        self.setCentralWidget(self.calculator)

        # === MENU ===
        self._create_actions()
        self._create_menu_bar()

        # === SIGNAL CONNECTIONS ===
        self.calculator.calculated.connect(self._on_calculated)
        self.calculator.cleared.connect(self._on_cleared)

        # === STATUS BAR ===
        self.statusBar().showMessage("Introduzca los datos conocidos")

    def _create_actions(self) -> None:
        """Initialize the QActions used by the menus."""
        self.action_clear = QAction("Limpiar", self)
        self.action_clear.triggered.connect(self.calculator.clear)

        self.action_quit = QAction("Salir", self)
        self.action_quit.setShortcut(QKeySequence.StandardKey.Quit)
        self.action_quit.triggered.connect(self.close)

        self.action_quick_start = QAction("Guía Rápida", self)
        self.action_quick_start.setShortcut(QKeySequence.StandardKey.HelpContents)
        self.action_quick_start.triggered.connect(self._on_quick_start)

    def _create_menu_bar(self) -> None:
        menu_bar = self.menuBar()

        file_menu = menu_bar.addMenu("Archivo")
        file_menu.addAction(self.action_quit)

        edit_menu = menu_bar.addMenu("Editar")
        edit_menu.addAction(self.action_clear)

        help_menu = menu_bar.addMenu("Ayuda")
        help_menu.addAction(self.action_quick_start)

    def _on_calculated(self, outcome: DerivationOutcome) -> None:
        target = outcome.target
        if outcome.succeeded:
            state = self.calculator.fields[target]
            value = format_value(state.raw_value, self.calculator.resolver.options)
            self.statusBar().showMessage(f"{target.label}: {value} {state.unit}")
        else:
            missing = ", ".join(q.label for q in outcome.missing if q != target)
            self.statusBar().showMessage(f"Faltan datos para {target.label}: {missing}")

    def _on_cleared(self) -> None:
        self.statusBar().showMessage("Campos limpiados")

    def _on_quick_start(self) -> None:
        dialog = QuickStartDialog(self)
        dialog.exec()
