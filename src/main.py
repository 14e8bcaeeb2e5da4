"""Punto de entrada de la calculadora de molaridad.

Este módulo inicializa PyQt6, carga la ventana principal y arranca el bucle
de eventos. Es el archivo que se ejecuta al iniciar la aplicación.
"""

import argparse
import logging
import sys
import os

# Aseguramos que Python encuentre los módulos dentro de `src` al ejecutar
# el archivo directamente.
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from PyQt6.QtWidgets import QApplication
from gui.main_window import CalculatorWindow


def main():
    """
    Arranca la aplicación Qt y muestra la ventana principal.

    Returns:
        Código de salida del proceso de Qt.

    Side Effects:
        Configura el logging, crea la instancia de `QApplication`, muestra la
        ventana y entra en el bucle de eventos de Qt.
    """
    parser = argparse.ArgumentParser(prog="molcalc", add_help=True)
    parser.add_argument("--debug", action="store_true", help="registrar cada derivación")
    args, qt_args = parser.parse_known_args()

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = QApplication([sys.argv[0]] + qt_args)
    app.setApplicationName("Calculadora de Molaridad")

    window = CalculatorWindow()
    window.show()

    sys.exit(app.exec())

if __name__ == "__main__":
    main()
