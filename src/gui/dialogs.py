"""
Calculator Dialogs
Quick start help dialog.
"""
from PyQt6.QtWidgets import (
    QDialog,
    QVBoxLayout,
    QDialogButtonBox,
    QTextBrowser,
)


INSTRUCTIONS = (
    "Pulse «Calcular» en cada fila para ver en rojo los campos necesarios.\n"
    "Los campos usados en el cálculo se muestran en verde.\n"
    "El campo calculado se muestra en azul.\n"
    "Use Intro para pasar de un campo al siguiente.\n"
    "Ctrl+Intro calcula el campo actual."
)


class QuickStartDialog(QDialog):
    """Help dialog describing colours and keyboard shortcuts."""

    def __init__(self, parent=None) -> None:
        super().__init__(parent)
        self.setWindowTitle("Guía Rápida")
        self.setMinimumWidth(480)

        text = QTextBrowser()
        text.setOpenExternalLinks(False)
        text.setHtml(
            "<h3>Guía Rápida de la Calculadora de Molaridad</h3>"
            "<p>Relaciona masa, masa molar, moles, volumen y molaridad mediante "
            "<i>n = m / MM</i> y <i>n = V · c</i>.</p>"
            "<ul>"
            "<li><b>Calcular:</b> Introduzca los datos conocidos con sus unidades y pulse "
            "«Calcular» en la fila que desea obtener. El valor previo de esa fila se descarta.</li>"
            "<li><b><span style='color:#FF0000'>Rojo</span>:</b> dato necesario que falta.</li>"
            "<li><b><span style='color:#006400'>Verde</span>:</b> dato usado en el cálculo.</li>"
            "<li><b><span style='color:#0000FF'>Azul</span>:</b> valor calculado.</li>"
            "<li><b>Teclado:</b> Intro pasa al siguiente campo, Ctrl+Intro calcula el campo "
            "actual y Ctrl+D limpia todos los campos.</li>"
            "</ul>"
            "<p><i>Tip: Al calcular la masa desde volumen y molaridad también se "
            "actualizan los moles.</i></p>"
        )

        buttons = QDialogButtonBox(QDialogButtonBox.StandardButton.Ok)
        buttons.accepted.connect(self.accept)

        layout = QVBoxLayout(self)
        layout.addWidget(text)
        layout.addWidget(buttons)
