"""Opciones de configuración del motor de cálculo."""

from dataclasses import dataclass


@dataclass
class CalcOptions:
    """Opciones de control de la derivación y de la presentación."""

    # Cifras significativas al mostrar un valor calculado.
    significant_digits: int = 10
    # Emitir un registro DEBUG por cada derivación.
    log_derivations: bool = True
