"""Registro de unidades y conversión a valores canónicos.

Cada magnitud tiene una tabla ordenada de unidades con su factor hacia la
unidad canónica (factor 1). La primera entrada de cada tabla es la unidad
seleccionada por defecto en la interfaz.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional, Tuple

from core.model import Quantity
from .errors import UnknownUnit
from .options import CalcOptions

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UnitEntry:
    """Etiqueta de unidad y su factor multiplicativo a la unidad canónica."""
    label: str
    factor: float


# Tablas de unidades por magnitud; la primera entrada es la canónica.
UNIT_TABLE: Dict[Quantity, Tuple[Tuple[str, float], ...]] = {
    Quantity.MASS: (
        ("g", 1.0),
        ("mg", 1e-3),
        ("ug", 1e-6),
        ("ng", 1e-9),
        ("kg", 1e3),
    ),
    Quantity.MOLAR_MASS: (
        ("g/mol", 1.0),
        ("mg/mol", 1e-3),
        ("g/mmol", 1e3),
    ),
    Quantity.MOLES: (
        ("mol", 1.0),
        ("mmol", 1e-3),
        ("umol", 1e-6),
    ),
    Quantity.VOLUME: (
        ("L", 1.0),
        ("mL", 1e-3),
        ("uL", 1e-6),
        ("nL", 1e-9),
    ),
    Quantity.MOLARITY: (
        ("M", 1.0),
        ("mM", 1e-3),
        ("uM", 1e-6),
        ("nM", 1e-9),
        ("pM", 1e-12),
    ),
}


def parse_raw(text) -> Optional[float]:
    """Interpreta de forma permisiva el texto de un campo numérico.

    Args:
        text: Cadena tecleada, número o None.

    Returns:
        El valor como float, o None si el texto está vacío, no es numérico
        o no es finito.

    Side Effects:
        No tiene efectos laterales.
    """
    if text is None:
        return None
    if isinstance(text, (int, float)):
        value = float(text)
    else:
        stripped = str(text).strip()
        if not stripped:
            return None
        try:
            value = float(stripped)
        except ValueError:
            return None
    if not math.isfinite(value):
        return None
    return value


def format_value(value: Optional[float], options: Optional[CalcOptions] = None) -> str:
    """Formatea un valor para mostrarlo en un campo de texto."""
    if value is None:
        return ""
    digits = (options or CalcOptions()).significant_digits
    return f"{value:.{digits}g}"


class UnitRegistry:
    """Tabla inmutable de unidades por magnitud."""

    def __init__(self, table: Mapping[Quantity, Iterable[Tuple[str, float]]]) -> None:
        """Valida y congela la tabla de unidades.

        Args:
            table: Magnitud -> secuencia ordenada de (etiqueta, factor).

        Raises:
            ValueError: Si falta una magnitud, alguna tabla está vacía, hay
                etiquetas repetidas o algún factor no es positivo.
        """
        entries: Dict[Quantity, Tuple[UnitEntry, ...]] = {}
        factors: Dict[Quantity, Mapping[str, float]] = {}
        for quantity in Quantity:
            if quantity not in table:
                raise ValueError(f"No units registered for {quantity.value}")
            units = tuple(UnitEntry(label, float(factor)) for label, factor in table[quantity])
            if not units:
                raise ValueError(f"Empty unit table for {quantity.value}")
            lookup: Dict[str, float] = {}
            for unit in units:
                if unit.label in lookup:
                    raise ValueError(f"Duplicate unit {unit.label!r} for {quantity.value}")
                if not (unit.factor > 0 and math.isfinite(unit.factor)):
                    raise ValueError(f"Unit {unit.label!r} for {quantity.value} must have a positive factor")
                lookup[unit.label] = unit.factor
            entries[quantity] = units
            factors[quantity] = MappingProxyType(lookup)
        self._entries = MappingProxyType(entries)
        self._factors = MappingProxyType(factors)

    def units_for(self, quantity: Quantity) -> Tuple[UnitEntry, ...]:
        """Devuelve las unidades de una magnitud; la primera es la de defecto."""
        return self._entries[quantity]

    def default_unit(self, quantity: Quantity) -> str:
        return self._entries[quantity][0].label

    def factor(self, quantity: Quantity, label: str) -> float:
        """Factor multiplicativo de `label` hacia la unidad canónica.

        Raises:
            UnknownUnit: Si la unidad no existe para la magnitud.
        """
        try:
            return self._factors[quantity][label]
        except KeyError:
            logger.warning("Unit %r is not registered for %s", label, getattr(quantity, "value", quantity))
            raise UnknownUnit(quantity, label) from None

    def to_canonical(self, quantity: Quantity, raw, label: str) -> Optional[float]:
        """Convierte un valor en la unidad `label` a la unidad canónica.

        Args:
            quantity: Magnitud del campo.
            raw: Valor numérico, texto o None.
            label: Unidad seleccionada.

        Returns:
            Valor canónico, o None si el valor está ausente o no es numérico.

        Raises:
            UnknownUnit: Si la unidad no existe, aunque el valor esté vacío.
        """
        factor = self.factor(quantity, label)
        value = parse_raw(raw)
        if value is None:
            return None
        return value * factor

    def from_canonical(self, quantity: Quantity, value: float, label: str) -> float:
        """Convierte un valor canónico a la unidad `label` para mostrarlo."""
        return value / self.factor(quantity, label)


DEFAULT_REGISTRY = UnitRegistry(UNIT_TABLE)
