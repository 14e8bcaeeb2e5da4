"""API pública del motor de la calculadora de molaridad."""

from .errors import ChemCalcError, UnknownUnit
from .options import CalcOptions
from .resolver import DerivationOutcome, QuantityResolver, derive
from .units import (
    DEFAULT_REGISTRY,
    UNIT_TABLE,
    UnitEntry,
    UnitRegistry,
    format_value,
    parse_raw,
)

__all__ = [
    "ChemCalcError",
    "UnknownUnit",
    "CalcOptions",
    "DerivationOutcome",
    "QuantityResolver",
    "derive",
    "DEFAULT_REGISTRY",
    "UNIT_TABLE",
    "UnitEntry",
    "UnitRegistry",
    "format_value",
    "parse_raw",
]
