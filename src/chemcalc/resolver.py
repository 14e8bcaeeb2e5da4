"""Derivación de la magnitud pedida a partir de las demás.

Las cinco magnitudes se relacionan mediante dos identidades:

    n = m / MM        n = V * c

Para cada magnitud objetivo hay dos ramas de cálculo que se prueban en un
orden fijo. La rama preferente usa la combinación más rica de datos y,
además del objetivo, reescribe otra magnitud ("escritura acoplada"): los
moles, o bien el volumen y la molaridad cuando los moles salen de la masa.

Todas las operaciones trabajan con valores canónicos (g, g/mol, mol, L, M);
la conversión desde y hacia las unidades elegidas es tarea de `units`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Dict, Mapping, Optional, Tuple

from core.model import Classification, Quantity, clear_all
from .options import CalcOptions
from .units import DEFAULT_REGISTRY, UnitEntry, UnitRegistry

if TYPE_CHECKING:
    from core.model import FieldSet

logger = logging.getLogger(__name__)

M = Quantity.MASS
MM = Quantity.MOLAR_MASS
N = Quantity.MOLES
V = Quantity.VOLUME
C = Quantity.MOLARITY

Values = Dict[Quantity, float]


@dataclass(frozen=True)
class Branch:
    """Una combinación de datos suficiente para calcular el objetivo."""
    name: str
    inputs: Tuple[Quantity, ...]
    compute: Callable[[Values], float]
    coupled: Optional[Callable[[Values], Dict[Quantity, Optional[float]]]] = None
    # Al aplicarse, ningún dato queda marcado como requerido.
    clears_required: bool = False


# Ramas por objetivo, en orden de prioridad: gana la primera con todos sus
# datos presentes.
BRANCHES: Dict[Quantity, Tuple[Branch, ...]] = {
    M: (
        Branch(
            "mass_from_volume_molarity",
            (MM, V, C),
            lambda v: v[V] * v[C] * v[MM],
            lambda v: {N: v[V] * v[C]},
            clears_required=True,
        ),
        Branch("mass_from_moles", (MM, N), lambda v: v[N] * v[MM]),
    ),
    MM: (
        Branch(
            "molar_mass_from_volume_molarity",
            (M, V, C),
            lambda v: v[M] / (v[V] * v[C]),
            lambda v: {N: v[V] * v[C]},
            clears_required=True,
        ),
        Branch("molar_mass_from_moles", (M, N), lambda v: v[M] / v[N]),
    ),
    N: (
        Branch(
            "moles_from_mass",
            (M, MM),
            lambda v: v[M] / v[MM],
            lambda v: {V: None, C: None},
        ),
        Branch("moles_from_volume_molarity", (V, C), lambda v: v[V] * v[C]),
    ),
    V: (
        Branch(
            "volume_from_mass",
            (C, M, MM),
            lambda v: (v[M] / v[MM]) / v[C],
            lambda v: {N: v[M] / v[MM]},
            clears_required=True,
        ),
        Branch("volume_from_moles", (C, N), lambda v: v[N] / v[C]),
    ),
    C: (
        Branch(
            "molarity_from_mass",
            (V, M, MM),
            lambda v: (v[M] / v[MM]) / v[V],
            lambda v: {N: v[M] / v[MM]},
            clears_required=True,
        ),
        Branch("molarity_from_moles", (V, N), lambda v: v[N] / v[V]),
    ),
}


@dataclass
class DerivationOutcome:
    """Resultado de una derivación.

    Attributes:
        target: Magnitud pedida.
        classification: Estado de las cinco magnitudes.
        values: Valores canónicos a escribir de vuelta. Solo contiene las
            magnitudes modificadas; None significa dejar el campo vacío.
        branch: Nombre de la rama que se aplicó, o None si faltan datos.
    """
    target: Quantity
    classification: Dict[Quantity, Classification]
    values: Dict[Quantity, Optional[float]] = field(default_factory=dict)
    branch: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.branch is not None

    @property
    def result(self) -> Optional[float]:
        """Valor canónico calculado para el objetivo (None si no se calculó)."""
        if not self.succeeded:
            return None
        return self.values.get(self.target)

    @property
    def missing(self) -> Tuple[Quantity, ...]:
        """Magnitudes marcadas como requeridas, en el orden de `Quantity`."""
        return tuple(
            quantity for quantity in Quantity
            if self.classification[quantity] is Classification.REQUIRED
        )


def _present(values: Mapping[Quantity, Optional[float]]) -> Values:
    """Filtra los valores presentes; None o cero cuentan como ausentes."""
    present: Values = {}
    for quantity in Quantity:
        value = values.get(quantity)
        if value:
            present[quantity] = float(value)
    return present


def derive(
    target: Quantity,
    values: Mapping[Quantity, Optional[float]],
    options: Optional[CalcOptions] = None,
) -> DerivationOutcome:
    """Calcula `target` a partir del resto de magnitudes.

    Args:
        target: Magnitud que se desea (re)calcular.
        values: Valor canónico de cada magnitud; None, cero o una clave
            ausente se interpretan como dato vacío.
        options: Opciones del motor.

    Returns:
        Un `DerivationOutcome` con la clasificación de las cinco magnitudes
        y los valores a escribir. La falta de datos no es un error: se
        refleja con `Classification.REQUIRED`.

    Side Effects:
        No modifica `values`.
    """
    options = options or CalcOptions()
    target = Quantity(target)
    present = _present(values)

    classification = {
        quantity: Classification.USED if quantity in present else Classification.REQUIRED
        for quantity in Quantity
    }
    written: Dict[Quantity, Optional[float]] = {}

    # El objetivo nunca participa en su propio cálculo.
    if target in present:
        del present[target]
        classification[target] = Classification.NEUTRAL
        written[target] = None

    fired = None
    for branch in BRANCHES[target]:
        if all(quantity in present for quantity in branch.inputs):
            fired = branch
            break

    if fired is None:
        outcome = DerivationOutcome(target, classification, written)
        if options.log_derivations:
            logger.debug(
                "Insufficient data for %s; missing %s",
                target.value,
                ", ".join(q.value for q in outcome.missing) or "-",
            )
        return outcome

    written[target] = fired.compute(present)
    if fired.coupled is not None:
        written.update(fired.coupled(present))

    clear_required = fired.clears_required
    for quantity in Quantity:
        if quantity == target:
            classification[quantity] = Classification.RESULT
        elif quantity in fired.inputs:
            classification[quantity] = Classification.USED
        elif classification[quantity] is Classification.REQUIRED and not clear_required:
            continue
        else:
            classification[quantity] = Classification.NEUTRAL

    if options.log_derivations:
        logger.debug("Derived %s via %s: %r", target.value, fired.name, written)
    return DerivationOutcome(target, classification, written, fired.name)


class QuantityResolver:
    """Fachada sin estado que une el registro de unidades y la derivación."""

    def __init__(
        self,
        registry: UnitRegistry = DEFAULT_REGISTRY,
        options: Optional[CalcOptions] = None,
    ) -> None:
        self.registry = registry
        self.options = options or CalcOptions()

    def derive(
        self, target: Quantity, values: Mapping[Quantity, Optional[float]]
    ) -> DerivationOutcome:
        return derive(target, values, self.options)

    def derive_fields(self, target: Quantity, fields: "FieldSet") -> DerivationOutcome:
        """Deriva `target` a partir de un `FieldSet` y le aplica el resultado.

        Side Effects:
            Escribe en `fields` el objetivo vacío o calculado y las
            escrituras acopladas.

        Raises:
            UnknownUnit: Si algún campo tiene una unidad no registrada.
        """
        outcome = self.derive(target, fields.canonical_values())
        fields.apply(outcome)
        return outcome

    def units_for(self, quantity: Quantity) -> Tuple[UnitEntry, ...]:
        return self.registry.units_for(quantity)

    def to_canonical(self, quantity: Quantity, raw, label: str) -> Optional[float]:
        return self.registry.to_canonical(quantity, raw, label)

    def from_canonical(self, quantity: Quantity, value: float, label: str) -> float:
        return self.registry.from_canonical(quantity, value, label)

    def clear_all(self) -> Tuple["FieldSet", Dict[Quantity, Classification]]:
        """Estado en blanco: campos vacíos y clasificación neutra."""
        return clear_all(self.registry)
