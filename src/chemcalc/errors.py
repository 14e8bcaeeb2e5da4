"""Excepciones específicas del motor de cálculo."""


class ChemCalcError(Exception):
    """Base de los errores del motor de cálculo."""


class UnknownUnit(ChemCalcError):
    """Se lanza cuando una unidad no está registrada para la magnitud.

    Indica un desajuste entre la GUI y el registro de unidades, no un error
    del usuario.
    """

    def __init__(self, quantity, label: str) -> None:
        self.quantity = quantity
        self.label = label
        name = getattr(quantity, "value", quantity)
        super().__init__(f"Unknown unit {label!r} for {name}")
