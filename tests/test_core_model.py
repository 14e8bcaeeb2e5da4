"""Pruebas unitarias para test_core_model."""

import os
import sys
import unittest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src")))

from chemcalc import DEFAULT_REGISTRY, QuantityResolver, UnknownUnit
from chemcalc.resolver import DerivationOutcome
from core.model import Classification, FieldSet, Quantity, clear_all


class FieldSetTest(unittest.TestCase):
    """Casos de prueba para FieldSetTest."""
    def test_initial_state(self):
        """Verifica que los campos empiezan vacíos con la unidad por defecto.

        Returns:
            None.

        """
        fields = FieldSet(DEFAULT_REGISTRY)
        self.assertEqual([q for q, _ in fields], list(Quantity))
        for quantity, state in fields:
            self.assertIsNone(state.raw_value)
            self.assertEqual(state.unit, DEFAULT_REGISTRY.default_unit(quantity))

    def test_set_raw_is_permissive(self):
        """Verifica set raw is permissive.

        Returns:
            None.

        """
        fields = FieldSet(DEFAULT_REGISTRY)
        self.assertEqual(fields.set_raw(Quantity.MASS, "12.5"), 12.5)
        self.assertIsNone(fields.set_raw(Quantity.MOLES, "doce"))
        self.assertIsNone(fields[Quantity.MOLES].raw_value)

    def test_set_unit_rejects_unknown(self):
        fields = FieldSet(DEFAULT_REGISTRY)
        with self.assertRaises(UnknownUnit):
            fields.set_unit(Quantity.VOLUME, "furlongs")
        self.assertEqual(fields[Quantity.VOLUME].unit, "L")

    def test_canonical_values_use_selected_unit(self):
        fields = FieldSet(DEFAULT_REGISTRY)
        fields.set_unit(Quantity.VOLUME, "mL")
        fields.set_raw(Quantity.VOLUME, "500")
        fields.set_unit(Quantity.MOLARITY, "mM")
        fields.set_raw(Quantity.MOLARITY, "100")

        values = fields.canonical_values()
        self.assertAlmostEqual(values[Quantity.VOLUME], 0.5)
        self.assertAlmostEqual(values[Quantity.MOLARITY], 0.1)
        self.assertIsNone(values[Quantity.MASS])

    def test_apply_writes_in_selected_unit(self):
        """Verifica apply writes in selected unit.

        Returns:
            None.

        """
        fields = FieldSet(DEFAULT_REGISTRY)
        fields.set_unit(Quantity.MOLES, "mmol")
        fields.set_raw(Quantity.MOLES, "999")
        fields.set_raw(Quantity.VOLUME, "7")
        outcome = DerivationOutcome(
            target=Quantity.MASS,
            classification={q: Classification.NEUTRAL for q in Quantity},
            values={Quantity.MOLES: 0.05, Quantity.VOLUME: None},
            branch="test",
        )

        fields.apply(outcome)

        self.assertAlmostEqual(fields[Quantity.MOLES].raw_value, 50.0)
        self.assertIsNone(fields[Quantity.VOLUME].raw_value)

    def test_clear_keeps_units(self):
        fields = FieldSet(DEFAULT_REGISTRY)
        fields.set_unit(Quantity.MASS, "mg")
        fields.set_raw(Quantity.MASS, "3")
        fields.clear()
        self.assertIsNone(fields[Quantity.MASS].raw_value)
        self.assertEqual(fields[Quantity.MASS].unit, "mg")

    def test_clear_all(self):
        fields, classification = clear_all(DEFAULT_REGISTRY)
        self.assertTrue(all(state.raw_value is None for _, state in fields))
        self.assertEqual(set(classification.values()), {Classification.NEUTRAL})


class DeriveFieldsTest(unittest.TestCase):
    """Casos de prueba para DeriveFieldsTest."""
    def test_priority_example_with_units(self):
        """Verifica el ejemplo de NaCl: 999 mmol se sustituye por 50 mmol.

        Returns:
            None.

        """
        resolver = QuantityResolver()
        fields, _ = resolver.clear_all()
        fields.set_raw(Quantity.MOLAR_MASS, "58.44")
        fields.set_raw(Quantity.VOLUME, "0.5")
        fields.set_raw(Quantity.MOLARITY, "0.1")
        fields.set_unit(Quantity.MOLES, "mmol")
        fields.set_raw(Quantity.MOLES, "999")

        outcome = resolver.derive_fields(Quantity.MASS, fields)

        self.assertAlmostEqual(fields[Quantity.MASS].raw_value, 2.922)
        self.assertAlmostEqual(fields[Quantity.MOLES].raw_value, 50.0)
        self.assertEqual(outcome.classification[Quantity.MASS], Classification.RESULT)

    def test_result_uses_target_unit(self):
        resolver = QuantityResolver()
        fields, _ = resolver.clear_all()
        fields.set_raw(Quantity.MASS, "5.844")
        fields.set_raw(Quantity.MOLAR_MASS, "58.44")
        fields.set_unit(Quantity.MOLES, "umol")

        resolver.derive_fields(Quantity.MOLES, fields)

        self.assertAlmostEqual(fields[Quantity.MOLES].raw_value, 100000.0, places=4)

    def test_blank_target_written_back(self):
        resolver = QuantityResolver()
        fields, _ = resolver.clear_all()
        fields.set_raw(Quantity.MOLARITY, "2")

        outcome = resolver.derive_fields(Quantity.MOLARITY, fields)

        self.assertFalse(outcome.succeeded)
        self.assertIsNone(fields[Quantity.MOLARITY].raw_value)


if __name__ == "__main__":
    unittest.main()
