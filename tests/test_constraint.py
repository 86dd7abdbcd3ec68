import unittest

import pytest

from mpsconv.constraint import Relation, Constraint


class TestRelation(unittest.TestCase):

    def test_from_letter(self):
        self.assertEqual(Relation.from_letter("L"), Relation.LESS_EQUAL)
        self.assertEqual(Relation.from_letter("E"), Relation.EQUAL)
        self.assertEqual(Relation.from_letter("G"), Relation.GREATER_EQUAL)

    def test_case_insensitive(self):
        self.assertEqual(Relation.from_letter("l"), Relation.LESS_EQUAL)
        self.assertEqual(Relation.from_letter("e"), Relation.EQUAL)
        self.assertEqual(Relation.from_letter("g"), Relation.GREATER_EQUAL)

    def test_invalid_letter(self):
        for letter in ["N", "X", "", "LE"]:
            with pytest.raises(ValueError):
                Relation.from_letter(letter)

    def test_sign_and_str(self):
        self.assertEqual([r.sign for r in Relation], [-1, 0, 1])
        self.assertEqual([str(r) for r in Relation], ["<=", "==", ">="])


class TestConstraint(unittest.TestCase):

    def test_defaults(self):
        c = Constraint(3, Relation.EQUAL)
        self.assertEqual(c.id, 3)
        self.assertEqual(c.relation, Relation.EQUAL)
        self.assertEqual(c.rhs, 0)
        self.assertEqual(dict(c.coefficients), {})

    def test_rhs_in_constructor(self):
        c = Constraint(0, Relation.LESS_EQUAL, 4.5)
        self.assertEqual(c.rhs, 4.5)

    def test_missing_coefficient_is_zero(self):
        c = Constraint(0, Relation.LESS_EQUAL)
        c.add_coefficient("x", 2)
        self.assertEqual(c.coefficient("x"), 2.0)
        self.assertEqual(c.coefficient("y"), 0.0)
        self.assertEqual(c.coefficient(None), 0.0)

    def test_last_write_wins(self):
        c = Constraint(0, Relation.GREATER_EQUAL)
        c.add_coefficient("x", 2)
        c.add_coefficient("x", -7.5)
        self.assertEqual(c.coefficient("x"), -7.5)
        self.assertEqual(len(c.coefficients), 1)

        c.set_rhs(1)
        c.set_rhs(3)
        self.assertEqual(c.rhs, 3.0)

    def test_coefficients_read_only(self):
        c = Constraint(0, Relation.EQUAL)
        c.add_coefficient("x", 1)
        with pytest.raises(TypeError):
            c.coefficients["y"] = 2
