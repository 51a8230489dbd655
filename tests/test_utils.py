import unittest

from bignum.utils import int_pow, int_root, trunc_divmod, round_half_away
from bignum.errors import DivisionByZero


class TestUtils(unittest.TestCase):

    def test_int_pow(self):
        for base in range(-5, 6):
            for exp in range(0, 20):
                self.assertEqual(int_pow(base, exp), base ** exp)
        self.assertEqual(int_pow(1, 2**64), 1)
        self.assertEqual(int_pow(-1, 2**63 - 1), -1)
        self.assertEqual(int_pow(-1, 2**64), 1)
        self.assertEqual(int_pow(0, 2**63), 0)
        self.assertEqual(int_pow(2, 64), 18446744073709551616)

    def test_int_root(self):
        self.assertEqual(int_root(0, 2), 0)
        self.assertEqual(int_root(1, 3), 1)
        self.assertEqual(int_root(144, 2), 12)
        self.assertEqual(int_root(3**60, 3), 3**20)
        self.assertIsNone(int_root(2, 2))
        self.assertIsNone(int_root(10**20 + 1, 2))
        self.assertIsNone(int_root(9, 3))

    def test_trunc_divmod(self):
        self.assertEqual(trunc_divmod(7, 2), (3, 1))
        self.assertEqual(trunc_divmod(-7, 2), (-3, -1))
        self.assertEqual(trunc_divmod(7, -2), (-3, 1))
        self.assertEqual(trunc_divmod(-7, -2), (3, -1))
        with self.assertRaises(DivisionByZero):
            trunc_divmod(1, 0)

    def test_round_half_away(self):
        self.assertEqual(round_half_away(5, 2), 3)
        self.assertEqual(round_half_away(-5, 2), -3)
        self.assertEqual(round_half_away(7, 3), 2)
        self.assertEqual(round_half_away(-8, 3), -3)
        self.assertEqual(round_half_away(0, 1), 0)
