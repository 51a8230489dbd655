import unittest
import io
from contextlib import redirect_stdout

from bignum.bigrat import BigRat
from bignum.errors import DivisionByZero

from calc import run_power


class TestCalc(unittest.TestCase):

    def test_run_power(self):
        out = io.StringIO()
        with redirect_stdout(out):
            result = run_power(BigRat.parse('2'), BigRat.parse('64'))
        self.assertEqual(result, BigRat(2**64))
        self.assertEqual(out.getvalue(), '18446744073709551616\n')

    def test_fraction_output(self):
        out = io.StringIO()
        with redirect_stdout(out):
            run_power(BigRat.parse('-2/3'), BigRat.parse('-3'))
        self.assertEqual(out.getvalue().splitlines(), ['-27/8', 'numer: -27', 'denom: 8'])

    def test_failure(self):
        with self.assertRaises(DivisionByZero):
            run_power(BigRat.parse('0'), BigRat.parse('-1'))
