"""
Unit tests for the Future Value Interest Factor (FVIF), float track.

Covers input validation, every branch of the FVIF algorithm (zero periods,
zero interest factor, single period, negative periods) and the reciprocal
exponent law fvif(r, -n) = 1 / fvif(r, n).

Version: 0.1.0
Last Updated: 2026-10-19
Status: Active
"""

import math
import unittest
import warnings

import numpy as np

from simple_finance import InvalidInput, fvif, pvif

# =============================================================================
# Test Parameters
# =============================================================================

DECIMAL_PLACES_FOR_ASSERTIONS: int = 12  # decimal places for assertAlmostEqual

# Module-level shared data (populated by setUpModule)
TEST_SCENARIOS: list[dict[str, int | float]] = []


# =============================================================================
# Module Setup/Teardown
# =============================================================================

def setUpModule():
    """Build (rate, periods) scenarios for the reciprocal law."""
    rates = [0.001, 0.01, 0.05, 0.1, 0.25, -0.5, 2.0]
    periods = [2, 5, 12, 60, 360]
    for rate in rates:
        for n in periods:
            TEST_SCENARIOS.append({'rate': rate, 'periods': n})

    if not TEST_SCENARIOS:
        raise RuntimeError("setUpModule failed: No test scenarios were created")


def tearDownModule():
    """Clean up module-level data."""
    TEST_SCENARIOS.clear()


# =============================================================================
# Test Classes
# =============================================================================

class TestFVIFValidation(unittest.TestCase):
    """Type checks run before any computation."""

    def test_interest_rate_not_float(self):
        with self.assertRaises(InvalidInput) as cm:
            fvif('a string', 1)
        self.assertEqual(cm.exception.parameter, 'interest_rate')
        self.assertTrue(str(cm.exception).startswith('interest_rate is not float'))

    def test_interest_rate_int_rejected(self):
        with self.assertRaises(InvalidInput) as cm:
            fvif(1, 1)
        self.assertEqual(cm.exception.parameter, 'interest_rate')

    def test_interest_rate_bool_rejected(self):
        with self.assertRaises(InvalidInput):
            fvif(True, 1)

    def test_periods_not_int(self):
        with self.assertRaises(InvalidInput) as cm:
            fvif(1.0, 'a string')
        self.assertEqual(cm.exception.parameter, 'periods')
        self.assertTrue(str(cm.exception).startswith('periods is not int'))

    def test_periods_float_rejected(self):
        with self.assertRaises(InvalidInput) as cm:
            fvif(0.05, 12.0)
        self.assertEqual(cm.exception.parameter, 'periods')

    def test_periods_bool_rejected(self):
        with self.assertRaises(InvalidInput):
            fvif(0.05, True)

    def test_invalid_input_is_value_error(self):
        with self.assertRaises(ValueError):
            fvif('a string', 1)

    def test_numpy_scalars_accepted(self):
        self.assertAlmostEqual(fvif(np.float64(0.05), np.int64(2)), 1.1025,
                               places=DECIMAL_PLACES_FOR_ASSERTIONS)

    def test_non_finite_rate_rejected(self):
        for interest_rate in [float('nan'), float('inf'), float('-inf')]:
            with self.subTest(interest_rate=interest_rate):
                with self.assertRaises(InvalidInput) as cm:
                    fvif(interest_rate, 2)
                self.assertEqual(cm.exception.parameter, 'interest_rate')


class TestFVIFBranches(unittest.TestCase):
    """One test per branch of the algorithm."""

    def test_periods_equals_zero(self):
        self.assertEqual(fvif(1.0, 0), 1)
        self.assertEqual(fvif(0.05, 0), 1)
        self.assertEqual(fvif(-0.75, 0), 1)

    def test_periods_zero_with_rate_minus_one_is_unity(self):
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            self.assertEqual(fvif(-1.0, 0), 1)
        self.assertEqual(len(caught), 0)

    def test_interest_factor_zero(self):
        with self.assertWarns(UserWarning):
            self.assertEqual(fvif(-1.0, 1), 0.0)

    def test_interest_factor_zero_negative_periods(self):
        """The zero-factor check precedes the reciprocal, so no division by zero."""
        with self.assertWarns(UserWarning):
            self.assertEqual(fvif(-1.0, -3), 0.0)

    def test_periods_one(self):
        for interest_rate in [0.01, 0.05, 0.1, 0.25, 0.5]:
            with self.subTest(interest_rate=interest_rate):
                self.assertEqual(fvif(interest_rate, 1), interest_rate + 1)

    def test_known_values(self):
        # 1.05^10 and 1.01^12 (exact decimal expansions)
        self.assertAlmostEqual(fvif(0.05, 10), 1.62889462677744140625,
                               places=DECIMAL_PLACES_FOR_ASSERTIONS)
        self.assertAlmostEqual(fvif(0.01, 12), 1.126825030131969720661201,
                               places=DECIMAL_PLACES_FOR_ASSERTIONS)

    def test_negative_rate(self):
        self.assertEqual(fvif(-0.5, 2), 0.25)
        self.assertEqual(fvif(-0.5, -2), 4.0)

    def test_negative_interest_factor(self):
        self.assertEqual(fvif(-2.0, 3), -1.0)
        self.assertEqual(fvif(-3.0, -2), 0.25)

    def test_overflow_saturates_to_infinity(self):
        self.assertEqual(fvif(0.01, 100000), math.inf)
        self.assertEqual(fvif(-0.01, -100000), math.inf)
        self.assertEqual(fvif(-3.0, 100001), -math.inf)
        self.assertEqual(fvif(-3.0, 100000), math.inf)

    def test_underflow_to_zero(self):
        self.assertEqual(pvif(0.01, 100000), 0.0)


class TestFVIFReciprocalLaw(unittest.TestCase):
    """fvif(r, -n) * fvif(r, n) == 1 for r != -1."""

    def test_reciprocal_exponent(self):
        for scenario in TEST_SCENARIOS:
            rate = float(scenario['rate'])
            n = int(scenario['periods'])
            with self.subTest(rate=rate, periods=n):
                self.assertAlmostEqual(fvif(rate, -n) * fvif(rate, n), 1.0,
                                       places=DECIMAL_PLACES_FOR_ASSERTIONS)

    def test_negative_one_period_is_reciprocal(self):
        self.assertAlmostEqual(fvif(0.25, -1), 0.8, places=DECIMAL_PLACES_FOR_ASSERTIONS)


class TestPVIF(unittest.TestCase):
    """pvif is fvif in the discounting direction."""

    def test_pvif_equals_fvif_negative_periods(self):
        for scenario in TEST_SCENARIOS:
            rate = float(scenario['rate'])
            n = int(scenario['periods'])
            with self.subTest(rate=rate, periods=n):
                self.assertEqual(pvif(rate, n), fvif(rate, -n))

    def test_pvif_validation(self):
        with self.assertRaises(InvalidInput) as cm:
            pvif(0.05, '10')
        self.assertEqual(cm.exception.parameter, 'periods')
        with self.assertRaises(InvalidInput) as cm:
            pvif('0.05', 10)
        self.assertEqual(cm.exception.parameter, 'interest_rate')


if __name__ == '__main__':
    unittest.main()
