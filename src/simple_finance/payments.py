# Requires Python 3.12+
# Uses native type hints: list[x], tuple[x, y], X | None (PEP 585, PEP 604)
from __future__ import annotations

import decimal
import warnings
from decimal import Decimal
from typing import Any

import numpy as np
from scipy.optimize import brentq

from .arithmetic import (
    MONTHS_PER_YEAR,
    Arithmetic,
    DomainError,
    FLOAT_ARITHMETIC,
    decimal_arithmetic,
    to_decimal,
    validate_float,
    validate_float_array,
    validate_periods,
)
from .interest_factors import compound_factor, fvif_vector

__version__ = "0.1.0"

# Present value assumed by payment() and decimal_payment(): -1 * [principal] = -25.
# This is a fixed unit-principal convention, not a general-purpose parameter.
UNIT_PRINCIPAL_PRESENT_VALUE: int = -25


# =============================================================================
# Regular Payment at Regular Interval (PMT)
# =============================================================================

def level_payment(
        arithmetic: Arithmetic,
        interest_rate: Any,
        periods: int,
        present_value: Any,
        future_value: Any
) -> Any:
    """
    PMT over any Arithmetic. Inputs are assumed validated.

    The level payment per period that takes present_value to future_value over
    `periods` periods at `interest_rate` per period (cash-flow sign convention:
    money received is positive, money paid out is negative).

    Formula:
        r == 0:   PMT = -(FV + PV) / n
        r != 0:   PMT = -[(PV + FV) / (FVIF(r, n) - 1) + PV] × r

    The r != 0 form is the usual annuity formula rearranged:
        PV × FVIF + PMT × (FVIF - 1) / r + FV = 0

    Raises:
        DomainError: If r == 0 and n == 0
        DomainError: If FVIF(r, n) == 1 for r != 0 (always the case when n == 0)
    """
    if arithmetic.is_zero(interest_rate):
        if periods == 0:
            raise DomainError("periods is zero with a zero interest_rate; straight-line payment is undefined")
        total = arithmetic.add(future_value, present_value)
        return arithmetic.negate(arithmetic.divide(total, periods))

    numerator = arithmetic.add(present_value, future_value)
    denominator = arithmetic.subtract(compound_factor(arithmetic, interest_rate, periods), arithmetic.one)
    if arithmetic.is_zero(denominator):
        raise DomainError(
            f"FVIF - 1 is zero for interest_rate={interest_rate}, periods={periods}; payment is undefined"
        )

    pmt_value = arithmetic.divide(numerator, denominator)
    pmt_value = arithmetic.add(pmt_value, present_value)
    pmt_value = arithmetic.multiply(pmt_value, interest_rate)
    return arithmetic.negate(pmt_value)


def _warn_straight_line() -> None:
    warnings.warn("interest_rate is zero, returning straight-line amortization")


def pmt(
        interest_rate: float,
        periods: int,
        present_value: float,
        future_value: float = 0.0
) -> float:
    """
    Regular Payment at Regular Interval (PMT).

    Args:
        interest_rate: Per-period rate as decimal (e.g., 0.01 for 1%); must be a float
        periods: Number of payment periods
        present_value: Value at the start (e.g., -25.0 for a 25 unit loan received)
        future_value: Value at the end (default 0.0, fully amortized)

    Returns:
        Payment per period

    Raises:
        InvalidInput: If interest_rate is not a finite float
        InvalidInput: If periods is not an int
        DomainError: If the payment would divide by zero (see level_payment)
        Warning: If interest_rate is zero

    Example (1% monthly, 12 months, 25 borrowed):
        >>> print(f"{pmt(0.01, 12, -25.0, 0.0):.4f}")
        2.2212
    """
    interest_rate = validate_float(interest_rate, "interest_rate")
    periods = validate_periods(periods)
    if interest_rate == 0:
        _warn_straight_line()
    return level_payment(FLOAT_ARITHMETIC, interest_rate, periods, present_value, future_value)


def decimal_pmt(
        interest_rate: Decimal | str | int,
        periods: int,
        present_value: Decimal | str | int,
        future_value: Decimal | str | int = 0,
        *,
        context: decimal.Context | None = None
) -> Decimal:
    """
    PMT computed in arbitrary-precision decimal arithmetic. See pmt.

    Args:
        interest_rate: Per-period rate as Decimal, int or numeric string (floats refused)
        periods: Number of payment periods
        present_value: Value at the start, as a decimal value
        future_value: Value at the end, as a decimal value (default 0)
        context: Decimal context to compute in (default: decimal_context())

    Returns:
        Payment per period as Decimal

    Raises:
        InvalidInput: If any monetary or rate argument is not a decimal value
        InvalidInput: If periods is not an int
        DomainError: If the payment would divide by zero
        Warning: If interest_rate is zero
    """
    rate = to_decimal(interest_rate, "interest_rate")
    periods = validate_periods(periods)
    pv = to_decimal(present_value, "present_value")
    fv = to_decimal(future_value, "future_value")
    arithmetic = decimal_arithmetic(context)
    if arithmetic.is_zero(rate):
        _warn_straight_line()
    return level_payment(arithmetic, rate, periods, pv, fv)


# =============================================================================
# Loan payment convenience wrappers
# =============================================================================

def payment(annual_interest_rate: float, months: int) -> float:
    """
    Monthly payment on the unit-principal convention.

    Converts the annual rate to a monthly rate (÷ 12) and returns
    pmt(monthly_rate, months, UNIT_PRINCIPAL_PRESENT_VALUE, 0).

    Example:
        >>> payment(0.12, 12) == pmt(0.12 / 12, 12, -25, 0)
        True
    """
    annual_interest_rate = validate_float(annual_interest_rate, "annual_interest_rate")
    months = validate_periods(months, "months")
    interest_rate = annual_interest_rate / MONTHS_PER_YEAR
    return pmt(interest_rate, months, UNIT_PRINCIPAL_PRESENT_VALUE, 0)


def decimal_payment(
        annual_interest_rate: Decimal | str | int,
        months: int,
        *,
        context: decimal.Context | None = None
) -> Decimal:
    """Decimal counterpart of payment(); the monthly rate is divided in `context`."""
    annual_rate = to_decimal(annual_interest_rate, "annual_interest_rate")
    months = validate_periods(months, "months")
    arithmetic = decimal_arithmetic(context)
    interest_rate = arithmetic.divide(annual_rate, MONTHS_PER_YEAR)
    return decimal_pmt(interest_rate, months, UNIT_PRINCIPAL_PRESENT_VALUE, 0, context=context)


# =============================================================================
# Vectorized PMT
# =============================================================================

def pmt_vector(
        interest_rates: float | list[float] | np.ndarray,
        periods: int,
        present_value: float,
        future_value: float = 0.0
) -> np.ndarray:
    """
    Vectorized PMT over a grid of per-period rates. See pmt for details.

    Zero rates take the straight-line branch element-wise; no warning is issued.

    Args:
        interest_rates: Per-period rates as decimal. Any shape.
        periods: Number of payment periods (scalar int)
        present_value: Value at the start
        future_value: Value at the end (default 0.0)

    Returns:
        Array of payments, same shape as interest_rates.

    Raises:
        InvalidInput: If interest_rates is not a finite numeric array
        InvalidInput: If periods is not an int
        DomainError: If periods is zero, or any non-zero rate has FVIF - 1 == 0
    """
    rates = validate_float_array(interest_rates, "interest_rates")
    periods = validate_periods(periods)
    if periods == 0:
        raise DomainError("periods is zero; payment is undefined")

    denominator = fvif_vector(rates, periods) - 1.0
    zero_rate = rates == 0.0
    if np.any(~zero_rate & (denominator == 0.0)):
        raise DomainError(f"FVIF - 1 is zero for a non-zero rate at periods={periods}; payment is undefined")

    total = present_value + future_value
    with np.errstate(divide='ignore', invalid='ignore'):
        general = -((total / denominator) + present_value) * rates
    straight_line = -total / periods
    return np.where(zero_rate, straight_line, general)


# =============================================================================
# Implied rate
# =============================================================================

def implied_rate(
        periods: int,
        payment_amount: float,
        present_value: float,
        future_value: float = 0.0,
        *,
        lower: float = -0.99,
        upper: float = 1.0,
        tolerance: float = 1e-12,
        max_iterations: int = 100
) -> float:
    """
    Solve for the per-period rate at which pmt() equals payment_amount.

    Uses Brent's method (scipy.optimize.brentq) on

        f(r) = PMT(r, n, PV, FV) - payment_amount

    over [lower, upper]. f must change sign over the bracket; for a borrower
    (PV < 0, FV = 0) PMT increases with r, so the default bracket covers rates
    from -99% to +100% per period.

    Args:
        periods: Number of payment periods
        payment_amount: Observed payment per period
        present_value: Value at the start
        future_value: Value at the end (default 0.0)
        lower: Lower end of the rate bracket
        upper: Upper end of the rate bracket
        tolerance: Absolute convergence tolerance on the rate
        max_iterations: Maximum iterations for Brent's method

    Returns:
        Per-period rate as decimal

    Raises:
        InvalidInput: If periods is not an int
        DomainError: If periods is zero
        ValueError: If no rate in [lower, upper] reproduces payment_amount, or the
            solver does not converge within max_iterations

    Example:
        >>> amount = pmt(0.01, 12, -25.0, 0.0)
        >>> print(f"{implied_rate(12, amount, -25.0):.6f}")
        0.010000
    """
    periods = validate_periods(periods)
    if periods == 0:
        raise DomainError("periods is zero; no rate can be implied")

    def objective(
            rate: float,
            periods: int,
            payment_amount: float,
            present_value: float,
            future_value: float,
    ) -> float:
        """Objective: projected payment - observed payment."""
        return level_payment(FLOAT_ARITHMETIC, rate, periods, present_value, future_value) - payment_amount

    try:
        return brentq(
            objective,
            lower, upper,
            args=(periods, payment_amount, present_value, future_value),
            xtol=tolerance,
            maxiter=max_iterations
        )
    except (ValueError, RuntimeError) as e:
        # brentq raises ValueError if f(lower) and f(upper) share a sign,
        # RuntimeError if it does not converge within max_iterations
        raise ValueError(
            f"Could not find an interest rate for the given payment. "
            f"periods: {periods}, payment_amount: {payment_amount}, "
            f"present_value: {present_value}, future_value: {future_value}, "
            f"bracket: [{lower}, {upper}]. "
            f"Original error: {e}"
        ) from e
