# Requires Python 3.12+
# Uses native type hints: list[x], tuple[x, y], X | None (PEP 585, PEP 604)
from __future__ import annotations

import decimal
import warnings
from decimal import Decimal
from typing import Any

import numpy as np

from .arithmetic import (
    Arithmetic,
    FLOAT_ARITHMETIC,
    InvalidInput,
    decimal_arithmetic,
    to_decimal,
    validate_float,
    validate_float_array,
    validate_periods,
)

__version__ = "0.1.0"


# =============================================================================
# Future Value Interest Factor (FVIF)
# =============================================================================

def compound_factor(arithmetic: Arithmetic, interest_rate: Any, periods: int) -> Any:
    """
    FVIF over any Arithmetic. Inputs are assumed validated.

    Formula:
        FVIF(r, n) = (1 + r)^n

    Branches, in order:
        n == 0           -> 1 (no compounding)
        1 + r == 0       -> 0 (rate of exactly -100%)
        n == 1           -> 1 + r
        n < 0            -> (1 / (1 + r))^|n|
        otherwise        -> (1 + r)^n
    """
    if periods == 0:
        return arithmetic.one

    interest_factor = arithmetic.add(interest_rate, arithmetic.one)

    if arithmetic.is_zero(interest_factor):
        return arithmetic.zero

    if periods == 1:
        return interest_factor

    if periods < 0:
        periods = -periods
        interest_factor = arithmetic.divide(arithmetic.one, interest_factor)

    return arithmetic.power(interest_factor, periods)


def _warn_zero_interest_factor() -> None:
    warnings.warn("interest factor is zero (rate of -100%), returning zero FVIF")


def fvif(interest_rate: float, periods: int) -> float:
    """
    Future Value Interest Factor: the multiplier by which one unit grows over
    `periods` compounding periods at `interest_rate` per period.

    Negative periods discount instead of compound: fvif(r, -n) = 1 / fvif(r, n).

    Args:
        interest_rate: Per-period rate as decimal (e.g., 0.01 for 1%); must be a float
        periods: Number of compounding periods (may be zero or negative)

    Returns:
        Future value interest factor

    Raises:
        InvalidInput: If interest_rate is not a finite float
        InvalidInput: If periods is not an int
        Warning: If interest_rate is exactly -1.0 (returns 0.0)

    Example:
        >>> print(f"{fvif(0.05, 10):.8f}")
        1.62889463
        >>> fvif(0.05, 1)
        1.05
    """
    interest_rate = validate_float(interest_rate, "interest_rate")
    periods = validate_periods(periods)
    if periods != 0 and interest_rate + 1 == 0:
        _warn_zero_interest_factor()
    return compound_factor(FLOAT_ARITHMETIC, interest_rate, periods)


def decimal_fvif(
        interest_rate: Decimal | str | int,
        periods: int,
        *,
        context: decimal.Context | None = None
) -> Decimal:
    """
    FVIF computed in arbitrary-precision decimal arithmetic.

    Same branches as fvif(). Every intermediate is rounded by `context`
    (default: decimal_context(), 50 significant digits).

    Args:
        interest_rate: Per-period rate as Decimal, int or numeric string (floats refused)
        periods: Number of compounding periods (may be zero or negative)
        context: Decimal context to compute in

    Returns:
        Future value interest factor as Decimal

    Raises:
        InvalidInput: If interest_rate is not a decimal value
        InvalidInput: If periods is not an int
        Warning: If interest_rate is exactly -1 (returns 0)
    """
    rate = to_decimal(interest_rate, "interest_rate")
    periods = validate_periods(periods)
    arithmetic = decimal_arithmetic(context)
    if periods != 0 and arithmetic.is_zero(arithmetic.add(rate, arithmetic.one)):
        _warn_zero_interest_factor()
    return compound_factor(arithmetic, rate, periods)


# =============================================================================
# Present Value Interest Factor (PVIF)
# =============================================================================

def pvif(interest_rate: float, periods: int) -> float:
    """Present Value Interest Factor: fvif(interest_rate, -periods)."""
    periods = validate_periods(periods)
    return fvif(interest_rate, -periods)


def decimal_pvif(
        interest_rate: Decimal | str | int,
        periods: int,
        *,
        context: decimal.Context | None = None
) -> Decimal:
    """Present Value Interest Factor in decimal arithmetic."""
    periods = validate_periods(periods)
    return decimal_fvif(interest_rate, -periods, context=context)


# =============================================================================
# Vectorized FVIF
# =============================================================================

def fvif_vector(
        interest_rates: float | list[float] | np.ndarray,
        periods: int | list[int] | np.ndarray
) -> np.ndarray:
    """
    Vectorized FVIF. See fvif for details.

    interest_rates and periods broadcast against each other, so a single rate
    can be evaluated over a range of periods or a single period over a grid of
    rates.

    Args:
        interest_rates: Per-period rates as decimal. Any shape.
        periods: Integer period counts. Any shape broadcastable with interest_rates.

    Returns:
        Array of FVIF values with the broadcast shape.

    Raises:
        InvalidInput: If interest_rates is not a finite numeric array
        InvalidInput: If periods does not have an integer dtype

    Example:
        >>> fvif_vector([0.01, 0.05], 12)
        array([1.12682503, 1.79585633])
    """
    rates = validate_float_array(interest_rates, "interest_rates")
    periods_arr = np.asarray(periods)
    if periods_arr.dtype == bool or not np.issubdtype(periods_arr.dtype, np.integer):
        raise InvalidInput("periods", "int", periods)

    interest_factor = rates + 1.0
    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        # Reciprocal of the factor for negative periods, as in compound_factor
        base = np.where(periods_arr < 0, 1.0 / interest_factor, interest_factor)
        compounded = np.power(base, np.abs(periods_arr))
    result = np.where(interest_factor == 0.0, 0.0, compounded)
    return np.where(periods_arr == 0, 1.0, result)
