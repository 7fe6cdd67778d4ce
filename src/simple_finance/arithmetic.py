# Requires Python 3.12+
# Uses native type hints: list[x], tuple[x, y], X | None (PEP 585, PEP 604)
from __future__ import annotations

import decimal
import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Callable

import numpy as np

__version__ = "0.1.0"


# =============================================================================
# Configuration
# =============================================================================

MONTHS_PER_YEAR: int = 12

# Significant digits carried by the default decimal context
DEFAULT_DECIMAL_PRECISION: int = 50


def decimal_context(precision: int = DEFAULT_DECIMAL_PRECISION) -> decimal.Context:
    """
    Build the decimal context used by the arbitrary-precision track.

    The context traps division by zero, invalid operations and overflow so that
    a bad intermediate never degrades silently into NaN or Infinity.

    Args:
        precision: Significant digits kept by every operation (default 50)

    Returns:
        A fresh decimal.Context (ROUND_HALF_EVEN)

    Raises:
        ValueError: If precision is not positive
    """
    if precision <= 0:
        raise ValueError(f"precision must be positive, got {precision}")
    return decimal.Context(
        prec=precision,
        rounding=decimal.ROUND_HALF_EVEN,
        traps=[decimal.DivisionByZero, decimal.InvalidOperation, decimal.Overflow],
    )


# =============================================================================
# Errors
# =============================================================================

class InvalidInput(ValueError):
    """
    An argument has the wrong type for its precision track.

    The offending argument name is kept on `parameter` so callers can report it
    without parsing the message.
    """

    def __init__(self, parameter: str, expected: str, value: Any) -> None:
        self.parameter = parameter
        self.expected = expected
        super().__init__(f"{parameter} is not {expected}, got {type(value).__name__}")


class DomainError(ZeroDivisionError):
    """A payment calculation would divide by zero."""


# =============================================================================
# Input validation
# =============================================================================

def validate_float(value: Any, parameter: str) -> float:
    """Require a genuine, finite float (bool, int, str, NaN and inf are rejected)."""
    if not isinstance(value, float):
        raise InvalidInput(parameter, "float", value)
    if not math.isfinite(value):
        raise InvalidInput(parameter, "a finite float", value)
    return value


def validate_float_array(values: Any, parameter: str) -> np.ndarray:
    """
    Coerce a rate array (integer or floating dtype) to float.

    Strings, bools and objects are rejected by dtype before any conversion, so
    "0.05" is an error here just as it is for the scalar functions.

    Raises:
        InvalidInput: If the dtype is not integer or floating, or any element is NaN or inf
    """
    array = np.asarray(values)
    if array.dtype == bool or not (np.issubdtype(array.dtype, np.integer)
                                   or np.issubdtype(array.dtype, np.floating)):
        raise InvalidInput(parameter, "a numeric array", values)
    array = array.astype(float)
    if not np.all(np.isfinite(array)):
        raise InvalidInput(parameter, "a finite numeric array", values)
    return array


def validate_periods(value: Any, parameter: str = "periods") -> int:
    """Require a genuine integer period count (bool is rejected)."""
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise InvalidInput(parameter, "int", value)
    return int(value)


def to_decimal(value: Any, parameter: str) -> Decimal:
    """
    Convert a rate or amount to Decimal without losing precision.

    Accepts Decimal, int and numeric strings. Floats are refused: a float has
    already been rounded to binary, and converting it would smuggle that error
    into the decimal track.

    Raises:
        InvalidInput: If value is a float, bool, malformed string or other type
    """
    if isinstance(value, bool) or isinstance(value, float):
        raise InvalidInput(parameter, "a decimal value", value)
    if isinstance(value, Decimal):
        converted = value
    elif isinstance(value, (int, np.integer)):
        converted = Decimal(int(value))
    elif isinstance(value, str):
        try:
            converted = Decimal(value.strip())
        except decimal.InvalidOperation as e:
            raise InvalidInput(parameter, "a decimal literal", value) from e
    else:
        raise InvalidInput(parameter, "a decimal value", value)
    if not converted.is_finite():
        raise InvalidInput(parameter, "a finite decimal", value)
    return converted


# =============================================================================
# Numeric capability sets
# =============================================================================
#
# FVIF and PMT are written once against an Arithmetic instance. The float track
# uses Python operators; the decimal track uses the bound methods of a
# decimal.Context, so every intermediate is rounded to the context precision.
# =============================================================================

@dataclass(frozen=True)
class Arithmetic:
    """
    The operations the time-value-of-money algorithms need from a number type.

    compare(a, b) returns -1, 0 or 1.
    """
    name: str
    zero: Any
    one: Any
    add: Callable[[Any, Any], Any]
    subtract: Callable[[Any, Any], Any]
    multiply: Callable[[Any, Any], Any]
    divide: Callable[[Any, Any], Any]
    power: Callable[[Any, int], Any]
    compare: Callable[[Any, Any], int]

    def is_zero(self, value: Any) -> bool:
        return self.compare(value, self.zero) == 0

    def negate(self, value: Any) -> Any:
        return self.subtract(self.zero, value)


def _compare_floats(a: float, b: float) -> int:
    if a < b:
        return -1
    if a > b:
        return 1
    if a == b:
        return 0
    # NaN is unordered
    raise ValueError(f"cannot compare {a!r} with {b!r}")


def _power_floats(base: float, exponent: int) -> float:
    try:
        return base ** exponent
    except OverflowError:
        # Saturate to infinity as np.power does; odd powers keep the sign of the base
        return math.copysign(math.inf, base) if exponent % 2 else math.inf


FLOAT_ARITHMETIC = Arithmetic(
    name="float",
    zero=0.0,
    one=1.0,
    add=lambda a, b: a + b,
    subtract=lambda a, b: a - b,
    multiply=lambda a, b: a * b,
    divide=lambda a, b: a / b,
    power=_power_floats,
    compare=_compare_floats,
)


def decimal_arithmetic(context: decimal.Context | None = None) -> Arithmetic:
    """
    Arithmetic backed by a decimal.Context.

    Args:
        context: Context to compute in (default: decimal_context())

    Returns:
        Arithmetic whose operations round to the context precision
    """
    if context is None:
        context = decimal_context()
    return Arithmetic(
        name=f"decimal(prec={context.prec})",
        zero=Decimal(0),
        one=Decimal(1),
        add=context.add,
        subtract=context.subtract,
        multiply=context.multiply,
        divide=context.divide,
        power=context.power,
        compare=lambda a, b: int(context.compare(a, b)),
    )
