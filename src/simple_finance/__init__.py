# Requires Python 3.12+
"""
Simple Finance — time-value-of-money factors and level payments.

Future Value Interest Factor (FVIF) and Regular Payment at Regular Interval
(PMT), each in a float track and an arbitrary-precision decimal track.
"""

from __future__ import annotations

__version__ = "0.1.0"

# Arithmetic, errors and configuration
from simple_finance.arithmetic import (
    MONTHS_PER_YEAR,
    DEFAULT_DECIMAL_PRECISION,
    Arithmetic,
    FLOAT_ARITHMETIC,
    decimal_arithmetic,
    decimal_context,
    InvalidInput,
    DomainError,
)

# Interest factors
from simple_finance.interest_factors import (
    fvif,
    decimal_fvif,
    pvif,
    decimal_pvif,
    fvif_vector,
)

# Payments
from simple_finance.payments import (
    UNIT_PRINCIPAL_PRESENT_VALUE,
    pmt,
    decimal_pmt,
    payment,
    decimal_payment,
    pmt_vector,
    implied_rate,
)

__all__ = [
    "__version__",
    # Arithmetic
    "MONTHS_PER_YEAR",
    "DEFAULT_DECIMAL_PRECISION",
    "Arithmetic",
    "FLOAT_ARITHMETIC",
    "decimal_arithmetic",
    "decimal_context",
    "InvalidInput",
    "DomainError",
    # Interest factors
    "fvif",
    "decimal_fvif",
    "pvif",
    "decimal_pvif",
    "fvif_vector",
    # Payments
    "UNIT_PRINCIPAL_PRESENT_VALUE",
    "pmt",
    "decimal_pmt",
    "payment",
    "decimal_payment",
    "pmt_vector",
    "implied_rate",
]
