"""
Domain models and value objects.

Contains the numeric contracts (Numeric, Rational) and the fixed-width
rational number kind (LongRational) with its shared constants.
"""

from src.core.domain.long_rational import ONE, ZERO, LongRational, make_rational
from src.core.domain.numeric import Numeric
from src.core.domain.rational import Rational

__all__ = [
    # Contracts
    "Numeric",
    "Rational",
    # Fixed-width rational
    "LongRational",
    "make_rational",
    "ZERO",
    "ONE",
]
