"""
Core math modules для bignum

Base-256 арифметика произвольной точности: digits, представление,
сложение/вычитание, два алгоритма умножения, два алгоритма деления и
возведение в степень по модулю.
"""

# Primitives
from bignum.core.math.primitives import (
    # Constants
    ACCUMULATOR_MAX,
    DIGIT_BASE,
    DIGIT_BITS,
    DIGIT_MAX,
    DIGIT_ONE,
    DIGIT_ZERO,
    # Types
    Accumulator,
    Digit,
)

# Representation, ordering, shifts, add/subtract
from bignum.core.math.big_number import BigNumber

# Multiplication
from bignum.core.math.multiplication import (
    karatsuba_multiply,
    multiply,
    schoolbook_multiply,
)

# Division
from bignum.core.math.division import (
    ReciprocalCache,
    divmod_numbers,
    newton_divmod,
    schoolbook_divmod,
)

# Modular exponentiation
from bignum.core.math.exponentiation import powmod

__all__ = [
    # Primitives: constants
    "ACCUMULATOR_MAX",
    "DIGIT_BASE",
    "DIGIT_BITS",
    "DIGIT_MAX",
    "DIGIT_ONE",
    "DIGIT_ZERO",
    # Primitives: types
    "Accumulator",
    "Digit",
    # BigNumber
    "BigNumber",
    # Multiplication
    "karatsuba_multiply",
    "multiply",
    "schoolbook_multiply",
    # Division
    "ReciprocalCache",
    "divmod_numbers",
    "newton_divmod",
    "schoolbook_divmod",
    # Modular exponentiation
    "powmod",
]
