"""
bignum — base-256 арифметика произвольной точности и RSA расшифровка.

Основные точки входа:
    BigNumber.from_hex / BigNumber.to_hex
    +, -, *, //, %, <<, >>, сравнения
    BigNumber.powmod / pow(base, exponent, modulus)
"""

from bignum.core.config import (
    DEFAULT_FAST_DIVIDE_THRESHOLD,
    DEFAULT_FAST_MULTIPLY_THRESHOLD,
    ArithmeticConfig,
    get_default_config,
    set_default_config,
)
from bignum.core.errors import (
    BigNumError,
    DivisionByZeroError,
    ImageFormatError,
    InvalidArgumentError,
    InvalidHexError,
    InvalidKeyError,
    InvalidWidthError,
)
from bignum.core.math import (
    Accumulator,
    BigNumber,
    Digit,
    ReciprocalCache,
    divmod_numbers,
    karatsuba_multiply,
    multiply,
    newton_divmod,
    powmod,
    schoolbook_divmod,
    schoolbook_multiply,
)
from bignum.rsa import EncryptedImage, RsaKey

__all__ = [
    # Config
    "DEFAULT_FAST_DIVIDE_THRESHOLD",
    "DEFAULT_FAST_MULTIPLY_THRESHOLD",
    "ArithmeticConfig",
    "get_default_config",
    "set_default_config",
    # Errors
    "BigNumError",
    "DivisionByZeroError",
    "ImageFormatError",
    "InvalidArgumentError",
    "InvalidHexError",
    "InvalidKeyError",
    "InvalidWidthError",
    # Core math
    "Accumulator",
    "BigNumber",
    "Digit",
    "ReciprocalCache",
    "divmod_numbers",
    "karatsuba_multiply",
    "multiply",
    "newton_divmod",
    "powmod",
    "schoolbook_divmod",
    "schoolbook_multiply",
    # RSA
    "EncryptedImage",
    "RsaKey",
]
