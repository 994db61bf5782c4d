"""
Primitives — Digit (8 bit) и Accumulator (16 bit)

Элементарные операции над base-256 digits. Любая операция, способная выйти
за пределы одного digit (add, subtract, multiply), расширяется до
Accumulator, который затем раскладывается на high/low digits (carry/borrow
и младший разряд результата).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Digit ∈ [0, 255], Accumulator ∈ [0, 65535]
2. Равенство только по значению (никакого identity cache)
3. 255 * 255 + 255 + 255 = 65535: multiply-accumulate с carry всегда
   помещается в Accumulator
"""

from dataclasses import dataclass
from typing import Final

from bignum.core.errors import DivisionByZeroError, InvalidArgumentError, InvalidHexError

# =============================================================================
# CONSTANTS
# =============================================================================

DIGIT_BITS: Final[int] = 8
DIGIT_BASE: Final[int] = 1 << DIGIT_BITS  # 256
DIGIT_MAX: Final[int] = DIGIT_BASE - 1  # 0xFF
ACCUMULATOR_MAX: Final[int] = (1 << (2 * DIGIT_BITS)) - 1  # 0xFFFF

HEX_DIGITS: Final[frozenset[str]] = frozenset("0123456789abcdefABCDEF")


def _ensure_int_in_range(value: object, max_value: int, kind: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError("int", value)
    if value < 0 or value > max_value:
        raise ValueError(f"{kind} value must be in [0, {max_value}], got {value}")
    return value


# =============================================================================
# DIGIT
# =============================================================================


@dataclass(frozen=True, order=True, slots=True)
class Digit:
    """
    8-bit unsigned digit (base 256).

    add / subtract / multiply возвращают Accumulator,
    AND / OR / XOR возвращают Digit.
    """

    value: int

    def __post_init__(self) -> None:
        _ensure_int_in_range(self.value, DIGIT_MAX, "Digit")

    @classmethod
    def from_hex(cls, hex_string: str) -> "Digit":
        """
        Digit из 1-2 hex символов ("7", "0a", "FF").

        Raises:
            InvalidHexError: если строка пустая, длиннее 2 символов или не hex
        """
        if not isinstance(hex_string, str) or not 1 <= len(hex_string) <= 2:
            raise InvalidHexError(f"Invalid hexadecimal digit string: {hex_string!r}")
        if any(ch not in HEX_DIGITS for ch in hex_string):
            raise InvalidHexError(f"Invalid hexadecimal digit string: {hex_string!r}")
        return cls(int(hex_string, 16))

    def to_hex(self) -> str:
        """Две заглавные hex цифры ("0A")."""
        return f"{self.value:02X}"

    def widen(self) -> "Accumulator":
        """Этот digit как Accumulator (zero-extended)."""
        return Accumulator(self.value)

    def __add__(self, other: "Digit") -> "Accumulator":
        _ensure_digit(other)
        return Accumulator(self.value + other.value)

    def __sub__(self, other: "Digit") -> "Accumulator":
        # Wraparound mod 65536: 0x00 - 0x01 = 0xFFFF
        _ensure_digit(other)
        return Accumulator((ACCUMULATOR_MAX + 1 + self.value - other.value) & ACCUMULATOR_MAX)

    def __mul__(self, other: "Digit") -> "Accumulator":
        _ensure_digit(other)
        return Accumulator(self.value * other.value)

    def __and__(self, other: "Digit") -> "Digit":
        _ensure_digit(other)
        return Digit(self.value & other.value)

    def __or__(self, other: "Digit") -> "Digit":
        _ensure_digit(other)
        return Digit(self.value | other.value)

    def __xor__(self, other: "Digit") -> "Digit":
        _ensure_digit(other)
        return Digit(self.value ^ other.value)

    def __bool__(self) -> bool:
        return self.value != 0

    def __repr__(self) -> str:
        return f"Digit(0x{self.to_hex()})"

    def __str__(self) -> str:
        return f"0x{self.to_hex()}"


DIGIT_ZERO: Final[Digit] = Digit(0)
DIGIT_ONE: Final[Digit] = Digit(1)
DIGIT_TWO: Final[Digit] = Digit(2)


def _ensure_digit(other: object) -> None:
    if not isinstance(other, Digit):
        raise InvalidArgumentError("Digit", other)


# =============================================================================
# ACCUMULATOR
# =============================================================================


@dataclass(frozen=True, order=True, slots=True)
class Accumulator:
    """
    16-bit unsigned промежуточное значение.

    Раскладывается на high (carry) и low (digit результата).
    Деление на Digit допустимо, только если частное помещается в Digit:
    вызывающий код обязан это гарантировать.
    """

    value: int

    def __post_init__(self) -> None:
        _ensure_int_in_range(self.value, ACCUMULATOR_MAX, "Accumulator")

    @classmethod
    def from_digits(cls, high: Digit, low: Digit) -> "Accumulator":
        """Accumulator = high * 256 + low."""
        _ensure_digit(high)
        _ensure_digit(low)
        return cls((high.value << DIGIT_BITS) | low.value)

    @property
    def high(self) -> Digit:
        """Старший digit (carry)."""
        return Digit(self.value >> DIGIT_BITS)

    @property
    def low(self) -> Digit:
        """Младший digit."""
        return Digit(self.value & DIGIT_MAX)

    def to_hex(self) -> str:
        return f"{self.value:04X}"

    def __add__(self, other: "Accumulator") -> "Accumulator":
        _ensure_accumulator(other)
        return Accumulator((self.value + other.value) & ACCUMULATOR_MAX)

    def __sub__(self, other: "Accumulator") -> "Accumulator":
        _ensure_accumulator(other)
        return Accumulator((self.value - other.value) & ACCUMULATOR_MAX)

    def __floordiv__(self, other: Digit) -> Digit:
        """
        Частное Accumulator / Digit.

        Raises:
            DivisionByZeroError: если other == 0
            ValueError: если частное не помещается в Digit
        """
        _ensure_digit(other)
        if other.value == 0:
            raise DivisionByZeroError("Accumulator division by a zero digit")
        quotient = self.value // other.value
        if quotient > DIGIT_MAX:
            raise ValueError(
                f"Quotient 0x{quotient:X} of 0x{self.to_hex()} / {other} does not fit in a digit"
            )
        return Digit(quotient)

    def __mod__(self, other: Digit) -> Digit:
        _ensure_digit(other)
        if other.value == 0:
            raise DivisionByZeroError("Accumulator modulo by a zero digit")
        return Digit(self.value % other.value)

    def __bool__(self) -> bool:
        return self.value != 0

    def __repr__(self) -> str:
        return f"Accumulator(0x{self.to_hex()})"

    def __str__(self) -> str:
        return f"0x{self.to_hex()}"


ACCUMULATOR_ZERO: Final[Accumulator] = Accumulator(0)
ACCUMULATOR_BASE: Final[Accumulator] = Accumulator(DIGIT_BASE)  # 0x0100


def _ensure_accumulator(other: object) -> None:
    if not isinstance(other, Accumulator):
        raise InvalidArgumentError("Accumulator", other)
