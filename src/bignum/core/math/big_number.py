"""
BigNumber — беззнаковое целое произвольной длины (base 256)

Представление: tuple[Digit, ...] little-endian (index 0 = младший digit).

Модуль содержит представление, hex I/O, сравнение, digit shifts,
сложение и вычитание. Умножение, деление и возведение в степень по модулю
живут в отдельных модулях; операторы BigNumber делегируют туда.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Длина >= 1 (ноль = один нулевой digit)
2. BigNumber immutable: арифметика всегда строит новый экземпляр
3. Старшие нулевые digits допустимы (width влияет на вычитание), но никогда
   не влияют на сравнение, равенство и hash
4. Результаты +, -, *, //, % всегда normalized
5. Вычитание a - b при a < b даёт wraparound по модулю 256**width
"""

from collections.abc import Iterable
from typing import TYPE_CHECKING, Final

from bignum.core.errors import InvalidArgumentError, InvalidHexError, InvalidWidthError
from bignum.core.math.primitives import (
    ACCUMULATOR_ZERO,
    DIGIT_ONE,
    DIGIT_ZERO,
    HEX_DIGITS,
    Digit,
)

if TYPE_CHECKING:
    from bignum.core.config import ArithmeticConfig

# Сколько hex символов кодирует один digit
HEX_CHARS_PER_DIGIT: Final[int] = 2


def ensure_big_number(*operands: object) -> None:
    """InvalidArgumentError, если хотя бы один операнд не BigNumber."""
    for operand in operands:
        if not isinstance(operand, BigNumber):
            raise InvalidArgumentError("BigNumber", operand)


def _ensure_digit_count(value: object, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError("int", value)
    if value < 0:
        raise InvalidWidthError(f"{name} cannot be negative, got {value}")
    return value


def _trim(digits: tuple[Digit, ...]) -> tuple[Digit, ...]:
    end = len(digits)
    while end > 1 and digits[end - 1] == DIGIT_ZERO:
        end -= 1
    return digits if end == len(digits) else digits[:end]


class BigNumber:
    """
    Беззнаковое целое как последовательность base-256 digits.

    Создание:
        BigNumber(digits, width)  — digits little-endian, width = мин. длина
        BigNumber.zero(width)     — 0 шириной >= width digits
        BigNumber.one(width)      — 1 шириной >= width digits
        BigNumber.from_hex("1A2B")

    Examples:
        >>> (BigNumber.from_hex("1234") + BigNumber.from_hex("5678")).to_hex()
        '68AC'
        >>> (BigNumber.zero() - BigNumber.one(4)).to_hex()
        'FFFFFFFF'
    """

    __slots__ = ("_digits",)

    def __init__(self, digits: Iterable[Digit] = (), width: int | None = None) -> None:
        """
        Args:
            digits: Digits little-endian (копируются)
            width: Минимальное число digits; недостающие старшие digits = 0

        Raises:
            InvalidArgumentError: если элемент digits не Digit или width не int
            InvalidWidthError: если width < 0
        """
        digit_tuple = tuple(digits)
        for digit in digit_tuple:
            if not isinstance(digit, Digit):
                raise InvalidArgumentError("Digit", digit)

        if width is None:
            width = len(digit_tuple)
        else:
            _ensure_digit_count(width, "BigNumber width")

        width = max(width, 1)
        if len(digit_tuple) < width:
            digit_tuple += (DIGIT_ZERO,) * (width - len(digit_tuple))

        self._digits = digit_tuple

    @classmethod
    def _wrap(cls, digits: tuple[Digit, ...]) -> "BigNumber":
        # Внутренний конструктор без валидации: digits уже проверены
        instance = object.__new__(cls)
        instance._digits = digits if digits else (DIGIT_ZERO,)
        return instance

    # =========================================================================
    # CONSTRUCTION
    # =========================================================================

    @classmethod
    def zero(cls, width: int = 1) -> "BigNumber":
        """Число 0 шириной не меньше width digits."""
        return cls((), width)

    @classmethod
    def one(cls, width: int = 1) -> "BigNumber":
        """Число 1 шириной не меньше width digits."""
        _ensure_digit_count(width, "BigNumber width")
        return cls((DIGIT_ONE,), width)

    @classmethod
    def from_hex(cls, hex_string: str) -> "BigNumber":
        """
        Разбор hex строки (без знака и префикса, регистр любой).

        Символы группируются парами справа (от младшего разряда); при
        нечётной длине самый левый символ образует отдельный digit.
        Число digits результата = ceil(len(hex_string) / 2), старшие нули
        сохраняются.

        Raises:
            InvalidHexError: пустая строка, не str, или символ вне 0-9a-fA-F

        Examples:
            >>> BigNumber.from_hex("123").digits
            (Digit(0x23), Digit(0x01))
        """
        if not isinstance(hex_string, str):
            raise InvalidHexError(
                f"Expected a hexadecimal string, got {type(hex_string).__name__}"
            )
        if not hex_string:
            raise InvalidHexError("Hexadecimal string cannot be empty")

        invalid = sorted({ch for ch in hex_string if ch not in HEX_DIGITS})
        if invalid:
            raise InvalidHexError(
                f"Invalid hexadecimal string {hex_string!r}: unexpected characters {invalid}"
            )

        digits = []
        end = len(hex_string)
        while end > 0:
            start = max(end - HEX_CHARS_PER_DIGIT, 0)
            digits.append(Digit.from_hex(hex_string[start:end]))
            end = start

        return cls._wrap(tuple(digits))

    # =========================================================================
    # REPRESENTATION
    # =========================================================================

    @property
    def digits(self) -> tuple[Digit, ...]:
        """Digits little-endian, включая старшие нули."""
        return self._digits

    @property
    def width(self) -> int:
        """Число digits, включая старшие нули."""
        return len(self._digits)

    @property
    def is_normalized(self) -> bool:
        """False, если есть хотя бы один старший нулевой digit."""
        return len(self._digits) == 1 or self._digits[-1] != DIGIT_ZERO

    @property
    def is_zero(self) -> bool:
        return all(digit == DIGIT_ZERO for digit in self._digits)

    def normalize(self) -> "BigNumber":
        """Копия без старших нулевых digits (минимум один digit)."""
        if self.is_normalized:
            return self
        return BigNumber._wrap(_trim(self._digits))

    def to_hex(self) -> str:
        """
        Заглавный hex normalized значения, старший байт первым.

        Минимум 2 символа: ноль → "00".
        """
        return "".join(digit.to_hex() for digit in reversed(_trim(self._digits)))

    def __str__(self) -> str:
        return f"0x{self.to_hex()}"

    def __repr__(self) -> str:
        return f"BigNumber(0x{self.to_hex()}, {len(self._digits)} digits)"

    def __bool__(self) -> bool:
        return not self.is_zero

    # =========================================================================
    # ORDERING
    # =========================================================================

    def _compare(self, other: "BigNumber") -> int:
        # Чистое чтение: операнды не мутируются
        left = _trim(self._digits)
        right = _trim(other._digits)

        if len(left) != len(right):
            return -1 if len(left) < len(right) else 1

        for i in range(len(left) - 1, -1, -1):
            if left[i] != right[i]:
                return -1 if left[i] < right[i] else 1

        return 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BigNumber):
            return NotImplemented
        return self._compare(other) == 0

    def __hash__(self) -> int:
        return hash(_trim(self._digits))

    def __lt__(self, other: "BigNumber") -> bool:
        ensure_big_number(other)
        return self._compare(other) < 0

    def __le__(self, other: "BigNumber") -> bool:
        ensure_big_number(other)
        return self._compare(other) <= 0

    def __gt__(self, other: "BigNumber") -> bool:
        ensure_big_number(other)
        return self._compare(other) > 0

    def __ge__(self, other: "BigNumber") -> bool:
        ensure_big_number(other)
        return self._compare(other) >= 0

    # =========================================================================
    # SHIFTS (в digits, не в битах)
    # =========================================================================

    def __lshift__(self, count: int) -> "BigNumber":
        """Умножение на 256**count: count нулевых digits снизу."""
        _ensure_digit_count(count, "Shift count")
        return BigNumber._wrap((DIGIT_ZERO,) * count + self._digits)

    def __rshift__(self, count: int) -> "BigNumber":
        """Целочисленное деление на 256**count; count >= width → ноль."""
        _ensure_digit_count(count, "Shift count")
        if count >= len(self._digits):
            return BigNumber.zero()
        return BigNumber._wrap(self._digits[count:])

    # =========================================================================
    # ADD / SUBTRACT
    # =========================================================================

    def __add__(self, other: "BigNumber") -> "BigNumber":
        """
        Сумма с carry через Accumulator.

        Ширина результата = max(width) + 1 (место под финальный carry),
        результат normalized.
        """
        ensure_big_number(other)
        left, right = self._digits, other._digits
        width = max(len(left), len(right)) + 1

        result = []
        carry = DIGIT_ZERO
        for i in range(width):
            x = left[i] if i < len(left) else DIGIT_ZERO
            y = right[i] if i < len(right) else DIGIT_ZERO
            word = (x + y) + carry.widen()
            result.append(word.low)
            carry = word.high

        return BigNumber._wrap(_trim(tuple(result)))

    def __sub__(self, other: "BigNumber") -> "BigNumber":
        """
        Разность с borrow, ширина результата = max(width).

        При self < other результат — wraparound по модулю 256**width
        (0 - 1 на ширине 1 = FF, на ширине 4 = FFFFFFFF). Для знаковой
        разности вызывающий обязан сравнить операнды заранее.
        """
        ensure_big_number(other)
        left, right = self._digits, other._digits
        width = max(len(left), len(right))

        result = []
        borrow = DIGIT_ZERO
        for i in range(width):
            x = left[i].widen() if i < len(left) else ACCUMULATOR_ZERO
            y = right[i] + borrow if i < len(right) else borrow.widen()
            result.append((x - y).low)
            borrow = DIGIT_ONE if x < y else DIGIT_ZERO

        return BigNumber._wrap(_trim(tuple(result)))

    # =========================================================================
    # MULTIPLY / DIVIDE / POWMOD (делегирование)
    # =========================================================================

    def __mul__(self, other: "BigNumber") -> "BigNumber":
        from bignum.core.math.multiplication import multiply

        ensure_big_number(other)
        return multiply(self, other)

    def __divmod__(self, other: "BigNumber") -> tuple["BigNumber", "BigNumber"]:
        from bignum.core.math.division import divmod_numbers

        ensure_big_number(other)
        return divmod_numbers(self, other)

    def __floordiv__(self, other: "BigNumber") -> "BigNumber":
        return self.__divmod__(other)[0]

    # "/" над беззнаковыми целыми даёт то же целочисленное частное, что и "//"
    __truediv__ = __floordiv__

    def __mod__(self, other: "BigNumber") -> "BigNumber":
        return self.__divmod__(other)[1]

    def powmod(
        self,
        exponent: "BigNumber",
        modulus: "BigNumber",
        config: "ArithmeticConfig | None" = None,
    ) -> "BigNumber":
        """(self ** exponent) mod modulus."""
        from bignum.core.math.exponentiation import powmod

        return powmod(self, exponent, modulus, config=config)

    def __pow__(self, exponent: "BigNumber", modulus: "BigNumber | None" = None) -> "BigNumber":
        # Только трёхаргументная форма pow(base, exponent, modulus)
        if modulus is None:
            raise InvalidArgumentError("BigNumber modulus (use pow(base, exponent, modulus))", None)
        return self.powmod(exponent, modulus)
