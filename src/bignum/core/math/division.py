"""
Division — schoolbook (binary doubling) и Newton-Raphson reciprocal

Два алгоритма divmod с обязательно идентичным результатом:
- schoolbook_divmod: двоичное деление столбиком через таблицу удвоенных
  делителей divisor * 2**k
- newton_divmod: частное через fixed-point приближение 1/divisor,
  уточняемое итерацией Ньютона

Состояние Newton-Raphson (inverse, precision) хранится в явном
ReciprocalCache, а не на самом делителе: BigNumber остаётся immutable.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Делитель, равный нулю после нормализации → DivisionByZeroError ДО любого
   цикла (цикл уточнения Ньютона на нуле не завершается)
2. Оба операнда нормализуются перед диспетчеризацией
3. Результат: quotient и remainder normalized, remainder < divisor
4. Inverse в кэше всегда <= 256**precision / divisor (оценка снизу), и
   divisor * inverse / 256**precision не убывает от уточнения к уточнению
"""

from bignum.core.config import ArithmeticConfig, resolve_config
from bignum.core.errors import DivisionByZeroError
from bignum.core.logging import get_logger
from bignum.core.math.big_number import BigNumber, ensure_big_number
from bignum.core.math.primitives import ACCUMULATOR_BASE, DIGIT_MAX, DIGIT_ONE, DIGIT_ZERO, Digit

logger = get_logger(__name__)


def _ensure_nonzero_divisor(divisor: BigNumber) -> None:
    if divisor.is_zero:
        raise DivisionByZeroError("BigNumber division by zero")


# =============================================================================
# RECIPROCAL CACHE
# =============================================================================


class ReciprocalCache:
    """
    Fixed-point приближение 1/divisor для Newton-Raphson деления.

    inverse / 256**precision ≈ 1 / divisor (с недостатком).

    Кэш привязывается к первому делителю, с которым его использовали;
    повторное использование с другим значением делителя — ошибка.
    Не thread-safe: для параллельного деления нужен кэш на поток.
    """

    __slots__ = ("divisor", "inverse", "precision", "refinements")

    def __init__(self) -> None:
        self.divisor: BigNumber | None = None
        self.inverse: BigNumber | None = None
        self.precision: int = 0
        self.refinements: int = 0

    def bind(self, divisor: BigNumber) -> None:
        """
        Привязка к делителю и начальное приближение (если его ещё нет).

        Начальное приближение по старшему digit msb делителя:
            inverse = 256 // (msb + 1), precision = divisor.width
        Если msb + 1 переполняет digit (msb = 0xFF):
            inverse = 0xFF, precision = divisor.width + 1

        Raises:
            ValueError: если кэш уже привязан к другому делителю
            DivisionByZeroError: если делитель равен нулю
        """
        divisor = divisor.normalize()

        if self.divisor is not None:
            if self.divisor != divisor:
                raise ValueError(
                    f"ReciprocalCache is bound to divisor {self.divisor}, got {divisor}"
                )
            return

        _ensure_nonzero_divisor(divisor)

        msb = divisor.digits[-1]
        msb_plus = (msb + DIGIT_ONE).low
        if msb_plus == DIGIT_ZERO:
            msb_inverse = Digit(DIGIT_MAX)
            precision = divisor.width + 1
        else:
            msb_inverse = ACCUMULATOR_BASE // msb_plus
            precision = divisor.width

        self.divisor = divisor
        self.inverse = BigNumber((msb_inverse,))
        self.precision = precision
        logger.debug(f"reciprocal seeded: inverse={self.inverse}, precision={precision}")

    def refine(self) -> None:
        """
        Одна итерация Ньютона в fixed point:
            new = (2 * inverse << precision) - divisor * inverse**2
            precision *= 2
        Затем младшие нулевые digits inverse отбрасываются (precision
        уменьшается на их число): они не добавляют точности.
        """
        if self.divisor is None or self.inverse is None:
            raise ValueError("ReciprocalCache.refine() called before bind()")

        old_inverse = self.inverse
        old_precision = self.precision

        inverse = ((old_inverse + old_inverse) << old_precision) - (
            self.divisor * old_inverse * old_inverse
        )
        precision = old_precision * 2

        zero_digits = 0
        while zero_digits < inverse.width - 1 and inverse.digits[zero_digits] == DIGIT_ZERO:
            zero_digits += 1
        if zero_digits > 0:
            inverse = inverse >> zero_digits
            precision -= zero_digits

        self.inverse = inverse
        self.precision = precision
        self.refinements += 1
        logger.debug(
            f"reciprocal refined: precision {old_precision} -> {precision} digits "
            f"(refinement #{self.refinements})"
        )


# =============================================================================
# DISPATCH
# =============================================================================


def divmod_numbers(
    dividend: BigNumber,
    divisor: BigNumber,
    config: ArithmeticConfig | None = None,
    cache: ReciprocalCache | None = None,
) -> tuple[BigNumber, BigNumber]:
    """
    (dividend // divisor, dividend % divisor) с выбором алгоритма.

    Операнды нормализуются; schoolbook, если хотя бы один из них имеет
    <= config.fast_divide_threshold digits, иначе Newton-Raphson.

    Args:
        dividend: Делимое
        divisor: Делитель (не ноль)
        config: Пороги алгоритмов (default: активная конфигурация)
        cache: ReciprocalCache делителя для повторных делений (optional)

    Raises:
        DivisionByZeroError: если divisor нормализуется в ноль
    """
    ensure_big_number(dividend, divisor)
    dividend = dividend.normalize()
    divisor = divisor.normalize()
    _ensure_nonzero_divisor(divisor)

    config = resolve_config(config)
    threshold = config.fast_divide_threshold

    if dividend.width <= threshold or divisor.width <= threshold:
        return schoolbook_divmod(dividend, divisor)

    logger.debug(f"newton divmod: {dividend.width} / {divisor.width} digits")
    return newton_divmod(dividend, divisor, cache=cache)


# =============================================================================
# SCHOOLBOOK
# =============================================================================


def schoolbook_divmod(dividend: BigNumber, divisor: BigNumber) -> tuple[BigNumber, BigNumber]:
    """
    Двоичное деление столбиком.

    1. multiples = [divisor, 2*divisor, 4*divisor, ...], пока последний
       элемент < remainder
    2. От старшей степени к нулевой: quotient удваивается; если
       remainder >= multiples[k], то remainder -= multiples[k] и младший бит
       quotient выставляется в 1

    Examples:
        >>> q, r = schoolbook_divmod(BigNumber.from_hex("43"), BigNumber.from_hex("03"))
        >>> q.to_hex(), r.to_hex()
        ('16', '01')
    """
    ensure_big_number(dividend, divisor)
    remainder = dividend.normalize()
    divisor = divisor.normalize()
    _ensure_nonzero_divisor(divisor)

    multiples = [divisor]
    while multiples[-1] < remainder:
        multiples.append((multiples[-1] + multiples[-1]).normalize())

    quotient = BigNumber.zero()
    for multiple in reversed(multiples):
        quotient = (quotient + quotient).normalize()
        if remainder >= multiple:
            remainder = remainder - multiple
            digits = quotient.digits
            quotient = BigNumber((digits[0] | DIGIT_ONE,) + digits[1:])

    return quotient.normalize(), remainder.normalize()


# =============================================================================
# NEWTON-RAPHSON
# =============================================================================


def newton_divmod(
    dividend: BigNumber,
    divisor: BigNumber,
    cache: ReciprocalCache | None = None,
) -> tuple[BigNumber, BigNumber]:
    """
    Деление через multiplicative inverse делителя.

    Цикл:
        quotient = (dividend * inverse) >> precision
        product = divisor * quotient
        product > dividend  → quotient -= 1, product -= divisor
        product <= dividend → remainder = dividend - product;
                              remainder >= divisor → quotient += 1, remainder -= divisor
                              remainder < divisor  → готово
        иначе inverse уточняется и оценка повторяется

    Делитель 1 обрабатывается отдельно: (dividend, 0).

    Args:
        dividend: Делимое
        divisor: Делитель (не ноль)
        cache: ReciprocalCache для этого делителя; создаётся, если не передан

    Raises:
        DivisionByZeroError: если divisor нормализуется в ноль
        ValueError: если cache привязан к другому делителю
    """
    ensure_big_number(dividend, divisor)
    dividend = dividend.normalize()
    divisor = divisor.normalize()
    _ensure_nonzero_divisor(divisor)

    one = BigNumber.one()
    if divisor == one:
        return dividend, BigNumber.zero()

    if cache is None:
        cache = ReciprocalCache()
    cache.bind(divisor)

    while True:
        quotient = (dividend * cache.inverse) >> cache.precision
        product = divisor * quotient

        if product > dividend:
            product = product - divisor
            quotient = quotient - one

        if product <= dividend:
            remainder = dividend - product
            if remainder >= divisor:
                remainder = remainder - divisor
                quotient = quotient + one
            if remainder < divisor:
                return quotient.normalize(), remainder.normalize()

        cache.refine()
