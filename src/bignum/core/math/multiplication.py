"""
Multiplication — schoolbook и Karatsuba

Два алгоритма с обязательно идентичным normalized результатом:
- schoolbook_multiply: классический digit-by-digit multiply-accumulate, O(n*m)
- karatsuba_multiply: рекурсивное деление пополам, 3 умножения половинного
  размера вместо 4, O(n^1.585)

Диспетчер multiply выбирает schoolbook, если хотя бы один операнд имеет
<= config.fast_multiply_threshold digits.
"""

from bignum.core.config import ArithmeticConfig, resolve_config
from bignum.core.logging import get_logger
from bignum.core.math.big_number import BigNumber, ensure_big_number
from bignum.core.math.primitives import DIGIT_ZERO

logger = get_logger(__name__)


def multiply(a: BigNumber, b: BigNumber, config: ArithmeticConfig | None = None) -> BigNumber:
    """
    Произведение a * b с выбором алгоритма по ширине операндов.

    Args:
        a: Первый множитель
        b: Второй множитель
        config: Пороги алгоритмов (default: активная конфигурация)

    Returns:
        Normalized произведение
    """
    ensure_big_number(a, b)
    config = resolve_config(config)
    threshold = config.fast_multiply_threshold

    if a.width <= threshold or b.width <= threshold:
        return schoolbook_multiply(a, b)

    logger.debug(f"karatsuba multiply: {a.width} x {b.width} digits")
    return karatsuba_multiply(a, b, config=config)


def schoolbook_multiply(a: BigNumber, b: BigNumber) -> BigNumber:
    """
    Классическое умножение столбиком.

    Ширина результата = a.width + b.width. Для каждой пары (i, j):
        word = a[i] * b[j] + result[i + j] + carry
        result[i + j] = word.low, carry = word.high
    По окончании строки carry записывается в result[i + b.width].

    Examples:
        >>> schoolbook_multiply(BigNumber.from_hex("1234"), BigNumber.from_hex("5678")).to_hex()
        '06260060'
    """
    ensure_big_number(a, b)
    left, right = a.digits, b.digits
    result = [DIGIT_ZERO] * (len(left) + len(right))

    for i, x in enumerate(left):
        carry = DIGIT_ZERO
        for j, y in enumerate(right):
            word = (x * y) + result[i + j].widen() + carry.widen()
            result[i + j] = word.low
            carry = word.high
        result[i + len(right)] = carry

    return BigNumber(result).normalize()


def karatsuba_multiply(
    a: BigNumber,
    b: BigNumber,
    config: ArithmeticConfig | None = None,
) -> BigNumber:
    """
    Умножение Karatsuba.

    Базовый случай: оба операнда из одного digit → 2-digit результат из
    high/low Accumulator. Иначе split = max(width) // 2:
        a = high_a * 256**split + low_a  (аналогично b)
        hh = high_a * high_b
        ll = low_a * low_b
        cross = (low_a + high_a) * (low_b + high_b) - (hh + ll)
        a * b = (hh << 2*split) + (cross << split) + ll

    Рекурсивные умножения идут через диспетчер multiply с тем же config,
    поэтому маленькие половины уходят в schoolbook.
    """
    ensure_big_number(a, b)
    left, right = a.digits, b.digits
    in_digits = max(len(left), len(right))

    if in_digits == 1:
        product = left[0] * right[0]
        return BigNumber((product.low, product.high)).normalize()

    split = in_digits // 2
    low_a, high_a = BigNumber(left[:split]), BigNumber(left[split:])
    low_b, high_b = BigNumber(right[:split]), BigNumber(right[split:])

    high_high = multiply(high_a, high_b, config=config)
    low_low = multiply(low_a, low_b, config=config)
    # Неотрицательно: (la + ha)(lb + hb) = hh + ll + la*hb + ha*lb
    cross = multiply(low_a + high_a, low_b + high_b, config=config) - (high_high + low_low)

    return ((high_high << (2 * split)) + (cross << split) + low_low).normalize()
