"""
Modular Exponentiation — right-to-left binary method

    result = 1, multiplier = base
    для каждого бита exponent (от младшего digit к старшему, внутри digit
    маска 0x01, 0x02, ..., 0x80):
        бит = 1 → result = (result * multiplier) mod modulus
        multiplier = (multiplier * multiplier) mod modulus

Все редукции по одному modulus разделяют один ReciprocalCache, поэтому
Newton-Raphson приближение 1/modulus уточняется один раз на вызов.
"""

from bignum.core.config import ArithmeticConfig, resolve_config
from bignum.core.errors import DivisionByZeroError
from bignum.core.logging import get_logger
from bignum.core.math.big_number import BigNumber, ensure_big_number
from bignum.core.math.division import ReciprocalCache, divmod_numbers
from bignum.core.math.multiplication import multiply
from bignum.core.math.primitives import DIGIT_BITS, DIGIT_ONE, DIGIT_TWO, DIGIT_ZERO

logger = get_logger(__name__)


def powmod(
    base: BigNumber,
    exponent: BigNumber,
    modulus: BigNumber,
    config: ArithmeticConfig | None = None,
    cache: ReciprocalCache | None = None,
) -> BigNumber:
    """
    (base ** exponent) mod modulus.

    exponent = 0 → one (без редукции, даже при modulus = 1).
    base не редуцируется заранее: первая редукция случается на первом
    умножении.

    Args:
        base: Основание
        exponent: Показатель (нормализуется, старшие нули не сканируются)
        modulus: Модуль (не ноль)
        config: Пороги алгоритмов (default: активная конфигурация)
        cache: ReciprocalCache для modulus; создаётся, если не передан

    Returns:
        Normalized результат

    Raises:
        InvalidArgumentError: если аргумент не BigNumber
        DivisionByZeroError: если modulus нормализуется в ноль

    Examples:
        >>> powmod(BigNumber.from_hex("42"), BigNumber.from_hex("5"),
        ...        BigNumber.from_hex("100000000")).to_hex()
        '4AA51420'
    """
    ensure_big_number(base, exponent, modulus)

    if modulus.is_zero:
        raise DivisionByZeroError("powmod modulus cannot be zero")

    config = resolve_config(config)
    if cache is None:
        cache = ReciprocalCache()

    def reduce(value: BigNumber) -> BigNumber:
        return divmod_numbers(value, modulus, config=config, cache=cache)[1]

    result = BigNumber.one()
    multiplier = base
    exponent = exponent.normalize()

    logger.debug(f"powmod: exponent {exponent.width} digits, modulus {modulus.width} digits")

    for digit in exponent.digits:
        mask = DIGIT_ONE
        for _ in range(DIGIT_BITS):
            if (digit & mask) != DIGIT_ZERO:
                result = reduce(multiply(result, multiplier, config=config))
            mask = (mask * DIGIT_TWO).low
            multiplier = reduce(multiply(multiplier, multiplier, config=config))

    return result.normalize()
