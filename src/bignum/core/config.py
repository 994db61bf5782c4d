"""
Arithmetic Config — пороги выбора алгоритма

Пороги (в digits) определяют, когда schoolbook уступает асимптотически
быстрому алгоритму. Это настройки производительности, а не семантика:
оба пути обязаны давать одинаковый normalized результат, поэтому пороги
можно сдвигать в тестах, чтобы гонять каждый путь на маленьких числах.
"""

from typing import Final

from pydantic import BaseModel, Field

from bignum.core.errors import InvalidArgumentError

# =============================================================================
# DEFAULTS
# =============================================================================

# Schoolbook multiply, если хотя бы один операнд имеет <= порога digits
DEFAULT_FAST_MULTIPLY_THRESHOLD: Final[int] = 64

# Schoolbook divmod, если хотя бы один операнд имеет <= порога digits
DEFAULT_FAST_DIVIDE_THRESHOLD: Final[int] = 256


# =============================================================================
# CONFIG MODEL
# =============================================================================


class ArithmeticConfig(BaseModel):
    """
    Конфигурация диспетчеризации алгоритмов.

    Immutable (frozen=True): новая конфигурация = новый экземпляр.
    Порог 0 отключает schoolbook путь полностью (у любого числа >= 1 digit).
    """

    fast_multiply_threshold: int = Field(
        default=DEFAULT_FAST_MULTIPLY_THRESHOLD,
        ge=0,
        description="Макс. число digits операнда, при котором используется schoolbook multiply",
    )
    fast_divide_threshold: int = Field(
        default=DEFAULT_FAST_DIVIDE_THRESHOLD,
        ge=0,
        description="Макс. число digits операнда, при котором используется schoolbook divmod",
    )

    model_config = {"frozen": True}


_default_config = ArithmeticConfig()


def get_default_config() -> ArithmeticConfig:
    """Активная конфигурация, используемая операторами BigNumber."""
    return _default_config


def set_default_config(config: ArithmeticConfig) -> ArithmeticConfig:
    """
    Замена активной конфигурации.

    Args:
        config: Новая конфигурация

    Returns:
        Предыдущая конфигурация (для восстановления)

    Raises:
        InvalidArgumentError: если config не ArithmeticConfig
    """
    global _default_config

    if not isinstance(config, ArithmeticConfig):
        raise InvalidArgumentError("ArithmeticConfig", config)

    previous = _default_config
    _default_config = config
    return previous


def resolve_config(config: ArithmeticConfig | None) -> ArithmeticConfig:
    """config если передан, иначе активная default конфигурация."""
    return config if config is not None else _default_config
