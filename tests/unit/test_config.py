"""
Тесты для Arithmetic Config

Проверяет:
1. Default пороги
2. Валидацию (ge=0) и immutability (frozen=True)
3. Замену default конфигурации и её влияние на операторы BigNumber
"""

import logging

import pytest
from pydantic import ValidationError

from bignum.core.config import (
    DEFAULT_FAST_DIVIDE_THRESHOLD,
    DEFAULT_FAST_MULTIPLY_THRESHOLD,
    ArithmeticConfig,
    get_default_config,
    resolve_config,
    set_default_config,
)
from bignum.core.errors import InvalidArgumentError
from bignum.core.math.big_number import BigNumber


@pytest.fixture
def restore_default_config():
    """Восстанавливает default конфигурацию после теста."""
    previous = get_default_config()
    yield
    set_default_config(previous)


# =============================================================================
# ТЕСТЫ: Модель
# =============================================================================


class TestArithmeticConfig:
    """Валидация и immutability."""

    def test_defaults(self):
        config = ArithmeticConfig()
        assert config.fast_multiply_threshold == DEFAULT_FAST_MULTIPLY_THRESHOLD == 64
        assert config.fast_divide_threshold == DEFAULT_FAST_DIVIDE_THRESHOLD == 256

    def test_zero_thresholds_allowed(self):
        config = ArithmeticConfig(fast_multiply_threshold=0, fast_divide_threshold=0)
        assert config.fast_multiply_threshold == 0
        assert config.fast_divide_threshold == 0

    def test_negative_threshold_rejected(self):
        with pytest.raises(ValidationError):
            ArithmeticConfig(fast_multiply_threshold=-1)
        with pytest.raises(ValidationError):
            ArithmeticConfig(fast_divide_threshold=-5)

    def test_non_integer_threshold_rejected(self):
        with pytest.raises(ValidationError):
            ArithmeticConfig(fast_multiply_threshold="many")

    def test_frozen(self):
        config = ArithmeticConfig()
        with pytest.raises(ValidationError):
            config.fast_multiply_threshold = 1

    def test_json_round_trip(self):
        config = ArithmeticConfig(fast_multiply_threshold=8, fast_divide_threshold=16)
        assert ArithmeticConfig.model_validate_json(config.model_dump_json()) == config


# =============================================================================
# ТЕСТЫ: Default конфигурация
# =============================================================================


class TestDefaultConfig:
    """get/set/resolve default конфигурации."""

    def test_resolve_prefers_explicit(self):
        explicit = ArithmeticConfig(fast_multiply_threshold=3)
        assert resolve_config(explicit) is explicit
        assert resolve_config(None) is get_default_config()

    def test_set_returns_previous(self, restore_default_config):
        original = get_default_config()
        replacement = ArithmeticConfig(fast_multiply_threshold=1)
        assert set_default_config(replacement) is original
        assert get_default_config() is replacement

    def test_set_rejects_other_types(self, restore_default_config):
        """Не ArithmeticConfig → InvalidArgumentError (он же TypeError)."""
        original = get_default_config()
        with pytest.raises(InvalidArgumentError, match="Expected ArithmeticConfig, got dict"):
            set_default_config({"fast_multiply_threshold": 1})
        with pytest.raises(TypeError):
            set_default_config(None)
        assert get_default_config() is original

    def test_operators_follow_default(self, restore_default_config, caplog):
        """Операторы BigNumber используют активную конфигурацию."""
        caplog.set_level(logging.DEBUG, logger="bignum.core.math.multiplication")
        caplog.set_level(logging.DEBUG, logger="bignum.core.math.division")
        set_default_config(ArithmeticConfig(fast_multiply_threshold=0, fast_divide_threshold=0))

        a, b = BigNumber.from_hex("1234"), BigNumber.from_hex("5678")
        assert a * b == BigNumber.from_hex("06260060")
        assert (a * b) // a == b
        assert "karatsuba multiply" in caplog.text
        assert "newton divmod" in caplog.text
