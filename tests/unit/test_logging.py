"""Тесты для logging utilities."""

import logging
import os
import subprocess
import sys
import textwrap
from pathlib import Path

from bignum.core.logging import get_logger

SRC_DIR = Path(__file__).resolve().parents[2] / "src"


class TestGetLogger:
    """get_logger наследует настройки root logger."""

    def test_returns_named_logger(self):
        logger = get_logger("bignum.test")
        assert isinstance(logger, logging.Logger)
        assert logger.name == "bignum.test"

    def test_propagates_to_root(self):
        assert get_logger("bignum.test.propagate").propagate is True

    def test_level_left_to_root(self):
        """Уровень не фиксируется на модульном логгере."""
        assert get_logger("bignum.test.level").level == logging.NOTSET

    def test_records_reach_caplog(self, caplog):
        logger = get_logger("bignum.test.caplog")
        caplog.set_level(logging.DEBUG, logger="bignum.test.caplog")
        logger.debug("reciprocal refined")
        assert "reciprocal refined" in caplog.text


class TestBasicConfigAfterImport:
    """basicConfig(DEBUG) после импорта включает debug записи bignum."""

    def test_debug_records_emitted(self):
        script = textwrap.dedent(
            """
            import logging

            import bignum
            from bignum.core.config import ArithmeticConfig
            from bignum.core.math.big_number import BigNumber
            from bignum.core.math.multiplication import multiply

            logging.basicConfig(level=logging.DEBUG)
            multiply(
                BigNumber.from_hex("1234"),
                BigNumber.from_hex("5678"),
                config=ArithmeticConfig(fast_multiply_threshold=0),
            )
            """
        )
        env = dict(os.environ)
        env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(SRC_DIR), env.get("PYTHONPATH")]))

        result = subprocess.run(
            [sys.executable, "-c", script],
            capture_output=True,
            text=True,
            env=env,
            check=True,
        )
        assert "karatsuba multiply: 2 x 2 digits" in result.stderr

    def test_quiet_without_configuration(self):
        script = textwrap.dedent(
            """
            from bignum.core.config import ArithmeticConfig
            from bignum.core.math.big_number import BigNumber
            from bignum.core.math.multiplication import multiply

            multiply(
                BigNumber.from_hex("1234"),
                BigNumber.from_hex("5678"),
                config=ArithmeticConfig(fast_multiply_threshold=0),
            )
            """
        )
        env = dict(os.environ)
        env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(SRC_DIR), env.get("PYTHONPATH")]))

        result = subprocess.run(
            [sys.executable, "-c", script],
            capture_output=True,
            text=True,
            env=env,
            check=True,
        )
        assert "karatsuba multiply" not in result.stderr
