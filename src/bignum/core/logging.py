"""Logging utilities для модулей bignum."""

import logging


def get_logger(name: str) -> logging.Logger:
    """
    Логгер, наследующий настройки root logger.

    Работает с basicConfig() без явной настройки:
    - Propagate в root logger (поведение по умолчанию)
    - Уровень не выставляется (NOTSET): эффективный уровень берётся у
      root logger, поэтому basicConfig(level=DEBUG), вызванный после
      импорта, включает debug записи bignum. Без настройки root остаётся
      на WARNING

    Args:
        name: Имя логгера (обычно __name__)

    Returns:
        Настроенный logging.Logger
    """
    logger = logging.getLogger(name)
    logger.propagate = True
    return logger
