"""
Exceptions для big number арифметики и RSA слоя.

Все ошибки локальны: поднимаются у непосредственного вызывающего,
внутренних retry нет.
"""


class BigNumError(Exception):
    """Базовое исключение для всех ошибок bignum."""
    pass


class InvalidHexError(BigNumError, ValueError):
    """Строка не является валидным hex (пустая или символы вне 0-9a-fA-F)."""
    pass


class InvalidArgumentError(BigNumError, TypeError):
    """Операнд не того типа (например, int вместо BigNumber)."""

    def __init__(self, expected: str, got: object) -> None:
        """
        Args:
            expected: Имя ожидаемого типа
            got: Фактически переданное значение
        """
        self.expected = expected
        self.got_type = type(got).__name__
        super().__init__(f"Expected {expected}, got {self.got_type}")


class InvalidWidthError(BigNumError, ValueError):
    """Отрицательная ширина (количество digits) или отрицательный shift."""
    pass


class DivisionByZeroError(BigNumError, ZeroDivisionError):
    """Делитель (или modulus) после нормализации равен нулю."""
    pass


class ImageFormatError(BigNumError, ValueError):
    """Некорректное описание зашифрованного изображения."""

    def __init__(self, message: str, line_number: int | None = None) -> None:
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class InvalidKeyError(BigNumError, ValueError):
    """RSA ключ, непригодный для расшифровки (modulus короче 2 байт)."""
    pass
