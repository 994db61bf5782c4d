"""
Encrypted Image — построчное описание изображения, зашифрованного RSA

Формат (одна команда на строку, поля через пробел):
    key <exponent_hex> <modulus_hex>
    sx <columns>
    row <encrypted_row_hex>
    end

Неизвестные команды и пустые строки пропускаются; чтение прекращается на
"end" или в конце ввода. Каждый пиксель = 6 hex символов (RGB).
"""

from collections.abc import Iterable
from typing import Final, TextIO

from bignum.core.errors import ImageFormatError
from bignum.core.logging import get_logger
from bignum.rsa.key import RsaKey

logger = get_logger(__name__)

# Hex символов на пиксель (RGB, по байту на канал)
HEX_CHARS_PER_PIXEL: Final[int] = 6


class EncryptedImage:
    """Зашифрованное изображение и его ленивая расшифровка."""

    def __init__(self) -> None:
        self.key: RsaKey | None = None
        self.encrypted_rows: list[str] = []
        self.rows: list[str] | None = None
        self.columns: int | None = None

    def set_key(self, exponent_hex: str, modulus_hex: str) -> None:
        self.key = RsaKey(exponent_hex, modulus_hex)

    def add_row(self, encrypted_row_data: str) -> None:
        self.encrypted_rows.append(encrypted_row_data)

    def decrypt_image(self) -> None:
        """
        Расшифровка всех строк (один раз).

        Если задан columns, каждая строка обрезается до
        columns * HEX_CHARS_PER_PIXEL символов.

        Raises:
            ImageFormatError: если есть строки, но не задан key
        """
        if self.rows is not None:
            return

        if self.key is None and self.encrypted_rows:
            raise ImageFormatError("Encrypted rows given without a key command")

        row_size = self.columns * HEX_CHARS_PER_PIXEL if self.columns is not None else None
        rows = []
        for encrypted_row in self.encrypted_rows:
            row = self.key.decrypt(encrypted_row)
            rows.append(row[:row_size] if row_size is not None else row)

        logger.debug(f"decrypted {len(rows)} rows")
        self.rows = rows

    def to_line_list(self) -> list[str]:
        """Расшифрованные строки изображения."""
        self.decrypt_image()
        return list(self.rows)

    def write_to(self, stream: TextIO) -> None:
        """Запись расшифрованных строк в stream, по одной на строку."""
        for line in self.to_line_list():
            stream.write(f"{line}\n")

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "EncryptedImage":
        """
        Разбор описания изображения.

        Raises:
            ImageFormatError: неверное число аргументов команды или
                нечисловой / отрицательный sx
            InvalidHexError: невалидный hex в команде key
        """
        image = cls()

        for line_number, line in enumerate(lines, start=1):
            command = line.split()
            if not command:
                continue

            name, args = command[0], command[1:]
            if name == "key":
                if len(args) != 2:
                    raise ImageFormatError("key expects <exponent> <modulus>", line_number)
                image.set_key(args[0], args[1])
            elif name == "sx":
                if len(args) != 1:
                    raise ImageFormatError("sx expects <columns>", line_number)
                try:
                    columns = int(args[0])
                except ValueError as e:
                    raise ImageFormatError(f"sx expects an integer, got {args[0]!r}", line_number) from e
                if columns < 0:
                    raise ImageFormatError(f"sx cannot be negative, got {columns}", line_number)
                image.columns = columns
            elif name == "row":
                if len(args) != 1:
                    raise ImageFormatError("row expects <encrypted_row>", line_number)
                image.add_row(args[0])
            elif name == "end":
                break
            else:
                logger.debug(f"line {line_number}: ignoring unknown command {name!r}")

        return image

    @classmethod
    def from_stream(cls, stream: TextIO) -> "EncryptedImage":
        """Разбор описания изображения из текстового stream."""
        return cls.from_lines(stream)
