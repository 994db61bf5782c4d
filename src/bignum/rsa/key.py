"""
RSA Key — ECB RSA расшифровка hex данных

Ключ = (exponent, modulus). Шифротекст режется на chunks по size байт
(size = длина modulus в байтах), каждый chunk возводится в степень по
модулю, результат дополняется нулями слева до size - 1 байт.
"""

from bignum.core.config import ArithmeticConfig
from bignum.core.errors import DivisionByZeroError, InvalidKeyError
from bignum.core.logging import get_logger
from bignum.core.math.big_number import HEX_CHARS_PER_DIGIT, BigNumber
from bignum.core.math.division import ReciprocalCache
from bignum.core.math.exponentiation import powmod

logger = get_logger(__name__)


class RsaKey:
    """
    Публичный или приватный RSA ключ.

    Хранит ReciprocalCache для modulus (общий для всех chunks) и кэш уже
    расшифрованных chunks по тексту шифротекста.
    """

    def __init__(
        self,
        exponent_hex: str,
        modulus_hex: str,
        config: ArithmeticConfig | None = None,
    ) -> None:
        """
        Args:
            exponent_hex: Публичный или приватный exponent (hex)
            modulus_hex: Modulus (hex)
            config: Пороги алгоритмов (default: активная конфигурация)

        Raises:
            InvalidHexError: если exponent_hex или modulus_hex не hex
            DivisionByZeroError: если modulus равен нулю
            InvalidKeyError: если modulus короче 2 байт (нет места под output chunk)
        """
        self.exponent = BigNumber.from_hex(exponent_hex).normalize()
        self.modulus = BigNumber.from_hex(modulus_hex).normalize()

        if self.modulus.is_zero:
            raise DivisionByZeroError("RSA modulus cannot be zero")

        self.size = self.modulus.width
        if self.size < 2:
            raise InvalidKeyError(f"RSA modulus must be at least 2 bytes long, got {self.size}")

        self.config = config
        self.chunk_cache: dict[str, str] = {}
        self._reciprocal = ReciprocalCache()

    @property
    def in_chunk_size(self) -> int:
        """Длина chunk шифротекста в hex символах."""
        return self.size * HEX_CHARS_PER_DIGIT

    @property
    def out_chunk_size(self) -> int:
        """Длина chunk открытого текста в hex символах."""
        return (self.size - 1) * HEX_CHARS_PER_DIGIT

    def raw_crypt(self, number: BigNumber) -> BigNumber:
        """number ** exponent mod modulus."""
        return powmod(number, self.exponent, self.modulus, config=self.config, cache=self._reciprocal)

    def decrypt(self, hex_string: str) -> str:
        """
        Расшифровка hex строки.

        Output chunk длиннее out_chunk_size означает ошибку расшифровки;
        он обрезается (чтобы визуализация продолжала работать) и логируется.

        Returns:
            Hex строка открытого текста
        """
        out_chunks = []
        for start in range(0, len(hex_string), self.in_chunk_size):
            in_chunk = hex_string[start:start + self.in_chunk_size]

            out_chunk = self.chunk_cache.get(in_chunk)
            if out_chunk is None:
                out_chunk = self.raw_crypt(BigNumber.from_hex(in_chunk)).to_hex()
                if len(out_chunk) > self.out_chunk_size:
                    logger.warning(
                        f"decryption error: chunk {in_chunk} decrypted to {out_chunk}, "
                        f"truncating to {self.out_chunk_size} hex characters"
                    )
                    out_chunk = out_chunk[:self.out_chunk_size]
                self.chunk_cache[in_chunk] = out_chunk
            else:
                logger.debug(f"chunk cache hit: {in_chunk}")

            out_chunks.append(out_chunk.rjust(self.out_chunk_size, "0"))

        return "".join(out_chunks)
