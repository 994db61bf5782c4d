"""
RSA слой: ключ и зашифрованное изображение.

Использует из core только BigNumber.from_hex, powmod и to_hex.
"""

from bignum.rsa.image import HEX_CHARS_PER_PIXEL, EncryptedImage
from bignum.rsa.key import RsaKey

__all__ = [
    "HEX_CHARS_PER_PIXEL",
    "EncryptedImage",
    "RsaKey",
]
