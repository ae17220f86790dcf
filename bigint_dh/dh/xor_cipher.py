"""
XOR Cipher — Учебное шифрование сообщения общим секретом

НЕ является стойким шифром: ключевой поток повторяется в каждом блоке.

Схема:
1. message → UTF-8 байты → hex (нижний регистр, два символа на байт)
2. hex дополняется справа '0' до кратного длине секрета
3. каждый блок длиной с hex-текст секрета XOR-ится с ним поразрядно
4. расшифровка: тот же XOR, затем отбрасывается дополнение по исходной
   длине hex (hex_length)
"""

from dataclasses import dataclass

from bigint_dh.core.domain.big_value import BigValue
from bigint_dh.core.domain.radix import DIGIT_CHARS, Radix


@dataclass(frozen=True)
class EncryptedMessage:
    """Зашифрованные блоки и длина hex-представления исходного сообщения."""

    chunks: tuple[str, ...]
    hex_length: int


def message_to_hex(message: str) -> str:
    return message.encode("utf-8").hex()


def hex_to_message(hex_text: str) -> str:
    """
    Raises:
        ValueError: нечётная длина, не-hex символ или не UTF-8
    """
    return bytes.fromhex(hex_text).decode("utf-8")


def pad_hex(hex_text: str, chunk_size: int) -> str:
    """Дополнение '0' справа до длины, кратной chunk_size."""
    if chunk_size < 1:
        raise ValueError(f"chunk_size must be >= 1, got {chunk_size}")
    remainder = len(hex_text) % chunk_size
    if remainder == 0:
        return hex_text
    return hex_text + "0" * (chunk_size - remainder)


def _secret_key_text(shared_secret: BigValue) -> str:
    if shared_secret.radix is not Radix.HEX:
        raise ValueError("XOR cipher requires a hexadecimal shared secret")
    return shared_secret.magnitude_text()


def xor_hex(chunk: str, key: str) -> str:
    """Поразрядный XOR hex-строк (ключ повторяется)."""
    return "".join(
        DIGIT_CHARS[Radix.HEX.digit_value(c) ^ Radix.HEX.digit_value(key[i % len(key)])]
        for i, c in enumerate(chunk)
    )


def encrypt_message(message: str, shared_secret: BigValue) -> EncryptedMessage:
    """
    Шифрование сообщения общим секретом.

    Examples:
        >>> encrypt_message("A", BigValue.from_text("ff")).chunks
        ('be',)
    """
    key = _secret_key_text(shared_secret)
    message_hex = message_to_hex(message)
    padded = pad_hex(message_hex, len(key))
    chunks = tuple(xor_hex(padded[i : i + len(key)], key) for i in range(0, len(padded), len(key)))
    return EncryptedMessage(chunks=chunks, hex_length=len(message_hex))


def decrypt_message(encrypted: EncryptedMessage, shared_secret: BigValue) -> str:
    key = _secret_key_text(shared_secret)
    decrypted_hex = "".join(xor_hex(chunk, key) for chunk in encrypted.chunks)
    return hex_to_message(decrypted_hex[: encrypted.hex_length])
