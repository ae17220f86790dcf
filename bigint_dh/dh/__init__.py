"""
Diffie-Hellman key exchange demo and the XOR message cipher built on its
shared secret.
"""

from bigint_dh.dh.key_exchange import (
    DH_GENERATOR_DEFAULT,
    DH_PRIME_DIGITS_DEFAULT,
    DHKeyPair,
    DHParameters,
    KeyExchangeResult,
    compute_public_key,
    compute_shared_secret,
    generate_parameters,
    generate_private_key,
    run_key_exchange,
)
from bigint_dh.dh.xor_cipher import (
    EncryptedMessage,
    decrypt_message,
    encrypt_message,
    hex_to_message,
    message_to_hex,
    pad_hex,
)

__all__ = [
    # Key exchange — Constants
    "DH_PRIME_DIGITS_DEFAULT",
    "DH_GENERATOR_DEFAULT",
    # Key exchange — Types
    "DHParameters",
    "DHKeyPair",
    "KeyExchangeResult",
    # Key exchange — Functions
    "generate_parameters",
    "generate_private_key",
    "compute_public_key",
    "compute_shared_secret",
    "run_key_exchange",
    # XOR cipher
    "EncryptedMessage",
    "message_to_hex",
    "hex_to_message",
    "pad_hex",
    "encrypt_message",
    "decrypt_message",
]
