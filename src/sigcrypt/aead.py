"""XChaCha20-Poly1305 authenticated encryption for sigcrypt."""

import nacl.utils
from nacl.bindings import (
    crypto_aead_xchacha20poly1305_ietf_encrypt,
    crypto_aead_xchacha20poly1305_ietf_decrypt,
    crypto_aead_xchacha20poly1305_ietf_KEYBYTES,
)
from nacl.exceptions import CryptoError

from .types import (
    NONCE_SIZE,
    TAG_SIZE,
    AuthenticationFailedError,
    EnvelopeFormatError,
    InvalidKeyLengthError,
)

KEY_SIZE = crypto_aead_xchacha20poly1305_ietf_KEYBYTES  # 32


def random_nonce() -> bytes:
    """Draw a fresh 24-byte nonce from the OS CSPRNG."""
    return nacl.utils.random(NONCE_SIZE)


def seal(key: bytes, nonce: bytes, plaintext: bytes) -> bytes:
    """
    Encrypt and authenticate plaintext.

    Args:
        key: 32-byte symmetric key
        nonce: 24-byte nonce, never reused with the same key
        plaintext: Bytes to encrypt

    Returns:
        Ciphertext with the 16-byte tag appended (len(plaintext) + 16 bytes)
    """
    _check_params(key, nonce)
    return crypto_aead_xchacha20poly1305_ietf_encrypt(bytes(plaintext), None, nonce, key)


def open_sealed(key: bytes, nonce: bytes, ciphertext: bytes) -> bytes:
    """
    Verify and decrypt a sealed ciphertext.

    Nothing is returned unless the tag verifies.

    Args:
        key: 32-byte symmetric key
        nonce: 24-byte nonce used at seal time
        ciphertext: Ciphertext with trailing 16-byte tag

    Returns:
        The plaintext

    Raises:
        AuthenticationFailedError: If the ciphertext is shorter than a tag or
            the tag does not verify
    """
    _check_params(key, nonce)
    if len(ciphertext) < TAG_SIZE:
        raise AuthenticationFailedError(
            f"Ciphertext too short: {len(ciphertext)} bytes (minimum {TAG_SIZE})"
        )

    try:
        return crypto_aead_xchacha20poly1305_ietf_decrypt(bytes(ciphertext), None, nonce, key)
    except CryptoError as e:
        raise AuthenticationFailedError("Authentication tag verification failed") from e


# Alias matching the seal/open naming of the envelope format.
open = open_sealed


def _check_params(key: bytes, nonce: bytes) -> None:
    if len(key) != KEY_SIZE:
        raise InvalidKeyLengthError("Key", KEY_SIZE, len(key))
    if len(nonce) != NONCE_SIZE:
        raise EnvelopeFormatError(f"Nonce must be {NONCE_SIZE} bytes, got {len(nonce)}")
