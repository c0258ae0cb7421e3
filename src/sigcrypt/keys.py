"""Key pair generation and X25519 key agreement for sigcrypt."""

import hashlib
import hmac
import os
from dataclasses import dataclass
from typing import Optional, Union

from cryptography.hazmat.primitives.asymmetric.x25519 import X25519PrivateKey, X25519PublicKey
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat

from .envelope import from_transport_hex
from .types import (
    PUBLIC_KEY_SIZE,
    PRIVATE_KEY_SIZE,
    InvalidKeyLengthError,
    InvalidPeerKeyError,
)

_ZERO_SECRET = bytes(32)


@dataclass(frozen=True)
class KeyPair:
    """
    An X25519 key pair held as raw bytes.

    Attributes:
        public_key: The 32-byte public key (u-coordinate).
        private_key: The 32-byte clamped private scalar.
    """

    public_key: bytes
    private_key: bytes

    @classmethod
    def from_private_key(cls, private_key: bytes) -> "KeyPair":
        """
        Rebuild a key pair from a private key.

        The private key is clamped first, so any 32 bytes are accepted.

        Raises:
            InvalidKeyLengthError: If private_key is not 32 bytes.
        """
        _check_length("Private key", private_key, PRIVATE_KEY_SIZE)
        scalar = clamp_scalar(private_key)
        return cls(public_key=_scalar_base_mult(scalar), private_key=scalar)

    @property
    def public_key_hex(self) -> str:
        """The public key as 64 lowercase hex characters."""
        return self.public_key.hex()

    @property
    def private_key_hex(self) -> str:
        """
        The private key as 64 lowercase hex characters.

        Warning: Handle with care. Prefer re-deriving the key over storing this.
        """
        return self.private_key.hex()

    def __repr__(self) -> str:
        return f"KeyPair(public_key={self.public_key_hex})"


def clamp_scalar(data: bytes) -> bytes:
    """
    Apply X25519 clamping to a 32-byte scalar.

    Clears the low 3 bits of byte 0 and the high bit of byte 31, and sets the
    second-highest bit of byte 31.
    """
    _check_length("Scalar", data, PRIVATE_KEY_SIZE)
    scalar = bytearray(data)
    scalar[0] &= 248
    scalar[31] &= 127
    scalar[31] |= 64
    return bytes(scalar)


def is_clamped(data: bytes) -> bool:
    """Check whether 32 bytes already satisfy the clamping rules."""
    if len(data) != PRIVATE_KEY_SIZE:
        return False
    return data[0] & 7 == 0 and data[31] & 128 == 0 and data[31] & 64 == 64


def generate_keypair(seed: Optional[bytes] = None) -> KeyPair:
    """
    Generate an X25519 key pair.

    Args:
        seed: Optional 32-byte seed. When given, the result is deterministic.
            When omitted, 32 random bytes are drawn from the OS CSPRNG.

    Returns:
        KeyPair with a clamped private key

    Raises:
        InvalidKeyLengthError: If seed is not 32 bytes.
    """
    if seed is None:
        seed = os.urandom(PRIVATE_KEY_SIZE)
    return KeyPair.from_private_key(seed)


def agree(private_key: bytes, peer_public_key: bytes) -> bytes:
    """
    Perform X25519 ECDH key agreement.

    Args:
        private_key: Our 32-byte private key
        peer_public_key: Their 32-byte public key

    Returns:
        32-byte shared secret

    Raises:
        InvalidKeyLengthError: If either key is not 32 bytes.
        InvalidPeerKeyError: If the peer key is a low-order point.
    """
    _check_length("Private key", private_key, PRIVATE_KEY_SIZE)
    _check_length("Peer public key", peer_public_key, PUBLIC_KEY_SIZE)

    ours = X25519PrivateKey.from_private_bytes(private_key)
    theirs = X25519PublicKey.from_public_bytes(peer_public_key)
    try:
        shared_secret = ours.exchange(theirs)
    except ValueError as e:
        # OpenSSL refuses to return an all-zero output
        raise InvalidPeerKeyError(f"Key agreement failed: {e}") from e

    if hmac.compare_digest(shared_secret, _ZERO_SECRET):
        raise InvalidPeerKeyError("Key agreement produced an all-zero shared secret")

    return shared_secret


def public_key_from_hex(text: str) -> bytes:
    """
    Parse a public key from its 64-character hex form.

    Raises:
        InvalidHexInputError: If text is not hex.
        InvalidKeyLengthError: If text does not decode to 32 bytes.
    """
    key = _key_from_hex(text)
    _check_length("Public key", key, PUBLIC_KEY_SIZE)
    return key


def private_key_from_hex(text: str) -> bytes:
    """
    Parse a private key from its 64-character hex form.

    Raises:
        InvalidHexInputError: If text is not hex.
        InvalidKeyLengthError: If text does not decode to 32 bytes.
    """
    key = _key_from_hex(text)
    _check_length("Private key", key, PRIVATE_KEY_SIZE)
    return key


def coerce_key(key: Union[bytes, str], name: str) -> bytes:
    """Accept a key as raw bytes or hex text and return 32 raw bytes."""
    if isinstance(key, str):
        key = _key_from_hex(key)
    _check_length(name, key, PUBLIC_KEY_SIZE)
    return bytes(key)


def fingerprint(public_key: bytes) -> str:
    """
    Generate a human-readable fingerprint for a public key.

    The fingerprint is a truncated SHA-256 hash formatted for easy comparison.

    Args:
        public_key: The public key (32 bytes)

    Returns:
        A fingerprint string like "A7B3 C9D1 E5F2 8A4B"
    """
    hash_bytes = hashlib.sha256(public_key).digest()
    hex_digits = hash_bytes[:8].hex().upper()
    return " ".join(hex_digits[i : i + 4] for i in range(0, 16, 4))


def _scalar_base_mult(scalar: bytes) -> bytes:
    private_key = X25519PrivateKey.from_private_bytes(scalar)
    return private_key.public_key().public_bytes(Encoding.Raw, PublicFormat.Raw)


def _key_from_hex(text: str) -> bytes:
    return from_transport_hex(text)


def _check_length(name: str, data: bytes, expected: int) -> None:
    if len(data) != expected:
        raise InvalidKeyLengthError(name, expected, len(data))
