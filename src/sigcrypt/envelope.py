"""Envelope encoding and decoding for sigcrypt."""

import string
from dataclasses import dataclass

from .types import (
    PUBLIC_KEY_SIZE,
    NONCE_SIZE,
    HEADER_SIZE,
    MIN_ENVELOPE_SIZE,
    HEX_PREFIX,
    EnvelopeFormatError,
    InvalidHexInputError,
)

_HEX_DIGITS = frozenset(string.hexdigits)


@dataclass
class SealedEnvelope:
    """Sealed message envelope."""
    ephemeral_public_key: bytes  # 32 bytes
    nonce: bytes  # 24 bytes
    ciphertext: bytes  # variable (message + 16-byte tag)


def encode_envelope(envelope: SealedEnvelope) -> bytes:
    """
    Encode an envelope to bytes.

    Format (56-byte header + ciphertext):
        [0-31]   ephemeralPublicKey (32 bytes)
        [32-55]  nonce (24 bytes)
        [56+]    ciphertext (variable, 16-byte tag at the end)

    Args:
        envelope: SealedEnvelope to encode

    Returns:
        Encoded bytes

    Raises:
        EnvelopeFormatError: If a field has the wrong size
    """
    if len(envelope.ephemeral_public_key) != PUBLIC_KEY_SIZE:
        raise EnvelopeFormatError(
            f"Ephemeral public key must be {PUBLIC_KEY_SIZE} bytes, "
            f"got {len(envelope.ephemeral_public_key)}"
        )
    if len(envelope.nonce) != NONCE_SIZE:
        raise EnvelopeFormatError(f"Nonce must be {NONCE_SIZE} bytes, got {len(envelope.nonce)}")

    return envelope.ephemeral_public_key + envelope.nonce + envelope.ciphertext


def decode_envelope(data: bytes) -> SealedEnvelope:
    """
    Decode bytes into an envelope.

    Args:
        data: Encoded envelope bytes

    Returns:
        Decoded SealedEnvelope

    Raises:
        EnvelopeFormatError: If data is too short to hold a header and a tag
    """
    if len(data) < MIN_ENVELOPE_SIZE:
        raise EnvelopeFormatError(
            f"Data too short: {len(data)} bytes (minimum {MIN_ENVELOPE_SIZE})"
        )

    return SealedEnvelope(
        ephemeral_public_key=bytes(data[:PUBLIC_KEY_SIZE]),
        nonce=bytes(data[PUBLIC_KEY_SIZE:HEADER_SIZE]),
        ciphertext=bytes(data[HEADER_SIZE:]),
    )


def is_sealed_envelope(data: bytes) -> bool:
    """
    Check if data is long enough to be a sealed envelope.

    The layout has no magic bytes, so this is a length check only.
    """
    return len(data) >= MIN_ENVELOPE_SIZE


def to_transport_hex(data: bytes, prefix: bool = True) -> str:
    """
    Render bytes as lowercase hex for transport.

    Args:
        data: Bytes to render
        prefix: Emit the conventional "0x" prefix

    Returns:
        Hex string
    """
    encoded = data.hex()
    return HEX_PREFIX + encoded if prefix else encoded


def from_transport_hex(text: str) -> bytes:
    """
    Parse transport hex back into bytes.

    Surrounding whitespace and an optional "0x" prefix are ignored. Hex digits
    of either case are accepted.

    Raises:
        InvalidHexInputError: On non-hex characters or an odd number of digits
    """
    if not isinstance(text, str):
        raise InvalidHexInputError(f"Expected hex text, got {type(text).__name__}")

    digits = text.strip()
    if digits[:2].lower() == HEX_PREFIX:
        digits = digits[2:]

    bad = next((c for c in digits if c not in _HEX_DIGITS), None)
    if bad is not None:
        raise InvalidHexInputError(f"Invalid hex character: {bad!r}")
    if len(digits) % 2:
        raise InvalidHexInputError(f"Odd-length hex string: {len(digits)} digits")

    return bytes.fromhex(digits)
