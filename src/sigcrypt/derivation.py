"""Deterministic identity key derivation from signing-oracle signatures."""

from typing import Union

from cryptography.hazmat.primitives import hashes

from .envelope import from_transport_hex
from .keys import KeyPair, clamp_scalar, generate_keypair
from .types import KeyDerivationError


def derive_seed(signature: bytes) -> bytes:
    """
    Derive a clamped X25519 private-key seed from signature bytes.

    The seed is SHA-256(signature) with curve clamping applied. The same
    signature always yields the same seed, so the private key never needs to
    be stored. This only holds if the signer is deterministic for a fixed
    message (Ed25519, RFC 6979 ECDSA); a randomized signer yields a new key
    on every call.

    Args:
        signature: Opaque signature bytes of any non-zero length

    Returns:
        32-byte clamped seed

    Raises:
        KeyDerivationError: If the signature is empty
    """
    if not signature:
        raise KeyDerivationError("Signature must not be empty")

    digest = hashes.Hash(hashes.SHA256())
    digest.update(bytes(signature))
    return clamp_scalar(digest.finalize())


def signature_from_hex(text: str) -> bytes:
    """
    Parse a hex signature as returned by wallet-style signers ("0x...").

    Raises:
        InvalidHexInputError: If text is not valid hex
    """
    return from_transport_hex(text)


def derive_identity_keypair(signature: Union[bytes, str]) -> KeyPair:
    """
    Derive the identity key pair for a signature.

    Args:
        signature: Raw signature bytes, or its hex text form

    Returns:
        KeyPair recomputed from the signature
    """
    if isinstance(signature, str):
        signature = signature_from_hex(signature)
    return generate_keypair(derive_seed(signature))
