"""
sigcrypt - Hybrid encryption with signature-derived identity keys

Python implementation of X25519 + XChaCha20-Poly1305 envelopes whose
recipient keys are recomputed from a signing oracle's signature.
"""

from .keys import (
    KeyPair,
    generate_keypair,
    agree,
    clamp_scalar,
    is_clamped,
    fingerprint,
    public_key_from_hex,
    private_key_from_hex,
)
from .aead import seal, open_sealed, random_nonce
from .derivation import derive_seed, derive_identity_keypair, signature_from_hex
from .envelope import (
    SealedEnvelope,
    encode_envelope,
    decode_envelope,
    is_sealed_envelope,
    to_transport_hex,
    from_transport_hex,
)
from .crypto import encrypt_for_recipient, decrypt_with_private_key, decrypt_text
from .signer import (
    KeyGenerationRequest,
    SigningOracle,
    CallbackSigningOracle,
    Ed25519SigningOracle,
    obtain_identity_keypair,
    decrypt_with_oracle,
    check_signer_determinism,
)
from .types import (
    PUBLIC_KEY_SIZE,
    PRIVATE_KEY_SIZE,
    NONCE_SIZE,
    TAG_SIZE,
    HEADER_SIZE,
    MIN_ENVELOPE_SIZE,
    SigCryptError,
    InvalidHexInputError,
    EnvelopeFormatError,
    InvalidKeyLengthError,
    InvalidPeerKeyError,
    KeyDerivationError,
    DecryptionError,
    AuthenticationFailedError,
    SigningError,
    UserRejectedSigningError,
    SigningTimeoutError,
)

__version__ = "0.1.0"

__all__ = [
    # Keys
    "KeyPair",
    "generate_keypair",
    "agree",
    "clamp_scalar",
    "is_clamped",
    "fingerprint",
    "public_key_from_hex",
    "private_key_from_hex",
    # AEAD
    "seal",
    "open_sealed",
    "random_nonce",
    # Derivation
    "derive_seed",
    "derive_identity_keypair",
    "signature_from_hex",
    # Envelope
    "SealedEnvelope",
    "encode_envelope",
    "decode_envelope",
    "is_sealed_envelope",
    "to_transport_hex",
    "from_transport_hex",
    # Crypto
    "encrypt_for_recipient",
    "decrypt_with_private_key",
    "decrypt_text",
    # Signer
    "KeyGenerationRequest",
    "SigningOracle",
    "CallbackSigningOracle",
    "Ed25519SigningOracle",
    "obtain_identity_keypair",
    "decrypt_with_oracle",
    "check_signer_determinism",
    # Constants
    "PUBLIC_KEY_SIZE",
    "PRIVATE_KEY_SIZE",
    "NONCE_SIZE",
    "TAG_SIZE",
    "HEADER_SIZE",
    "MIN_ENVELOPE_SIZE",
    # Errors
    "SigCryptError",
    "InvalidHexInputError",
    "EnvelopeFormatError",
    "InvalidKeyLengthError",
    "InvalidPeerKeyError",
    "KeyDerivationError",
    "DecryptionError",
    "AuthenticationFailedError",
    "SigningError",
    "UserRejectedSigningError",
    "SigningTimeoutError",
]
