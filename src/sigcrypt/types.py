"""Type definitions and constants for sigcrypt."""

# Envelope constants
PUBLIC_KEY_SIZE = 32
PRIVATE_KEY_SIZE = 32
NONCE_SIZE = 24
TAG_SIZE = 16
HEADER_SIZE = PUBLIC_KEY_SIZE + NONCE_SIZE  # 56
MIN_ENVELOPE_SIZE = HEADER_SIZE + TAG_SIZE  # 72

# Transport constants
HEX_PREFIX = "0x"

# Key generation message template
KEY_GENERATION_DOMAIN_NAME = "Encryption Key Generator"
KEY_GENERATION_DOMAIN_VERSION = "1"
KEY_GENERATION_PRIMARY_TYPE = "KeyGeneration"
KEY_GENERATION_PURPOSE = "Sign this message to generate your encryption private key"


# Exception types
class SigCryptError(Exception):
    """Base exception for sigcrypt errors."""
    pass


class InvalidHexInputError(SigCryptError, ValueError):
    """Transport or key text is not valid hex."""
    pass


class EnvelopeFormatError(SigCryptError, ValueError):
    """Envelope bytes are too short or malformed."""
    pass


class InvalidKeyLengthError(SigCryptError, ValueError):
    """Key material is not exactly 32 bytes."""

    def __init__(self, name: str, expected: int, actual: int) -> None:
        self.name = name
        self.expected = expected
        self.actual = actual
        super().__init__(f"{name} must be {expected} bytes, got {actual}")


class InvalidPeerKeyError(SigCryptError):
    """Key agreement produced a degenerate shared secret."""
    pass


class KeyDerivationError(SigCryptError):
    """Key derivation failed."""
    pass


class DecryptionError(SigCryptError):
    """Decryption failed."""
    pass


class AuthenticationFailedError(DecryptionError):
    """AEAD tag did not verify (tampered data or wrong key)."""
    pass


class SigningError(SigCryptError):
    """The signing oracle failed to produce a signature."""
    pass


class UserRejectedSigningError(SigningError):
    """The signing request was declined by the oracle's operator."""
    pass


class SigningTimeoutError(SigningError):
    """The signing oracle did not answer in time."""
    pass
