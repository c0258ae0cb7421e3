"""Encryption and decryption for sigcrypt messages."""

import logging
from typing import Union

from .aead import seal, open_sealed, random_nonce
from .envelope import (
    SealedEnvelope,
    encode_envelope,
    decode_envelope,
    to_transport_hex,
    from_transport_hex,
)
from .keys import agree, coerce_key, generate_keypair
from .types import DecryptionError

logger = logging.getLogger(__name__)


def encrypt_for_recipient(
    recipient_public_key: Union[bytes, str],
    plaintext: Union[bytes, str],
) -> str:
    """
    Encrypt a message for a recipient.

    A fresh ephemeral key pair and nonce are generated for every call. The
    ephemeral private key and shared secret never leave this function.

    Args:
        recipient_public_key: Recipient's public key (32 bytes or 64-char hex)
        plaintext: Message to encrypt (str is encoded as UTF-8)

    Returns:
        The envelope as "0x"-prefixed lowercase hex

    Raises:
        InvalidKeyLengthError: If the recipient key is not 32 bytes
        InvalidHexInputError: If a hex recipient key is malformed
        InvalidPeerKeyError: If the recipient key is a low-order point
    """
    recipient_key = coerce_key(recipient_public_key, "Recipient public key")
    message_bytes = plaintext.encode("utf-8") if isinstance(plaintext, str) else bytes(plaintext)

    # Generate ephemeral key pair for this message
    ephemeral = generate_keypair()
    shared_secret = agree(ephemeral.private_key, recipient_key)

    nonce = random_nonce()
    ciphertext = seal(shared_secret, nonce, message_bytes)

    encoded = encode_envelope(
        SealedEnvelope(
            ephemeral_public_key=ephemeral.public_key,
            nonce=nonce,
            ciphertext=ciphertext,
        )
    )
    logger.debug("Sealed %d-byte message into %d-byte envelope", len(message_bytes), len(encoded))
    return to_transport_hex(encoded)


def decrypt_with_private_key(
    recipient_private_key: Union[bytes, str],
    envelope_text: str,
) -> bytes:
    """
    Decrypt an envelope addressed to us.

    Args:
        recipient_private_key: Our private key (32 bytes or 64-char hex)
        envelope_text: Envelope hex, with or without "0x"

    Returns:
        The plaintext bytes

    Raises:
        InvalidHexInputError: If the envelope text is not valid hex
        EnvelopeFormatError: If the envelope is too short
        InvalidKeyLengthError: If the private key is not 32 bytes
        AuthenticationFailedError: If the envelope was tampered with or is
            addressed to another key
    """
    private_key = coerce_key(recipient_private_key, "Recipient private key")
    envelope = decode_envelope(from_transport_hex(envelope_text))

    shared_secret = agree(private_key, envelope.ephemeral_public_key)
    return open_sealed(shared_secret, envelope.nonce, envelope.ciphertext)


def decrypt_text(
    recipient_private_key: Union[bytes, str],
    envelope_text: str,
) -> str:
    """
    Decrypt an envelope and decode the plaintext as UTF-8.

    Raises:
        DecryptionError: If the plaintext is not valid UTF-8, plus everything
            decrypt_with_private_key raises
    """
    plaintext = decrypt_with_private_key(recipient_private_key, envelope_text)
    try:
        return plaintext.decode("utf-8")
    except UnicodeDecodeError as e:
        raise DecryptionError(f"Plaintext is not valid UTF-8: {e}") from e
