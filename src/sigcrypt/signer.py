"""
Signing oracle interface for identity key recovery.

A user's identity key pair is never stored. Instead the user is asked to sign
a fixed, versioned key-generation message, and the key pair is recomputed from
the signature (see derivation.py). The signer must be deterministic for the
same message, or the recovered key changes between sessions.
"""

import asyncio
import json
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional, Union

from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey

from .crypto import decrypt_with_private_key
from .derivation import derive_identity_keypair, signature_from_hex
from .keys import KeyPair, fingerprint
from .types import (
    KEY_GENERATION_DOMAIN_NAME,
    KEY_GENERATION_DOMAIN_VERSION,
    KEY_GENERATION_PRIMARY_TYPE,
    KEY_GENERATION_PURPOSE,
    KeyDerivationError,
    SigningError,
    SigningTimeoutError,
    UserRejectedSigningError,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KeyGenerationRequest:
    """
    The structured message signed to recover an identity key.

    Attributes:
        domain_name: Name of the signing domain.
        domain_version: Version of the message template.
        purpose: Human-readable statement shown to the signer.
    """

    domain_name: str = KEY_GENERATION_DOMAIN_NAME
    domain_version: str = KEY_GENERATION_DOMAIN_VERSION
    purpose: str = KEY_GENERATION_PURPOSE

    def to_typed_data(self) -> dict:
        """Render the request in typed-data form (domain, types, message)."""
        return {
            "domain": {
                "name": self.domain_name,
                "version": self.domain_version,
            },
            "types": {
                KEY_GENERATION_PRIMARY_TYPE: [
                    {"name": "purpose", "type": "string"},
                ],
            },
            "primaryType": KEY_GENERATION_PRIMARY_TYPE,
            "message": {
                "purpose": self.purpose,
            },
        }

    def to_bytes(self) -> bytes:
        """Canonical byte encoding: compact JSON with sorted keys."""
        return json.dumps(
            self.to_typed_data(), sort_keys=True, separators=(",", ":")
        ).encode("utf-8")


class SigningOracle(ABC):
    """Interface for an external signer of key-generation requests."""

    @abstractmethod
    async def sign(self, request: KeyGenerationRequest) -> bytes:
        """
        Sign a key-generation request.

        Raises:
            UserRejectedSigningError: If the operator declines the request.
        """
        ...


SignCallback = Callable[[dict], Awaitable[Union[bytes, str]]]


class CallbackSigningOracle(SigningOracle):
    """
    Signing oracle backed by an async callback.

    The callback receives the typed-data dict and returns the signature as
    raw bytes or hex text, matching the shape of a wallet's typed-data
    signing call. Callbacks signal a declined request by raising
    UserRejectedSigningError.
    """

    def __init__(self, callback: SignCallback) -> None:
        self._callback = callback

    async def sign(self, request: KeyGenerationRequest) -> bytes:
        """Sign a request through the callback."""
        result: Any = await self._callback(request.to_typed_data())

        if isinstance(result, str):
            return signature_from_hex(result)
        if isinstance(result, (bytes, bytearray)):
            return bytes(result)
        raise SigningError(f"Signer returned {type(result).__name__}, expected bytes or hex")


class Ed25519SigningOracle(SigningOracle):
    """
    Signing oracle using a local Ed25519 key.

    Ed25519 signatures are deterministic, so the same key always recovers the
    same identity key pair.
    """

    def __init__(self, signing_key: Union[Ed25519PrivateKey, bytes]) -> None:
        if isinstance(signing_key, (bytes, bytearray)):
            if len(signing_key) != 32:
                raise SigningError(f"Signing key must be 32 bytes, got {len(signing_key)}")
            signing_key = Ed25519PrivateKey.from_private_bytes(bytes(signing_key))
        self._signing_key = signing_key

    async def sign(self, request: KeyGenerationRequest) -> bytes:
        """Sign the canonical request bytes."""
        return self._signing_key.sign(request.to_bytes())


async def obtain_identity_keypair(
    oracle: SigningOracle,
    request: Optional[KeyGenerationRequest] = None,
    timeout: Optional[float] = None,
) -> KeyPair:
    """
    Ask the oracle for a signature and derive the identity key pair from it.

    The call is made once; retrying after a rejection is up to the caller.

    Args:
        oracle: The signing oracle to query.
        request: The message to sign (defaults to the standard template).
        timeout: Optional number of seconds to wait for the oracle.

    Returns:
        The identity KeyPair.

    Raises:
        UserRejectedSigningError: If the oracle's operator declined.
        SigningTimeoutError: If the oracle did not answer within timeout.
        SigningError: If the oracle returned an unusable result.
    """
    request = request or KeyGenerationRequest()

    try:
        if timeout is None:
            signature = await oracle.sign(request)
        else:
            signature = await asyncio.wait_for(oracle.sign(request), timeout)
    except asyncio.TimeoutError as e:
        raise SigningTimeoutError(f"Signing oracle did not answer within {timeout}s") from e
    except UserRejectedSigningError:
        logger.debug("Key generation request rejected by signer")
        raise

    keypair = derive_identity_keypair(signature)
    logger.debug("Derived identity key %s", fingerprint(keypair.public_key))
    return keypair


async def decrypt_with_oracle(
    oracle: SigningOracle,
    envelope_text: str,
    request: Optional[KeyGenerationRequest] = None,
    timeout: Optional[float] = None,
) -> bytes:
    """
    Recover our identity key from the oracle and decrypt an envelope with it.

    The recovered key pair is used for this call only.

    Raises:
        UserRejectedSigningError: If the oracle's operator declined.
        AuthenticationFailedError: If the envelope is not addressed to the
            recovered identity or was tampered with.
    """
    keypair = await obtain_identity_keypair(oracle, request, timeout)
    return decrypt_with_private_key(keypair.private_key, envelope_text)


async def check_signer_determinism(
    oracle: SigningOracle,
    request: Optional[KeyGenerationRequest] = None,
) -> KeyPair:
    """
    Recover the identity key twice and confirm both attempts agree.

    A randomized signer would make earlier messages undecryptable, so this
    should be run once before publishing a public key.

    Returns:
        The identity KeyPair.

    Raises:
        KeyDerivationError: If the two recovered key pairs differ.
    """
    first = await obtain_identity_keypair(oracle, request)
    second = await obtain_identity_keypair(oracle, request)

    if first != second:
        raise KeyDerivationError(
            "Signer is not deterministic: key regeneration produced a different key"
        )
    return first
