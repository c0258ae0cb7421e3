"""Tests for deterministic identity key derivation."""

import os
import pytest
from sigcrypt.derivation import derive_seed, derive_identity_keypair, signature_from_hex
from sigcrypt.keys import generate_keypair, is_clamped
from sigcrypt.types import InvalidHexInputError, KeyDerivationError
from .test_vectors import ABC_SEED_HEX, MOCK_SIGNATURE_HEX


class TestSeedDerivation:
    """Test signature -> seed derivation."""

    def test_known_vector(self) -> None:
        """Seed is clamped SHA-256 of the signature."""
        assert derive_seed(b"abc").hex() == ABC_SEED_HEX

    @pytest.mark.parametrize("size", [1, 32, 64, 65, 1000])
    def test_any_length_accepted(self, size: int) -> None:
        """The hash normalizes any signature length."""
        seed = derive_seed(os.urandom(size))

        assert len(seed) == 32
        assert is_clamped(seed)

    def test_empty_signature_rejected(self) -> None:
        """Empty signatures cannot seed a key."""
        with pytest.raises(KeyDerivationError, match="empty"):
            derive_seed(b"")

    def test_different_signatures_different_seeds(self) -> None:
        """Distinct signatures give distinct seeds."""
        assert derive_seed(b"signature-1") != derive_seed(b"signature-2")


class TestIdentityKeyPair:
    """Test signature -> key pair composition."""

    def test_deterministic(self) -> None:
        """Repeated derivation gives bit-identical key pairs."""
        signature = os.urandom(65)
        keypairs = [derive_identity_keypair(signature) for _ in range(5)]

        assert all(kp == keypairs[0] for kp in keypairs)

    def test_matches_manual_composition(self) -> None:
        """derive_identity_keypair == generate_keypair(derive_seed(sig))."""
        signature = os.urandom(64)
        assert derive_identity_keypair(signature) == generate_keypair(derive_seed(signature))

    def test_hex_signature(self) -> None:
        """Hex signatures are parsed before hashing."""
        raw = signature_from_hex(MOCK_SIGNATURE_HEX)

        assert len(raw) == 64
        assert derive_identity_keypair(MOCK_SIGNATURE_HEX) == derive_identity_keypair(raw)
        assert derive_identity_keypair(MOCK_SIGNATURE_HEX[2:]) == derive_identity_keypair(raw)

    def test_invalid_hex_signature(self) -> None:
        """Malformed hex signatures are rejected."""
        with pytest.raises(InvalidHexInputError):
            derive_identity_keypair("0xnot-a-signature")

    def test_empty_hex_signature(self) -> None:
        """A bare prefix is an empty signature."""
        with pytest.raises(KeyDerivationError):
            derive_identity_keypair("0x")
