"""Test vectors for sigcrypt."""

# RFC 7748 section 6.1 X25519 vectors (private keys as given, before clamping)
ALICE_PRIVATE_KEY_HEX = "77076d0a7318a57d3c16c17251b26645df4c2f87ebc0992ab177fba51db92c2a"
ALICE_PUBLIC_KEY_HEX = "8520f0098930a754748b7ddcb43ef75a0dbf3a0d26381af4eba4a98eaa9b4e6a"
BOB_PRIVATE_KEY_HEX = "5dab087e624a8a4b79e17f8b83800ee66f3bb1292618b6fd1c2f8b27ff88e0eb"
BOB_PUBLIC_KEY_HEX = "de9edb7d7b7dc1b4d35b61c2ece435373f8343c85b78674dadfc7e146f882b4f"
SHARED_SECRET_HEX = "4a5d9d5ba4ce2de1728e3bf480350f25e07e21c947d19e3376f09b3c1e161742"

# Clamped form of Alice's private key
ALICE_CLAMPED_PRIVATE_KEY_HEX = "70076d0a7318a57d3c16c17251b26645df4c2f87ebc0992ab177fba51db92c6a"

# SHA-256("abc") = ba7816bf...f20015ad, clamped
ABC_SEED_HEX = "b87816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f200156d"

# Signature returned by a wallet-style signer, as hex text
MOCK_SIGNATURE_HEX = (
    "0x1234567890abcdef1234567890abcdef1234567890abcdef1234567890abcdef"
    "1234567890abcdef1234567890abcdef1234567890abcdef1234567890abcdef"
)

# Zero seed after clamping
ZERO_SEED_CLAMPED_HEX = "00" * 31 + "40"

# Order-8 point on Curve25519 (low-order, yields an all-zero shared secret)
LOW_ORDER_POINT_HEX = "e0eb7a7c3b41b8ae1656e3faf19fc46ada098deb9c32b1fd866205165f49b800"

# Test messages covering edge cases
TEST_MESSAGES = {
    "empty": "",
    "single_char": "X",
    "hex_text": "48656c6c6f",
    "whitespace": "   \t\n   ",
    "punctuation": "!@#$%^&*()_+-=[]{}\\|;':\",./<>?",
    "newlines": "Line 1\nLine 2\nLine 3",
    "emoji": "Hello \U0001F44B World \U0001F30D",
    "chinese": "你好世界 - Hello World",
    "accents": "Café résumé naïve",
    "json": '{"key": "value", "num": 42}',
    "long_text": "The quick brown fox jumps over the lazy dog. " * 100,
}
