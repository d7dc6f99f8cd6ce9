"""
ed25519 key material from a 32-byte seed, backed by the cryptography package.
"""

from cryptography.hazmat.primitives.asymmetric import ed25519
from cryptography.hazmat.primitives import serialization

from ipns_errors import InvalidSeedLength

SEED_LEN = 32
PUBLIC_KEY_LEN = 32


def public_key_from_seed(seed: bytes) -> bytes:
    """Return the raw 32-byte ed25519 public key for a 32-byte seed."""
    if len(seed) != SEED_LEN:
        raise InvalidSeedLength(f"Seed must be {SEED_LEN} bytes (got {len(seed)})")
    private_key = ed25519.Ed25519PrivateKey.from_private_bytes(bytes(seed))
    return private_key.public_key().public_bytes(
        encoding=serialization.Encoding.Raw,
        format=serialization.PublicFormat.Raw
    )
