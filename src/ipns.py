"""
IPNS public-key identity codec.

Tags a raw ed25519 public key with the libp2p protobuf prefix and renders the
40-byte result as the textual addresses IPNS understands:

    ipns://k...   multibase base36 (lower case)
    ipns://b...   multibase base32 (RFC 4648, lower case, no padding)
    ipns://f...   multibase base16 (lower-case hex)

Decoding accepts any of the three, with or without the scheme, in any case,
and always validates length and prefix on the hex form.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

from multiformats import multibase

from ipns_errors import (
    IPNSKeyError,
    InvalidDigit,
    InvalidLength,
    InvalidPrefix,
    InvalidSeedLength,
    UnsupportedFormat,
)
from keymaterial import SEED_LEN, PUBLIC_KEY_LEN, public_key_from_seed

# Constants
IPNS_SCHEME = "ipns://"
# libp2p-key multicodec (0x72) + identity multihash (0x00, 36 bytes) + protobuf Ed25519 header
PUBLIC_KEY_PREFIX = bytes([0x01, 0x72, 0x00, 0x24, 0x08, 0x01, 0x12, 0x20])
PRIVATE_KEY_PREFIX = bytes([0x08, 0x01, 0x12, 0x40])
PUBLIC_KEY_HEX_PREFIX = PUBLIC_KEY_PREFIX.hex()
TAGGED_KEY_LEN = len(PUBLIC_KEY_PREFIX) + PUBLIC_KEY_LEN  # 40
TAGGED_KEY_HEX_LEN = TAGGED_KEY_LEN * 2  # 80
# ipns-ns (0xe5) as unsigned varint
CONTENTHASH_PREFIX = "e501"

# multibase code -> multibase encoding name
SUPPORTED_BASES = {
    "k": "base36",
    "b": "base32",
    "f": "base16",
}


class Addresses(NamedTuple):
    base36: str
    base32: str
    base16: str


@dataclass(frozen=True)
class KeyBundle:
    public_key: str
    private_key: str
    base36: str
    base32: str
    base16: str
    contenthash: str

    def as_dict(self) -> dict[str, str]:
        return {
            'publicKey': self.public_key,
            'privateKey': self.private_key,
            'base36': self.base36,
            'base32': self.base32,
            'base16': self.base16,
            'contenthash': self.contenthash,
        }


def build_public(pubkey: bytes) -> bytes:
    """Prefix a raw 32-byte public key with the IPNS key tag (40 bytes total)."""
    if len(pubkey) != PUBLIC_KEY_LEN:
        raise InvalidLength(f"Public key must be {PUBLIC_KEY_LEN} bytes (got {len(pubkey)})")
    return PUBLIC_KEY_PREFIX + bytes(pubkey)


def build_private(seed: bytes, pubkey: bytes) -> bytes:
    """Return prefix || seed || pubkey (68 bytes), the libp2p private key export."""
    if len(seed) != SEED_LEN:
        raise InvalidSeedLength(f"Seed must be {SEED_LEN} bytes (got {len(seed)})")
    if len(pubkey) != PUBLIC_KEY_LEN:
        raise InvalidLength(f"Public key must be {PUBLIC_KEY_LEN} bytes (got {len(pubkey)})")
    return PRIVATE_KEY_PREFIX + bytes(seed) + bytes(pubkey)


def _check_hex(hex_key: str) -> None:
    if len(hex_key) != TAGGED_KEY_HEX_LEN or not hex_key.startswith(PUBLIC_KEY_HEX_PREFIX):
        raise InvalidPrefix(hex_key)


def _check_tagged(tagged: bytes) -> None:
    # Refuse to render something decode() would reject.
    _check_hex(bytes(tagged).hex())


def _encode_base(tagged: bytes, code: str) -> str:
    _check_tagged(tagged)
    return multibase.encode(bytes(tagged), SUPPORTED_BASES[code])


def encode_base16(tagged: bytes) -> str:
    return _encode_base(tagged, "f")


def encode_base32(tagged: bytes) -> str:
    return _encode_base(tagged, "b")


def encode_base36(tagged: bytes) -> str:
    return _encode_base(tagged, "k")


def encode(tagged: bytes) -> Addresses:
    """Render a tagged public key as the three ipns:// addresses."""
    return Addresses(
        base36=IPNS_SCHEME + encode_base36(tagged),
        base32=IPNS_SCHEME + encode_base32(tagged),
        base16=IPNS_SCHEME + encode_base16(tagged),
    )


def format_public_key(tagged: bytes) -> str:
    """Format a tagged public key as its canonical 'ipns://k...' address."""
    return IPNS_SCHEME + encode_base36(tagged)


def _multibase_decode(encoded: str) -> bytes:
    try:
        base, raw = multibase.decode_raw(encoded)
    except KeyError:
        raise UnsupportedFormat(f"Unsupported base-x format: {encoded[:1]!r}") from None
    except ValueError as e:
        raise InvalidDigit(f"Invalid {SUPPORTED_BASES[encoded[0]]} payload: {e}") from None
    if base.name != SUPPORTED_BASES[encoded[0]]:
        raise UnsupportedFormat(f"Unexpected multibase encoding: {base.name}")
    return raw


def decode(address: str) -> bytes:
    """
    Parse an IPNS address ('ipns://k...', 'b...', 'F...', etc.) into the
    40-byte tagged public key.

    Raises:
        UnsupportedFormat: not ASCII, or base indicator is not one of k, b, f
        InvalidDigit: payload has a character outside its base's alphabet
        InvalidPrefix: decoded key is not 40 bytes or lacks the IPNS key tag
    """
    if not address.isascii():
        raise UnsupportedFormat(f"Non-ASCII IPNS address: {address!r}")
    address = address.lower()
    if address.startswith(IPNS_SCHEME):
        address = address[len(IPNS_SCHEME):]

    code = address[:1]
    if code not in SUPPORTED_BASES:
        raise UnsupportedFormat(f"Unsupported base-x format: {code!r}")

    if code == "f":
        # Hex payload is already the intermediate form; check it before decoding.
        _check_hex(address[1:])

    hex_key = _multibase_decode(address).hex()
    if code == "k":
        # Leading zero bytes vanish in the integer, so pad back to full width.
        hex_key = hex_key.rjust(TAGGED_KEY_HEX_LEN, '0')

    _check_hex(hex_key)
    return bytes.fromhex(hex_key)


parse_address = decode


def content_hash(tagged_hex: str) -> str:
    """ENS-style contenthash: 0x + ipns-ns varint + tagged key hex."""
    if tagged_hex.startswith("0x"):
        tagged_hex = tagged_hex[2:]
    return "0x" + CONTENTHASH_PREFIX + tagged_hex


def get_keys(seed: bytes) -> KeyBundle:
    """Derive the ed25519 key pair for a seed and render every IPNS form of it."""
    pubkey = public_key_from_seed(seed)
    tagged = build_public(pubkey)
    hex_key = tagged.hex()
    addresses = encode(tagged)

    return KeyBundle(
        public_key=f"0x{hex_key}",
        private_key=f"0x{build_private(seed, pubkey).hex()}",
        base36=addresses.base36,
        base32=addresses.base32,
        base16=addresses.base16,
        contenthash=content_hash(hex_key),
    )
