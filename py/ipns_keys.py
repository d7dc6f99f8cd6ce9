from __future__ import annotations

import os
import sys
import argparse

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from ipns import (
    IPNSKeyError,
    SEED_LEN,
    content_hash,
    decode,
    encode,
    get_keys,
)


def print_bundle(seed: bytes) -> None:
    bundle = get_keys(seed)

    print(f"Seed (32 bytes):        {seed.hex()}")
    print(f"Public Key (40 bytes):  {bundle.public_key}")
    print(f"Private Key (68 bytes): {bundle.private_key}")
    print(f"Base36:                 {bundle.base36}")
    print(f"Base32:                 {bundle.base32}")
    print(f"Base16:                 {bundle.base16}")
    print(f"Contenthash:            {bundle.contenthash}")


def print_parsed(address: str) -> None:
    tagged = decode(address)
    addresses = encode(tagged)

    print(f"Address:                {address}")
    print(f"Public Key (40 bytes):  0x{tagged.hex()}")
    print(f"Base36:                 {addresses.base36}")
    print(f"Base32:                 {addresses.base32}")
    print(f"Base16:                 {addresses.base16}")
    print(f"Contenthash:            {content_hash(tagged.hex())}")


def main() -> None:
    parser = argparse.ArgumentParser(description="IPNS ed25519 key generator")
    group = parser.add_mutually_exclusive_group()
    _ = group.add_argument("--seed", type=str, default="", help="32-byte seed (hex); random if omitted")
    _ = group.add_argument("--parse", type=str, default="", help="IPNS address to decode (ipns://k..., b..., f...)")

    args = parser.parse_args()

    try:
        if args.parse:
            print_parsed(args.parse)
            return

        if args.seed:
            seed = bytes.fromhex(args.seed)
        else:
            seed = os.urandom(SEED_LEN)
        print_bundle(seed)
    except (IPNSKeyError, ValueError) as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
