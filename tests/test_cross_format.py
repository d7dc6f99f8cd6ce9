#!/usr/bin/env python3
"""
Cross-format agreement between the base-36, base-32 and base-16 addresses.

Every textual form of a tagged key must decode to the same 40 bytes, and
re-encoding the decoded bytes must reproduce each address exactly.
"""

import unittest
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from ipns import (
    build_public,
    decode,
    encode,
    encode_base36,
)

SAMPLE_PUBKEYS = [
    bytes(32),
    b'\x00' * 31 + b'\x01',
    b'\x00\x00\x00' + b'\xff' * 29,
    b'\xff' * 32,
    bytes(range(32)),
    bytes.fromhex('12c8299ec2c51dffbbcb4f9fccadcee1424cb237e9b30d3cd72d47c18103689d'),
]


class TestCrossFormat(unittest.TestCase):
    """All three bases agree once decoded."""

    def test_all_forms_decode_identically(self):
        for pub in SAMPLE_PUBKEYS:
            tagged = build_public(pub)
            decoded = {decode(addr) for addr in encode(tagged)}
            self.assertEqual(decoded, {tagged}, pub.hex())

    def test_decode_then_encode_reproduces_address(self):
        for pub in SAMPLE_PUBKEYS:
            for addr in encode(build_public(pub)):
                self.assertIn(addr, encode(decode(addr)))

    def test_bare_and_scheme_forms_agree(self):
        for pub in SAMPLE_PUBKEYS:
            for addr in encode(build_public(pub)):
                self.assertEqual(decode(addr), decode(addr[len('ipns://'):]))

    def test_zero_key_base36_pads_back(self):
        tagged = build_public(bytes(32))
        addr = encode_base36(tagged)
        self.assertEqual(decode(addr), tagged)
        self.assertEqual(decode(addr)[8:], bytes(32))


class TestAddressShape(unittest.TestCase):

    def test_base32_length(self):
        # 40 bytes = 320 bits = 64 base-32 characters exactly
        for pub in SAMPLE_PUBKEYS:
            self.assertEqual(len(encode(build_public(pub)).base32), len('ipns://b') + 64)

    def test_base16_length(self):
        for pub in SAMPLE_PUBKEYS:
            self.assertEqual(len(encode(build_public(pub)).base16), len('ipns://f') + 80)

    def test_base36_prefix(self):
        # The fixed tag pins the leading base-36 digits
        for pub in SAMPLE_PUBKEYS:
            self.assertTrue(encode(build_public(pub)).base36.startswith('ipns://k51qzi5uqu5d'))


if __name__ == "__main__":
    unittest.main(verbosity=2)
