import os
import sys
import struct

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from keymaterial import public_key_from_seed
from ipns import build_public, encode_base36

OUTPUT = os.path.join(os.path.dirname(__file__), '..', 'testdata', 'ipns_vectors.bin')
BASE36_FIELD_LEN = 64


def main(output: str = OUTPUT, num_vectors: int = 100):
    print(f"Generating {os.path.basename(output)} ({num_vectors} vectors)...")

    os.makedirs(os.path.dirname(os.path.abspath(output)), exist_ok=True)
    with open(output, "wb") as f:
        f.write(struct.pack("<I", num_vectors))

        for i in range(num_vectors):
            # Deterministic seed generation
            seed = bytes([(i * 37 + j * 17 + 123) & 0xff for j in range(32)])

            pub_bytes = public_key_from_seed(seed)
            tagged = build_public(pub_bytes)
            # Drop the 'k' indicator, pad to fixed width
            b36 = encode_base36(tagged)[1:].encode('ascii')

            f.write(seed)
            f.write(pub_bytes)
            f.write(tagged)
            f.write(b36.ljust(BASE36_FIELD_LEN, b'\x00'))

    print(f"Generated {num_vectors} test vectors")


if __name__ == "__main__":
    main(sys.argv[1] if len(sys.argv) > 1 else OUTPUT)
