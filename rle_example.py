"""
Example script: compress and decompress sample buffers with RLE.
"""

from buffer_printer import describe_records, print_buffer
from RLE import decode, encode

SAMPLE = bytes([
    0x03, 0x74, 0x04, 0x04, 0x04, 0x35, 0x35, 0x64,
    0x64, 0x64, 0x64, 0x00, 0x00, 0x00, 0x00, 0x00,
    0x56, 0x45, 0x56, 0x56, 0x56, 0x09, 0x09, 0x09,
])

# більше 255 однакових байтів підряд
LONG_RUN = bytes([0x74] * 256)


def run_example(name: str, data: bytes, show_bits: bool = False):
    print(f"\n{name}: {len(data)} bytes")
    print_buffer(data)

    encoded = encode(data)
    print(f"Encoded: {len(encoded)} bytes")
    print_buffer(encoded, show_bits=show_bits)
    for record in describe_records(encoded):
        print(f"  {record}")

    decoded = decode(encoded)
    print(f"Decoded: {len(decoded)} bytes")
    print_buffer(decoded)
    if decoded != data:
        raise ValueError(f"Round trip failed for {name}")


def main():
    run_example("Mixed buffer", SAMPLE, show_bits=True)
    run_example("Long run", LONG_RUN)
    run_example("High-bit bytes", bytes([0xC8, 0x10, 0xFF, 0xFF, 0xFF]), show_bits=True)


if __name__ == "__main__":
    main()
