from typing import List

from bitarray import bitarray

from RLE import MASK, read_record


def format_buffer(data: bytes) -> str:
    """
    Форматує буфер як список hex-значень у фігурних дужках: {3, 74, 84}.
    """
    return "{" + ", ".join(f"{byte:x}" for byte in bytes(data)) + "}"


def format_bits(data: bytes) -> str:
    """
    Повертає бітове представлення буфера, по вісім біт на байт (старший біт першим).
    Старший біт кожної групи показує, чи є байт тегом серії.
    """
    bits = bitarray(endian="big")
    bits.frombytes(bytes(data))
    text = bits.to01()
    return " ".join(text[i : i + 8] for i in range(0, len(text), 8))


def describe_records(encoded: bytes) -> List[str]:
    """Splits an encoded stream into human readable records."""
    encoded = bytes(encoded)
    records = []
    pos = 0
    while pos < len(encoded):
        is_run = encoded[pos] & MASK
        value, repeat, pos = read_record(encoded, pos)
        if is_run:
            records.append(f"run 0x{value:02x} x{repeat}")
        else:
            records.append(f"literal 0x{value:02x}")
    return records


def print_buffer(data: bytes, show_bits: bool = False):
    print(format_buffer(data))
    if show_bits:
        print(format_bits(data))
