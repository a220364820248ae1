"""
Run-Length Encoding (RLE) Compression Module

Encoded stream layout (records are concatenated, no header):
    literal     one byte 0x00..0x7F, copied as is
    run record  tag byte (value | 0x80)
                [0x00 marker if the value itself is >= 0x80]
                zero or more 0xFF continuation bytes, each adding 127
                terminator byte 0x01..0x7F with the remaining count
"""

from typing import BinaryIO, Tuple

from compressor_ABC import Compressor

MASK = 0x80
CONTINUATION = 0xFF
MAX_CHUNK = 127
HIGH_VALUE_MARKER = 0x00


class MalformedStream(ValueError):
    """Encoded stream ends in the middle of a run record."""


def repeats(data: bytes, start_index: int) -> int:
    """
    Counts how many bytes in a row equal data[start_index].

    Args:
        data: Input buffer
        start_index: Position of the first byte of the run

    Returns:
        Run length, at least 1
    """
    data_size = len(data)
    if not 0 <= start_index < data_size:
        raise ValueError(f"Start index {start_index} is outside buffer of {data_size} bytes")

    end = start_index
    while end < data_size - 1 and data[end] == data[end + 1]:
        end += 1
    return end - start_index + 1


def encode_length(length: int) -> bytes:
    """Splits a run length into 0xFF continuation bytes and a terminator."""
    if length < 1:
        raise ValueError(f"Run length must be positive, got {length}")

    out = bytearray()
    while length > MAX_CHUNK:
        out.append(CONTINUATION)
        length -= MAX_CHUNK
    out.append(length)
    return bytes(out)


def decode_length(data: bytes, index: int) -> Tuple[int, int]:
    """
    Reads a run length starting at data[index].

    Returns:
        (length, index of the first byte after the terminator)
    """
    start = index
    data_size = len(data)
    length = 0
    while index < data_size and data[index] & MASK:
        length += MAX_CHUNK
        index += 1
    if index >= data_size:
        raise MalformedStream(f"Run length at byte {start} has no terminator")
    length += data[index]
    return length, index + 1


def encode(data: bytes) -> bytes:
    """
    Compress data using RLE.

    Bytes with the high bit set are always written as run records, even
    when they do not repeat, so a decoder never mistakes them for tags.

    Args:
        data: Input data as bytes

    Returns:
        Encoded stream as a new bytes object
    """
    data = bytes(data)
    result = bytearray()
    pos = 0

    while pos < len(data):
        value = data[pos]
        repeat = repeats(data, pos)

        if repeat == 1 and not value & MASK:
            result.append(value)
        else:
            result.append(value | MASK)
            if value & MASK:
                result.append(HIGH_VALUE_MARKER)
            result.extend(encode_length(repeat))
        pos += repeat

    return bytes(result)


def read_record(data: bytes, pos: int) -> Tuple[int, int, int]:
    """
    Reads one literal or run record starting at data[pos].

    Returns:
        (value, repeat, position of the next record); a literal has repeat 1

    Raises:
        MalformedStream: if a run record is cut short or has zero length
    """
    byte = data[pos]
    if not byte & MASK:
        return byte, 1, pos + 1

    tag_pos = pos
    value = byte ^ MASK
    pos += 1
    if pos < len(data) and data[pos] == HIGH_VALUE_MARKER:
        value |= MASK
        pos += 1

    repeat, pos = decode_length(data, pos)
    if repeat == 0:
        raise MalformedStream(f"Run at byte {tag_pos} has zero length")
    return value, repeat, pos


def decode(data: bytes) -> bytes:
    """
    Decompress an RLE stream produced by encode().

    Args:
        data: Encoded stream

    Returns:
        Original data as bytes

    Raises:
        MalformedStream: if a run record is cut short or has zero length
    """
    data = bytes(data)
    result = bytearray()
    pos = 0

    while pos < len(data):
        value, repeat, pos = read_record(data, pos)
        result.extend(bytes([value]) * repeat)

    return bytes(result)


def count_records(data: bytes) -> Tuple[int, int]:
    """Returns (runs, literals) found in an encoded stream."""
    data = bytes(data)
    runs = literals = 0
    pos = 0
    while pos < len(data):
        if data[pos] & MASK:
            runs += 1
        else:
            literals += 1
        _, _, pos = read_record(data, pos)
    return runs, literals


class RLECompressor(Compressor):
    """Class for RLE compression and decompression"""

    def compress(self, input_stream: BinaryIO, output_stream: BinaryIO) -> str:
        data = input_stream.read()
        if self.verbose:
            print(f"Compressing {len(data)} bytes")

        encoded = encode(data)
        output_stream.write(encoded)

        if self.verbose:
            runs, literals = count_records(encoded)
            print(f"Written {len(encoded)} encoded bytes")
            print(f"Encoded {runs} runs, {literals} literals")
        return self.size_report(len(data), len(encoded))

    def decompress(self, input_stream: BinaryIO, output_stream: BinaryIO) -> str:
        blob = input_stream.read()
        if self.verbose:
            print(f"Decompressing {len(blob)} bytes")

        data = decode(blob)
        output_stream.write(data)

        if self.verbose:
            print(f"Decompressed {len(data)} bytes")
        return self.size_report(len(blob), len(data))

    @classmethod
    def compress_file(cls, input_file: str, output_file: str = "compressed_rle.bin") -> str:
        return super().compress_file(input_file, output_file)

    @classmethod
    def decompress_file(
        cls, input_file: str = "compressed_rle.bin", output_file: str = "decompressed_rle"
    ) -> str:
        return super().decompress_file(input_file, output_file)
