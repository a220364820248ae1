import pytest

import rle_example
from buffer_printer import describe_records, format_bits, format_buffer, print_buffer
from RLE import MalformedStream


def test_format_buffer():
    assert format_buffer(b"\x03\x74\x84") == "{3, 74, 84}"
    assert format_buffer(b"") == "{}"


def test_format_bits():
    assert format_bits(b"\x03\x84") == "00000011 10000100"
    assert format_bits(b"") == ""


def test_describe_records():
    encoded = b"\x03\x84\x03\xc8\x00\x01\xc1\xff\x01"
    assert describe_records(encoded) == [
        "literal 0x03",
        "run 0x04 x3",
        "run 0xc8 x1",
        "run 0x41 x128",
    ]


def test_describe_records_truncated():
    with pytest.raises(MalformedStream):
        describe_records(b"\x84")


def test_print_buffer(capsys):
    print_buffer(b"\x84\x03", show_bits=True)
    assert capsys.readouterr().out == "{84, 3}\n10000100 00000011\n"


def test_example_script(capsys):
    rle_example.main()
    printed = capsys.readouterr().out
    assert "Mixed buffer: 24 bytes" in printed
    assert "Encoded: 16 bytes" in printed
    assert "run 0x74 x256" in printed


def test_describe_records_rejects_zero_length_run():
    with pytest.raises(MalformedStream, match="zero length"):
        describe_records(b"\xc8\x00\x00")


def test_example_reports_failed_round_trip(monkeypatch):
    monkeypatch.setattr(rle_example, "decode", lambda encoded: b"")
    with pytest.raises(ValueError, match="Round trip failed"):
        rle_example.run_example("Broken", b"\x01\x01")
