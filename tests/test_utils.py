"""Tests for the truncation and encoding helpers."""

import pytest

from otpcore import Algorithm, utils

RFC4226_SECRET = b"12345678901234567890"


def test_dynamic_truncate_rfc_sample():
    digest = bytes.fromhex("1f8698690e02ca16618550ef7f19da8e945b555a")
    assert utils.dynamic_truncate(digest) == 0x50EF7F19


def test_dynamic_truncate_clears_top_bit():
    # offset 0, first four bytes all 0xff
    digest = b"\xff" * 4 + b"\x00" * 15 + b"\x00"
    assert utils.dynamic_truncate(digest) == 0x7FFFFFFF


def test_dynamic_truncate_uses_last_nibble_as_offset():
    digest = bytearray(64)
    digest[15:19] = b"\x12\x34\x56\x78"
    digest[-1] = 0xAF
    assert utils.dynamic_truncate(bytes(digest)) == 0x12345678


def test_dynamic_truncate_rejects_short_digest():
    with pytest.raises(ValueError):
        utils.dynamic_truncate(b"\x00" * 19)


@pytest.mark.parametrize(
    "value, digits, expected",
    [
        (1284755224, 6, 755224),
        (1284755224, 8, 84755224),
        (1284755224, 1, 4),
        (1284755224, 9, 284755224),
        (1284755224, 10, 1284755224),
        (1284755224, 12, 1284755224),
        (82162583, 8, 82162583),
    ],
)
def test_truncate(value, digits, expected):
    assert utils.truncate(value, digits) == expected


@pytest.mark.parametrize("digits", [0, -1])
def test_truncate_rejects_non_positive_digits(digits):
    with pytest.raises(ValueError):
        utils.truncate(1284755224, digits)


def test_int_to_bytestring():
    assert utils.int_to_bytestring(0) == b"\x00" * 8
    assert utils.int_to_bytestring(1) == b"\x00" * 7 + b"\x01"
    assert utils.int_to_bytestring(0x23523EC) == bytes.fromhex("00000000023523ec")
    assert utils.int_to_bytestring(2**63 - 1) == b"\x7f" + b"\xff" * 7


def test_int_to_bytestring_negative_is_twos_complement():
    assert utils.int_to_bytestring(-1) == b"\xff" * 8
    assert utils.int_to_bytestring(-(2**63)) == b"\x80" + b"\x00" * 7


@pytest.mark.parametrize("counter", [2**63, 2**64 - 1, 2**64, -(2**63) - 1])
def test_int_to_bytestring_rejects_out_of_range(counter):
    with pytest.raises(ValueError):
        utils.int_to_bytestring(counter)


def test_hmac_digest_rfc4226_intermediate_value():
    digest = utils.hmac_digest(Algorithm.SHA1, RFC4226_SECRET, utils.int_to_bytestring(0))
    assert digest.hex() == "cc93cf18508d94934c64b65d8ba7667fb7cde4b0"
    assert utils.dynamic_truncate(digest) == 0x4C93CF18


@pytest.mark.parametrize("algorithm, size", [("SHA1", 20), ("SHA256", 32), ("SHA512", 64)])
def test_hmac_digest_sizes(algorithm, size):
    assert len(utils.hmac_digest(algorithm, b"key", b"message")) == size


def test_hmac_digest_rejects_unknown_algorithm():
    with pytest.raises(ValueError):
        utils.hmac_digest("MD5", b"key", b"message")


def test_format_otp_zero_pads():
    assert utils.format_otp(7081804, 8) == "07081804"
    assert utils.format_otp(755224, 6) == "755224"
    assert utils.format_otp(0, 6) == "000000"


def test_otp_matches():
    assert utils.otp_matches("07081804", 7081804, 8)
    assert utils.otp_matches(7081804, 7081804, 8)
    # fullwidth digits normalize to ASCII
    assert utils.otp_matches("７５５２２４", 755224, 6)
    assert not utils.otp_matches("7081804", 7081804, 8)
    assert not utils.otp_matches("755225", 755224, 6)
