import hmac
import struct
import unicodedata
from hmac import compare_digest
from typing import Union

from .algorithms import Algorithm, AlgorithmLike

# Powers of ten for the common digit counts, indexed by digit count.
DIGITS_POWER = (1, 10, 100, 1000, 10000, 100000, 1000000, 10000000, 100000000)

MIN_DIGEST_SIZE = 20


def hmac_digest(algorithm: AlgorithmLike, key: bytes, message: bytes) -> bytes:
    """
    Computes HMAC(key, message) with the selected algorithm.

    :param algorithm: an Algorithm member or its name
    :param key: the shared secret
    :param message: the data to authenticate, usually the encoded counter
    :returns: raw digest bytes
    """
    algorithm = Algorithm.from_name(algorithm)
    return hmac.new(key, message, algorithm.digest).digest()


def dynamic_truncate(digest: bytes) -> int:
    """
    RFC 4226 section 5.3 dynamic truncation.

    The low nibble of the last byte selects where 4 bytes are read from; the
    top bit of the result is cleared so it always fits in 31 bits.

    :param digest: HMAC digest, at least 20 bytes long
    :returns: non-negative 31-bit integer
    """
    if len(digest) < MIN_DIGEST_SIZE:
        raise ValueError("digest must be at least {} bytes, got {}".format(MIN_DIGEST_SIZE, len(digest)))
    digest = bytearray(digest)
    offset = digest[-1] & 0xF
    return (
        (digest[offset] & 0x7F) << 24
        | (digest[offset + 1] & 0xFF) << 16
        | (digest[offset + 2] & 0xFF) << 8
        | (digest[offset + 3] & 0xFF)
    )


def truncate(value: int, digits: int) -> int:
    """
    Folds a truncated digest value into its last ``digits`` decimal digits.
    """
    if digits <= 0:
        raise ValueError("digits must be a positive integer, got {}".format(digits))
    if digits < len(DIGITS_POWER):
        return value % DIGITS_POWER[digits]
    return value % 10**digits


def int_to_bytestring(i: int) -> bytes:
    """
    Turns a signed 64-bit counter into the 8-byte big-endian string fed to
    the HMAC. Negative counters are written as their two's complement.
    """
    try:
        return struct.pack(">q", i)
    except struct.error as e:
        raise ValueError("counter {} does not fit in 64 bits".format(i)) from e


def format_otp(value: int, digits: int) -> str:
    # 287082 with 8 digits -> "00287082"
    return str(value).zfill(digits)


def strings_equal(s1: str, s2: str) -> bool:
    """
    Timing-attack resistant string comparison.

    Normal comparison using == will short-circuit on the first mismatching
    character. This avoids that by scanning the whole string, though we
    still reveal to a timing attack whether the strings are the same
    length.
    """
    s1 = unicodedata.normalize("NFKC", s1)
    s2 = unicodedata.normalize("NFKC", s2)
    return compare_digest(s1.encode("utf-8"), s2.encode("utf-8"))


def otp_matches(otp: Union[int, str], value: int, digits: int) -> bool:
    """
    Compares a user supplied code against a computed value.

    Integers are compared against the zero-padded rendering of ``value`` so
    that 7081804 and "07081804" both match an 8 digit code.
    """
    if isinstance(otp, int):
        otp = format_otp(otp, digits)
    return strings_equal(str(otp), format_otp(value, digits))
