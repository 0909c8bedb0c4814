import enum
import hashlib
from typing import Any, Callable, Union


class Algorithm(enum.Enum):
    """
    HMAC algorithms usable for OTP generation.

    Each member maps to its hashlib constructor and the size of the digest it
    produces; dynamic truncation needs at least 20 bytes, which all three give.
    """

    SHA1 = ("sha1", 20)
    SHA256 = ("sha256", 32)
    SHA512 = ("sha512", 64)

    def __init__(self, hash_name: str, digest_size: int) -> None:
        self.hash_name = hash_name
        self.digest_size = digest_size

    @property
    def digest(self) -> Callable[..., Any]:
        return getattr(hashlib, self.hash_name)

    @classmethod
    def from_name(cls, name: Union["Algorithm", str]) -> "Algorithm":
        """
        Resolves an algorithm from a member or one of its common spellings.

        Accepted: "SHA1", "sha1", "SHA-256", "HmacSHA512".

        :param name: algorithm member or name
        :returns: the matching member
        """
        if isinstance(name, cls):
            return name
        if not isinstance(name, str):
            raise ValueError("Invalid algorithm {!r}, must be SHA1, SHA256 or SHA512".format(name))

        key = name.upper().replace("-", "")
        if key.startswith("HMAC"):
            key = key[len("HMAC") :]
        try:
            return cls[key]
        except KeyError:
            raise ValueError("Invalid algorithm {!r}, must be SHA1, SHA256 or SHA512".format(name)) from None


AlgorithmLike = Union[Algorithm, str]
