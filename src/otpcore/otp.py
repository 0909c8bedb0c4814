from typing import Any

from .algorithms import Algorithm, AlgorithmLike

DEFAULT_DIGITS = 6
DEFAULT_ALGORITHM = Algorithm.SHA1


class OTPGenerator(object):
    """
    Base class for OTP generators.

    Holds the configuration shared by HOTP and TOTP generation. Subclasses
    implement ``generate``.
    """

    def __init__(
        self,
        secret_key: bytes,
        digits: int = DEFAULT_DIGITS,
        algorithm: AlgorithmLike = DEFAULT_ALGORITHM,
    ) -> None:
        if digits <= 0:
            raise ValueError("digits must be a positive integer, got {}".format(digits))
        if not isinstance(secret_key, (bytes, bytearray, memoryview)):
            raise TypeError("secret_key must be bytes, got {}".format(type(secret_key).__name__))
        self.secret_key = bytes(secret_key)
        self.digits = digits
        # unknown names fail here rather than on the first generate()
        self.algorithm = Algorithm.from_name(algorithm)

    def generate(self, checksum: bool = False) -> Any:
        """
        Produces a one-time password.

        :param checksum: generate for checking only; the generator's state
            does not advance
        """
        raise NotImplementedError

    def __repr__(self) -> str:
        return "<{} digits={} algorithm={}>".format(type(self).__name__, self.digits, self.algorithm.name)
