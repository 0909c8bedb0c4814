import logging
from dataclasses import dataclass
from typing import Optional, Union

from . import utils
from .algorithms import AlgorithmLike
from .otp import DEFAULT_ALGORITHM, DEFAULT_DIGITS, OTPGenerator

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class HOTP:
    """
    An HMAC-based one-time password and the counter it was derived from.
    """

    value: int
    counter: int


class HOTPGenerator(OTPGenerator):
    """
    Generator for HMAC-based OTP counters (RFC 4226).

    Not thread-safe: ``generate`` reads and then increments ``counter``.
    Share an instance across threads only behind a lock.
    """

    def __init__(
        self,
        secret_key: bytes,
        counter: int = 0,
        digits: int = DEFAULT_DIGITS,
        algorithm: AlgorithmLike = DEFAULT_ALGORITHM,
    ) -> None:
        """
        :param secret_key: shared secret as raw bytes
        :param counter: counter value used by the next ``generate`` call
        :param digits: number of decimal digits in the OTP
        :param algorithm: HMAC algorithm, SHA1 unless given
        """
        super().__init__(secret_key, digits=digits, algorithm=algorithm)
        self.counter = counter

    def at(self, counter: int) -> HOTP:
        """
        Generates the OTP for the given counter without touching ``self.counter``.

        :param counter: the OTP HMAC counter
        :returns: HOTP
        """
        digest = utils.hmac_digest(self.algorithm, self.secret_key, utils.int_to_bytestring(counter))
        value = utils.truncate(utils.dynamic_truncate(digest), self.digits)
        return HOTP(value, counter)

    def generate(self, checksum: bool = False) -> HOTP:
        """
        Generates the OTP for the current counter.

        :param checksum: when True the counter is left as is, so a code can
            be looked at without consuming a counter step
        :returns: HOTP carrying the counter value used
        """
        otp = self.at(self.counter)
        if not checksum:
            self.counter += 1
            log.debug("HOTP counter advanced to %d", self.counter)
        return otp

    def verify(self, otp: Union[int, str], counter: Optional[int] = None) -> bool:
        """
        Verifies an OTP against the code for a counter. Never advances the counter.

        :param otp: the OTP to check, as an int or a zero-padded string
        :param counter: the counter to check against, defaults to the current one
        """
        if counter is None:
            expected = self.generate(checksum=True)
        else:
            expected = self.at(counter)
        return utils.otp_matches(otp, expected.value, self.digits)
