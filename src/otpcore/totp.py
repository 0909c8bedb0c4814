import logging
from dataclasses import dataclass
from typing import Optional, Union

from . import utils
from .algorithms import AlgorithmLike
from .dateprovider import DateProvider, SystemDateProvider
from .hotp import HOTPGenerator
from .otp import DEFAULT_ALGORITHM, DEFAULT_DIGITS, OTPGenerator

log = logging.getLogger(__name__)

DEFAULT_TIME_STEP = 30
DEFAULT_DATE_DECREASE = 0


@dataclass(frozen=True)
class TOTP:
    """
    A time-based one-time password and the half-open window of epoch
    seconds in which it is valid.
    """

    value: int
    time_window: range

    @property
    def window_start(self) -> int:
        return self.time_window.start

    @property
    def window_end(self) -> int:
        return self.time_window.stop


def time_factor(time_step: int, date_decrease: int, date_provider: DateProvider) -> int:
    """
    Computes the RFC 6238 time counter T = (now - T0) / X.

    :param time_step: X, the length of a time window in seconds
    :param date_decrease: T0, the epoch second counting starts from
    :param date_provider: source of "now"
    :returns: the counter to feed to HOTP
    """
    if time_step <= 0:
        raise ValueError("time_step must be a positive integer, got {}".format(time_step))
    now = date_provider.current_time()
    offset = now - date_decrease
    # truncates toward zero, so a time just before T0 still maps to counter 0
    factor = offset // time_step if offset >= 0 else -(-offset // time_step)
    log.debug("time factor %d for t=%d (step=%d, t0=%d)", factor, now, time_step, date_decrease)
    return factor


class TOTPGenerator(OTPGenerator):
    """
    Generator for time-based OTPs (RFC 6238).

    Reuses an inner HOTPGenerator whose counter is overwritten with the time
    factor on every call, so like HOTPGenerator an instance must not be
    shared between threads without a lock.
    """

    def __init__(
        self,
        secret_key: bytes,
        digits: int = DEFAULT_DIGITS,
        algorithm: AlgorithmLike = DEFAULT_ALGORITHM,
        time_step: int = DEFAULT_TIME_STEP,
        date_decrease: int = DEFAULT_DATE_DECREASE,
        date_provider: Optional[DateProvider] = None,
    ) -> None:
        """
        :param secret_key: shared secret as raw bytes
        :param digits: number of decimal digits in the OTP
        :param algorithm: HMAC algorithm, SHA1 unless given
        :param time_step: X, length of a time window in seconds
        :param date_decrease: T0, epoch second time steps are counted from
        :param date_provider: where the current time comes from, the system clock by default
        """
        if time_step <= 0:
            raise ValueError("time_step must be a positive integer, got {}".format(time_step))
        super().__init__(secret_key, digits=digits, algorithm=algorithm)
        self.time_step = time_step
        self.date_decrease = date_decrease
        self.date_provider = date_provider if date_provider is not None else SystemDateProvider()
        self._hotp = HOTPGenerator(self.secret_key, 0, digits=self.digits, algorithm=self.algorithm)

    def time_factor(self) -> int:
        return time_factor(self.time_step, self.date_decrease, self.date_provider)

    def generate(self, checksum: bool = False) -> TOTP:
        """
        Generates the OTP for the current time window.

        :param checksum: accepted for symmetry with HOTPGenerator; time, not
            the number of calls, moves a TOTP forward, so it changes nothing
        :returns: TOTP with its validity window
        """
        factor = self.time_factor()
        self._hotp.counter = factor
        hotp = self._hotp.generate(checksum=True)

        window_start = factor * self.time_step
        return TOTP(hotp.value, range(window_start, window_start + self.time_step))

    def verify(self, otp: Union[int, str]) -> bool:
        """
        Verifies an OTP against the code of the current time window only.

        :param otp: the OTP to check, as an int or a zero-padded string
        """
        return utils.otp_matches(otp, self.generate(checksum=True).value, self.digits)

    def __repr__(self) -> str:
        return "<TOTPGenerator digits={} algorithm={} time_step={} date_decrease={}>".format(
            self.digits, self.algorithm.name, self.time_step, self.date_decrease
        )
