import logging
from typing import Union

from .algorithms import Algorithm as Algorithm
from .dateprovider import ConstantDateProvider as ConstantDateProvider
from .dateprovider import DateProvider as DateProvider
from .dateprovider import SystemDateProvider as SystemDateProvider
from .hotp import HOTP as HOTP
from .hotp import HOTPGenerator as HOTPGenerator
from .otp import OTPGenerator as OTPGenerator
from .totp import TOTP as TOTP
from .totp import TOTPGenerator as TOTPGenerator
from .totp import time_factor as time_factor
from .utils import dynamic_truncate as dynamic_truncate
from .utils import format_otp as format_otp
from .utils import hmac_digest as hmac_digest
from .utils import truncate as truncate

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Every generate() returns one of these; match on the type to reach
# the variant specific field (counter or time_window).
OneTimePassword = Union[HOTP, TOTP]
