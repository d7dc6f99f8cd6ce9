"""
Exceptions raised while building, encoding or parsing IPNS keys.

All of them are ValueError subclasses, so callers that only care about
"bad input" can catch ValueError.
"""


class IPNSKeyError(ValueError):
    """Base class for every rejection raised by this package."""


class InvalidLength(IPNSKeyError):
    pass


class InvalidSeedLength(InvalidLength):
    pass


class UnsupportedFormat(IPNSKeyError):
    pass


class InvalidDigit(IPNSKeyError):
    pass


class InvalidPrefix(IPNSKeyError):
    def __init__(self, hex_key: str):
        super().__init__(f"Invalid IPNS key prefix: {hex_key}")
        self.hex_key = hex_key
