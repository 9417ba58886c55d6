"""Error types for path-info parameter decoding.

Malformed path content is never an error: tuples without a key/value
separator are dropped and broken percent-escapes are kept literally.
Only caller mistakes (bad settings, bad ``set_*`` arguments) raise.
"""


class PathParamsError(Exception):
    """Base class for path-info parameter errors."""

    pass


class ConfigurationError(PathParamsError):
    """Settings or assignment arguments are invalid.

    Raised synchronously by the call that received the bad input,
    before any store state is touched.
    """

    def __init__(self, message: str, key: str | None = None):
        self.key = key
        super().__init__(message)
