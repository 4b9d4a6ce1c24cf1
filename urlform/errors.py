class UrlFormError(Exception):
    """Base error for urlform."""


class PreconditionError(UrlFormError, ValueError):
    """Raised when a required argument is missing or malformed."""


class EncodingUnavailableError(UrlFormError, LookupError):
    """Raised when the runtime has no UTF-8 codec."""
