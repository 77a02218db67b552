class RiddlebotError(RuntimeError):
    """Base class for every failure that stops the riddle loop."""


class TransportError(RiddlebotError):
    """The HTTP round trip failed or returned a non-2xx status."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class DecodeError(RiddlebotError):
    """A response payload was malformed or described an unknown riddle."""


class NoKeyFound(RiddlebotError):
    """A brute-force search exhausted its key space without a match."""


class ProtocolViolation(RiddlebotError):
    """The service accepted an answer but gave no way to continue."""


class DictionaryError(RiddlebotError):
    """The word list could not be read."""
