class SyncError(Exception):
    """Base error for catalog sync failures; ``message`` is shown to the operator."""

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class ConfigurationError(SyncError):
    """Base URL or secret key is missing."""


class ValidationError(SyncError):
    """The operation was given nothing to work on (no rows selected or found)."""


class FormatError(SyncError):
    """A payload or token did not have the expected shape."""


class RemoteError(SyncError):
    def __init__(self, message, status_code=None, body='', url=''):
        super().__init__(message)
        self.status_code = status_code
        self.body = body
        self.url = url


class TokenError(SyncError):
    pass


class DecodeError(TokenError):
    pass


class ExpiredError(TokenError):
    pass
