class SecretSharingError(ValueError):
    """Base class for misuse of the sharing API. Never retried."""

class InvalidThreshold(SecretSharingError):
    pass

class InsufficientShares(SecretSharingError):
    pass

class DuplicateCoordinate(SecretSharingError):
    pass

class ZeroCoordinate(SecretSharingError):
    pass

class InvalidExponent(SecretSharingError):
    pass

class ParameterMismatch(SecretSharingError):
    pass

class InvalidParameters(SecretSharingError):
    pass

class SecretOutOfRange(SecretSharingError):
    pass

class InvalidSessionState(SecretSharingError):
    pass
