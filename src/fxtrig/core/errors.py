class FxtrigError(Exception):
    """Base error."""

class ClampInvariantError(FxtrigError, AssertionError):
    """Raised when a clamped value still spans more than its declared width."""
