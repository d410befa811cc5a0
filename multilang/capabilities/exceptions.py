class CapabilityError(Exception):
    """Raised when an external AI capability call fails."""


class CapabilityResponseError(CapabilityError):
    """Raised when the capability output is malformed or fails validation."""


class CapabilityNetworkError(CapabilityError):
    """Raised when the provider call fails due to network/infrastructure issues."""


class CapabilityTimeoutError(CapabilityNetworkError):
    """Raised when the provider SDK gives up waiting for a response."""
