"""Exception hierarchy for polly-ops.

All custom exceptions inherit from PollyOpsError to enable
selective catching at different levels.

Hierarchy:
    PollyOpsError (base)
    ├── ConfigError - Configuration issues (missing region/endpoint)
    └── ResponseDecodeError - Response body could not be decoded
"""


class PollyOpsError(Exception):
    """
    Base exception for all polly-ops errors.

    Catching this will catch all custom exceptions from this package.
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ConfigError(PollyOpsError):
    """
    Configuration error.

    Raised when required configuration is missing or invalid.
    Examples: empty region with no endpoint override.

    CLI Exit Code: 2
    """

    pass


class ResponseDecodeError(PollyOpsError):
    """
    Response decoding error.

    Raised by the response parser when a JSON-bearing response body
    is not valid UTF-8 JSON or is not a JSON object.

    CLI Exit Code: 3

    Attributes:
        action: Action whose response failed to decode
        original_error: Original exception if wrapping
    """

    def __init__(
        self, message: str, action: str = "unknown", original_error: Exception | None = None
    ):
        self.action = action
        self.original_error = original_error
        full_message = f"[{action}] {message}"
        super().__init__(full_message)
