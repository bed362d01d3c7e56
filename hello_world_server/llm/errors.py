"""
Gateway error types.

Every failure of a remote model call is raised as one of these. Handlers
catch them and turn them into a textual reply; they never reach the MCP
channel as protocol faults.
"""


class GatewayError(Exception):
    """Base class. `kind` is a stable tag, str(err) the human-readable message."""

    kind = "gateway_error"

    def __init__(self, message: str = ""):
        self.message = message
        super().__init__(message)


class TransportFailure(GatewayError):
    """Network problem or a non-auth error status from the provider."""

    kind = "transport_failure"


class AuthFailure(GatewayError):
    """Missing, invalid or unauthorized credential."""

    kind = "auth_failure"


class MalformedModelOutput(GatewayError):
    """The model's reply could not be parsed as data."""

    kind = "malformed_model_output"


class SchemaValidationFailure(GatewayError):
    """The reply parsed, but does not satisfy the response schema."""

    kind = "schema_validation_failure"
