from .errors import (
    AuthFailure,
    GatewayError,
    MalformedModelOutput,
    SchemaValidationFailure,
    TransportFailure,
)
from .gateway import ModelGateway, extract_text

__all__ = [
    "AuthFailure",
    "GatewayError",
    "MalformedModelOutput",
    "ModelGateway",
    "SchemaValidationFailure",
    "TransportFailure",
    "extract_text",
]
