import enum
from typing import Any, Dict, Optional

from gatewayapi.schemas import UnauthorizedErrorData


class ErrorKind(enum.Enum):
    UNAUTHORIZED = "unauthorized"
    CONFIGURATION = "configuration"
    TRANSPORT = "transport"


class GatewayAPIClientError(Exception):
    """Base error raised by the GatewayAPI client."""

    kind: ErrorKind = ErrorKind.TRANSPORT

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(GatewayAPIClientError):
    kind = ErrorKind.CONFIGURATION


class UnauthorizedError(GatewayAPIClientError):
    """Raised when GatewayAPI answers 401, ie. an invalid API token.

    ``data`` holds the error body exactly as the provider sent it:
    ``code``, ``incident_uuid``, ``message`` and ``variables``.
    """

    kind = ErrorKind.UNAUTHORIZED

    def __init__(self, data: Dict[str, Any]):
        super().__init__(str(data.get("message", "")))
        self.data = data

    @property
    def code(self) -> Optional[str]:
        return self.data.get("code")

    @property
    def incident_uuid(self) -> Optional[str]:
        return self.data.get("incident_uuid")

    @property
    def variables(self) -> Any:
        return self.data.get("variables")

    @property
    def payload(self) -> UnauthorizedErrorData:
        return UnauthorizedErrorData.model_validate(self.data)


def classify_error(exc: BaseException) -> ErrorKind:
    """Map any error raised by the client to an ErrorKind.

    Anything that is not one of our own errors came straight from the
    transport and is reported as TRANSPORT.
    """
    if isinstance(exc, GatewayAPIClientError):
        return exc.kind
    return ErrorKind.TRANSPORT
