from gatewayapi.client import BASE_URL, GatewayAPIClient
from gatewayapi.config import GatewayAPIClientOptions, Settings, get_settings
from gatewayapi.errors import (
    ConfigurationError,
    ErrorKind,
    GatewayAPIClientError,
    UnauthorizedError,
    classify_error,
)
from gatewayapi.logging import setup_logging
from gatewayapi.schemas import (
    Balance,
    Recipient,
    SendSMS,
    SendSMSResponse,
    UnauthorizedErrorData,
    Usage,
)

__all__ = [
    "BASE_URL",
    "Balance",
    "ConfigurationError",
    "ErrorKind",
    "GatewayAPIClient",
    "GatewayAPIClientError",
    "GatewayAPIClientOptions",
    "Recipient",
    "SendSMS",
    "SendSMSResponse",
    "Settings",
    "UnauthorizedError",
    "UnauthorizedErrorData",
    "Usage",
    "classify_error",
    "get_settings",
    "setup_logging",
]
