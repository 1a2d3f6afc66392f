from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from gatewayapi.errors import ConfigurationError


class GatewayAPIClientOptions(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    api_token: str = Field(..., alias="apiToken")

    @field_validator("api_token")
    @classmethod
    def token_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("api_token must not be empty")
        return v


def parse_options(
    options: Union[GatewayAPIClientOptions, Mapping[str, Any], None] = None,
    api_token: Optional[str] = None,
) -> GatewayAPIClientOptions:
    """Normalize the constructor arguments into GatewayAPIClientOptions.

    Raises ConfigurationError when no usable API token was supplied.
    """
    if isinstance(options, GatewayAPIClientOptions):
        if api_token is None:
            return options
        options = options.model_dump()
    data = dict(options or {})
    if api_token is not None:
        data.pop("apiToken", None)
        data["api_token"] = api_token
    try:
        return GatewayAPIClientOptions.model_validate(data)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid GatewayAPI client options: {exc.errors()[0]['msg']}") from exc


class Settings(BaseSettings):
    api_token: Optional[str] = None
    log_level: str = "INFO"
    strict: bool = False

    model_config = SettingsConfigDict(env_prefix="GATEWAYAPI_", extra="ignore")


_settings = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
