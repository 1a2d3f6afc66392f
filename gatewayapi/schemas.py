from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class _ProviderModel(BaseModel):
    # GatewayAPI may add fields to its responses at any time
    model_config = ConfigDict(extra="allow")


class Balance(_ProviderModel):
    id: int
    credit: float
    currency: str


class Recipient(_ProviderModel):
    """A single SMS recipient.

    ``msisdn`` is the full mobile number including country code, without
    leading zeros or ``+`` (eg. 4510203040). GatewayAPI does the parsing, so
    both integers and numeric strings are accepted as is.
    """

    msisdn: Union[int, str]


class SendSMS(_ProviderModel):
    message: str
    # GatewayAPI allows up to 10 000 recipients per request
    recipients: List[Recipient]
    sender: Optional[str] = None
    userref: Optional[str] = None

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)


class Usage(_ProviderModel):
    total_cost: float
    currency: str
    countries: Dict[str, int] = Field(default_factory=dict)


class SendSMSResponse(_ProviderModel):
    ids: List[int]
    usage: Usage


class UnauthorizedErrorData(_ProviderModel):
    code: Optional[str] = None
    incident_uuid: Optional[str] = None
    message: str
    variables: Any = None
