import base64
import logging
import time
from typing import Any, Dict, Mapping, Optional, Union

import httpx

from gatewayapi.config import GatewayAPIClientOptions, Settings, get_settings, parse_options
from gatewayapi.errors import UnauthorizedError
from gatewayapi.metrics import GATEWAYAPI_REQUEST_LATENCY_SECONDS, GATEWAYAPI_REQUESTS_TOTAL
from gatewayapi.schemas import Balance, SendSMS, SendSMSResponse

logger = logging.getLogger(__name__)

BASE_URL = "https://gatewayapi.com/"


class GatewayAPIClient:
    """The GatewayAPI REST API client.

    One instance holds one API token. The ``Authorization`` value is derived
    once here and shared by every request, so a single client can serve any
    number of concurrent calls.
    """

    def __init__(
        self,
        options: Union[GatewayAPIClientOptions, Mapping[str, Any], None] = None,
        *,
        api_token: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
        strict: bool = False,
    ):
        self.options = parse_options(options, api_token)
        self._authorization_header = base64.b64encode(f"{self.options.api_token}:".encode("utf-8")).decode("ascii")
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient()
        self.strict = strict

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None, **kwargs) -> "GatewayAPIClient":
        settings = settings or get_settings()
        kwargs.setdefault("strict", settings.strict)
        # Level only; handlers stay up to the application
        logging.getLogger("gatewayapi").setLevel(settings.log_level)
        return cls(api_token=settings.api_token, **kwargs)

    async def __aenter__(self) -> "GatewayAPIClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        # An injected httpx client belongs to the caller
        if self._owns_client:
            await self.client.aclose()

    async def balance(self, **request_options) -> Union[Dict[str, Any], Balance]:
        """Check the account balance and what currency the account is set to.

        See: https://gatewayapi.com/docs/apis/prices-balance/
        """
        data = await self._fetch("/rest/me", **request_options)
        if self.strict:
            return Balance.model_validate(data)
        return data

    get_balance = balance

    async def send_sms(
        self, request: Union[SendSMS, Mapping[str, Any]], **request_options
    ) -> Union[Dict[str, Any], SendSMSResponse]:
        """Send an SMS to one or more recipients.

        A mapping is sent verbatim; recipients and encoding are validated by
        GatewayAPI, not here. Every call sends a new message.

        See: https://gatewayapi.com/docs/apis/rest/
        """
        payload = request.to_payload() if isinstance(request, SendSMS) else dict(request)
        data = await self._fetch("/rest/mtsms", method="POST", json=payload, **request_options)
        if self.strict:
            return SendSMSResponse.model_validate(data)
        return data

    async def _fetch(
        self,
        path: str,
        method: str = "GET",
        *,
        json: Any = None,
        headers: Optional[Mapping[str, str]] = None,
        **request_options,
    ) -> Any:
        """Run a request against GatewayAPI and return the decoded JSON body.

        ``path`` is resolved against BASE_URL. Extra keyword arguments such as
        ``timeout`` go straight to httpx.
        """
        url = httpx.URL(BASE_URL).join(path)
        merged_headers = httpx.Headers(headers)
        merged_headers["Authorization"] = f"Basic {self._authorization_header}"

        log_extra = {"method": method, "path": path}
        logger.debug("Sending GatewayAPI request.", extra=log_extra)

        outcome = "error"
        start = time.perf_counter()
        try:
            response = await self.client.request(method, url, json=json, headers=merged_headers, **request_options)
            response.raise_for_status()
            try:
                data = response.json()
            except ValueError:
                logger.warning("GatewayAPI returned a body that is not JSON.", extra={**log_extra, "status_code": response.status_code})
                raise
            outcome = "success"
            return data
        except httpx.HTTPStatusError as exc:
            # 400 bad arguments, 403 IP not allowed, 422 invalid JSON body and
            # 500 are passed on untouched. Only 401 gets its own error.
            status_code = exc.response.status_code
            error_data = _unauthorized_data(exc.response) if status_code == 401 else None
            if error_data is None:
                logger.warning("GatewayAPI request failed.", extra={**log_extra, "status_code": status_code})
                raise
            outcome = "unauthorized"
            logger.warning("GatewayAPI rejected the API token.", extra={**log_extra, "status_code": status_code})
            raise UnauthorizedError(error_data) from exc
        except httpx.RequestError as exc:
            logger.warning("GatewayAPI request could not be completed.", extra={**log_extra, "error": repr(exc)})
            raise
        finally:
            GATEWAYAPI_REQUESTS_TOTAL.labels(endpoint=path, outcome=outcome).inc()
            GATEWAYAPI_REQUEST_LATENCY_SECONDS.labels(endpoint=path).observe(time.perf_counter() - start)


def _unauthorized_data(response: httpx.Response) -> Optional[Dict[str, Any]]:
    try:
        data = response.json()
    except ValueError:
        return None
    return data if isinstance(data, dict) else None
