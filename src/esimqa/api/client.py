"""
Partner API client for the API scenarios.

Wraps Playwright's APIRequestContext with the partner API's URL layout
and header conventions. Responses are returned untouched so each test
makes its own hard assertions on status and body.
"""

import logging
from typing import Any, Mapping, Optional, Union

from playwright.async_api import APIRequestContext, APIResponse, Playwright
from pydantic import ValidationError

from ..config import ApiSettings
from ..exceptions import TokenRequestError
from ..models import OrderRequest, TokenResponse

logger = logging.getLogger(__name__)

QueryParams = Mapping[str, Union[str, int, float, bool]]

_UNSET: Any = object()


class PartnerApiClient:
    """
    Client for the partner REST API.

    One instance lives for one test module: the token is acquired once
    and reused by every request until the context is disposed.
    """

    def __init__(
        self,
        request: APIRequestContext,
        base_url: str,
        token: Optional[str] = None,
    ):
        self.request = request
        self.base_url = base_url if base_url.endswith("/") else base_url + "/"
        self._token = token

    @classmethod
    async def create(
        cls, playwright: Playwright, settings: ApiSettings
    ) -> "PartnerApiClient":
        """Open a fresh request context for the configured API."""
        request = await playwright.request.new_context()
        return cls(request, settings.base_url)

    @property
    def token(self) -> Optional[str]:
        return self._token

    def set_token(self, token: str) -> None:
        """Set the bearer token."""
        self._token = token

    def headers(self, token: Optional[str] = _UNSET) -> dict[str, str]:
        """
        Request headers for an authenticated call.

        Args:
            token: Overrides the stored token; pass "" to send an empty
                bearer.
        """
        if token is _UNSET:
            token = self._token
        return {
            "Accept": "application/json",
            "Authorization": f"Bearer {token or ''}",
        }

    def url(self, endpoint: str) -> str:
        return f"{self.base_url}{endpoint.lstrip('/')}"

    # Auth endpoints
    async def request_token(
        self, client_id: str, client_secret: str
    ) -> APIResponse:
        """POST token with a form-encoded client-credentials grant."""
        url = self.url("token")
        response = await self.request.post(url, form={
            "client_id": client_id,
            "client_secret": client_secret,
            "grant_type": "client_credentials",
        })
        logger.info("POST %s -> %s", url, response.status)
        return response

    async def authenticate(self, settings: ApiSettings) -> str:
        """
        Exchange the configured client credentials for a bearer token.

        Args:
            settings: API settings holding the client id and secret.

        Returns:
            The access token, also stored on the client.

        Raises:
            TokenRequestError: If the endpoint does not answer 200 with
                an access token.
        """
        secret = settings.client_secret.get_secret_value() \
            if settings.client_secret else ""
        response = await self.request_token(settings.client_id or "", secret)
        if response.status != 200:
            raise TokenRequestError(response.status, await response.text())

        try:
            body = TokenResponse.model_validate(await response.json())
        except (ValueError, ValidationError) as e:
            raise TokenRequestError(
                response.status, f"unexpected token body: {e}") from e

        self.set_token(body.data.access_token)
        logger.debug("Bearer token acquired")
        return body.data.access_token

    # eSIM endpoints
    async def list_sims(
        self,
        params: Optional[QueryParams] = None,
        token: Optional[str] = _UNSET,
    ) -> APIResponse:
        """GET sims with optional include/limit/page/filter parameters.

        Parameters are encoded by Playwright; keys such as
        ``filter[iccid]`` are passed as they are.
        """
        url = self.url("sims")
        response = await self.request.get(
            url, params=dict(params) if params else None,
            headers=self.headers(token))
        logger.info("GET %s %s -> %s", url, dict(params or {}), response.status)
        return response

    # Order endpoints
    async def submit_order(
        self,
        order: Union[OrderRequest, Mapping[str, Any]],
        token: Optional[str] = _UNSET,
    ) -> APIResponse:
        """POST orders with a form-encoded body."""
        if isinstance(order, OrderRequest):
            form = order.to_form()
        else:
            form = {k: "" if v is None else str(v) for k, v in order.items()}
        url = self.url("orders")
        response = await self.request.post(
            url, form=form, headers=self.headers(token))
        logger.info("POST %s -> %s", url, response.status)
        return response

    async def dispose(self) -> None:
        """Release the request context."""
        await self.request.dispose()
        self._token = None
