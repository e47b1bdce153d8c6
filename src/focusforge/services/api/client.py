"""API client for the hosted database."""

from typing import Any

import httpx

from focusforge.models.config_models import BackendConfig
from focusforge.services.config_service import get_config_service


class APIClient:
    """HTTP client for the hosted database REST interface.

    Requests carry the project ``apikey`` header and a bearer token: the
    signed-in user's access token when one is stored, otherwise the API key.
    Nothing is retried; HTTP errors propagate to the caller.
    """

    def __init__(
        self,
        backend: BackendConfig | None = None,
        access_token: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        if backend is None:
            config_service = get_config_service()
            backend = config_service.config.backend
            if access_token is None:
                credentials = config_service.load_credentials()
                if credentials:
                    access_token = credentials.access_token
        self.backend = backend
        self.base_url = backend.rest_url
        self.timeout = backend.timeout
        self.access_token = access_token
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "APIClient":
        """Enter the async context manager."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit the async context manager and ensure the client is closed."""
        await self.close()

    def _get_headers(self) -> dict[str, str]:
        """Get HTTP headers with authentication."""
        token = self.access_token or self.backend.api_key
        return {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "apikey": self.backend.api_key,
            "Authorization": f"Bearer {token}",
        }

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                follow_redirects=True,
                headers=self._get_headers(),
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Make an HTTP request to the API.

        Raises:
            httpx.HTTPStatusError: On a non-2xx response
            httpx.RequestError: On a transport failure
        """
        client = await self._get_client()
        url = path if path.startswith("/") else f"/{path}"

        response = await client.request(
            method=method,
            url=url,
            json=json,
            params=params,
            headers=headers,
        )
        response.raise_for_status()
        return response

    async def get(
        self,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Make a GET request."""
        return await self.request("GET", path, params=params, headers=headers)

    async def head(
        self,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Make a HEAD request."""
        return await self.request("HEAD", path, params=params, headers=headers)

    async def post(
        self,
        path: str,
        *,
        json: Any = None,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Make a POST request."""
        return await self.request(
            "POST", path, json=json, params=params, headers=headers
        )

    async def patch(
        self,
        path: str,
        *,
        json: Any = None,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Make a PATCH request."""
        return await self.request(
            "PATCH", path, json=json, params=params, headers=headers
        )

    async def delete(
        self,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Make a DELETE request."""
        return await self.request("DELETE", path, params=params, headers=headers)
