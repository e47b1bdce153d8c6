"""Client for the public motivational quote service."""

from __future__ import annotations

import httpx
from pydantic import ValidationError

from focusforge.exceptions import QuoteServiceError
from focusforge.models.config_models import QuotesConfig
from focusforge.models.core import Quote


class QuotesAPI:
    """Fetches random quotes from a quotable-style endpoint."""

    def __init__(
        self,
        config: QuotesConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.config = config or QuotesConfig()
        self._transport = transport

    async def random_quote(self, tags: str | None = None) -> Quote:
        """Fetch one random quote.

        Raises:
            QuoteServiceError: On transport errors, non-2xx responses or a
                body without quote text
        """
        params = {"tags": tags or self.config.tags}
        try:
            async with httpx.AsyncClient(
                timeout=self.config.timeout,
                follow_redirects=True,
                transport=self._transport,
            ) as client:
                response = await client.get(self.config.endpoint, params=params)
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPError as e:
            raise QuoteServiceError(f"Quote service request failed: {e}") from e
        except ValueError as e:
            raise QuoteServiceError(f"Quote service returned invalid JSON: {e}") from e

        # Some deployments wrap the quote in a single-element list
        if isinstance(data, list):
            data = data[0] if data else {}
        if not isinstance(data, dict):
            raise QuoteServiceError("Quote service returned an unexpected body")

        try:
            return Quote.model_validate(data)
        except ValidationError as e:
            raise QuoteServiceError(f"Quote service returned no quote text: {e}") from e
