"""YNAB API client with bearer-token authentication."""

import logging
from typing import List, Optional

import httpx

from .exceptions import (
    YNABAPIError,
    YNABConnectionError,
    YNABMultipleErrors,
    YNABValidationError,
)
from .models import BudgetSummary, decode_budgets

DEFAULT_BASE_URL = "https://api.youneedabudget.com/v1/budgets"


class YNABClient:
    """Minimal read-only client for the YNAB budgets endpoints."""

    def __init__(
        self,
        access_token: Optional[str],
        base_url: str = DEFAULT_BASE_URL,
        http_client: Optional[httpx.AsyncClient] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize YNAB client with access token.

        Args:
            access_token: YNAB Personal Access Token
            base_url: URL of the budgets list endpoint
            http_client: Client to send requests with (one is created if omitted)
            logger: Logger for progress messages

        Raises:
            YNABValidationError: If access token is not provided
        """
        if not access_token:
            raise YNABValidationError(
                "bearer token must be provided via --token or YNAB_BEARER_TOKEN env var"
            )

        self.access_token = access_token
        self.base_url = base_url
        self._owns_http_client = http_client is None
        self.http_client = http_client or httpx.AsyncClient()
        self.logger = logger or logging.getLogger(__name__)

    async def __aenter__(self) -> "YNABClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_http_client:
            await self.http_client.aclose()

    async def get(self, url: str) -> bytes:
        """Perform an authenticated GET and return the response body.

        The response stream is always closed. If both reading and closing
        fail, both errors are raised together.

        Args:
            url: Absolute URL to fetch

        Returns:
            Raw response body

        Raises:
            YNABValidationError: If the URL cannot be parsed
            YNABAPIError: If the status is not 200
            YNABConnectionError: If the request or the response stream fails
            YNABMultipleErrors: If more than one of the above happened
        """
        headers = {"Authorization": f"Bearer {self.access_token}"}
        try:
            request = self.http_client.build_request("GET", url, headers=headers)
        except httpx.InvalidURL as e:
            raise YNABValidationError(f"invalid URL {url!r}: {e}") from e
        try:
            response = await self.http_client.send(request, stream=True)
        except httpx.HTTPError as e:
            raise YNABConnectionError(f"GET {url}: {e}") from e

        errors: List[BaseException] = []
        data = b""
        try:
            if response.status_code != httpx.codes.OK:
                errors.append(YNABAPIError(response.status_code, url))
            else:
                data = await response.aread()
        except (httpx.HTTPError, OSError) as e:
            errors.append(YNABConnectionError(f"read body: {e}"))
        finally:
            try:
                await response.aclose()
            except (httpx.HTTPError, OSError) as e:
                errors.append(YNABConnectionError(f"close body: {e}"))

        if len(errors) == 1:
            raise errors[0]
        if errors:
            raise YNABMultipleErrors(errors)
        return data

    async def get_budgets(self) -> List[BudgetSummary]:
        """Get all budgets for the authenticated user.

        Returns:
            Budget summaries in server order
        """
        data = await self.get(self.base_url)
        budgets = decode_budgets(data)
        self.logger.info("Fetched %d budgets", len(budgets))
        return budgets

    async def get_budget(self, budget_id: str) -> bytes:
        """Get the full JSON document of a single budget, unparsed.

        Args:
            budget_id: The budget ID

        Returns:
            Raw JSON body
        """
        return await self.get(f"{self.base_url}/{budget_id}")
