import logging
from typing import Optional

import httpx
from pydantic import BaseModel, ConfigDict

from invoice_calculator.config import settings
from invoice_calculator.models.invoice import InvoiceCollection

logger = logging.getLogger(__name__)


class ApiResponse(BaseModel):
    """Status line and decoded body of one GET."""
    model_config = ConfigDict(frozen=True)

    status_code: int
    reason: str
    body: Optional[InvoiceCollection]

    @property
    def is_successful(self) -> bool:
        return 200 <= self.status_code < 300


class InvoiceApiClient:
    """
    HTTP transport for the remote invoice document.
    Performs a single GET per call and decodes the JSON body. Non-success
    status codes are returned to the caller, transport failures propagate.
    """
    def __init__(
        self,
        base_url: Optional[str] = None,
        endpoint: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url or settings.INVOICE_API_BASE_URL
        self.endpoint = endpoint or settings.INVOICE_ENDPOINT
        self.client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=httpx.Timeout(settings.HTTP_READ_TIMEOUT, connect=settings.HTTP_CONNECT_TIMEOUT),
            headers={"Content-Type": "application/json; charset=utf-8"},
            transport=transport,
        )

    async def fetch_invoices(self, endpoint: Optional[str] = None) -> ApiResponse:
        path = endpoint or self.endpoint
        logger.debug(f"GET {self.base_url}{path}")
        response = await self.client.get(path)
        logger.info(f"GET {path} -> {response.status_code}")

        body = self._decode(response) if response.is_success else None
        return ApiResponse(
            status_code=response.status_code,
            reason=response.reason_phrase,
            body=body
        )

    @staticmethod
    def _decode(response: httpx.Response) -> Optional[InvoiceCollection]:
        if not response.content.strip():
            return None
        payload = response.json()
        if payload is None:
            return None
        return InvoiceCollection.model_validate(payload)

    async def aclose(self):
        await self.client.aclose()

    async def __aenter__(self) -> "InvoiceApiClient":
        return self

    async def __aexit__(self, *exc_info):
        await self.aclose()
