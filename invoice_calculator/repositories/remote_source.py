import logging
from abc import ABC, abstractmethod
from typing import Optional

import httpx

from invoice_calculator.exceptions import EmptyBodyError, ProtocolError, TransportError
from invoice_calculator.models.invoice import InvoiceCollection
from invoice_calculator.tools.invoice_api import InvoiceApiClient

logger = logging.getLogger(__name__)


class InvoiceRemoteDataSource(ABC):
    @abstractmethod
    async def fetch(self) -> InvoiceCollection:
        """
        Fetch the raw invoice collection.
        Raises TransportError, ProtocolError or EmptyBodyError. No retries.
        """


class HttpInvoiceRemoteDataSource(InvoiceRemoteDataSource):
    """Classifies the outcome of one API call into the three failure kinds."""

    def __init__(self, api_client: InvoiceApiClient, endpoint: Optional[str] = None):
        self.api_client = api_client
        self.endpoint = endpoint

    async def fetch(self) -> InvoiceCollection:
        try:
            response = await self.api_client.fetch_invoices(self.endpoint)
        except (httpx.TransportError, OSError) as e:
            logger.warning(f"Invoice request did not complete: {e!r}")
            raise TransportError(f"Network error occurred: {e}") from e

        if not response.is_successful:
            logger.warning(f"Invoice request failed with status {response.status_code}")
            raise ProtocolError(response.status_code, response.reason)

        if response.body is None:
            logger.warning("Invoice response had no body")
            raise EmptyBodyError()

        return response.body
