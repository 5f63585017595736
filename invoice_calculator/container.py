import logging
from typing import Optional

import httpx

from invoice_calculator.agents.orchestration import ProcessedInvoicesAgent
from invoice_calculator.agents.processing import InvoiceProcessor
from invoice_calculator.config import settings
from invoice_calculator.repositories.invoice import InvoiceRepositoryImpl
from invoice_calculator.repositories.remote_source import HttpInvoiceRemoteDataSource
from invoice_calculator.tools.invoice_api import InvoiceApiClient
from invoice_calculator.workflow.reducer import InvoiceViewModel
from invoice_calculator.workflow.state import StateCell

logger = logging.getLogger(__name__)


class Container:
    """Wires the pipeline: API client -> remote source -> repository -> agent."""

    def __init__(
        self,
        endpoint: Optional[str] = None,
        use_empty_endpoint: Optional[bool] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        if endpoint is None:
            if use_empty_endpoint is None:
                use_empty_endpoint = settings.USE_EMPTY_ENDPOINT
            endpoint = settings.INVOICE_EMPTY_ENDPOINT if use_empty_endpoint else settings.INVOICE_ENDPOINT
        self.endpoint = endpoint
        self.api_client = InvoiceApiClient(transport=transport)
        self.remote_source = HttpInvoiceRemoteDataSource(self.api_client, endpoint=endpoint)
        self.repository = InvoiceRepositoryImpl(self.remote_source)
        self.processor = InvoiceProcessor(short_id_length=settings.SHORT_ID_LENGTH)
        self.use_case = ProcessedInvoicesAgent(self.repository, self.processor)

    def create_view_model(self, state: Optional[StateCell] = None) -> InvoiceViewModel:
        return InvoiceViewModel(self.use_case, state=state)

    async def close(self):
        await self.api_client.aclose()
        logger.info("Closed invoice API client")
