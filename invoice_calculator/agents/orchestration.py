import logging
from contextlib import aclosing
from typing import AsyncIterator

from invoice_calculator.agents.processing import InvoiceProcessor, invoice_processor
from invoice_calculator.core.result import (
    Empty,
    Error,
    Loading,
    Result,
    Success,
    error,
    loading,
    success,
)
from invoice_calculator.models.invoice import InvoiceCollection
from invoice_calculator.models.processed import ProcessedInvoiceSet
from invoice_calculator.repositories.invoice import InvoiceRepository

logger = logging.getLogger(__name__)


class ProcessedInvoicesAgent:
    """
    Maps the repository stream onto a stream of processed invoice sets.
    Aggregation faults become ``Error`` values; nothing is raised downstream.
    """
    def __init__(self, repository: InvoiceRepository, processor: InvoiceProcessor = invoice_processor):
        self.repository = repository
        self.processor = processor

    async def execute(self) -> AsyncIterator[Result]:
        async with aclosing(self.repository.observe_invoices()) as results:
            async for result in results:
                yield self.map_result(result)

    def map_result(self, result: Result) -> Result:
        if isinstance(result, Loading):
            return loading()
        if isinstance(result, Success):
            return self._handle_success(result.data)
        if isinstance(result, Empty):
            logger.info(f"Repository reported empty result: {result.title}")
            return success(self.processor.empty_result(result.message))
        if isinstance(result, Error):
            return error(result.message)
        raise TypeError(f"Unhandled result variant: {result!r}")

    def _handle_success(self, collection: InvoiceCollection) -> Result:
        try:
            processed = self.processor.aggregate(collection.invoices)
        except Exception as e:
            logger.error(f"Invoice aggregation failed: {e}")
            return error(f"Failed to process invoices: {e}")
        return success(processed)
