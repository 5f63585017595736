import logging
from abc import ABC, abstractmethod
from typing import AsyncIterator

import httpx

from invoice_calculator.core.result import Result, error, loading, success
from invoice_calculator.exceptions import EmptyBodyError, TransportError, UnknownError
from invoice_calculator.models.invoice import InvoiceCollection
from invoice_calculator.repositories.remote_source import InvoiceRemoteDataSource

logger = logging.getLogger(__name__)


class InvoiceRepository(ABC):
    @abstractmethod
    def observe_invoices(self) -> AsyncIterator[Result]:
        """Yield ``Loading`` then exactly one ``Success`` or ``Error``."""


class InvoiceRepositoryImpl(InvoiceRepository):
    """Wraps the remote source. Never raises; failures become ``Error`` values."""

    def __init__(self, remote_source: InvoiceRemoteDataSource):
        self.remote_source = remote_source

    async def observe_invoices(self) -> AsyncIterator[Result]:
        yield loading()
        yield await self._fetch()

    async def _fetch(self) -> Result:
        try:
            invoices = await self.remote_source.fetch()
        except (TransportError, httpx.TransportError, OSError) as e:
            message = f"Network error: {e}"
        except EmptyBodyError as e:
            message = str(e) or "No data found"
        except Exception as e:
            message = str(e) or str(UnknownError())
        else:
            logger.info(f"Fetched {len(invoices.invoices)} invoices")
            return success(invoices)

        logger.error(f"Invoice fetch failed: {message}")
        return error(message)
