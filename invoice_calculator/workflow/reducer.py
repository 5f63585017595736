import asyncio
import logging
from contextlib import aclosing
from typing import Optional

from invoice_calculator.agents.orchestration import ProcessedInvoicesAgent
from invoice_calculator.core.result import Empty, Error, Loading, Result, Success
from invoice_calculator.exceptions import UnknownError
from invoice_calculator.models.processed import ProcessedInvoiceSet
from invoice_calculator.workflow.state import StateCell, UiState

logger = logging.getLogger(__name__)


class InvoiceViewModel:
    """
    Presentation state reducer.

    Subscribes once to the processed invoice stream and folds every result into
    the owned StateCell. Each value is reduced synchronously as it arrives, so a
    value is fully applied before the next one is pulled and no state is skipped.
    The only mutator exposed to the presentation layer is ``clear_error``.
    """
    def __init__(self, use_case: ProcessedInvoicesAgent, state: Optional[StateCell] = None):
        self.use_case = use_case
        self.state = state or StateCell()
        self._subscription: Optional[asyncio.Task] = None

    @property
    def ui_state(self) -> UiState:
        return self.state.value

    def start(self) -> None:
        """Subscribe to the use case. Must be called from a running event loop."""
        if self._subscription is not None:
            return
        self._subscription = asyncio.get_running_loop().create_task(self._collect())
        self._subscription.add_done_callback(self._log_subscription_end)

    async def wait_idle(self) -> None:
        """Wait until the current subscription has delivered its last result."""
        if self._subscription is not None:
            await asyncio.wait({self._subscription})

    async def close(self) -> None:
        """Cancel the subscription, including any in-flight fetch."""
        task = self._subscription
        if task is None or task.done():
            return
        task.cancel()
        await asyncio.gather(task, return_exceptions=True)

    async def __aenter__(self) -> "InvoiceViewModel":
        self.start()
        return self

    async def __aexit__(self, *exc_info):
        await self.close()

    def clear_error(self) -> None:
        self.state.update(error=None)

    async def _collect(self):
        try:
            async with aclosing(self.use_case.execute()) as results:
                async for result in results:
                    self._apply(result)
        except Exception as e:
            logger.exception("Invoice subscription failed")
            self.state.update(is_loading=False, error=str(e) or str(UnknownError()))

    @staticmethod
    def _log_subscription_end(task: asyncio.Task):
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error(f"Invoice subscription ended with an unhandled error: {exc!r}")

    def _apply(self, result: Result):
        if isinstance(result, Loading):
            logger.debug("UI state -> loading")
            self.state.update(is_loading=True, error=None)
        elif isinstance(result, Success):
            logger.debug("UI state -> success")
            self._set_success(result.data)
        elif isinstance(result, Empty):
            logger.debug("UI state -> empty")
            self.state.set(UiState(
                is_loading=False,
                is_empty=True,
                error=None,
                empty_message=result.message
            ))
        elif isinstance(result, Error):
            logger.debug(f"UI state -> error: {result.message}")
            self.state.update(is_loading=False, error=result.message)
        else:
            raise TypeError(f"Unhandled result variant: {result!r}")

    def _set_success(self, data: ProcessedInvoiceSet):
        self.state.set(UiState(
            is_loading=False,
            is_empty=data.is_empty,
            invoices=data.invoices,
            grand_total=data.grand_total_formatted,
            error=None,
            empty_message=data.empty_message
        ))
