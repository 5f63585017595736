import logging
from typing import Callable, List, Optional, Tuple
from pydantic import BaseModel, ConfigDict

from invoice_calculator.models.processed import ProcessedInvoice
from invoice_calculator.tools.formatting import DEFAULT_CURRENCY_VALUE

logger = logging.getLogger(__name__)


class UiState(BaseModel):
    """
    Snapshot read by the presentation layer.
    Stale invoices and grand total stay visible while an error is shown.
    """
    model_config = ConfigDict(frozen=True)

    is_loading: bool = False
    is_empty: bool = False
    invoices: Tuple[ProcessedInvoice, ...] = ()
    grand_total: str = DEFAULT_CURRENCY_VALUE
    error: Optional[str] = None
    empty_message: Optional[str] = None


StateListener = Callable[[UiState], None]


class StateCell:
    """
    Holds the current UiState. One writer, many readers.
    Writes replace the whole reference; readers never see a partial update.
    """
    def __init__(self, initial: Optional[UiState] = None):
        self._value = initial or UiState()
        self._listeners: List[StateListener] = []

    @property
    def value(self) -> UiState:
        return self._value

    def set(self, state: UiState) -> UiState:
        self._value = state
        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception:
                logger.exception("State listener failed")
        return state

    def update(self, **changes) -> UiState:
        """Replace the state with a copy carrying ``changes``."""
        return self.set(self._value.model_copy(update=changes))

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe
