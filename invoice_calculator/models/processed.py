from typing import Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field, model_validator

from invoice_calculator.models.invoice import Invoice
from invoice_calculator.tools.formatting import DEFAULT_CURRENCY_VALUE


class ProcessedInvoice(BaseModel):
    """Read-only display projection of one invoice."""
    model_config = ConfigDict(frozen=True)

    invoice: Invoice
    total_in_cents: int
    formatted_total: str
    formatted_date: str
    short_id: str


class ProcessedInvoiceSet(BaseModel):
    """
    Output of one aggregation run.
    When ``is_empty`` is set the source collection was empty, so there are no
    invoices and the grand total is zero.
    """
    model_config = ConfigDict(frozen=True)

    invoices: Tuple[ProcessedInvoice, ...] = ()
    grand_total_cents: int = 0
    grand_total_formatted: str = DEFAULT_CURRENCY_VALUE
    is_empty: bool = Field(..., description="True iff the fetched collection had no invoices")
    empty_message: Optional[str] = None

    @model_validator(mode="after")
    def check_empty_invariant(self):
        if self.is_empty and (self.invoices or self.grand_total_cents != 0):
            raise ValueError("An empty invoice set must have no invoices and a zero grand total")
        return self
