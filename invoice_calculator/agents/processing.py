import logging
from typing import List, Optional, Sequence

from invoice_calculator.exceptions import AggregationFault
from invoice_calculator.models.invoice import Invoice, LineItem
from invoice_calculator.models.processed import ProcessedInvoice, ProcessedInvoiceSet
from invoice_calculator.tools.formatting import (
    DEFAULT_SHORT_ID_LENGTH,
    format_currency,
    format_invoice_date,
    short_id,
)

logger = logging.getLogger(__name__)

NO_INVOICES_MESSAGE = "No invoices found"
MIN_QUANTITY = 1
MIN_PRICE_CENTS = 0


class InvoiceProcessor:
    """
    Pure aggregation over fetched invoices: line, invoice and grand totals plus
    the formatted display fields. No I/O and no shared state.
    """
    def __init__(self, short_id_length: int = DEFAULT_SHORT_ID_LENGTH):
        self.short_id_length = short_id_length

    def line_item_total(self, item: LineItem) -> int:
        # Malformed upstream data never produces a negative contribution.
        quantity = max(item.quantity, MIN_QUANTITY)
        price = max(item.price_in_cents, MIN_PRICE_CENTS)
        return quantity * price

    def invoice_total(self, invoice: Invoice) -> int:
        total = 0
        for item in invoice.line_items:
            total += self.line_item_total(item)
        return total

    def grand_total(self, invoices: Sequence[Invoice]) -> int:
        return sum(self.invoice_total(invoice) for invoice in invoices)

    def process_invoices(self, invoices: Sequence[Invoice]) -> List[ProcessedInvoice]:
        processed = []
        for invoice in invoices:
            total = self.invoice_total(invoice)
            processed.append(ProcessedInvoice(
                invoice=invoice,
                total_in_cents=total,
                formatted_total=format_currency(total),
                formatted_date=format_invoice_date(invoice.date),
                short_id=short_id(invoice.id, self.short_id_length)
            ))
        return processed

    def aggregate(self, invoices: Sequence[Invoice]) -> ProcessedInvoiceSet:
        """
        Build the processed set for a fetched collection.
        An empty input yields the empty set with the default message.
        Raises AggregationFault when an invoice cannot be processed.
        """
        if not invoices:
            return self.empty_result()

        try:
            processed = self.process_invoices(invoices)
            grand_total = self.grand_total(invoices)
        except (AttributeError, TypeError, ValueError) as e:
            raise AggregationFault(str(e)) from e

        logger.debug(f"Aggregated {len(processed)} invoices, grand total {grand_total}")
        return ProcessedInvoiceSet(
            invoices=tuple(processed),
            grand_total_cents=grand_total,
            grand_total_formatted=format_currency(grand_total),
            is_empty=False,
            empty_message=None
        )

    def empty_result(self, message: Optional[str] = NO_INVOICES_MESSAGE) -> ProcessedInvoiceSet:
        return ProcessedInvoiceSet(
            invoices=(),
            grand_total_cents=0,
            grand_total_formatted=format_currency(0),
            is_empty=True,
            empty_message=message
        )

invoice_processor = InvoiceProcessor()
