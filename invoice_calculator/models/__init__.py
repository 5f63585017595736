from invoice_calculator.models.invoice import Invoice, InvoiceCollection, LineItem
from invoice_calculator.models.processed import ProcessedInvoice, ProcessedInvoiceSet

__all__ = [
    "Invoice",
    "InvoiceCollection",
    "LineItem",
    "ProcessedInvoice",
    "ProcessedInvoiceSet",
]
