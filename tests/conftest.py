import pytest

from invoice_calculator.agents.processing import InvoiceProcessor
from invoice_calculator.core.result import error, loading, success
from invoice_calculator.models.invoice import Invoice, InvoiceCollection, LineItem
from invoice_calculator.repositories.invoice import InvoiceRepository


class StubRepository(InvoiceRepository):
    """Replays a fixed sequence of results."""

    def __init__(self, results):
        self.results = list(results)
        self.calls = 0

    async def observe_invoices(self):
        self.calls += 1
        for result in self.results:
            yield result


@pytest.fixture
def processor():
    return InvoiceProcessor()


@pytest.fixture
def sample_invoice():
    return Invoice(
        id="invoice-1-0e4bd2e1",
        date="2022-10-01T10:22:32",
        description="Consulting services",
        line_items=(
            LineItem(id="item1", name="Service #1", price_in_cents=100, quantity=1),
            LineItem(id="item2", name="Service #2", price_in_cents=750, quantity=2),
        )
    )


@pytest.fixture
def second_invoice():
    return Invoice(
        id="inv-2",
        date="2022-11-15T08:00:00",
        description=None,
        line_items=(
            LineItem(id="item3", name="Licence", price_in_cents=123456, quantity=1),
        )
    )


@pytest.fixture
def sample_collection(sample_invoice, second_invoice):
    return InvoiceCollection(invoices=(sample_invoice, second_invoice))


@pytest.fixture
def invoice_payload():
    """The remote JSON document for two invoices."""
    return {
        "items": [
            {
                "id": "invoice-1-0e4bd2e1",
                "date": "2022-10-01T10:22:32",
                "description": "Consulting services",
                "items": [
                    {"id": "item1", "name": "Service #1", "priceinCents": 100, "quantity": 1},
                    {"id": "item2", "name": "Service #2", "priceinCents": 750, "quantity": 2}
                ]
            },
            {
                "id": "inv-2",
                "date": "2022-11-15T08:00:00",
                "description": None,
                "items": [
                    {"id": "item3", "name": "Licence", "priceinCents": 123456, "quantity": 1}
                ]
            }
        ]
    }


@pytest.fixture
def make_repository():
    return StubRepository


@pytest.fixture
def successful_repository(sample_collection):
    return StubRepository([loading(), success(sample_collection)])


@pytest.fixture
def failing_repository():
    return StubRepository([loading(), error("Network error: timeout")])
