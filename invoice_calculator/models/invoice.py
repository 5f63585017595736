from typing import Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field


class WireModel(BaseModel):
    """
    Immutable model decoded from the remote JSON document.
    Fields are populated either by their wire alias or by their Python name.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class LineItem(WireModel):
    """A single billable line. Price and quantity arrive verbatim and may be zero or negative."""
    id: str
    name: str
    price_in_cents: int = Field(..., alias="priceinCents")
    quantity: int


class Invoice(WireModel):
    id: str
    date: str = Field(..., description="ISO-8601 local timestamp, e.g. 2022-10-01T10:22:32")
    description: Optional[str] = None
    line_items: Tuple[LineItem, ...] = Field(default=(), alias="items")


class InvoiceCollection(WireModel):
    """The unit returned by one fetch."""
    invoices: Tuple[Invoice, ...] = Field(..., alias="items")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "items": [
                    {
                        "id": "0e4bd2e1-25a4-4ba3-8a5f-5b2c0a6d3a40",
                        "date": "2022-10-01T10:22:32",
                        "description": "Office supplies",
                        "items": [
                            {"id": "a1", "name": "Paper", "priceinCents": 750, "quantity": 2}
                        ]
                    }
                ]
            }
        }
    )
