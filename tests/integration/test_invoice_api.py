import json

import httpx
import pytest
from pydantic import ValidationError

from invoice_calculator.tools.invoice_api import InvoiceApiClient

BASE_URL = "https://example.test/homework/"


def client_for(handler):
    return InvoiceApiClient(base_url=BASE_URL, transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_fetch_decodes_invoice_document(invoice_payload):
    requests = []

    def handler(request):
        requests.append(request)
        return httpx.Response(200, json=invoice_payload)

    async with client_for(handler) as client:
        response = await client.fetch_invoices()

    assert response.is_successful
    assert response.status_code == 200
    assert len(response.body.invoices) == 2
    assert response.body.invoices[0].line_items[1].price_in_cents == 750
    assert requests[0].method == "GET"
    assert requests[0].url.path == "/homework/invoices.json"
    assert requests[0].headers["Content-Type"] == "application/json; charset=utf-8"


@pytest.mark.asyncio
async def test_fetch_alternate_endpoint():
    paths = []

    def handler(request):
        paths.append(request.url.path)
        return httpx.Response(200, json={"items": []})

    async with client_for(handler) as client:
        response = await client.fetch_invoices("invoices_empty.json")

    assert paths == ["/homework/invoices_empty.json"]
    assert response.body.invoices == ()


@pytest.mark.asyncio
async def test_non_success_status_is_returned_not_raised():
    async with client_for(lambda request: httpx.Response(404, text="missing")) as client:
        response = await client.fetch_invoices()

    assert response.is_successful is False
    assert response.status_code == 404
    assert response.reason == "Not Found"
    assert response.body is None


@pytest.mark.parametrize("content", [b"", b"   ", b"null"])
@pytest.mark.asyncio
async def test_missing_payload_gives_no_body(content):
    async with client_for(lambda request: httpx.Response(200, content=content)) as client:
        response = await client.fetch_invoices()

    assert response.is_successful
    assert response.body is None


@pytest.mark.asyncio
async def test_invalid_json_raises():
    async with client_for(lambda request: httpx.Response(200, content=b"{not json")) as client:
        with pytest.raises(json.JSONDecodeError):
            await client.fetch_invoices()


@pytest.mark.asyncio
async def test_transport_errors_propagate():
    def handler(request):
        raise httpx.ConnectError("refused", request=request)

    async with client_for(handler) as client:
        with pytest.raises(httpx.ConnectError):
            await client.fetch_invoices()


@pytest.mark.asyncio
async def test_document_without_items_fails_validation():
    async with client_for(lambda request: httpx.Response(200, json={})) as client:
        with pytest.raises(ValidationError):
            await client.fetch_invoices()
