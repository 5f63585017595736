from fastapi import APIRouter, Depends, HTTPException, Request

from invoice_calculator.workflow.reducer import InvoiceViewModel
from invoice_calculator.workflow.state import UiState

router = APIRouter(prefix="/api/invoices", tags=["Invoices"])


def get_view_model(request: Request) -> InvoiceViewModel:
    """Dependency returning the reducer owned by the running app."""
    view_model = getattr(request.app.state, "view_model", None)
    if view_model is None:
        raise HTTPException(status_code=503, detail="Invoice pipeline is not running")
    return view_model


@router.get("/state", response_model=UiState)
async def read_state(view_model: InvoiceViewModel = Depends(get_view_model)):
    return view_model.ui_state


@router.post("/state/clear-error", response_model=UiState)
async def clear_error(view_model: InvoiceViewModel = Depends(get_view_model)):
    view_model.clear_error()
    return view_model.ui_state
