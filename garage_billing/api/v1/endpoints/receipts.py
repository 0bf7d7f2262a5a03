from fastapi import APIRouter, HTTPException, status
from fastapi.responses import PlainTextResponse

from garage_billing.schemas.invoice import InvoiceRenderRequest
from garage_billing.services.receipt import format_receipt, parse_receipt_width

router = APIRouter(prefix="/receipts", tags=["Receipts"])


@router.post("/{width}", response_class=PlainTextResponse)
def render_receipt(width: str, render_request: InvoiceRenderRequest):
    """Fixed-width thermal receipt text (narrow/58mm or wide/80mm)"""
    try:
        receipt_width = parse_receipt_width(width)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )

    return PlainTextResponse(
        format_receipt(receipt_width, render_request.invoice, render_request.customer)
    )
