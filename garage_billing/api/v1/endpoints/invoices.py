from fastapi import APIRouter, status
from fastapi.responses import Response

from garage_billing.schemas.invoice import (
    Invoice,
    InvoiceRenderRequest,
    PrintInvoiceResponse,
    ShareInvoiceResponse
)
from garage_billing.services.invoice import mark_invoice_paid
from garage_billing.services.pdf import render_invoice_document
from garage_billing.services.printing import print_invoice_document
from garage_billing.services.share import build_share_message, build_share_url

router = APIRouter(prefix="/invoices", tags=["Invoices"])


@router.post("/document")
def download_invoice_document(render_request: InvoiceRenderRequest):
    """Print-ready invoice PDF"""
    invoice = render_request.invoice
    pdf_content = render_invoice_document(invoice, render_request.customer)

    return Response(
        content=pdf_content,
        media_type="application/pdf",
        headers={
            "Content-Disposition": f'attachment; filename="Invoice-{invoice.id}.pdf"'
        }
    )


@router.post("/print", response_model=PrintInvoiceResponse, status_code=status.HTTP_202_ACCEPTED)
def print_invoice(render_request: InvoiceRenderRequest):
    """Send the invoice PDF to the print surface (503 if none is available)"""
    invoice = render_request.invoice
    print_invoice_document(invoice, render_request.customer)

    return PrintInvoiceResponse(
        success=True,
        message="Invoice sent to printer",
        invoiceId=invoice.id
    )


@router.post("/mark-paid", response_model=Invoice)
def mark_paid(invoice: Invoice):
    """Pending -> paid; the store persists the returned invoice"""
    return mark_invoice_paid(invoice)


@router.post("/share", response_model=ShareInvoiceResponse)
def share_invoice(render_request: InvoiceRenderRequest):
    """WhatsApp message and wa.me link for the invoice"""
    invoice = render_request.invoice
    customer = render_request.customer

    return ShareInvoiceResponse(
        message=build_share_message(invoice, customer),
        url=build_share_url(invoice, customer)
    )
