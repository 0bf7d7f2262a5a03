"""
Invoice lifecycle helpers
"""
import logging

from garage_billing.schemas.invoice import Invoice, InvoiceStatus

logger = logging.getLogger(__name__)


def mark_invoice_paid(invoice: Invoice) -> Invoice:
    """
    Move an invoice from pending to paid

    Returns a new invoice; the input is left untouched. Paid invoices come
    back as they are. There is no way back to pending.
    """
    if invoice.is_paid:
        return invoice

    logger.info(f"Invoice {invoice.id} marked as paid")
    return invoice.model_copy(update={"status": InvoiceStatus.PAID.value})
