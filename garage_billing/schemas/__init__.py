"""
Pydantic schemas for billing, customers and invoices
"""
from garage_billing.schemas.billing import (
    ServiceType,
    ServiceSelection,
    BillingInput,
    BillingResult,
    ServiceRecordCreate,
    PricingResponse,
)
from garage_billing.schemas.customer import CustomerProfile
from garage_billing.schemas.invoice import (
    InvoiceStatus,
    ServiceRecord,
    Invoice,
    InvoiceRenderRequest,
    PrintInvoiceResponse,
    ShareInvoiceResponse,
)

__all__ = [
    "ServiceType",
    "ServiceSelection",
    "BillingInput",
    "BillingResult",
    "ServiceRecordCreate",
    "PricingResponse",
    "CustomerProfile",
    "InvoiceStatus",
    "ServiceRecord",
    "Invoice",
    "InvoiceRenderRequest",
    "PrintInvoiceResponse",
    "ShareInvoiceResponse",
]
