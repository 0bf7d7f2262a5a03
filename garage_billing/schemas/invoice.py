from enum import Enum
from pydantic import BaseModel, ConfigDict
from typing import Optional

from garage_billing.schemas.billing import ServiceType
from garage_billing.schemas.customer import CustomerProfile


class InvoiceStatus(str, Enum):
    PENDING = "pending"
    PAID = "paid"


# Service Record Schemas
class ServiceRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    serviceType: ServiceType = ServiceType()
    customService: str = ""
    subtotal: int = 0
    sparePartsCost: int = 0
    labourCharges: int = 0
    discount: int = 0
    gstAmount: int = 0
    total: int = 0
    gstFlag: bool = False
    customerId: int
    concierge: str = ""
    createdAt: int  # nanoseconds since epoch


# Invoice Schemas
class Invoice(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    # Free-form in the store contract; "pending" or "paid" in practice
    status: str = InvoiceStatus.PENDING.value
    createdAt: int
    customerId: int
    serviceRecord: ServiceRecord

    @property
    def is_paid(self) -> bool:
        return self.status == InvoiceStatus.PAID.value


class InvoiceRenderRequest(BaseModel):
    invoice: Invoice
    customer: Optional[CustomerProfile] = None


class PrintInvoiceResponse(BaseModel):
    success: bool
    message: str
    invoiceId: str


class ShareInvoiceResponse(BaseModel):
    message: str
    url: str
