from pydantic import BaseModel, ConfigDict
from typing import Optional


# Service Selection Schemas
class ServiceType(BaseModel):
    model_config = ConfigDict(frozen=True)

    oilChange: bool = False
    generalService: bool = False
    engineRepair: bool = False
    spareParts: bool = False


class ServiceSelection(ServiceType):
    customService: str = ""

    @property
    def service_type(self) -> ServiceType:
        return ServiceType(
            oilChange=self.oilChange,
            generalService=self.generalService,
            engineRepair=self.engineRepair,
            spareParts=self.spareParts,
        )


# Billing Schemas
class BillingInput(ServiceSelection):
    # Manual charges may arrive negative; the calculator floors them to zero
    labourCharges: int = 0
    sparePartsCost: int = 0
    discount: int = 0
    gstEnabled: bool = False

    @property
    def selection(self) -> ServiceSelection:
        return ServiceSelection(
            oilChange=self.oilChange,
            generalService=self.generalService,
            engineRepair=self.engineRepair,
            spareParts=self.spareParts,
            customService=self.customService,
        )


class BillingResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    subtotal: int
    sparePartsCost: int
    labourCharges: int
    discount: int
    gstAmount: int
    total: int


class ServiceRecordCreate(BaseModel):
    billing: BillingInput
    customerId: int
    concierge: str = ""
    createdAt: Optional[int] = None  # nanoseconds, defaults to now


class PricingResponse(BaseModel):
    oilChange: int
    generalService: int
    engineRepair: int
    spareParts: int
    gstRate: float
