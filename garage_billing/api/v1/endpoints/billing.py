from fastapi import APIRouter

from garage_billing.core.pricing import DEFAULT_PRICING, GST_RATE
from garage_billing.schemas.billing import (
    BillingInput,
    BillingResult,
    ServiceRecordCreate,
    PricingResponse
)
from garage_billing.schemas.invoice import ServiceRecord
from garage_billing.services.billing import calculate_billing, build_service_record

router = APIRouter(prefix="/billing", tags=["Billing"])


@router.get("/pricing", response_model=PricingResponse)
def get_pricing():
    """Fixed service prices and GST rate"""
    return PricingResponse(
        oilChange=DEFAULT_PRICING.oil_change,
        generalService=DEFAULT_PRICING.general_service,
        engineRepair=DEFAULT_PRICING.engine_repair,
        spareParts=DEFAULT_PRICING.spare_parts,
        gstRate=float(GST_RATE)
    )


@router.post("/calculate", response_model=BillingResult)
def calculate(billing_input: BillingInput):
    """Price a bill from selected services and manual charges"""
    return calculate_billing(billing_input)


@router.post("/service-record", response_model=ServiceRecord)
def create_service_record(record_data: ServiceRecordCreate):
    """Price a bill and package it as the record the store persists"""
    result = calculate_billing(record_data.billing)
    return build_service_record(
        record_data.billing,
        result,
        customer_id=record_data.customerId,
        concierge=record_data.concierge,
        created_at=record_data.createdAt
    )
