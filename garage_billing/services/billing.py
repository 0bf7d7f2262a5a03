"""
Billing calculator
Turns a service selection plus manual charges into a priced breakdown
"""
import logging
import time
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Optional, Tuple

from garage_billing.core.pricing import DEFAULT_PRICING, GST_RATE, PricingTable
from garage_billing.schemas.billing import BillingInput, BillingResult, ServiceType
from garage_billing.schemas.invoice import ServiceRecord

logger = logging.getLogger(__name__)


# Display order is part of the rendered receipt
SERVICE_DISPLAY_NAMES = (
    ("oilChange", "Oil Change"),
    ("generalService", "General Service"),
    ("engineRepair", "Engine Repair"),
    ("spareParts", "Spare Parts"),
)

CHARGE_SPARE_PARTS = "spareParts"
CHARGE_LABOUR = "labour"
CHARGE_DISCOUNT = "discount"
CHARGE_GST = "gst"


def round_half_away_from_zero(value: Decimal) -> int:
    """Round to the nearest whole rupee, halves away from zero"""
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def calculate_billing(
    billing_input: BillingInput,
    pricing: PricingTable = DEFAULT_PRICING
) -> BillingResult:
    """
    Price a bill

    Never fails: negative manual charges are floored to zero and a discount
    larger than the charges yields a zero total.

    Args:
        billing_input: Selected services, manual charges and GST flag
        pricing: Fixed price list

    Returns:
        BillingResult: Priced breakdown
    """
    subtotal = 0
    if billing_input.oilChange:
        subtotal += pricing.oil_change
    if billing_input.generalService:
        subtotal += pricing.general_service
    if billing_input.engineRepair:
        subtotal += pricing.engine_repair

    spare_parts_cost = max(0, billing_input.sparePartsCost)
    labour_charges = max(0, billing_input.labourCharges)
    discount = max(0, billing_input.discount)

    if (spare_parts_cost, labour_charges, discount) != (
        billing_input.sparePartsCost, billing_input.labourCharges, billing_input.discount
    ):
        logger.debug("Clamped negative manual charges to zero")

    # GST applies to the pre-tax amount before the final clamp, even if negative
    pre_tax_total = subtotal + spare_parts_cost + labour_charges - discount
    gst_amount = 0
    if billing_input.gstEnabled:
        gst_amount = round_half_away_from_zero(Decimal(pre_tax_total) * GST_RATE)

    total = max(0, pre_tax_total + gst_amount)

    return BillingResult(
        subtotal=subtotal,
        sparePartsCost=spare_parts_cost,
        labourCharges=labour_charges,
        discount=discount,
        gstAmount=gst_amount,
        total=total
    )


def build_service_record(
    billing_input: BillingInput,
    result: BillingResult,
    customer_id: int,
    concierge: str = "",
    created_at: Optional[int] = None
) -> ServiceRecord:
    """Package a calculated bill as the record handed to the store"""
    if created_at is None:
        created_at = time.time_ns()

    return ServiceRecord(
        serviceType=billing_input.service_type,
        customService=billing_input.customService,
        subtotal=result.subtotal,
        sparePartsCost=result.sparePartsCost,
        labourCharges=result.labourCharges,
        discount=result.discount,
        gstAmount=result.gstAmount,
        total=result.total,
        gstFlag=billing_input.gstEnabled,
        customerId=customer_id,
        concierge=concierge,
        createdAt=created_at
    )


def get_service_names(service_type: ServiceType) -> List[str]:
    """Display names of the selected fixed services, in receipt order"""
    return [
        name for field, name in SERVICE_DISPLAY_NAMES
        if getattr(service_type, field)
    ]


def get_service_lines(record: ServiceRecord) -> List[str]:
    """Fixed service names followed by the custom service label, if any"""
    services = get_service_names(record.serviceType)
    if record.customService:
        services.append(record.customService)
    return services


def get_charge_items(record: ServiceRecord) -> List[Tuple[str, int]]:
    """
    Optional charge lines printed under the subtotal

    Only nonzero amounts are listed, in the order spare parts, labour,
    discount, GST. Shared by the receipt and the PDF document.
    """
    charges = [
        (CHARGE_SPARE_PARTS, record.sparePartsCost),
        (CHARGE_LABOUR, record.labourCharges),
        (CHARGE_DISCOUNT, record.discount),
        (CHARGE_GST, record.gstAmount),
    ]
    return [(kind, amount) for kind, amount in charges if amount != 0]
