"""
Shared fixtures: sample customers, invoices and the API test client
"""
import pytest
from fastapi.testclient import TestClient

from garage_billing.schemas.billing import BillingInput
from garage_billing.schemas.customer import CustomerProfile
from garage_billing.schemas.invoice import Invoice
from garage_billing.services.billing import calculate_billing, build_service_record

# 2026-10-18 09:05:00 UTC (14:35 IST) plus a sub-millisecond remainder
CREATED_AT = 1792314300 * 1_000_000_000 + 999_999


@pytest.fixture
def customer():
    """Customer with every field filled in"""
    return CustomerProfile(
        name="Ravi Kumar",
        phone="9876543210",
        address="12 MG Road, Bengaluru",
        bikeModel="Honda Shine",
        bikeNumber="KA01AB1234",
        kmReading=15230,
        fuelLevel="Half"
    )


@pytest.fixture
def make_invoice():
    """
    Factory: price a BillingInput and wrap it in an invoice
    Usage: make_invoice(oilChange=True, labourCharges=200, status="paid")
    """
    def _make(invoice_id="INV-1001", status="pending", created_at=CREATED_AT, **billing_fields):
        billing_input = BillingInput(**billing_fields)
        result = calculate_billing(billing_input)
        record = build_service_record(
            billing_input,
            result,
            customer_id=7,
            concierge="Suresh",
            created_at=created_at
        )
        return Invoice(
            id=invoice_id,
            status=status,
            createdAt=created_at,
            customerId=7,
            serviceRecord=record
        )

    return _make


@pytest.fixture
def invoice(make_invoice):
    """Oil change + general service + custom job, labour and a discount"""
    return make_invoice(
        oilChange=True,
        generalService=True,
        customService="Chain Lube",
        labourCharges=200,
        discount=50
    )


@pytest.fixture
def test_client():
    """Test client fixture"""
    from main import app
    return TestClient(app)
