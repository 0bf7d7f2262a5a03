"""
Billing calculator tests
"""
import pytest
from decimal import Decimal
from pydantic import ValidationError

from garage_billing.core.pricing import DEFAULT_PRICING, PricingTable
from garage_billing.schemas.billing import BillingInput, ServiceType
from garage_billing.services.billing import (
    calculate_billing,
    build_service_record,
    get_charge_items,
    get_service_names,
    get_service_lines,
    round_half_away_from_zero,
)


class TestCalculateBilling:
    """Pricing scenarios"""

    def test_oil_change_and_general_service(self):
        """
        Test: Two fixed services, no manual charges, no GST
        Expected: subtotal 800, total 800
        """
        result = calculate_billing(BillingInput(oilChange=True, generalService=True))

        assert result.subtotal == 800
        assert result.gstAmount == 0
        assert result.total == 800

    def test_discount_larger_than_charges(self):
        """
        Test: No services, labour 200, discount 500
        Expected: pre-tax -300 clamps to a zero total
        """
        result = calculate_billing(BillingInput(labourCharges=200, discount=500))

        assert result.subtotal == 0
        assert result.labourCharges == 200
        assert result.discount == 500
        assert result.total == 0

    def test_engine_repair_with_gst(self):
        """
        Test: Engine repair + spare parts 100 with GST
        Expected: gst round(1300 * 0.18) = 234, total 1534
        """
        result = calculate_billing(
            BillingInput(engineRepair=True, sparePartsCost=100, gstEnabled=True)
        )

        assert result.subtotal == 1200
        assert result.sparePartsCost == 100
        assert result.gstAmount == 234
        assert result.total == 1534

    def test_spare_parts_flag_has_no_fixed_price(self):
        """
        Test: Only the spare parts flag and a custom service
        Expected: subtotal stays 0, cost comes from sparePartsCost
        """
        result = calculate_billing(
            BillingInput(spareParts=True, customService="Brake pads", sparePartsCost=450)
        )

        assert result.subtotal == 0
        assert result.total == 450

    def test_no_services_selected(self):
        """
        Test: Nothing selected and no charges
        Expected: zero bill
        """
        result = calculate_billing(BillingInput())

        assert result.subtotal == 0
        assert result.total == 0

    def test_negative_manual_charges_are_floored(self):
        """
        Test: Negative labour, spare parts and discount
        Expected: each clamps to 0, never rejected
        """
        result = calculate_billing(
            BillingInput(oilChange=True, labourCharges=-100, sparePartsCost=-50, discount=-10)
        )

        assert result.labourCharges == 0
        assert result.sparePartsCost == 0
        assert result.discount == 0
        assert result.total == 300

    def test_gst_on_negative_pre_tax_amount(self):
        """
        Test: Discount exceeds charges with GST enabled
        Expected: gst is computed on the negative pre-tax amount, total still 0
        """
        result = calculate_billing(BillingInput(discount=250, gstEnabled=True))

        assert result.gstAmount == -45
        assert result.total == 0

    def test_gst_rounds_half_away_from_zero(self):
        """
        Test: 25 * 0.18 = 4.5 and -25 * 0.18 = -4.5
        Expected: 5 and -5
        """
        up = calculate_billing(BillingInput(labourCharges=25, gstEnabled=True))
        down = calculate_billing(BillingInput(discount=25, gstEnabled=True))

        assert up.gstAmount == 5
        assert up.total == 30
        assert down.gstAmount == -5
        assert down.total == 0

    def test_custom_pricing_table(self):
        """
        Test: Injected price list
        Expected: calculator uses it instead of the defaults
        """
        pricing = PricingTable(oil_change=350, general_service=550, engine_repair=1500)
        result = calculate_billing(BillingInput(oilChange=True, engineRepair=True), pricing)

        assert result.subtotal == 1850
        assert DEFAULT_PRICING.oil_change == 300

    def test_pricing_table_is_immutable(self):
        """
        Test: Assigning a price on the shared table
        Expected: rejected
        """
        with pytest.raises(ValidationError):
            DEFAULT_PRICING.oil_change = 1


SELECTIONS = [
    {},
    {"oilChange": True},
    {"generalService": True, "engineRepair": True},
    {"oilChange": True, "generalService": True, "engineRepair": True, "spareParts": True},
]
CHARGES = [
    {},
    {"labourCharges": 150, "sparePartsCost": 75},
    {"labourCharges": 10, "discount": 999},
    {"labourCharges": -40, "sparePartsCost": 333, "discount": 17},
]


class TestBillingInvariants:
    """Properties that hold for every input"""

    @pytest.mark.parametrize("selection", SELECTIONS)
    @pytest.mark.parametrize("charges", CHARGES)
    @pytest.mark.parametrize("gst_enabled", [False, True])
    def test_total_identity(self, selection, charges, gst_enabled):
        """
        Test: total = max(0, subtotal + spare + labour - discount + gst)
        Expected: holds, total never negative, gst 0 when disabled
        """
        result = calculate_billing(BillingInput(gstEnabled=gst_enabled, **selection, **charges))

        expected = max(
            0,
            result.subtotal + result.sparePartsCost + result.labourCharges
            - result.discount + result.gstAmount
        )
        assert result.total == expected
        assert result.total >= 0
        assert min(result.sparePartsCost, result.labourCharges, result.discount) >= 0
        if not gst_enabled:
            assert result.gstAmount == 0

    def test_same_input_same_result(self):
        """
        Test: Calculating twice
        Expected: equal results
        """
        billing_input = BillingInput(engineRepair=True, labourCharges=120, gstEnabled=True)

        assert calculate_billing(billing_input) == calculate_billing(billing_input)


class TestRounding:

    @pytest.mark.parametrize("value, expected", [
        ("4.5", 5),
        ("-4.5", -5),
        ("4.49", 4),
        ("233.99", 234),
        ("0", 0),
    ])
    def test_round_half_away_from_zero(self, value, expected):
        assert round_half_away_from_zero(Decimal(value)) == expected


class TestServiceRecord:
    """Packaging a bill for the store"""

    def test_build_service_record(self):
        """
        Test: Record built from input and result
        Expected: flags, figures and metadata copied across
        """
        billing_input = BillingInput(
            oilChange=True, customService="Wash", labourCharges=100, gstEnabled=True
        )
        result = calculate_billing(billing_input)

        record = build_service_record(billing_input, result, customer_id=3,
                                      concierge="Anil", created_at=123)

        assert record.serviceType == ServiceType(oilChange=True)
        assert record.customService == "Wash"
        assert record.subtotal == 300
        assert record.gstAmount == 72
        assert record.total == 472
        assert record.gstFlag is True
        assert record.customerId == 3
        assert record.concierge == "Anil"
        assert record.createdAt == 123

    def test_created_at_defaults_to_now(self):
        """
        Test: No timestamp given
        Expected: a nanosecond wall-clock timestamp
        """
        billing_input = BillingInput(oilChange=True)
        record = build_service_record(billing_input, calculate_billing(billing_input), customer_id=1)

        assert record.createdAt > 1_600_000_000 * 1_000_000_000


class TestServiceNames:
    """Display name derivation"""

    def test_fixed_order(self):
        """
        Test: All flags set
        Expected: Oil Change, General Service, Engine Repair, Spare Parts
        """
        names = get_service_names(ServiceType(
            spareParts=True, engineRepair=True, generalService=True, oilChange=True
        ))

        assert names == ["Oil Change", "General Service", "Engine Repair", "Spare Parts"]

    def test_custom_service_comes_last(self, invoice):
        """
        Test: Record with fixed services and a custom label
        Expected: custom label appended after fixed names
        """
        assert get_service_lines(invoice.serviceRecord) == [
            "Oil Change", "General Service", "Chain Lube"
        ]

    def test_charge_items_skip_zero_amounts(self, make_invoice):
        """
        Test: Only labour and discount are nonzero
        Expected: charge items list just those two, in order
        """
        invoice = make_invoice(oilChange=True, labourCharges=200, discount=50)

        assert get_charge_items(invoice.serviceRecord) == [("labour", 200), ("discount", 50)]
