"""
Fixed-width receipt formatter for thermal printers

58mm rolls print 32 columns, 80mm rolls print 48. Every line is padded or
truncated to exactly the column count; longer lines wrap or garble on the
printer.
"""
import unicodedata
from enum import IntEnum
from typing import List, Optional

from garage_billing.core.config import settings
from garage_billing.schemas.customer import CustomerProfile
from garage_billing.schemas.invoice import Invoice, InvoiceStatus
from garage_billing.services.billing import (
    CHARGE_DISCOUNT,
    CHARGE_GST,
    CHARGE_LABOUR,
    CHARGE_SPARE_PARTS,
    get_charge_items,
    get_service_lines,
)
from garage_billing.utils.date import format_date


class ReceiptWidth(IntEnum):
    NARROW = 32  # 58mm
    WIDE = 48  # 80mm


RECEIPT_WIDTH_ALIASES = {
    "narrow": ReceiptWidth.NARROW,
    "58mm": ReceiptWidth.NARROW,
    "wide": ReceiptWidth.WIDE,
    "80mm": ReceiptWidth.WIDE,
}


def parse_receipt_width(value: str) -> ReceiptWidth:
    """Resolve "narrow"/"58mm" or "wide"/"80mm" to a ReceiptWidth"""
    try:
        return RECEIPT_WIDTH_ALIASES[value.strip().lower()]
    except KeyError:
        raise ValueError(f"Unknown receipt width: {value}")


def printable(text: str) -> str:
    """Replace control characters (newlines, tabs, ...) with a single space each"""
    return "".join(" " if unicodedata.category(ch).startswith("C") else ch for ch in text)


def pad_right(text: str, width: int) -> str:
    text = printable(text)
    return text[:max(0, width)].ljust(width)


def pad_left(text: str, width: int) -> str:
    text = printable(text)
    return text[:max(0, width)].rjust(width)


def center_text(text: str, width: int) -> str:
    trimmed = printable(text)[:max(0, width)]
    total_pad = width - len(trimmed)
    left_pad = total_pad // 2
    return " " * left_pad + trimmed + " " * (total_pad - left_pad)


def divider(width: int, char: str = "-") -> str:
    return char * width


def format_line(label: str, value: str, width: int) -> str:
    """Label on the left, value flush against the right edge"""
    value = printable(value)[:max(0, width - 1)]
    max_label = width - len(value) - 1
    return pad_right(label, max_label) + " " + value


def _status_text(invoice: Invoice) -> str:
    return invoice.status.upper()


def format_receipt_58mm(invoice: Invoice, customer: Optional[CustomerProfile] = None) -> str:
    """Render a 32-column receipt"""
    width = ReceiptWidth.NARROW.value
    record = invoice.serviceRecord
    lines: List[str] = []

    lines.append(center_text(settings.BRAND_NAME, width))
    lines.append(center_text(settings.BRAND_TAGLINE, width))
    lines.append(center_text(f"Ph: {settings.BRAND_PHONE}", width))
    lines.append(divider(width, "="))
    lines.append(format_line("Invoice:", invoice.id, width))
    lines.append(format_line("Date:", format_date(invoice.createdAt).split(",")[0], width))
    lines.append(divider(width))

    if customer:
        lines.append(format_line("Name:", customer.name[:14], width))
        lines.append(format_line("Phone:", customer.phone, width))
        lines.append(format_line("Bike:", customer.bikeModel[:14], width))
        lines.append(format_line("Reg No:", customer.bikeNumber, width))
        lines.append(format_line("KM:", str(customer.kmReading), width))

    lines.append(divider(width, "="))
    lines.append(center_text("SERVICES", width))
    lines.append(divider(width))

    for service in get_service_lines(record):
        lines.append("  " + pad_right(service, width - 2))

    labels = {
        CHARGE_SPARE_PARTS: "Spare Parts:",
        CHARGE_LABOUR: "Labour:",
        CHARGE_DISCOUNT: "Discount:",
        CHARGE_GST: "GST (18%):",
    }
    lines.append(divider(width))
    lines.append(format_line("Subtotal:", f"Rs.{record.subtotal}", width))
    for kind, amount in get_charge_items(record):
        sign = "-" if kind == CHARGE_DISCOUNT else ""
        lines.append(format_line(labels[kind], f"{sign}Rs.{amount}", width))
    lines.append(divider(width, "="))
    lines.append(format_line("TOTAL:", f"Rs.{record.total}", width))
    lines.append(divider(width, "="))

    # A zero-total bill always prints as PAID on the narrow receipt,
    # whatever the stored status is
    status = _status_text(invoice) if record.total > 0 else InvoiceStatus.PAID.value.upper()
    lines.append(format_line("Status:", status, width))
    lines.append(divider(width))
    lines.append(center_text("Thank You!", width))
    lines.append(center_text("Visit Again", width))
    lines.append("")

    return "\n".join(lines)


def format_receipt_80mm(invoice: Invoice, customer: Optional[CustomerProfile] = None) -> str:
    """Render a 48-column receipt"""
    width = ReceiptWidth.WIDE.value
    record = invoice.serviceRecord
    lines: List[str] = []

    lines.append(center_text(f"{settings.BRAND_NAME} - {settings.BRAND_TAGLINE.upper()}", width))
    lines.append(center_text(f"Contact: {settings.BRAND_PHONE}", width))
    lines.append(divider(width, "="))
    lines.append(format_line("Invoice No:", invoice.id, width))
    lines.append(format_line("Date & Time:", format_date(invoice.createdAt), width))
    lines.append(divider(width))

    if customer:
        lines.append(format_line("Customer Name:", customer.name, width))
        lines.append(format_line("Phone:", customer.phone, width))
        lines.append(format_line("Address:", customer.address[:28], width))
        lines.append(format_line("Bike Model:", customer.bikeModel, width))
        lines.append(format_line("Reg. Number:", customer.bikeNumber, width))
        lines.append(format_line("KM Reading:", f"{customer.kmReading} km", width))
        lines.append(format_line("Fuel Level:", customer.fuelLevel, width))

    lines.append(divider(width, "="))
    lines.append(center_text("SERVICE DETAILS", width))
    lines.append(divider(width))

    services = get_service_lines(record)
    for service in services:
        lines.append("  * " + pad_right(service, width - 4))
    if not services:
        lines.append(pad_right("  No services recorded", width))

    labels = {
        CHARGE_SPARE_PARTS: "Spare Parts Cost:",
        CHARGE_LABOUR: "Labour Charges:",
        CHARGE_DISCOUNT: "Discount:",
        CHARGE_GST: "GST @ 18%:",
    }
    lines.append(divider(width))
    lines.append(format_line("Service Subtotal:", f"Rs. {record.subtotal}", width))
    for kind, amount in get_charge_items(record):
        sign = "-" if kind == CHARGE_DISCOUNT else ""
        lines.append(format_line(labels[kind], f"{sign}Rs. {amount}", width))
    lines.append(divider(width, "="))
    lines.append(format_line("GRAND TOTAL:", f"Rs. {record.total}", width))
    lines.append(divider(width, "="))
    lines.append(format_line("Payment Status:", _status_text(invoice), width))
    lines.append(divider(width))
    lines.append(center_text(f"Thank you for choosing {settings.BRAND_NAME}!", width))
    lines.append(center_text("We look forward to serving you again.", width))
    lines.append("")

    return "\n".join(lines)


def format_receipt(
    width: ReceiptWidth,
    invoice: Invoice,
    customer: Optional[CustomerProfile] = None
) -> str:
    """
    Render an invoice as fixed-width receipt text

    Args:
        width: ReceiptWidth.NARROW (58mm) or ReceiptWidth.WIDE (80mm)
        invoice: Invoice to print
        customer: Linked customer; the customer block is omitted when None

    Returns:
        str: Newline-joined lines ending with a blank line
    """
    if ReceiptWidth(width) is ReceiptWidth.NARROW:
        return format_receipt_58mm(invoice, customer)
    return format_receipt_80mm(invoice, customer)
