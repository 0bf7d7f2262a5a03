"""
WhatsApp share message for invoices
"""
import re
from typing import Optional
from urllib.parse import quote

from garage_billing.core.config import settings
from garage_billing.schemas.customer import CustomerProfile
from garage_billing.schemas.invoice import Invoice
from garage_billing.services.billing import get_service_lines
from garage_billing.utils.currency import format_currency
from garage_billing.utils.date import format_short_date

WHATSAPP_URL = "https://wa.me/{phone}?text={text}"

# Left unescaped in the text, as encodeURIComponent does
URL_SAFE_MARKS = "!*'()"


def build_share_message(invoice: Invoice, customer: Optional[CustomerProfile] = None) -> str:
    """Plain-text invoice summary formatted for WhatsApp (*bold* markup)"""
    services = get_service_lines(invoice.serviceRecord)
    name = customer.name if customer else "N/A"
    bike_model = customer.bikeModel if customer else ""
    bike_number = customer.bikeNumber if customer else ""

    return "\n".join([
        f"*{settings.BRAND_NAME}* - Service Invoice",
        f"Contact: {settings.BRAND_PHONE}",
        "",
        f"Invoice No: *{invoice.id}*",
        f"Date: {format_short_date(invoice.createdAt)}",
        f"Customer: {name or 'N/A'}",
        f"Bike: {bike_model} ({bike_number})",
        "",
        f"Services: {', '.join(services) or 'N/A'}",
        "",
        f"*Total Amount: {format_currency(invoice.serviceRecord.total)}*",
        "",
        f"Thank you for choosing {settings.BRAND_NAME}!",
        "Please visit us again for your next service.",
        f"Ph: {settings.BRAND_PHONE}",
    ])


def build_share_url(invoice: Invoice, customer: Optional[CustomerProfile] = None) -> str:
    """wa.me link addressed to the customer's phone (digits only)"""
    phone = re.sub(r"\D", "", customer.phone) if customer else ""
    return WHATSAPP_URL.format(phone=phone, text=quote(build_share_message(invoice, customer), safe=URL_SAFE_MARKS))
