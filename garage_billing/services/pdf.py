from reportlab.lib.pagesizes import A4
from reportlab.lib import colors
from reportlab.lib.units import inch
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.enums import TA_CENTER
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont
from reportlab.lib.fonts import addMapping
from xml.sax.saxutils import escape
from io import BytesIO
import os
from typing import List, Optional, Tuple

from garage_billing.core.config import settings
from garage_billing.schemas.customer import CustomerProfile
from garage_billing.schemas.invoice import Invoice, ServiceRecord
from garage_billing.services.billing import (
    CHARGE_DISCOUNT,
    CHARGE_GST,
    CHARGE_LABOUR,
    CHARGE_SPARE_PARTS,
    get_charge_items,
    get_service_lines,
)
from garage_billing.utils.currency import format_currency
from garage_billing.utils.date import format_date

# Helvetica has no rupee sign, so the document is set in a bundled TTF
FONT_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), "fonts")
FONT_NAME = "DejaVuSans"
FONT_NAME_BOLD = "DejaVuSans-Bold"


def register_fonts() -> None:
    if FONT_NAME in pdfmetrics.getRegisteredFontNames():
        return
    pdfmetrics.registerFont(TTFont(FONT_NAME, os.path.join(FONT_DIR, "DejaVuSans.ttf")))
    pdfmetrics.registerFont(TTFont(FONT_NAME_BOLD, os.path.join(FONT_DIR, "DejaVuSans-Bold.ttf")))
    addMapping(FONT_NAME, 0, 0, FONT_NAME)
    addMapping(FONT_NAME, 1, 0, FONT_NAME_BOLD)
    addMapping(FONT_NAME, 0, 1, FONT_NAME)
    addMapping(FONT_NAME, 1, 1, FONT_NAME_BOLD)


BRAND_COLOR = colors.HexColor('#FF8C00')
MUTED_COLOR = colors.HexColor('#888888')

STATUS_COLORS = {
    'paid': (colors.HexColor('#DCFCE7'), colors.HexColor('#166534')),
    'pending': (colors.HexColor('#FEF3C7'), colors.HexColor('#92400E')),
}

CHARGE_LABELS = {
    CHARGE_SPARE_PARTS: 'Spare Parts',
    CHARGE_LABOUR: 'Labour Charges',
    CHARGE_DISCOUNT: 'Discount',
    CHARGE_GST: 'GST (18%)',
}


def build_totals_rows(record: ServiceRecord) -> List[Tuple[str, str]]:
    """Label/amount rows of the totals block, grand total last"""
    rows = [('Service Subtotal', format_currency(record.subtotal))]
    for kind, amount in get_charge_items(record):
        sign = '-' if kind == CHARGE_DISCOUNT else ''
        rows.append((CHARGE_LABELS[kind], f"{sign}{format_currency(amount)}"))
    rows.append(('TOTAL', format_currency(record.total)))
    return rows


def build_customer_rows(customer: CustomerProfile) -> List[Tuple[str, str]]:
    """Label/value pairs of the customer & vehicle grid"""
    return [
        ('Customer Name', customer.name),
        ('Phone', customer.phone),
        ('Address', customer.address or '-'),
        ('Bike Model', customer.bikeModel or '-'),
        ('Registration No.', customer.bikeNumber),
        ('KM Reading', f"{customer.kmReading} km"),
        ('Fuel Level', customer.fuelLevel),
    ]


def _field(label: str, value: str, label_style, value_style) -> list:
    return [Paragraph(escape(label), label_style), Paragraph(f"<b>{escape(value)}</b>", value_style)]


def render_invoice_document(invoice: Invoice, customer: Optional[CustomerProfile] = None) -> bytes:
    """
    Generate a print-ready PDF for an invoice

    Args:
        invoice: Invoice with its embedded service record
        customer: Linked customer; the customer grid is omitted when None

    Returns:
        bytes: PDF content, byte-identical for identical inputs
    """
    register_fonts()
    record = invoice.serviceRecord
    buffer = BytesIO()
    doc = SimpleDocTemplate(buffer, pagesize=A4, rightMargin=30, leftMargin=30,
                           topMargin=30, bottomMargin=18,
                           title=f"Invoice {invoice.id}", author=settings.BRAND_NAME,
                           invariant=1)

    # Container for the 'Flowable' objects
    elements = []

    # Define styles
    styles = getSampleStyleSheet()
    brand_style = ParagraphStyle(
        'BrandName',
        parent=styles['Heading1'],
        fontName=FONT_NAME_BOLD,
        fontSize=26,
        leading=30,
        textColor=BRAND_COLOR,
        spaceAfter=2
    )
    section_style = ParagraphStyle(
        'SectionTitle',
        parent=styles['Heading4'],
        fontName=FONT_NAME_BOLD,
        fontSize=9,
        textColor=MUTED_COLOR,
        spaceBefore=6,
        spaceAfter=6
    )
    label_style = ParagraphStyle('FieldLabel', parent=styles['Normal'], fontName=FONT_NAME, fontSize=8, textColor=MUTED_COLOR)
    value_style = ParagraphStyle('FieldValue', parent=styles['Normal'], fontName=FONT_NAME, fontSize=10)
    normal_style = ParagraphStyle('Body', parent=styles['Normal'], fontName=FONT_NAME)

    # Header with brand mark
    elements.append(Paragraph(escape(settings.BRAND_NAME), brand_style))
    elements.append(Paragraph(f"Professional {escape(settings.BRAND_TAGLINE)}", normal_style))
    elements.append(Paragraph(f"Ph: {escape(settings.BRAND_PHONE)}", normal_style))
    header_rule = Table([['']], colWidths=[7.5*inch], rowHeights=[6])
    header_rule.setStyle(TableStyle([
        ('LINEBELOW', (0, 0), (-1, -1), 3, BRAND_COLOR),
    ]))
    elements.append(header_rule)
    elements.append(Spacer(1, 16))

    # Invoice metadata and status indicator
    status_bg, status_fg = STATUS_COLORS.get(invoice.status, STATUS_COLORS['pending'])
    status_style = ParagraphStyle('Status', parent=value_style, textColor=status_fg, alignment=TA_CENTER)
    meta_data = [
        [Paragraph('INVOICE NUMBER', label_style),
         Paragraph('DATE &amp; TIME', label_style),
         Paragraph('STATUS', label_style)],
        [Paragraph(f"<b>{escape(invoice.id)}</b>", value_style),
         Paragraph(f"<b>{escape(format_date(invoice.createdAt))}</b>", value_style),
         Paragraph(f"<b>{escape(invoice.status.upper())}</b>", status_style)],
    ]
    meta_table = Table(meta_data, colWidths=[3.5*inch, 2.5*inch, 1.5*inch])
    meta_table.setStyle(TableStyle([
        ('VALIGN', (0, 0), (-1, -1), 'TOP'),
        ('BACKGROUND', (2, 1), (2, 1), status_bg),
    ]))
    elements.append(meta_table)
    elements.append(Spacer(1, 16))

    # Customer / vehicle grid, two fields per row
    if customer:
        elements.append(Paragraph('CUSTOMER &amp; VEHICLE DETAILS', section_style))
        fields = [_field(label, value, label_style, value_style)
                  for label, value in build_customer_rows(customer)]
        grid = []
        for i in range(0, len(fields), 2):
            left = fields[i]
            right = fields[i + 1] if i + 1 < len(fields) else ['', '']
            grid.append([left[0], right[0]])
            grid.append([left[1], right[1]])
        customer_table = Table(grid, colWidths=[3.75*inch, 3.75*inch])
        customer_table.setStyle(TableStyle([
            ('VALIGN', (0, 0), (-1, -1), 'TOP'),
            ('BOTTOMPADDING', (0, 0), (-1, -1), 2),
        ]))
        elements.append(customer_table)
        elements.append(Spacer(1, 16))

    # Services performed
    elements.append(Paragraph('SERVICES PERFORMED', section_style))
    services = get_service_lines(record)
    if services:
        service_data = [['•', Paragraph(escape(service), normal_style)] for service in services]
    else:
        service_data = [['', Paragraph('No services recorded', label_style)]]
    services_table = Table(service_data, colWidths=[0.3*inch, 7.2*inch])
    services_table.setStyle(TableStyle([
        ('FONTNAME', (0, 0), (-1, -1), FONT_NAME),
        ('TEXTCOLOR', (0, 0), (0, -1), BRAND_COLOR),
        ('LINEBELOW', (0, 0), (-1, -1), 0.5, colors.HexColor('#F0F0F0')),
        ('VALIGN', (0, 0), (-1, -1), 'MIDDLE'),
    ]))
    elements.append(services_table)
    elements.append(Spacer(1, 20))

    # Totals, right-aligned block
    totals_data = [['', label, amount] for label, amount in build_totals_rows(record)]
    totals_table = Table(totals_data, colWidths=[3.6*inch, 2.4*inch, 1.5*inch])
    totals_style = [
        ('FONTNAME', (1, 0), (-1, -2), FONT_NAME),
        ('ALIGN', (2, 0), (2, -1), 'RIGHT'),
        ('FONTSIZE', (1, 0), (-1, -2), 10),
        ('FONTNAME', (1, -1), (-1, -1), FONT_NAME_BOLD),
        ('FONTSIZE', (1, -1), (-1, -1), 14),
        ('TEXTCOLOR', (1, -1), (-1, -1), BRAND_COLOR),
        ('LINEABOVE', (1, -1), (-1, -1), 2, BRAND_COLOR),
        ('TOPPADDING', (1, -1), (-1, -1), 8),
    ]
    for row, (_, label, _) in enumerate(totals_data):
        if label == CHARGE_LABELS[CHARGE_DISCOUNT]:
            totals_style.append(('TEXTCOLOR', (1, row), (-1, row), colors.HexColor('#EF4444')))
    totals_table.setStyle(TableStyle(totals_style))
    elements.append(totals_table)

    # Footer
    elements.append(Spacer(1, 30))
    footer = Paragraph(
        f"Thank you for choosing {escape(settings.BRAND_NAME)}! | Ph: {escape(settings.BRAND_PHONE)}",
        ParagraphStyle('Footer', parent=normal_style, fontSize=8, textColor=MUTED_COLOR, alignment=TA_CENTER)
    )
    elements.append(footer)

    # Build PDF
    doc.build(elements)

    # Get PDF content
    pdf_content = buffer.getvalue()
    buffer.close()

    return pdf_content
