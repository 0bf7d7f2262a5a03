"""
Print surface handling
Hands rendered invoice documents to whatever can print them
"""
import logging
import os
import re
from typing import Callable, Optional, Protocol

from garage_billing.core.config import settings
from garage_billing.core.exceptions import PrintingUnavailable
from garage_billing.schemas.customer import CustomerProfile
from garage_billing.schemas.invoice import Invoice
from garage_billing.services.pdf import render_invoice_document

logger = logging.getLogger(__name__)


class PrintSurface(Protocol):
    def submit(self, document: bytes, title: str) -> None:
        ...


class SpoolDirectorySurface:
    """Writes documents into a directory watched by the print daemon"""

    def __init__(self, directory: str):
        self.directory = directory

    def path_for(self, title: str) -> str:
        filename = re.sub(r"[^A-Za-z0-9._-]+", "_", title).strip("_") or "document"
        return os.path.join(self.directory, f"{filename}.pdf")

    def submit(self, document: bytes, title: str) -> None:
        path = self.path_for(title)
        # Only a completely written document ever appears under its .pdf name
        partial = f"{path}.part"
        try:
            with open(partial, "wb") as f:
                f.write(document)
            os.replace(partial, path)
        except OSError:
            if os.path.exists(partial):
                os.remove(partial)
            raise
        logger.info(f"Spooled {title} to {path}")


def open_spool_surface() -> Optional[SpoolDirectorySurface]:
    """Spool surface for settings.PRINT_SPOOL_DIR, or None if unusable"""
    directory = settings.PRINT_SPOOL_DIR
    if not directory:
        return None
    if not os.path.isdir(directory) or not os.access(directory, os.W_OK):
        logger.warning(f"Print spool directory not writable: {directory}")
        return None
    return SpoolDirectorySurface(directory)


def print_invoice_document(
    invoice: Invoice,
    customer: Optional[CustomerProfile] = None,
    open_surface: Callable[[], Optional[PrintSurface]] = open_spool_surface
) -> None:
    """
    Render an invoice and submit it to a print surface

    Raises:
        PrintingUnavailable: No surface could be obtained or it refused the
            document. The caller should tell the user and allow a retry.
    """
    document = render_invoice_document(invoice, customer)
    title = f"Invoice {invoice.id}"

    try:
        surface = open_surface()
    except OSError as e:
        logger.error(f"Could not open print surface: {str(e)}")
        raise PrintingUnavailable() from e

    if surface is None:
        logger.warning(f"No print surface available for {title}")
        raise PrintingUnavailable()

    try:
        surface.submit(document, title=title)
    except OSError as e:
        logger.error(f"Print surface rejected {title}: {str(e)}")
        raise PrintingUnavailable() from e

    logger.info(f"Submitted {title} for printing")
