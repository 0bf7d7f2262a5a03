"""
Fixed service price list and GST rate

Prices are part of the build, not runtime settings: every invoice computed by
one release is priced from the same table.
"""
from decimal import Decimal

from pydantic import BaseModel, ConfigDict


GST_RATE = Decimal("0.18")


class PricingTable(BaseModel):
    """Price (in rupees) per fixed service category"""

    model_config = ConfigDict(frozen=True)

    oil_change: int = 300
    general_service: int = 500
    engine_repair: int = 1200
    # Spare parts are billed through the manual sparePartsCost charge
    spare_parts: int = 0


DEFAULT_PRICING = PricingTable()
