# garage_billing/api/v1/router.py
from fastapi import APIRouter

from garage_billing.api.v1.endpoints import (
    billing,
    receipts,
    invoices
)

api_router = APIRouter()
api_router.include_router(billing.router)
api_router.include_router(receipts.router)
api_router.include_router(invoices.router)
