from fastapi import APIRouter

from .health import health_router
from .consumers import consumer_router
from .merchants import merchant_router
from .consumer_limits import consumer_limit_router
from .loans import loan_router
from .transactions import transaction_router

router = APIRouter()

router.include_router(health_router, tags=["Health"])
router.include_router(consumer_router, tags=["Consumers"])
router.include_router(merchant_router, tags=["Merchants"])
router.include_router(consumer_limit_router, tags=["Consumer Limits"])
router.include_router(loan_router, tags=["Loans"])
router.include_router(transaction_router, tags=["Transactions"])
