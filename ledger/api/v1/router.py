"""Main v1 router aggregator"""
from fastapi import APIRouter

from ledger.api.v1 import balances, expenses, settlements

# Every ledger route is scoped to one group: /groups/{group_id}/...
api_router = APIRouter()

api_router.include_router(expenses.router)
api_router.include_router(balances.router)
api_router.include_router(settlements.router)
