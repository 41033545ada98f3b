"""HTTP API routers."""

from fastapi import APIRouter

from .eosb import router as eosb_router

api_router = APIRouter(prefix="/api")
api_router.include_router(eosb_router)

__all__ = ["api_router"]
