from fastapi import APIRouter

from .health import health_router
from .configuration import configuration_router
from .calculation import calculation_router

router = APIRouter(prefix="/eosb")

router.include_router(health_router, tags=["Health"])
router.include_router(configuration_router, tags=["Configuration"])
router.include_router(calculation_router, tags=["EOSB Calculation"])
