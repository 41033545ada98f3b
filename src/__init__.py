"""
EOSB Calculator - UAE End of Service Benefits Service

A FastAPI-based microservice that calculates end-of-service gratuity
and publishes the rate table it calculates with.
"""

__version__ = "1.0.0"
