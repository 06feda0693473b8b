"""
RemitLend Score Service - Mock Credit Score API

A FastAPI-based microservice that derives deterministic credit scores,
classifies them into bands and applies repayment-driven score updates.
"""

__version__ = "0.1.0"
