"""
Multifinance - Consumer Credit Service

A FastAPI-based microservice that manages per-tenure consumer credit
limits, originates loans against them and processes loan payments.
"""

__version__ = "0.1.0"
