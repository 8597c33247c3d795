"""
Loan Decision Gateway - Consumer Loan Decision Service

A FastAPI-based microservice that decides on consumer loan requests,
approving the largest amount (and, if needed, the shortest period) an
applicant's credit segment allows.
"""

__version__ = "0.1.0"
