"""Domain interfaces for risk assessment.

Interfaces define contracts between the domain and its callers.
Callers depend on these abstractions, not on concrete engines.
"""

from .risk_engine import IRiskEngine

__all__ = [
    "IRiskEngine",
]
