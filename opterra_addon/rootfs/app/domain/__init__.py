"""Domain layer for the Opterra risk engine.

This package contains the core water heater risk models,
following Domain-Driven Design (DDD) principles.

The domain layer is pure Python with no external dependencies on
Flask or any infrastructure concerns.
"""
