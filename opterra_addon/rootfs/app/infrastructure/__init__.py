"""Infrastructure layer for the Opterra risk engine.

This package contains the adapters that connect the domain to the
outside world (JSON mapping, HTTP API).
"""
