"""Pytest fixtures for integration tests.

This module provides fixtures for testing the Flask API with a fresh
assessment service per test.
"""

from typing import Any, Dict, Generator
from unittest.mock import patch

import pytest

from application.services import AssessmentApplicationService


@pytest.fixture
def assessment_service() -> AssessmentApplicationService:
    """Create an AssessmentApplicationService with the current engines."""
    return AssessmentApplicationService()


@pytest.fixture
def flask_app(assessment_service: AssessmentApplicationService) -> Generator[Any, None, None]:
    """Create a Flask test app.

    This fixture patches the global assessment_service in the server module.
    """
    import infrastructure.api.server as server_module

    with patch.object(server_module, "assessment_service", assessment_service):
        app = server_module.app
        app.config["TESTING"] = True
        yield app


@pytest.fixture
def client(flask_app: Any) -> Any:
    """Create a Flask test client."""
    return flask_app.test_client()


@pytest.fixture
def sample_tank_payload() -> Dict[str, Any]:
    """A 12-year-old gas tank in an unfinished garage on an open system."""
    return {
        "calendar_age": 12,
        "house_psi": 90,
        "hardness_gpg": 5,
        "fuel_type": "GAS",
        "location": "GARAGE",
        "is_finished_area": False,
        "is_annually_maintained": True,
        "warranty_years": 6,
    }


@pytest.fixture
def sample_tankless_payload() -> Dict[str, Any]:
    """A 3-year-old gas tankless unit without isolation valves."""
    return {
        "calendar_age": 3,
        "house_psi": 60,
        "hardness_gpg": 0,
        "fuel_type": "TANKLESS_GAS",
        "has_isolation_valves": False,
        "warranty_years": 10,
    }


@pytest.fixture
def sample_hybrid_payload() -> Dict[str, Any]:
    """A heat-pump water heater with a clogged air filter."""
    return {
        "calendar_age": 4,
        "house_psi": 60,
        "hardness_gpg": 3,
        "fuel_type": "HYBRID",
        "air_filter_status": "CLOGGED",
        "compressor_health": 90,
        "is_condensate_clear": True,
        "room_volume_type": "OPEN",
    }
