"""Flask HTTP API Server.

HTTP API for the Opterra risk engine.
Provides endpoints for water heater assessments and the tier catalog.
"""

import logging
import os
import sys
from datetime import datetime
from pathlib import Path

from flask import Flask, Response, jsonify, request

# Add app directory to Python path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from application.services import AssessmentApplicationService
from infrastructure.adapters import (
    metrics_to_dict,
    parse_forensic_inputs,
    recommendation_to_dict,
    result_to_dict,
    tier_profile_to_dict,
)

# Configure logging
log_level = os.getenv("LOG_LEVEL", "info").upper()
logging.basicConfig(
    level=getattr(logging, log_level, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
_LOGGER = logging.getLogger(__name__)

# Create Flask app
app = Flask(__name__)

# Initialize services
assessment_service = AssessmentApplicationService()


@app.route("/health", methods=["GET"])
def health_check() -> Response:
    """Health check endpoint."""
    return jsonify({
        "status": "healthy",
        "timestamp": datetime.now().isoformat(),
    })


@app.route("/api/v1/status", methods=["GET"])
def get_status() -> Response:
    """Get assessment service status."""
    try:
        return jsonify(assessment_service.get_status())
    except Exception as e:
        _LOGGER.exception("Error getting status")
        return jsonify({"error": str(e)}), 500


@app.route("/api/v1/assess", methods=["POST"])
def assess() -> Response:
    """Run a full assessment.

    Request body:
    {
        "calendar_age": float,
        "house_psi": float,
        "hardness_gpg": float,
        "fuel_type": str (optional, default: "GAS"),
        ... any other inspection field, snake_case
    }
    """
    try:
        data = request.get_json(silent=True)
        if not data:
            return jsonify({"error": "No data provided"}), 400

        inputs = parse_forensic_inputs(data)
        result = assessment_service.assess(inputs)

        return jsonify({
            "success": True,
            "fuel_type": inputs.fuel_type.value,
            "tier": assessment_service.detect_tier(inputs).tier.value,
            **result_to_dict(result),
        })

    except KeyError as e:
        return jsonify({"error": f"Missing required field: {e}"}), 400
    except ValueError as e:
        _LOGGER.warning("Invalid assessment request: %s", e)
        return jsonify({"error": f"Invalid data: {e}"}), 400
    except Exception as e:
        _LOGGER.exception("Error running assessment")
        return jsonify({"error": str(e)}), 500


@app.route("/api/v1/health-metrics", methods=["POST"])
def health_metrics() -> Response:
    """Compute metrics only.

    Request body: same as /api/v1/assess.
    """
    try:
        data = request.get_json(silent=True)
        if not data:
            return jsonify({"error": "No data provided"}), 400

        inputs = parse_forensic_inputs(data)
        metrics = assessment_service.calculate_health(inputs)

        return jsonify({
            "success": True,
            "metrics": metrics_to_dict(metrics),
        })

    except KeyError as e:
        return jsonify({"error": f"Missing required field: {e}"}), 400
    except ValueError as e:
        _LOGGER.warning("Invalid metrics request: %s", e)
        return jsonify({"error": f"Invalid data: {e}"}), 400
    except Exception as e:
        _LOGGER.exception("Error computing metrics")
        return jsonify({"error": str(e)}), 500


@app.route("/api/v1/recommendation", methods=["POST"])
def recommendation() -> Response:
    """Derive the verdict through the decomposed metrics-then-verdict path.

    Request body: same as /api/v1/assess.
    """
    try:
        data = request.get_json(silent=True)
        if not data:
            return jsonify({"error": "No data provided"}), 400

        inputs = parse_forensic_inputs(data)
        metrics = assessment_service.calculate_health(inputs)
        verdict = assessment_service.get_recommendation(metrics, inputs)

        return jsonify({
            "success": True,
            "metrics": metrics_to_dict(metrics),
            "verdict": recommendation_to_dict(verdict),
        })

    except KeyError as e:
        return jsonify({"error": f"Missing required field: {e}"}), 400
    except ValueError as e:
        _LOGGER.warning("Invalid recommendation request: %s", e)
        return jsonify({"error": f"Invalid data: {e}"}), 400
    except Exception as e:
        _LOGGER.exception("Error deriving recommendation")
        return jsonify({"error": str(e)}), 500


@app.route("/api/v1/tiers", methods=["GET"])
def list_tiers() -> Response:
    """List the tank and tankless quality tier catalogs."""
    try:
        catalog = assessment_service.get_tier_catalog()
        return jsonify({
            family: [tier_profile_to_dict(profile) for profile in profiles.values()]
            for family, profiles in catalog.items()
        })
    except Exception as e:
        _LOGGER.exception("Error listing tiers")
        return jsonify({"error": str(e)}), 500


def main() -> None:
    """Main entry point for the server."""
    host = os.getenv("API_HOST", "0.0.0.0")
    port = int(os.getenv("API_PORT", "5000"))

    _LOGGER.info("Starting Opterra risk engine API server on %s:%d", host, port)

    app.run(host=host, port=port, debug=False)


if __name__ == "__main__":
    main()
