"""Application services for water heater assessments.

These services orchestrate domain logic for the use cases exposed to
callers.
"""

from .assessment_application_service import AssessmentApplicationService

__all__ = [
    "AssessmentApplicationService",
]
