"""
Request validation for the resume analysis endpoint.
"""

from __future__ import annotations

from .models import OpportunityType, Preferences


class RequestValidationError(ValueError):
    """Client sent a request body the API cannot use (reported as HTTP 400)."""


def parse_analyze_request(payload) -> tuple[str, Preferences]:
    """
    Turn a decoded JSON body into (resume_text, preferences).
    Raises RequestValidationError when a required field is missing or mistyped.
    An empty resumeText is accepted; its content is never read.
    """
    if not isinstance(payload, dict):
        raise RequestValidationError("Request body must be a JSON object.")

    resume_text = payload.get("resumeText")
    prefs_raw = payload.get("userPreferences")
    if resume_text is None or prefs_raw is None:
        raise RequestValidationError("resumeText and userPreferences are required.")

    if not isinstance(resume_text, str):
        raise RequestValidationError(
            f"'resumeText' must be a string (got {type(resume_text).__name__})"
        )
    if not isinstance(prefs_raw, dict):
        raise RequestValidationError(
            f"'userPreferences' must be an object (got {type(prefs_raw).__name__})"
        )

    for field in ("dreamJob", "experienceLevel"):
        val = prefs_raw.get(field)
        if val is not None and not isinstance(val, str):
            raise RequestValidationError(
                f"'userPreferences.{field}' must be a string (got {type(val).__name__})"
            )

    return resume_text, Preferences.from_dict(prefs_raw)


def parse_opportunity_type(raw: str) -> OpportunityType:
    """Map a category name (case-insensitive) to an OpportunityType."""
    wanted = raw.strip().lower()
    for op_type in OpportunityType:
        if op_type.value.lower() == wanted:
            return op_type
    valid = ", ".join(t.value for t in OpportunityType)
    raise RequestValidationError(f"Unknown opportunity type {raw!r} (expected one of: {valid})")
