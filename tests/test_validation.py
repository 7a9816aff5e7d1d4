"""Tests for request body validation."""

import pytest

from pathfinder.models import OpportunityType, Preferences
from pathfinder.validation import (
    RequestValidationError,
    parse_analyze_request,
    parse_opportunity_type,
)


class TestParseAnalyzeRequest:
    def test_valid_body(self) -> None:
        resume_text, prefs = parse_analyze_request({
            "resumeText": "my resume",
            "userPreferences": {"dreamJob": "Software Engineer", "experienceLevel": "Senior"},
        })
        assert resume_text == "my resume"
        assert prefs == Preferences(dream_job="Software Engineer", experience_level="Senior")

    def test_empty_resume_text_accepted(self) -> None:
        resume_text, _ = parse_analyze_request({"resumeText": "", "userPreferences": {}})
        assert resume_text == ""

    @pytest.mark.parametrize(
        "body",
        [
            {"userPreferences": {"dreamJob": "x"}},
            {"resumeText": "x"},
            {"resumeText": None, "userPreferences": {}},
            {"resumeText": "x", "userPreferences": None},
        ],
    )
    def test_missing_field(self, body: dict) -> None:
        with pytest.raises(RequestValidationError, match="required"):
            parse_analyze_request(body)

    @pytest.mark.parametrize("body", [None, [], "text", 3])
    def test_non_object_body(self, body) -> None:
        with pytest.raises(RequestValidationError, match="JSON object"):
            parse_analyze_request(body)

    def test_resume_text_must_be_string(self) -> None:
        with pytest.raises(RequestValidationError, match="resumeText"):
            parse_analyze_request({"resumeText": 42, "userPreferences": {}})

    def test_preferences_must_be_object(self) -> None:
        with pytest.raises(RequestValidationError, match="userPreferences"):
            parse_analyze_request({"resumeText": "x", "userPreferences": "Engineer"})

    @pytest.mark.parametrize("field", ["dreamJob", "experienceLevel"])
    def test_preference_fields_must_be_strings(self, field: str) -> None:
        with pytest.raises(RequestValidationError, match=field):
            parse_analyze_request({"resumeText": "x", "userPreferences": {field: ["a"]}})

    def test_validation_error_is_value_error(self) -> None:
        assert issubclass(RequestValidationError, ValueError)


class TestParseOpportunityType:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("Internship", OpportunityType.INTERNSHIP),
            ("online course", OpportunityType.ONLINE_COURSE),
            ("  COMMUNITY SERVICE ", OpportunityType.COMMUNITY_SERVICE),
        ],
    )
    def test_known_types(self, raw: str, expected: OpportunityType) -> None:
        assert parse_opportunity_type(raw) is expected

    def test_unknown_type(self) -> None:
        with pytest.raises(RequestValidationError, match="Unknown opportunity type"):
            parse_opportunity_type("Hackathon")
