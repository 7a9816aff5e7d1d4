"""Pytest configuration and fixtures."""

import pytest

import app as server
from pathfinder.analyzer import ResumeAnalyzer
from pathfinder.models import Opportunity, OpportunityType, Preferences
from pathfinder.store import OpportunityStore


@pytest.fixture
def store() -> OpportunityStore:
    """The seeded opportunity store."""
    return OpportunityStore()


@pytest.fixture
def analyzer(store: OpportunityStore) -> ResumeAnalyzer:
    return ResumeAnalyzer(store)


@pytest.fixture
def swe_preferences() -> Preferences:
    return Preferences(dream_job="Software Engineer", experience_level="Student / Entry-Level")


@pytest.fixture
def make_opportunity():
    """Factory for ad-hoc opportunities."""

    def _make(op_id: int, keywords: tuple[str, ...] = (), op_type=OpportunityType.WEBINAR) -> Opportunity:
        return Opportunity(
            id=op_id,
            type=op_type,
            title=f"Opportunity {op_id}",
            description="",
            url=f"http://example.com/{op_id}",
            keywords=keywords,
        )

    return _make


@pytest.fixture
def client():
    """Flask test client for the PathFinder app."""
    server.app.config["TESTING"] = True
    with server.app.test_client() as test_client:
        yield test_client
