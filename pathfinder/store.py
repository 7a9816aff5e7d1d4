"""
Opportunity Store – fixed, read-only table of opportunities.

The table is built once at import time and never mutated; every caller
shares the same tuple of frozen records.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from .models import Opportunity, OpportunityType


SEED_OPPORTUNITIES: tuple[Opportunity, ...] = (
    Opportunity(
        id=1,
        type=OpportunityType.COMPETITION,
        title="Google Code Jam 2025",
        description="Global online coding competition. Solve algorithmic challenges.",
        url="http://example.com/codejam",
        keywords=("coding", "software", "engineering"),
    ),
    Opportunity(
        id=2,
        type=OpportunityType.INTERNSHIP,
        title="Product Manager Intern",
        description="Help define product roadmaps and strategy.",
        url="http://example.com/pm-intern",
        keywords=("product management", "business", "strategy"),
    ),
    Opportunity(
        id=3,
        type=OpportunityType.WEBINAR,
        title="Intro to AI/ML",
        description="Learn the fundamentals of Artificial Intelligence from industry experts.",
        url="http://example.com/ai-webinar",
        keywords=("ai", "machine learning", "data science"),
    ),
    Opportunity(
        id=4,
        type=OpportunityType.COMMUNITY_SERVICE,
        title="Local Park Cleanup",
        description="Join us to help clean and preserve our local green spaces.",
        url="http://example.com/park-cleanup",
        keywords=("environment", "community", "volunteering"),
    ),
    Opportunity(
        id=5,
        type=OpportunityType.INTERNSHIP,
        title="Software Engineer Intern",
        description="Work on a real-world software project using modern web technologies.",
        url="http://example.com/swe-intern",
        keywords=("coding", "software", "engineering", "javascript"),
    ),
    Opportunity(
        id=6,
        type=OpportunityType.ONLINE_COURSE,
        title="Advanced JavaScript",
        description="Deep dive into asynchronous JavaScript, closures, and more.",
        url="http://example.com/js-course",
        keywords=("javascript", "coding", "web development"),
    ),
)


class OpportunityStore:
    """Read-only, ordered collection of opportunities."""

    def __init__(self, opportunities: Iterable[Opportunity] = SEED_OPPORTUNITIES) -> None:
        self._opportunities: tuple[Opportunity, ...] = tuple(opportunities)
        seen: set[int] = set()
        for op in self._opportunities:
            if op.id <= 0:
                raise ValueError(f"Opportunity id must be positive (got {op.id})")
            if op.id in seen:
                raise ValueError(f"Duplicate opportunity id {op.id}")
            seen.add(op.id)

    def __len__(self) -> int:
        return len(self._opportunities)

    def __iter__(self) -> Iterator[Opportunity]:
        return iter(self._opportunities)

    def list_opportunities(self) -> tuple[Opportunity, ...]:
        """Return every opportunity, in insertion order."""
        return self._opportunities

    def by_type(self, op_type: OpportunityType) -> list[Opportunity]:
        """Opportunities of one category, in insertion order."""
        return [op for op in self._opportunities if op.type is op_type]

    def count_by_type(self) -> dict[str, int]:
        """Number of opportunities per category, zero counts included."""
        counts = {t.value: 0 for t in OpportunityType}
        for op in self._opportunities:
            counts[op.type.value] += 1
        return counts
