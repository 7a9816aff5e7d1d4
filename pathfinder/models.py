"""
Data models for opportunities and resume analysis.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class OpportunityType(str, Enum):
    """Fixed set of opportunity categories."""

    COMPETITION = "Competition"
    INTERNSHIP = "Internship"
    WEBINAR = "Webinar"
    ONLINE_COURSE = "Online Course"
    COMMUNITY_SERVICE = "Community Service"


@dataclass(frozen=True)
class Opportunity:
    """A single listing the user might pursue."""

    id: int
    type: OpportunityType
    title: str
    description: str
    url: str
    keywords: tuple[str, ...] = ()      # lowercase topic tags, may be empty

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "type": self.type.value,
            "title": self.title,
            "description": self.description,
            "url": self.url,
            "keywords": list(self.keywords),
        }


@dataclass(frozen=True)
class Preferences:
    """User targeting input sent with a resume."""

    dream_job: str = ""
    experience_level: str = ""          # accepted, not used by the analyzer

    @classmethod
    def from_dict(cls, data: dict) -> "Preferences":
        return cls(
            dream_job=data.get("dreamJob") or "",
            experience_level=data.get("experienceLevel") or "",
        )


@dataclass(frozen=True)
class ResumeAnalysis:
    """Diagnostic block of an analysis result."""

    found_skills: tuple[str, ...]
    weak_phrases: tuple[str, ...]
    quantification_needed: bool

    def to_dict(self) -> dict:
        return {
            "foundSkills": list(self.found_skills),
            "weakPhrases": list(self.weak_phrases),
            "quantificationNeeded": self.quantification_needed,
        }


@dataclass(frozen=True)
class ImprovedResume:
    header: str
    summary: str
    experience: tuple[str, ...]
    skills: str

    def to_dict(self) -> dict:
        return {
            "header": self.header,
            "summary": self.summary,
            "experience": list(self.experience),
            "skills": self.skills,
        }


@dataclass(frozen=True)
class AnalysisResult:
    """Everything returned for one resume analysis request."""

    analysis: ResumeAnalysis
    suggestions: tuple[str, ...]
    improved_resume: ImprovedResume
    recommended_opportunities: tuple[Opportunity, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {
            "analysis": self.analysis.to_dict(),
            "suggestions": list(self.suggestions),
            "improvedResume": self.improved_resume.to_dict(),
            "recommendedOpportunities": [op.to_dict() for op in self.recommended_opportunities],
        }
