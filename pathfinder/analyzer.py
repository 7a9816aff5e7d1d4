"""
Resume Analyzer – builds the career blueprint returned for an uploaded resume.

• The diagnostic, suggestions and resume template are canned content
  (see resume_content.py); the resume text itself is never inspected.
• Recommendations are opportunities whose tags overlap the dream-job
  tokens or the found skills, first matches in store order, capped at two.
"""

from __future__ import annotations

import logging
from typing import Iterable

import resume_content as _content
from .models import AnalysisResult, ImprovedResume, Opportunity, Preferences, ResumeAnalysis
from .store import OpportunityStore

logger = logging.getLogger(__name__)

MAX_RECOMMENDATIONS = 2


def resolve_dream_job(preferences: Preferences) -> str:
    """Return the dream job verbatim, or the fallback phrase when it is blank."""
    dream_job = preferences.dream_job
    if dream_job and dream_job.strip():
        return dream_job
    return _content.FALLBACK_DREAM_JOB


def build_keyword_set(dream_job: str, found_skills: Iterable[str]) -> frozenset[str]:
    """Lowercase whitespace tokens of the dream job plus the found skills."""
    tokens = dream_job.lower().split()
    tokens.extend(skill.lower() for skill in found_skills)
    return frozenset(tokens)


def match_opportunities(
    opportunities: Iterable[Opportunity],
    keywords: frozenset[str],
    limit: int = MAX_RECOMMENDATIONS,
) -> list[Opportunity]:
    """
    Return the first `limit` opportunities having any tag in `keywords`.
    Tags are compared whole and case-insensitively; order is preserved.
    """
    matches: list[Opportunity] = []
    for op in opportunities:
        if len(matches) >= limit:
            break
        if any(kw.lower() in keywords for kw in op.keywords):
            matches.append(op)
    return matches


class ResumeAnalyzer:
    """Composes an AnalysisResult against a fixed opportunity store."""

    def __init__(self, store: OpportunityStore) -> None:
        self.store = store

    def analyze(self, resume_text: str, preferences: Preferences) -> AnalysisResult:
        dream_job = resolve_dream_job(preferences)

        analysis = ResumeAnalysis(
            found_skills=_content.FOUND_SKILLS,
            weak_phrases=_content.WEAK_PHRASES,
            quantification_needed=_content.QUANTIFICATION_NEEDED,
        )
        improved = ImprovedResume(
            header=_content.RESUME_HEADER,
            summary=_content.RESUME_SUMMARY_TEMPLATE.format(dream_job=dream_job),
            experience=_content.RESUME_EXPERIENCE,
            skills=_content.RESUME_SKILLS,
        )

        keywords = build_keyword_set(dream_job, analysis.found_skills)
        recommended = match_opportunities(self.store.list_opportunities(), keywords)
        logger.debug(
            "Blueprint for %r: keywords=%s  recommended=%s",
            dream_job, sorted(keywords), [op.id for op in recommended],
        )

        return AnalysisResult(
            analysis=analysis,
            suggestions=_content.SUGGESTIONS,
            improved_resume=improved,
            recommended_opportunities=tuple(recommended),
        )
