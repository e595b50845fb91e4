"""ATS matching entry points used by the API layer.

Two paths:
1. Job description text vs resume text: both sides go through extraction.
2. Declared required skills (e.g. a stored job role) vs resume text: the
   declared list is only canonicalized, the resume side is extracted.

The current matcher is a process-wide singleton. Swapping the taxonomy builds
a complete new matcher and replaces the reference in one assignment, so
in-flight requests keep using the snapshot they started with.
"""

import logging

from config import settings
from models.schemas.match_result import MatchResult
from services.match_scorer import MatchScorer
from services.skill_extractor import SkillExtractor
from services.taxonomy import DEFAULT_TAXONOMY, SkillTaxonomy

logger = logging.getLogger(__name__)


def _text_or_none(text):
    return text if isinstance(text, str) else None


class ATSMatcher:
    """Extractor and scorer bound to a single taxonomy."""

    def __init__(self, taxonomy: SkillTaxonomy = DEFAULT_TAXONOMY) -> None:
        self.taxonomy = taxonomy
        self.extractor = SkillExtractor(taxonomy)
        self.scorer = MatchScorer(taxonomy)

    def match_job_description(self, job_description: str, resume_text: str) -> MatchResult:
        required = self.extractor.extract(job_description)
        candidate = self.extractor.extract(resume_text)
        result = self.scorer.score(required, candidate, candidate_text=_text_or_none(resume_text))
        logger.info(
            "JD match: %d/%d required skills, score=%d",
            len(result.matched_skills), len(result.required_skills), result.match_score,
        )
        return result

    def match_required_skills(self, required_skills, resume_text: str) -> MatchResult:
        candidate = self.extractor.extract(resume_text)
        result = self.scorer.score(required_skills, candidate, candidate_text=_text_or_none(resume_text))
        logger.info(
            "Declared-skills match: %d/%d required skills, score=%d",
            len(result.matched_skills), len(result.required_skills), result.match_score,
        )
        return result


_matcher: ATSMatcher | None = None


def _load_configured_taxonomy() -> SkillTaxonomy:
    if settings.taxonomy_file:
        return SkillTaxonomy.from_file(settings.taxonomy_file)
    return DEFAULT_TAXONOMY


def get_matcher() -> ATSMatcher:
    """Return the current matcher, building it on first use."""
    global _matcher
    if _matcher is None:
        _matcher = ATSMatcher(_load_configured_taxonomy())
    return _matcher


def use_taxonomy(taxonomy: SkillTaxonomy) -> ATSMatcher:
    """Replace the current matcher with one built over ``taxonomy``."""
    global _matcher
    matcher = ATSMatcher(taxonomy)
    _matcher = matcher
    logger.info("Switched ATS matcher to %r", taxonomy)
    return matcher


def reset() -> None:
    """Drop the current matcher so the next call reloads from settings."""
    global _matcher
    _matcher = None
