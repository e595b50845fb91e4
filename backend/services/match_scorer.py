"""Match scoring: compare required skills against candidate skills.

Produces matched/missing sets, a job-fit percentage, an optional
resume-richness score and one remediation line per missing skill.
"""

import logging

from models.schemas.match_result import MatchResult
from services.taxonomy import DEFAULT_TAXONOMY, SkillTaxonomy

logger = logging.getLogger(__name__)

# Content score: skill breadth and text length each contribute up to half
CONTENT_POINTS_PER_SKILL = 5
CONTENT_SKILLS_CAP = 50
CONTENT_CHARS_PER_POINT = 40
CONTENT_LENGTH_CAP = 50

SUGGESTION_TEMPLATE = "Add {skill} to increase your ATS score"

_SKILL_CONTAINERS = (list, tuple, set, frozenset)


def percentage(part: int, whole: int) -> int:
    """Round ``100 * part / whole`` half-up to an int in 0-100; 0 if whole is 0."""
    if whole <= 0:
        return 0
    # Exact integer half-up rounding, no float error at .5 boundaries
    value = (200 * part + whole) // (2 * whole)
    return min(100, max(0, value))


def score_band(score: int) -> str:
    """Bucket a 0-100 score the way the results page colours it."""
    if score <= 40:
        return "low"
    if score <= 70:
        return "medium"
    return "high"


class MatchScorer:
    def __init__(self, taxonomy: SkillTaxonomy = DEFAULT_TAXONOMY) -> None:
        self.taxonomy = taxonomy

    def normalize_skills(self, skills) -> list[str]:
        """Canonicalize a caller-supplied skill list.

        Items are trimmed, lower-cased and folded through the synonym map so a
        declared "NodeJS" equals an extracted "node.js". Anything that is not a
        list/tuple/set, non-string items and blanks are dropped.
        """
        if not isinstance(skills, _SKILL_CONTAINERS):
            if skills is not None:
                logger.warning("Ignoring skill list of type %s", type(skills).__name__)
            return []
        canonical = {
            self.taxonomy.canonicalize(s)
            for s in skills
            if isinstance(s, str) and s.strip()
        }
        return sorted(canonical)

    def content_score(self, candidate_skills, candidate_text: str) -> int:
        """Resume richness from skill breadth plus raw text length, 0-100."""
        skills = self.normalize_skills(candidate_skills)
        text = candidate_text.strip() if isinstance(candidate_text, str) else ""
        skills_part = min(CONTENT_SKILLS_CAP, len(skills) * CONTENT_POINTS_PER_SKILL)
        length_part = min(CONTENT_LENGTH_CAP, len(text) // CONTENT_CHARS_PER_POINT)
        return min(100, skills_part + length_part)

    def suggestions(self, missing_skills: list[str]) -> list[str]:
        return [
            SUGGESTION_TEMPLATE.format(skill=self.taxonomy.display_name(skill))
            for skill in missing_skills
        ]

    def score(self, required, candidate, candidate_text: str | None = None) -> MatchResult:
        """Compare two skill sets.

        ``None`` for either side is the empty set. An empty required set gives
        a match score of 0. ``candidate_text`` enables the content score.
        """
        required_skills = self.normalize_skills(required)
        candidate_skills = self.normalize_skills(candidate)
        candidate_set = set(candidate_skills)

        matched = [s for s in required_skills if s in candidate_set]
        missing = [s for s in required_skills if s not in candidate_set]

        content = None
        if candidate_text is not None:
            content = self.content_score(candidate_skills, candidate_text)

        return MatchResult(
            required_skills=required_skills,
            candidate_skills=candidate_skills,
            matched_skills=matched,
            missing_skills=missing,
            match_score=percentage(len(matched), len(required_skills)),
            content_score=content,
            suggestions=self.suggestions(missing),
        )
