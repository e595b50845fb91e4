"""Outcome of comparing a required skill set with a candidate skill set."""

from pydantic import BaseModel, ConfigDict


class MatchResult(BaseModel):
    """Structured output of the Match Scorer.

    All skill lists hold canonical skills sorted ascending. ``content_score``
    is only present when the raw resume text was available to the scorer.
    """

    model_config = ConfigDict(frozen=True)

    required_skills: list[str] = []
    candidate_skills: list[str] = []
    matched_skills: list[str] = []
    missing_skills: list[str] = []
    match_score: int = 0  # 0-100, share of required skills found
    content_score: int | None = None  # 0-100, independent of match_score
    suggestions: list[str] = []  # one per missing skill, same order
