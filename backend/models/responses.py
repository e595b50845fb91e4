from pydantic import BaseModel

from models.schemas.match_result import MatchResult
from services.match_scorer import score_band


class ATSMatchResponse(MatchResult):
    match_band: str = "low"  # low (<=40), medium (<=70), high
    role_id: str | None = None

    @classmethod
    def from_result(cls, result: MatchResult, role_id: str | None = None) -> "ATSMatchResponse":
        return cls(
            **result.model_dump(),
            match_band=score_band(result.match_score),
            role_id=role_id,
        )


class HealthResponse(BaseModel):
    status: str = "ok"
    taxonomy_size: int = 0
