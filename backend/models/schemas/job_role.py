"""A stored job role users can score their resume against."""

from pydantic import BaseModel, ConfigDict


class JobRole(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    description: str = ""
    required_skills: list[str] = []
