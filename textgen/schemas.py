from pydantic import BaseModel, Field


class ModelStats(BaseModel):
    window_length: int = Field(ge=1)
    windows: int
    transitions: int
    distinct_chars: int
    avg_branching: float
    avg_entropy: float
