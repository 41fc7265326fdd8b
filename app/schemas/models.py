from dataclasses import dataclass
from typing import Union
from pydantic import BaseModel, ConfigDict, Field

class LyricsResponse(BaseModel):
    lyrics: str = Field(..., description="Trimmed lyrics text, empty if the page has no lyrics container")

    model_config = ConfigDict(extra='forbid')

class ErrorResponse(BaseModel):
    error: str

    model_config = ConfigDict(extra='forbid')

class HealthStatus(BaseModel):
    status: str = "ok"

# Outcome of the fetch + parse step
@dataclass(frozen=True)
class LyricsOk:
    lyrics: str

@dataclass(frozen=True)
class LyricsErr:
    reason: str  # diagnostic only, never sent to the caller

LyricsResult = Union[LyricsOk, LyricsErr]
