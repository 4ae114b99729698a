"""Data contracts for the saved-calculation history."""

from datetime import datetime
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

ScenarioKind = Literal["compound", "accumulation"]


class HistoryItem(BaseModel):
    """Snapshot of a scenario's inputs plus its headline result."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str
    name: str
    kind: ScenarioKind
    state: Dict[str, Any] = Field(default_factory=dict)
    result: int
    timestamp: datetime


class SaveHistoryRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    kind: ScenarioKind
    state: Dict[str, Any]
    result: int
    name: Optional[str] = Field(None, max_length=100)


class HistoryListResponse(BaseModel):
    items: List[HistoryItem]
    count: int


class HealthResponse(BaseModel):
    status: str
    app: str
