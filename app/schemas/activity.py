from datetime import datetime
from typing import List

from pydantic import BaseModel


class ActivityLogEntry(BaseModel):
    """One record in the bounded activity log"""
    timestamp: datetime
    action: str
    details: str
    status: str


class ActivityLogResponse(BaseModel):
    logs: List[ActivityLogEntry]


class RoutineResult(BaseModel):
    """Outcome of a single automation routine invocation"""
    routine: str
    processed: int = 0
    changed: int = 0
    failed: int = 0
    skipped: bool = False
