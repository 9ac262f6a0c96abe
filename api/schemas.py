"""Pydantic schemas for the screening session API."""
from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

from screening import AppState, FinalReport, JobConfig, Message, RadarDataPoint
from screening.transcript import ensure_chronological


class ConversationReq(BaseModel):
    messages: List[Message] = Field(default_factory=list)

    @field_validator("messages")
    @classmethod
    def _chronological(cls, value: List[Message]) -> List[Message]:
        ensure_chronological(value)
        return value


class ReplyResp(BaseModel):
    session_id: str
    message: Message


class ScreeningResp(BaseModel):
    session_id: str
    state: AppState
    config: Optional[JobConfig] = None
    initial_message: Optional[str] = None
    report: Optional[FinalReport] = None
    radar: List[RadarDataPoint] = Field(default_factory=list)
    is_generating_report: bool = False
    event_log: List[Dict] = Field(default_factory=list)
