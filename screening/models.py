"""Data model for screening sessions: job setup, conversation and scorecard."""
from __future__ import annotations

import time
import uuid
from enum import Enum
from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


HireRecommendation = Literal["Strong Hire", "Hire", "Weak Hire", "No Hire"]
Role = Literal["user", "model"]


class AppState(str, Enum):
    SETUP = "SETUP"
    INTERVIEW = "INTERVIEW"
    REPORT = "REPORT"


def _now_ms() -> int:
    return int(time.time() * 1000)


class JobConfig(BaseModel):  # Role configuration collected by the setup form
    model_config = ConfigDict(frozen=True)

    role: str = Field(min_length=1)
    level: str = Field(min_length=1)
    description: str = ""
    topics: List[str] = Field(default_factory=list)

    @field_validator("role", "level")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError("must not be blank")
        return stripped

    @field_validator("topics")
    @classmethod
    def _drop_blank_topics(cls, value: List[str]) -> List[str]:
        return [topic.strip() for topic in value if topic.strip()]


class Message(BaseModel):  # Single conversation turn
    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    role: Role
    text: str
    timestamp: int = Field(default_factory=_now_ms, ge=0)  # epoch milliseconds


class EvaluationMetric(BaseModel):  # Scored competency category
    model_config = ConfigDict(frozen=True)

    category: str
    score: int = Field(ge=0, le=100)
    feedback: str


class FinalReport(BaseModel):  # Hiring scorecard produced by the interviewer service
    model_config = ConfigDict(frozen=True)

    summary: str
    hire_recommendation: HireRecommendation
    metrics: List[EvaluationMetric] = Field(min_length=1)
    strengths: List[str] = Field(default_factory=list)
    weaknesses: List[str] = Field(default_factory=list)


class RadarDataPoint(BaseModel):  # Chart row for the report radar view
    subject: str
    value: int
    full_mark: int = 100


def radar_points(report: FinalReport) -> List[RadarDataPoint]:
    return [RadarDataPoint(subject=metric.category, value=metric.score) for metric in report.metrics]


__all__ = [
    "AppState",
    "EvaluationMetric",
    "FinalReport",
    "HireRecommendation",
    "JobConfig",
    "Message",
    "RadarDataPoint",
    "Role",
    "radar_points",
]
