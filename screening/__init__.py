from .controller import ControllerSnapshot, Outcome, ScreeningController
from .errors import InterviewTurnFailure, ReportGenerationFailure, ScreeningError, SessionStartFailure
from .gateway import SessionGateway
from .models import (
    AppState,
    EvaluationMetric,
    FinalReport,
    HireRecommendation,
    JobConfig,
    Message,
    RadarDataPoint,
    radar_points,
)
from .transcript import ensure_chronological, serialize_transcript

__all__ = [
    "AppState",
    "ControllerSnapshot",
    "EvaluationMetric",
    "FinalReport",
    "HireRecommendation",
    "InterviewTurnFailure",
    "JobConfig",
    "Message",
    "Outcome",
    "RadarDataPoint",
    "ReportGenerationFailure",
    "ScreeningController",
    "ScreeningError",
    "SessionGateway",
    "SessionStartFailure",
    "ensure_chronological",
    "radar_points",
    "serialize_transcript",
]
