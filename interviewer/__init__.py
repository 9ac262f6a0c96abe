from .interviewer import (
    BEGIN_SESSION_KEY,
    REPLY_KEY,
    REPORT_KEY,
    InterviewerTurn,
    LlmSessionGateway,
    OpeningMessage,
    load_gateway,
)

__all__ = [
    "BEGIN_SESSION_KEY",
    "REPLY_KEY",
    "REPORT_KEY",
    "InterviewerTurn",
    "LlmSessionGateway",
    "OpeningMessage",
    "load_gateway",
]
