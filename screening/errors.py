"""Failures surfaced by the screening controller.

Each failure wraps the underlying gateway error as ``__cause__`` and carries a
generic ``user_message`` for display.
"""
from __future__ import annotations


class ScreeningError(RuntimeError):
    operation = "screening"
    user_message = "Something went wrong. Please try again."

    def __init__(self, detail: str | None = None) -> None:
        super().__init__(detail or self.user_message)


class SessionStartFailure(ScreeningError):
    operation = "complete_setup"
    user_message = "Error starting AI session. Please check your API key."


class ReportGenerationFailure(ScreeningError):
    operation = "complete_interview"
    user_message = "Error generating report. Please try again."


class InterviewTurnFailure(ScreeningError):
    operation = "continue_interview"
    user_message = "Error contacting the interviewer. Please resend your answer."


__all__ = ["InterviewTurnFailure", "ReportGenerationFailure", "ScreeningError", "SessionStartFailure"]
