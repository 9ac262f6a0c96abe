"""Three-stage screening state machine: SETUP -> INTERVIEW -> REPORT.

The controller owns the active job configuration, the interviewer's opening
message, the final report and the report-generation flag. Operations never
raise for gateway failures; they return an :class:`Outcome` and leave the
state where it was so the caller can retry.
"""
from __future__ import annotations

import logging
import threading
import uuid
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Type

from pydantic import BaseModel, ConfigDict

from config.settings import settings
from observability import log_event, span
from .errors import InterviewTurnFailure, ReportGenerationFailure, ScreeningError, SessionStartFailure
from .gateway import SessionGateway
from .models import AppState, FinalReport, JobConfig, Message
from .transcript import serialize_transcript


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Outcome:
    """Result of a controller operation.

    ``applied`` is False both for failures (``error`` set) and for calls made in
    the wrong state or while another call is pending (``error`` is None).
    """

    state: AppState
    applied: bool
    error: Optional[ScreeningError] = None
    reply: Optional[str] = None

    @property
    def failed(self) -> bool:
        return self.error is not None


class ControllerSnapshot(BaseModel):
    model_config = ConfigDict(frozen=True)

    session_id: str
    state: AppState
    config: Optional[JobConfig] = None
    initial_message: str = ""
    report: Optional[FinalReport] = None
    is_generating_report: bool = False


class ScreeningController:
    def __init__(
        self,
        gateway: SessionGateway,
        *,
        session_id: Optional[str] = None,
        fallback_greeting: Optional[str] = None,
    ) -> None:
        self.session_id = session_id or str(uuid.uuid4())
        self.gateway = gateway
        self.fallback_greeting = fallback_greeting or settings.FALLBACK_GREETING
        self.state = AppState.SETUP
        self.config: Optional[JobConfig] = None
        self.initial_message = ""
        self.report: Optional[FinalReport] = None
        self.is_generating_report = False
        self.events: List[Dict[str, Any]] = []
        self._pending = threading.Lock()

    def snapshot(self) -> ControllerSnapshot:
        return ControllerSnapshot(
            session_id=self.session_id,
            state=self.state,
            config=self.config,
            initial_message=self.initial_message,
            report=self.report,
            is_generating_report=self.is_generating_report,
        )

    @property
    def busy(self) -> bool:
        return self._pending.locked()

    def complete_setup(self, config: JobConfig) -> Outcome:
        if self.state is not AppState.SETUP:
            return self._skip("complete_setup", "wrong_state")
        if not self._pending.acquire(blocking=False):
            return self._skip("complete_setup", "busy")
        try:
            self.config = config
            try:
                with span(self, "begin_session"):
                    intro = self.gateway.begin_session(config)
            except Exception as exc:  # noqa: BLE001
                logger.exception("Failed to start session session=%s", self.session_id)
                return self._fail("complete_setup", SessionStartFailure, exc)
            self.initial_message = (intro or "").strip() or self.fallback_greeting
            return self._advance("complete_setup", AppState.INTERVIEW)
        finally:
            self._pending.release()

    def continue_interview(self, messages: Sequence[Message]) -> Outcome:
        if self.state is not AppState.INTERVIEW or self.config is None:
            return self._skip("continue_interview", "wrong_state")
        if not self._pending.acquire(blocking=False):
            return self._skip("continue_interview", "busy")
        try:
            try:
                with span(self, "reply"):
                    text = self.gateway.reply(list(messages), self.config)
            except Exception as exc:  # noqa: BLE001
                logger.exception("Interviewer reply failed session=%s", self.session_id)
                return self._fail("continue_interview", InterviewTurnFailure, exc)
            log_event("turn", self.session_id, operation="continue_interview", outcome="replied")
            return Outcome(state=self.state, applied=True, reply=text)
        finally:
            self._pending.release()

    def complete_interview(self, messages: Sequence[Message]) -> Outcome:
        if self.state is not AppState.INTERVIEW or self.config is None:
            return self._skip("complete_interview", "wrong_state")
        if self.is_generating_report or not self._pending.acquire(blocking=False):
            return self._skip("complete_interview", "busy")
        self.is_generating_report = True
        try:
            try:
                transcript = serialize_transcript(messages)
                with span(self, "generate_report"):
                    report = self.gateway.generate_report(transcript, self.config)
            except Exception as exc:  # noqa: BLE001
                logger.exception("Failed to generate report session=%s", self.session_id)
                return self._fail("complete_interview", ReportGenerationFailure, exc)
            self.report = report
            return self._advance("complete_interview", AppState.REPORT)
        finally:
            self.is_generating_report = False
            self._pending.release()

    def restart(self) -> Outcome:
        # Waits for an in-flight gateway call so it cannot commit over the reset.
        with self._pending:
            return self._advance("restart", AppState.SETUP, reset=True)

    def _advance(self, operation: str, target: AppState, *, reset: bool = False) -> Outcome:
        previous = self.state
        self.state = target
        if reset:
            self.config = None
            self.initial_message = ""
            self.report = None
        log_event(
            "transition",
            self.session_id,
            operation=operation,
            from_state=previous.value,
            to_state=target.value,
            outcome="applied",
        )
        return Outcome(state=self.state, applied=True)

    def _skip(self, operation: str, reason: str) -> Outcome:
        log_event("transition", self.session_id, operation=operation, from_state=self.state.value, outcome=reason)
        return Outcome(state=self.state, applied=False)

    def _fail(self, operation: str, failure_cls: Type[ScreeningError], cause: Exception) -> Outcome:
        failure = failure_cls(str(cause) or type(cause).__name__)
        failure.__cause__ = cause
        log_event(
            "transition",
            self.session_id,
            operation=operation,
            from_state=self.state.value,
            outcome="failed",
            error=type(cause).__name__,
        )
        return Outcome(state=self.state, applied=False, error=failure)


__all__ = ["ControllerSnapshot", "Outcome", "ScreeningController"]
