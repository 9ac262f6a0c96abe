"""FastAPI routes exposing the screening state machine to the browser."""
from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from fastapi import APIRouter, HTTPException, Response
from pydantic import ValidationError

from api.schemas import ConversationReq, ReplyResp, ScreeningResp
from config.settings import settings
from interviewer import load_gateway
from screening import JobConfig, Message, Outcome, ScreeningController, SessionGateway, radar_points
from services.sessions import load_session, new_session
from session_reports import generate_report_pdf


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/screening")


@lru_cache(maxsize=4)
def _gateway_for(config_path: str) -> SessionGateway:
    return load_gateway(Path(config_path))


def default_gateway() -> SessionGateway:
    return _gateway_for(settings.APP_CONFIG_PATH)


def _require(session_id: str) -> ScreeningController:
    controller = load_session(session_id)
    if controller is None:
        raise HTTPException(status_code=404, detail="session not found")
    return controller


def _resp(controller: ScreeningController) -> ScreeningResp:
    snap = controller.snapshot()
    return ScreeningResp(
        session_id=snap.session_id,
        state=snap.state,
        config=snap.config,
        initial_message=snap.initial_message or None,
        report=snap.report,
        radar=radar_points(snap.report) if snap.report is not None else [],
        is_generating_report=snap.is_generating_report,
        event_log=list(controller.events),
    )


def _check(outcome: Outcome, operation: str) -> None:
    if outcome.error is not None:
        raise HTTPException(status_code=502, detail=outcome.error.user_message)
    if not outcome.applied:
        raise HTTPException(
            status_code=409,
            detail=f"{operation} is not available in state {outcome.state.value}",
        )


@router.post("/sessions", response_model=ScreeningResp, status_code=201)
def create_session() -> ScreeningResp:
    try:
        gateway = default_gateway()
    except (OSError, KeyError, ValidationError) as exc:
        logger.exception("Interviewer configuration could not be loaded")
        raise HTTPException(status_code=503, detail="Interviewer service is not configured") from exc
    return _resp(new_session(gateway))


@router.get("/sessions/{session_id}", response_model=ScreeningResp)
def get_session(session_id: str) -> ScreeningResp:
    return _resp(_require(session_id))


@router.post("/sessions/{session_id}/setup", response_model=ScreeningResp)
def submit_setup(session_id: str, config: JobConfig) -> ScreeningResp:
    controller = _require(session_id)
    _check(controller.complete_setup(config), "setup")
    return _resp(controller)


@router.post("/sessions/{session_id}/reply", response_model=ReplyResp)
def send_answer(session_id: str, req: ConversationReq) -> ReplyResp:
    controller = _require(session_id)
    outcome = controller.continue_interview(req.messages)
    _check(outcome, "reply")
    return ReplyResp(session_id=session_id, message=Message(role="model", text=outcome.reply or ""))


@router.post("/sessions/{session_id}/end", response_model=ScreeningResp)
def end_interview(session_id: str, req: ConversationReq) -> ScreeningResp:
    controller = _require(session_id)
    _check(controller.complete_interview(req.messages), "end interview")
    return _resp(controller)


@router.post("/sessions/{session_id}/restart", response_model=ScreeningResp)
def restart(session_id: str) -> ScreeningResp:
    controller = _require(session_id)
    controller.restart()
    return _resp(controller)


@router.get("/sessions/{session_id}/report.pdf")
def download_report(session_id: str) -> Response:
    controller = _require(session_id)
    snap = controller.snapshot()
    if snap.report is None:
        raise HTTPException(status_code=404, detail="report not available")
    payload = generate_report_pdf(snap.report, snap.config)
    return Response(
        content=payload,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="scorecard-{session_id[:8]}.pdf"'},
    )
