"""Streamlit views for the three screening stages.

Each view renders from a controller snapshot and forwards one intent to the
controller. Failures come back as ``Outcome.error`` and are shown inline.
"""
from __future__ import annotations

from typing import List, Optional

import streamlit as st
from pydantic import ValidationError

from screening import AppState, ControllerSnapshot, JobConfig, Message, Outcome, ScreeningController, radar_points
from session_reports import generate_report_pdf


CONVERSATION_KEY = "conversation"

LEVELS = ["Junior", "Mid-Level", "Senior", "Staff", "Principal"]

STEPS = (
    (AppState.SETUP, "1. Setup"),
    (AppState.INTERVIEW, "2. Interview"),
    (AppState.REPORT, "3. Analysis"),
)

INTERVIEW_TIP = (
    "The AI is instructed to probe deeper if answers are vague. "
    "Encouraging specific examples usually yields better scores."
)


def render_header(state: AppState) -> None:
    labels = [f":violet[**{label}**]" if step is state else label for step, label in STEPS]
    st.markdown("## 🧠 TalentScout AI")
    st.markdown("  /  ".join(labels))
    st.divider()


def _conversation(snap: ControllerSnapshot) -> List[Message]:
    if not st.session_state.get(CONVERSATION_KEY):
        st.session_state[CONVERSATION_KEY] = [Message(role="model", text=snap.initial_message)]
    return st.session_state[CONVERSATION_KEY]


def render_setup(controller: ScreeningController) -> Optional[Outcome]:
    st.title("AI-Powered Candidate Screening")
    st.caption(
        "Configure the role, let the AI interview the candidate, "
        "and get an instant, data-driven hiring recommendation."
    )
    with st.form("setup_form"):
        role = st.text_input("Job role", placeholder="Senior Backend Engineer")
        level = st.selectbox("Seniority level", LEVELS, index=2)
        description = st.text_area("Job description", height=150)
        topics_raw = st.text_area("Topics to probe (one per line)", placeholder="System design\nPython\nSQL")
        submitted = st.form_submit_button("Start interview", type="primary")
    if not submitted:
        return None

    try:
        config = JobConfig(
            role=role or "",
            level=level or "",
            description=description or "",
            topics=(topics_raw or "").splitlines(),
        )
    except ValidationError:
        st.warning("Role and level are required.")
        return None

    with st.spinner("Preparing your interviewer..."):
        outcome = controller.complete_setup(config)
    if outcome.error is not None:
        st.error(outcome.error.user_message)
    elif outcome.applied:
        st.session_state.pop(CONVERSATION_KEY, None)
        st.rerun()
    return outcome


def _render_competencies(snap: ControllerSnapshot) -> None:
    st.subheader("Target Competencies")
    topics = snap.config.topics if snap.config is not None else []
    for topic in topics:
        st.markdown(f"- {topic}")
    if not topics:
        st.caption("No specific topics configured.")
    st.info(f"💡 **Interview Tip:** {INTERVIEW_TIP}")


def render_interview(controller: ScreeningController) -> Optional[Outcome]:
    snap = controller.snapshot()
    messages = _conversation(snap)
    main, side = st.columns([2, 1])
    with side:
        _render_competencies(snap)
    with main:
        for message in messages:
            with st.chat_message("assistant" if message.role == "model" else "user"):
                st.markdown(message.text)
        end = st.button("End interview & generate report", type="primary")
    answer = st.chat_input("Type your answer...")

    if answer:
        messages.append(Message(role="user", text=answer))
        with st.spinner("Interviewer is thinking..."):
            outcome = controller.continue_interview(messages)
        if outcome.error is not None:
            messages.pop()
            st.error(outcome.error.user_message)
        elif outcome.applied:
            messages.append(Message(role="model", text=outcome.reply or ""))
            st.rerun()
        return outcome

    if end:
        with st.spinner("Analyzing Interview Performance... TalentScout is generating your detailed scorecard."):
            outcome = controller.complete_interview(messages)
        if outcome.error is not None:
            st.error(outcome.error.user_message)
        elif outcome.applied:
            st.session_state.pop(CONVERSATION_KEY, None)
            st.rerun()
        return outcome
    return None


def render_report(controller: ScreeningController) -> Optional[Outcome]:
    snap = controller.snapshot()
    report = snap.report
    if report is None:
        return None

    st.title("Interview Analysis")
    st.subheader(f"Recommendation: {report.hire_recommendation}")
    st.write(report.summary)

    st.subheader("Evaluation Metrics")
    for metric in report.metrics:
        st.markdown(f"**{metric.category}**: {metric.score}/100")
        st.progress(metric.score / 100)
        st.caption(metric.feedback)
    st.dataframe([point.model_dump() for point in radar_points(report)], hide_index=True)

    st.subheader("Strengths")
    for item in report.strengths:
        st.markdown(f"- {item}")
    st.subheader("Areas for Improvement")
    for item in report.weaknesses:
        st.markdown(f"- {item}")

    st.download_button(
        "Download scorecard (PDF)",
        data=generate_report_pdf(report, snap.config),
        file_name="scorecard.pdf",
        mime="application/pdf",
    )
    st.button("Start new screening", on_click=_restart, args=(controller,))
    return None


def _restart(controller: ScreeningController) -> None:  # Button callback; Streamlit reruns afterwards
    controller.restart()
    st.session_state.pop(CONVERSATION_KEY, None)


VIEWS = {
    AppState.SETUP: render_setup,
    AppState.INTERVIEW: render_interview,
    AppState.REPORT: render_report,
}


def render(controller: ScreeningController) -> Optional[Outcome]:
    render_header(controller.state)
    return VIEWS[controller.state](controller)
