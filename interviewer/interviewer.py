from __future__ import annotations  # LLM-backed interviewer: opening line, follow-up turns, final scorecard

from pathlib import Path
from textwrap import dedent
from typing import Dict, List, Sequence

from pydantic import BaseModel

from config import LlmRoute, load_app_registry
from llm_gateway import call, chat
from screening.models import FinalReport, JobConfig, Message


BEGIN_SESSION_KEY = "interviewer.begin_session"
REPLY_KEY = "interviewer.reply"
REPORT_KEY = "interviewer.generate_report"


class OpeningMessage(BaseModel):  # Interviewer greeting and first question
    text: str = ""


class InterviewerTurn(BaseModel):  # Interviewer follow-up after a candidate answer
    text: str


class LlmSessionGateway:  # SessionGateway implementation over configured LLM routes
    def __init__(self, *, opening_route: LlmRoute, reply_route: LlmRoute, report_route: LlmRoute) -> None:
        self.opening_route = opening_route
        self.reply_route = reply_route
        self.report_route = report_route

    def begin_session(self, config: JobConfig) -> str:
        result = call(_build_opening_task(config), OpeningMessage, cfg=self.opening_route)
        return result.text

    def reply(self, messages: Sequence[Message], config: JobConfig) -> str:
        history: List[Dict[str, str]] = [{"role": "system", "content": _build_persona(config)}]
        history.extend(_chat_message(message) for message in messages)
        result = chat(history, InterviewerTurn, cfg=self.reply_route)
        return result.text

    def generate_report(self, transcript: str, config: JobConfig) -> FinalReport:
        return call(_build_report_task(transcript, config), FinalReport, cfg=self.report_route)


def load_gateway(config_path: Path) -> LlmSessionGateway:  # Convenience helper using app config
    registry = load_app_registry(
        config_path,
        {
            BEGIN_SESSION_KEY: OpeningMessage,
            REPLY_KEY: InterviewerTurn,
            REPORT_KEY: FinalReport,
        },
    )
    return LlmSessionGateway(
        opening_route=registry[BEGIN_SESSION_KEY][0],
        reply_route=registry[REPLY_KEY][0],
        report_route=registry[REPORT_KEY][0],
    )


def _topics(config: JobConfig) -> str:
    return ", ".join(config.topics) or "(none specified; cover the core skills of the role)"


def _build_persona(config: JobConfig) -> str:  # System prompt shared by every interview turn
    return dedent(
        f"""
        You are TalentScout, an expert technical interviewer screening a candidate.
        Role: {config.role}
        Level: {config.level}
        Job description:
        {config.description or "(not provided)"}
        Topics to probe: {_topics(config)}

        Interview rules:
        - Ask exactly one question per turn and keep it under 80 words.
        - Go depth-first: if an answer is vague, ask for a concrete example, numbers, or trade-offs before moving on.
        - Work through the topics in order; move to the next topic once the current one has enough evidence.
        - Do not grade the candidate or reveal scores during the interview.
        - Stay professional and concise. Never answer your own questions.
        """
    ).strip()


def _build_opening_task(config: JobConfig) -> str:  # Prompt for the first interviewer message
    persona = _build_persona(config)
    return (
        persona
        + "\n\n"
        + dedent(
            """
            Start the interview now. Greet the candidate in one sentence, name the role you are hiring for,
            then ask your first question on the first topic.

            Respond with a JSON object following this contract:
            - text: the complete opening message shown to the candidate.
            Return only JSON without markdown fences, text, or commentary.
            """
        ).strip()
    )


def _build_report_task(transcript: str, config: JobConfig) -> str:  # Prompt for the final scorecard
    return dedent(
        f"""
        You are TalentScout, reviewing a completed screening interview.
        Role: {config.role}
        Level: {config.level}
        Topics probed: {_topics(config)}

        Transcript (USER is the candidate, MODEL is the interviewer):
        {transcript}

        Evaluate the candidate strictly on evidence from the transcript.
        Respond with a JSON object following this contract:
        - summary: three to five sentences on overall performance.
        - hire_recommendation: one of "Strong Hire", "Hire", "Weak Hire", "No Hire".
        - metrics: one entry per topic (plus "Communication"), each with
            - category: topic name.
            - score: integer from 0 to 100.
            - feedback: one or two sentences citing the evidence.
        - strengths: short phrases, best first.
        - weaknesses: short phrases, most important first.
        Unanswered topics score below 40. Return only JSON without markdown fences, text, or commentary.
        """
    ).strip()


def _chat_message(message: Message) -> Dict[str, str]:  # Map conversation roles onto chat-completion roles
    role = "assistant" if message.role == "model" else "user"
    return {"role": role, "content": message.text}
