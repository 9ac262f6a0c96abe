import os
import sys
from pathlib import Path

os.environ.setdefault("ENABLE_FILE_LOGS", "0")

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from llm_gateway import LlmGatewayError
from screening import EvaluationMetric, FinalReport, JobConfig
from services.sessions import clear_sessions


class FakeGateway:
    """In-memory interviewer; operations named in ``fail_on`` raise a gateway error."""

    def __init__(self, opening="Welcome! Let's start with system design.", report=None, reply="Can you give a concrete example?", fail_on=()):
        self.opening = opening
        self.report = report
        self.reply_text = reply
        self.fail_on = set(fail_on)
        self.calls = []

    def begin_session(self, config):
        self.calls.append(("begin_session", config))
        if "begin_session" in self.fail_on:
            raise LlmGatewayError("LLM returned status 401")
        return self.opening

    def reply(self, messages, config):
        self.calls.append(("reply", list(messages)))
        if "reply" in self.fail_on:
            raise LlmGatewayError("LLM transport failed")
        return self.reply_text

    def generate_report(self, transcript, config):
        self.calls.append(("generate_report", transcript))
        if "generate_report" in self.fail_on:
            raise LlmGatewayError("LLM output validation failed")
        return self.report


@pytest.fixture(autouse=True)
def _fresh_sessions():
    clear_sessions()
    try:
        yield
    finally:
        clear_sessions()


@pytest.fixture
def job_config():
    return JobConfig(
        role="Backend Engineer",
        level="Senior",
        description="Design and operate Python services.",
        topics=["System design", "Python", "SQL"],
    )


@pytest.fixture
def sample_report():
    return FinalReport(
        summary="Solid fundamentals with clear communication.",
        hire_recommendation="Hire",
        metrics=[
            EvaluationMetric(category="System design", score=78, feedback="Good trade-off discussion."),
            EvaluationMetric(category="Python", score=85, feedback="Idiomatic and precise."),
            EvaluationMetric(category="SQL", score=52, feedback="Struggled with window functions."),
        ],
        strengths=["Clear communication", "Python depth"],
        weaknesses=["Advanced SQL"],
    )


@pytest.fixture
def make_gateway(sample_report):
    def _make(**kwargs):
        kwargs.setdefault("report", sample_report)
        return FakeGateway(**kwargs)

    return _make
