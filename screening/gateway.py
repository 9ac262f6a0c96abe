from __future__ import annotations  # Contract for the language-model interviewer service

from typing import Protocol, Sequence

from .models import FinalReport, JobConfig, Message


class SessionGateway(Protocol):  # Operations the controller needs from the interviewer service
    def begin_session(self, config: JobConfig) -> str: ...

    def reply(self, messages: Sequence[Message], config: JobConfig) -> str: ...

    def generate_report(self, transcript: str, config: JobConfig) -> FinalReport: ...


__all__ = ["SessionGateway"]
