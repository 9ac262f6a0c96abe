from __future__ import annotations  # Transcript rendering for report generation

from typing import Sequence

from .models import Message


def serialize_transcript(messages: Sequence[Message]) -> str:  # One "ROLE: text" line per message, input order
    return "\n".join(f"{message.role.upper()}: {message.text}" for message in messages)


def ensure_chronological(messages: Sequence[Message]) -> None:  # Reject conversations whose timestamps go backwards
    previous = None
    for index, message in enumerate(messages):
        if previous is not None and message.timestamp < previous:
            raise ValueError(f"message {index} ({message.id}) is older than the message before it")
        previous = message.timestamp


__all__ = ["ensure_chronological", "serialize_transcript"]
