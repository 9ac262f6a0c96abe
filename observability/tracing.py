"""Span helper for recording gateway call timings."""
from __future__ import annotations

import time
from contextlib import contextmanager
from typing import Any, Iterator


@contextmanager
def span(target: Any, name: str) -> Iterator[None]:
    start = time.monotonic()
    try:
        yield
    finally:
        elapsed_ms = int((time.monotonic() - start) * 1000)
        target.events.append({"span": name, "ms": elapsed_ms})


__all__ = ["span"]
