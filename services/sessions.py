"""Helpers for creating and looking up screening sessions."""
from __future__ import annotations

import threading
from collections import OrderedDict
from typing import Optional

from config.settings import settings
from screening import ScreeningController, SessionGateway


_SESSIONS: "OrderedDict[str, ScreeningController]" = OrderedDict()
_SESSIONS_GUARD = threading.Lock()


def new_session(gateway: SessionGateway) -> ScreeningController:
    """Create a controller in SETUP and register it under a fresh session id.

    The oldest sessions are dropped once ``settings.SESSION_LIMIT`` is reached.
    """

    controller = ScreeningController(gateway)
    with _SESSIONS_GUARD:
        _SESSIONS[controller.session_id] = controller
        while len(_SESSIONS) > settings.SESSION_LIMIT:
            _SESSIONS.popitem(last=False)
    return controller


def load_session(session_id: str) -> Optional[ScreeningController]:
    """Return the controller for ``session_id`` if it is still registered."""

    with _SESSIONS_GUARD:
        return _SESSIONS.get(session_id)


def clear_sessions() -> None:
    with _SESSIONS_GUARD:
        _SESSIONS.clear()
