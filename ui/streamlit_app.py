"""Streamlit entry point: one screening controller per browser session."""
from __future__ import annotations

from pathlib import Path

import streamlit as st

from config.settings import settings
from interviewer import load_gateway
from observability import configure_logging
from screening import ScreeningController
from ui.views import render

CONTROLLER_KEY = "controller"


@st.cache_resource
def _gateway():
    return load_gateway(Path(settings.APP_CONFIG_PATH))


configure_logging()
st.set_page_config(page_title="TalentScout AI", page_icon="🧠", layout="wide")

# One controller per browser session
if CONTROLLER_KEY not in st.session_state:
    st.session_state[CONTROLLER_KEY] = ScreeningController(_gateway())

render(st.session_state[CONTROLLER_KEY])
