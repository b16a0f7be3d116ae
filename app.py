"""Streamlit entry point – renders the ROI proposal generator."""
from __future__ import annotations

import streamlit as st

from config import configure_logging
from state import ensure_session_defaults
from theme import inject_theme
from views.proposal import render_proposal_page

st.set_page_config(
    page_title="Ad Creative ROI Proposal",
    page_icon=":chart_with_upwards_trend:",
    layout="wide",
)

configure_logging()
inject_theme()
ensure_session_defaults()
render_proposal_page()
