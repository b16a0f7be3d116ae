"""Centralised colour scheme and proposal styling for the Streamlit pages."""
from __future__ import annotations

from typing import Dict

import streamlit as st

THEME_COLORS: Dict[str, str] = {
    "background": "#F8FAFC",
    "surface": "#FFFFFF",
    "surface_alt": "#F1F5F9",
    "primary": "#0F172A",
    "accent": "#EA580C",
    "gradient_start": "#F98538",
    "gradient_end": "#FE514A",
    "neutral": "#E2E8F0",
    "text": "#1E293B",
    "text_subtle": "#64748B",
}

CUSTOM_STYLE_TEMPLATE = """
<style>
:root {{
    --base-bg: {background};
    --surface: {surface};
    --surface-alt: {surface_alt};
    --primary: {primary};
    --accent: {accent};
    --gradient-start: {gradient_start};
    --gradient-end: {gradient_end};
    --neutral: {neutral};
    --text-color: {text};
    --text-subtle: {text_subtle};
    --radius-lg: 16px;
    --radius-md: 10px;
}}

[data-testid="stAppViewContainer"] {{
    background-color: var(--base-bg);
    color: var(--text-color);
}}

.proposal {{
    background: var(--surface);
    border-radius: var(--radius-lg);
    box-shadow: 0 10px 24px rgba(15, 23, 42, 0.08);
    padding: 1.5rem;
}}
.proposal__header {{
    display: flex;
    justify-content: space-between;
    align-items: flex-start;
    border-bottom: 1px solid var(--neutral);
    padding-bottom: 1rem;
    margin-bottom: 1.25rem;
}}
.proposal__title {{ font-size: 1.5rem; font-weight: 700; color: var(--primary); margin: 0; }}
.proposal__subtitle {{ color: var(--text-subtle); margin: 0.25rem 0 0; }}
.proposal__logo {{ max-height: 64px; max-width: 240px; object-fit: contain; }}
.proposal h3 {{ font-size: 1.1rem; color: var(--primary); }}
.proposal strong {{ color: var(--accent); }}
.proposal__footer {{
    border-top: 1px solid var(--neutral);
    padding-top: 1rem;
    font-size: 0.9rem;
    color: var(--text-subtle);
}}

.stat-grid {{ display: grid; grid-template-columns: repeat(2, minmax(0, 1fr)); gap: 1rem; margin-bottom: 1.25rem; }}
.stat-card {{ background: var(--surface-alt); border-radius: var(--radius-md); padding: 1rem; text-align: center; }}
.stat-card__label {{ font-size: 0.85rem; color: var(--text-subtle); margin: 0; }}
.stat-card__value {{
    font-size: 1.9rem;
    font-weight: 700;
    margin: 0;
    background: linear-gradient(to bottom, var(--gradient-start), var(--gradient-end));
    -webkit-background-clip: text;
    background-clip: text;
    color: transparent;
}}

@media print {{
    [data-testid="stSidebar"], [data-testid="stHeader"], .no-print {{ display: none !important; }}
}}
</style>
"""


def build_custom_style() -> str:
    return CUSTOM_STYLE_TEMPLATE.format(**THEME_COLORS)


def inject_theme() -> None:
    """Apply the shared CSS theme to the current page."""

    st.markdown(build_custom_style(), unsafe_allow_html=True)


__all__ = ["THEME_COLORS", "build_custom_style", "inject_theme"]
