"""Proposal page: editor on the left, live document and exports on the right."""
from __future__ import annotations

import logging
from typing import Callable, TypeVar

import streamlit as st

from config import LOGO_POLL_SECONDS
from services.document import (
    build_email_summary,
    build_proposal_document,
    build_talking_points,
    proposal_filename,
)
from services.export import ExportError, create_pdf
from state import get_proposal_session
from ui.components import copy_to_clipboard, render_proposal_preview, trigger_print
from ui.input_panel import render_input_panel
from ui.streamlit_compat import fragment, rerun, use_container_width_kwargs

log = logging.getLogger(__name__)
T = TypeVar("T")


def _execute_with_spinner(label: str, task: Callable[[], T]) -> T | None:
    """Run a user-initiated export and surface failures on the page."""

    try:
        with st.spinner(f"Generating {label}..."):
            return task()
    except ExportError as exc:
        log.exception("%s generation failed", label)
        st.session_state["pdf_error"] = (
            f"An error occurred while generating the {label}: {exc}. Please check your inputs and try again."
        )
        return None


@fragment(run_every=LOGO_POLL_SECONDS)
def _logo_watcher() -> None:
    """Fire the debounced logo lookup once the website field has settled."""

    session = get_proposal_session()
    if session.logo_debouncer.pending and session.poll():
        # Let the logo URL widget pick up the resolved value.
        st.session_state.pop("field_client_logo_url", None)
        rerun()


def _render_exports() -> None:
    session = get_proposal_session()
    form, projection = session.form, session.projection

    pdf_col, print_col, copy_col = st.columns(3)
    with pdf_col:
        if st.button("Prepare PDF", type="primary", **use_container_width_kwargs(st.button)):
            st.session_state["pdf_error"] = ""
            st.session_state["pdf_bytes"] = _execute_with_spinner(
                "PDF",
                lambda: create_pdf(build_proposal_document(form, projection)),
            )
        pdf_bytes = st.session_state.get("pdf_bytes")
        if pdf_bytes:
            st.download_button(
                "Download PDF",
                data=pdf_bytes,
                file_name=proposal_filename(form.client_name),
                mime="application/pdf",
                **use_container_width_kwargs(st.download_button),
            )
    with print_col:
        if st.button("Print / Save", **use_container_width_kwargs(st.button)):
            trigger_print()
    with copy_col:
        if st.button("Copy Email Summary", **use_container_width_kwargs(st.button)):
            summary = build_email_summary(form, projection)
            if summary is None:
                st.info("Calculate the ROI first to copy a summary.")
            else:
                st.session_state["copy_nonce"] += 1
                copy_to_clipboard(summary, nonce=st.session_state["copy_nonce"])
                st.toast("Copied!")

    if st.session_state.get("pdf_error"):
        st.error(st.session_state["pdf_error"])

    summary = build_email_summary(form, projection)
    if summary is not None:
        with st.expander("Email summary"):
            st.code(summary, language=None)


def _render_script() -> None:
    session = get_proposal_session()
    if not st.toggle("Show Screen-Share Script", key="show_script"):
        return
    with st.container(border=True):
        st.subheader("Screen-Share Script")
        st.caption("Use these talking points while walking your client through the calculator live.")
        st.markdown("\n".join(f"- {point}" for point in build_talking_points(session.form, session.projection)))


def render_proposal_page() -> None:
    session = get_proposal_session()
    _logo_watcher()

    editor_col, preview_col = st.columns(2, gap="large")
    with editor_col:
        render_input_panel()
    with preview_col:
        render_proposal_preview(build_proposal_document(session.form, session.projection))
        _render_exports()

    _render_script()


__all__ = ["render_proposal_page"]
