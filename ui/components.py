"""Reusable UI helpers for the proposal preview and browser-side actions."""
from __future__ import annotations

import html
import json
from typing import Sequence

import streamlit as st
import streamlit.components.v1 as components

from services.document import ProposalDocument, Segment, StatCard


def _segments_html(segments: Sequence[Segment]) -> str:
    return "".join(
        f"<strong>{html.escape(text)}</strong>" if emphasised else html.escape(text)
        for text, emphasised in segments
    )


def _stat_cards_html(cards: Sequence[StatCard]) -> str:
    blocks = [
        "<div class='stat-card' role='group' aria-label='{label}'>"
        "<p class='stat-card__label'>{label}</p>"
        "<p class='stat-card__value'>{value}</p>"
        "</div>".format(label=html.escape(card.label), value=html.escape(card.value))
        for card in cards
    ]
    return "<div class='stat-grid'>" + "".join(blocks) + "</div>"


def render_document_html(document: ProposalDocument) -> str:
    """Return the proposal as self-contained, escaped HTML."""

    logo_html = ""
    if document.client_logo_url:
        # A logo that fails to load is hidden rather than shown broken.
        logo_html = (
            f"<img class='proposal__logo' src='{html.escape(document.client_logo_url, quote=True)}' "
            f"alt='{html.escape(document.client_name, quote=True)} Logo' crossorigin='anonymous' "
            "onerror=\"this.style.display='none'\" />"
        )
    agency_logo_html = ""
    if document.agency_logo_url:
        agency_logo_html = (
            f"<img src='{html.escape(document.agency_logo_url, quote=True)}' alt='' style='height:20px' "
            "onerror=\"this.style.display='none'\" />"
        )
    paragraphs_html = "".join(f"<p>{_segments_html(paragraph)}</p>" for paragraph in document.paragraphs)
    bullets_html = "".join(f"<li>{html.escape(bullet)}</li>" for bullet in document.bullets)
    notes_html = (
        f"<p class='proposal__notes'>{html.escape(document.notes).replace(chr(10), '<br/>')}</p>"
        if document.notes
        else ""
    )
    contact_html = f"<p>{html.escape(document.contact)}</p>" if document.contact else ""
    return (
        "<div class='proposal' id='proposal-preview-content'>"
        "<header class='proposal__header'><div>"
        f"<h2 class='proposal__title'>{html.escape(document.title)}</h2>"
        f"<p class='proposal__subtitle'>{html.escape(document.subtitle)}</p>"
        f"</div>{logo_html}</header>"
        f"<section><h3>{html.escape(document.summary_title)}</h3>{_stat_cards_html(document.stat_cards)}</section>"
        f"<section>{paragraphs_html}</section>"
        f"<section><h3>{html.escape(document.package_name)}</h3><ul>{bullets_html}</ul>{notes_html}</section>"
        "<footer class='proposal__footer'>"
        f"<p><strong>{html.escape(document.next_steps_title)}</strong></p>"
        f"<p>{html.escape(document.next_steps)}</p>"
        f"{agency_logo_html}<p><b>{html.escape(document.signature)}</b></p>{contact_html}"
        "</footer></div>"
    )


def render_proposal_preview(document: ProposalDocument) -> None:
    st.markdown(render_document_html(document), unsafe_allow_html=True)


def trigger_print() -> None:
    """Open the browser print dialog for the page hosting the app."""

    components.html("<script>window.parent.print();</script>", height=0)


def copy_to_clipboard(text: str, *, nonce: int = 0) -> None:
    """Write *text* to the clipboard from the browser.

    Failures (permissions, insecure context) are logged to the browser
    console only. *nonce* forces a fresh component so repeated copies fire.
    """

    payload = json.dumps(text).replace("</", "<\\/")
    components.html(
        "<script>"
        f"/* {int(nonce)} */"
        f"navigator.clipboard.writeText({payload})"
        ".catch(function (err) { console.error('Failed to copy text: ', err); });"
        "</script>",
        height=0,
    )


__all__ = ["copy_to_clipboard", "render_document_html", "render_proposal_preview", "trigger_print"]
