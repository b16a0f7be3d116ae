"""Utilities for managing Streamlit session state defaults and resets."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, Mapping

import streamlit as st

from config import STORE_URL
from services.database import LocalStore
from services.session import ProposalSession

StateFactory = Callable[[], Any]
TypeHint = type | tuple[type, ...] | None

SESSION_KEY = "proposal_session"
WIDGET_PREFIXES = ("field_", "bullet_")


@dataclass(frozen=True)
class StateSpec:
    """Definition of a session state entry."""

    default_factory: StateFactory
    type_hint: TypeHint
    description: str

    def create_default(self) -> Any:
        return self.default_factory()

    def is_valid(self, value: Any) -> bool:
        if self.type_hint is None:
            return True
        hints = self.type_hint if isinstance(self.type_hint, tuple) else (self.type_hint,)
        return isinstance(value, hints)


@st.cache_resource
def get_local_store(url: str = STORE_URL) -> LocalStore:
    """One store (and engine) per process, shared by all sessions."""
    return LocalStore(url)


def _create_session() -> ProposalSession:
    return ProposalSession(get_local_store())


STATE_SPECS: Dict[str, StateSpec] = {
    SESSION_KEY: StateSpec(_create_session, ProposalSession, "Form, projection and logo watcher"),
    "pdf_bytes": StateSpec(lambda: None, (bytes, type(None)), "Last generated PDF"),
    "pdf_error": StateSpec(lambda: "", str, "Last PDF generation error"),
    "copy_nonce": StateSpec(lambda: 0, int, "Clipboard request counter"),
    "show_script": StateSpec(lambda: False, bool, "Screen-share script toggle"),
}


def ensure_session_defaults(overrides: Mapping[str, Any] | None = None) -> None:
    """Populate :mod:`st.session_state` with defaults and type-validate entries."""

    overrides = overrides or {}
    for key, spec in STATE_SPECS.items():
        if key in overrides:
            st.session_state[key] = overrides[key]
            continue
        if key not in st.session_state or not spec.is_valid(st.session_state[key]):
            st.session_state[key] = spec.create_default()


def get_proposal_session() -> ProposalSession:
    ensure_session_defaults()
    return st.session_state[SESSION_KEY]


def reset_session_keys(keys: Iterable[str] | None = None) -> None:
    """Reset selected state keys to their default values."""

    target_keys = list(keys) if keys is not None else list(STATE_SPECS.keys())
    for key in target_keys:
        if key in STATE_SPECS:
            st.session_state[key] = STATE_SPECS[key].create_default()
        elif key in st.session_state:
            del st.session_state[key]


def clear_widget_state(prefixes: Iterable[str] = WIDGET_PREFIXES) -> None:
    """Forget input widget values so they re-read the form on the next run."""

    prefixes = tuple(prefixes)
    for key in list(st.session_state.keys()):
        if isinstance(key, str) and key.startswith(prefixes):
            del st.session_state[key]


__all__ = [
    "SESSION_KEY",
    "STATE_SPECS",
    "StateSpec",
    "clear_widget_state",
    "ensure_session_defaults",
    "get_local_store",
    "get_proposal_session",
    "reset_session_keys",
]
