"""Compatibility helpers for Streamlit APIs that changed between releases."""
from __future__ import annotations

import inspect
from typing import Any, Callable, Dict

import streamlit as st

ComponentCallable = Callable[..., Any]

_ACCEPTS_CACHE: Dict[int, bool] = {}


def _accepts_use_container_width(func: ComponentCallable) -> bool:
    wrapped = func
    while getattr(wrapped, "__wrapped__", None) is not None:
        wrapped = wrapped.__wrapped__
    cache_key = id(wrapped)
    if cache_key not in _ACCEPTS_CACHE:
        try:
            _ACCEPTS_CACHE[cache_key] = "use_container_width" in inspect.signature(wrapped).parameters
        except (TypeError, ValueError):
            _ACCEPTS_CACHE[cache_key] = False
    return _ACCEPTS_CACHE[cache_key]


def use_container_width_kwargs(func: ComponentCallable, *, value: bool = True) -> Dict[str, bool]:
    """Return ``{"use_container_width": value}`` when *func* accepts it, else ``{}``."""

    if _accepts_use_container_width(func):
        return {"use_container_width": value}
    return {}


def fragment(*, run_every: float | None = None) -> Callable[[ComponentCallable], ComponentCallable]:
    """``st.fragment`` with a fallback to ``st.experimental_fragment`` on older releases."""

    decorator = getattr(st, "fragment", None) or getattr(st, "experimental_fragment")
    return decorator(run_every=run_every)


def rerun() -> None:
    """Trigger a full rerun across supported Streamlit versions."""

    if hasattr(st, "rerun"):
        st.rerun()
    else:  # pragma: no cover - legacy fallback
        st.experimental_rerun()


__all__ = ["fragment", "rerun", "use_container_width_kwargs"]
