"""Calculation helpers for proposal projections."""

from .roi import compute_projection, project_form

__all__ = ["compute_projection", "project_form"]
