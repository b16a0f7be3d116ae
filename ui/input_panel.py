"""Form editor: every widget edit is dispatched to the proposal session."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import streamlit as st

from models import AddBullet, FormAction, RemoveBullet, ResetForm, SetBullet, SetField
from state import clear_widget_state, get_proposal_session, reset_session_keys
from ui.streamlit_compat import use_container_width_kwargs


@dataclass(frozen=True)
class FieldSpec:
    name: str
    label: str
    placeholder: str = ""
    help: str | None = None
    wide: bool = False


@dataclass(frozen=True)
class SectionSpec:
    title: str
    fields: Tuple[FieldSpec, ...]


FORM_SECTIONS: Tuple[SectionSpec, ...] = (
    SectionSpec(
        "Client Business Inputs",
        (
            FieldSpec("client_name", "Client Name", wide=True),
            FieldSpec("client_industry", "Client Industry", wide=True),
            FieldSpec(
                "client_website",
                "Client Website",
                placeholder="acme.com",
                help="The client logo is looked up automatically when the logo field is empty.",
                wide=True,
            ),
            FieldSpec("average_sale_value", "Average Sale Value"),
            FieldSpec("current_monthly_leads", "Current Monthly Leads"),
            FieldSpec("lead_to_customer_rate", "Lead → Customer Close Rate (%)"),
        ),
    ),
    SectionSpec(
        "Service / Fee Inputs",
        (
            FieldSpec("expected_lead_increase_percent", "Estimated % Increase in Leads"),
            FieldSpec("service_fee_monthly", "Your Monthly Fee"),
        ),
    ),
    SectionSpec(
        "Your Details",
        (
            FieldSpec("your_name", "Your Name"),
            FieldSpec("your_agency_name", "Your Agency Name"),
            FieldSpec("your_email", "Your Email"),
            FieldSpec("your_phone", "Your Phone"),
            FieldSpec("agency_logo_url", "Agency Logo URL (Optional)", placeholder="https://...", wide=True),
        ),
    ),
    SectionSpec(
        "Assumptions & Advanced Settings",
        (
            FieldSpec("timeframe_months", "Timeframe for ROI (months)"),
            FieldSpec("currency_symbol", "Currency Symbol"),
            FieldSpec("client_logo_url", "Client Logo URL (Optional)", placeholder="https://...", wide=True),
            FieldSpec("package_name", "Package Name", wide=True),
        ),
    ),
)

NOTES_FIELD = FieldSpec("notes", "Notes", help="Shown under the package details.")


def _field_key(name: str) -> str:
    return f"field_{name}"


def _dispatch(action: FormAction) -> None:
    get_proposal_session().dispatch(action)
    # A prepared PDF no longer matches the form.
    st.session_state["pdf_bytes"] = None


def _on_field_change(name: str) -> None:
    _dispatch(SetField(name, st.session_state[_field_key(name)]))


def _on_bullet_change(index: int) -> None:
    _dispatch(SetBullet(index, st.session_state[f"bullet_{index}"]))


def _on_add_bullet() -> None:
    _dispatch(AddBullet())
    clear_widget_state(("bullet_",))


def _on_remove_bullet(index: int) -> None:
    _dispatch(RemoveBullet(index))
    clear_widget_state(("bullet_",))


def _on_calculate() -> None:
    get_proposal_session().calculate()
    st.session_state["pdf_bytes"] = None


def _on_reset() -> None:
    _dispatch(ResetForm())
    clear_widget_state()
    reset_session_keys(["pdf_bytes", "pdf_error"])


def _render_field(spec: FieldSpec, *, area: bool = False) -> None:
    form = get_proposal_session().form
    key = _field_key(spec.name)
    if key not in st.session_state:
        st.session_state[key] = getattr(form, spec.name)
    widget = st.text_area if area else st.text_input
    widget(
        spec.label,
        key=key,
        placeholder=spec.placeholder or None,
        help=spec.help,
        on_change=_on_field_change,
        args=(spec.name,),
    )


def _render_bullets() -> None:
    form = get_proposal_session().form
    st.markdown("**Package Bullets**")
    for index, bullet in enumerate(form.package_bullets):
        key = f"bullet_{index}"
        if key not in st.session_state:
            st.session_state[key] = bullet
        text_col, remove_col = st.columns([8, 1])
        with text_col:
            st.text_input(
                f"Bullet {index + 1}",
                key=key,
                label_visibility="collapsed",
                on_change=_on_bullet_change,
                args=(index,),
            )
        with remove_col:
            st.button("−", key=f"remove_bullet_{index}", help="Remove bullet", on_click=_on_remove_bullet, args=(index,))
    st.button("+ Add Bullet", key="add_bullet", on_click=_on_add_bullet)


def _render_fields(fields: Tuple[FieldSpec, ...]) -> None:
    pending: list[FieldSpec] = []

    def flush() -> None:
        if not pending:
            return
        for column, spec in zip(st.columns(2), pending):
            with column:
                _render_field(spec)
        pending.clear()

    for spec in fields:
        if spec.wide:
            flush()
            _render_field(spec)
        else:
            pending.append(spec)
            if len(pending) == 2:
                flush()
    flush()


def render_input_panel() -> None:
    for section in FORM_SECTIONS:
        with st.container(border=True):
            st.subheader(section.title)
            _render_fields(section.fields)
            if section.title == "Assumptions & Advanced Settings":
                _render_bullets()
                _render_field(NOTES_FIELD, area=True)

    calculate_col, reset_col = st.columns([3, 1])
    with calculate_col:
        st.button(
            "Calculate ROI & Generate Proposal",
            type="primary",
            on_click=_on_calculate,
            **use_container_width_kwargs(st.button),
        )
    with reset_col:
        st.button("Reset", on_click=_on_reset, **use_container_width_kwargs(st.button))


__all__ = ["FORM_SECTIONS", "FieldSpec", "SectionSpec", "render_input_panel"]
