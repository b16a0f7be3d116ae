"""Turn the form and its projection into the proposal's presentational content.

Everything here is a pure function of ``(FormState, Projection | None)``.
A missing projection renders placeholders, not zeros.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from formatting import (
    NOT_APPLICABLE,
    PENDING,
    format_currency,
    format_multiple,
    format_number,
    format_percent,
)
from models import FormState, Projection
from validators import coerce_number

Segment = Tuple[str, bool]  # (text, emphasised)

NEXT_STEPS_TITLE = "Next Steps"
NEXT_STEPS_TEXT = (
    "If these numbers make sense to you, the next step is simple: Let’s schedule your start date, "
    "and we’ll get your first batch of new creatives ready within the next 7 days."
)


@dataclass(frozen=True)
class StatCard:
    label: str
    value: str


@dataclass(frozen=True)
class ProposalDocument:
    """Content of one proposal, independent of how it is drawn."""

    title: str
    subtitle: str
    client_name: str
    client_logo_url: str
    agency_logo_url: str
    summary_title: str
    stat_cards: Tuple[StatCard, ...]
    paragraphs: Tuple[Tuple[Segment, ...], ...]
    package_name: str
    bullets: Tuple[str, ...]
    notes: str
    next_steps_title: str
    next_steps: str
    signature: str
    contact: str


def _signed(text: str) -> str:
    return text if text == NOT_APPLICABLE else f"+{text}"


def build_proposal_document(form: FormState, projection: Optional[Projection]) -> ProposalDocument:
    symbol = form.currency_symbol
    p = projection
    leads = format_number(p.extra_leads_per_month if p else None)
    revenue_month = format_currency(p.extra_revenue_per_month if p else None, symbol)
    revenue_total = format_currency(p.extra_revenue_timeframe if p else None, symbol)
    cost_total = format_currency(p.service_cost_timeframe if p else None, symbol)
    roi = format_percent(p.roi_percent if p else None)
    multiple = format_multiple(p.value_to_fee_multiple if p else None)
    months = form.timeframe_months

    stat_cards = (
        StatCard("Extra Leads / Month", _signed(leads)),
        StatCard("Extra Revenue / Month", _signed(revenue_month)),
        StatCard(f"ROI over {months} months", roi),
        StatCard("Return vs Fee", multiple),
    )
    paragraphs = (
        (
            ("Based on your current numbers, by improving your ad creatives we estimate an additional ", False),
            (leads, True),
            (" leads per month, resulting in approximately ", False),
            (revenue_month, True),
            (" in extra monthly revenue.", False),
        ),
        (
            ("Over ", False),
            (f"{months} months", True),
            (", that’s an estimated ", False),
            (revenue_total, True),
            (" in extra revenue. Our creative service fee over the same period would be ", False),
            (cost_total, True),
            (", which means an estimated ROI of ", False),
            (roi, True),
            (" and a ", False),
            (multiple, True),
            (" return on your investment.", False),
        ),
    )
    contact = " · ".join(part.strip() for part in (form.your_email, form.your_phone) if part.strip())
    return ProposalDocument(
        title=f"Ad Creative ROI Proposal for {form.client_name}",
        subtitle=f"{form.client_industry} - Prepared by {form.your_agency_name}",
        client_name=form.client_name,
        client_logo_url=form.client_logo_url.strip(),
        agency_logo_url=form.agency_logo_url.strip(),
        summary_title="Summary of Results",
        stat_cards=stat_cards,
        paragraphs=paragraphs,
        package_name=form.package_name,
        bullets=tuple(form.package_bullets),
        notes=form.notes.strip(),
        next_steps_title=NEXT_STEPS_TITLE,
        next_steps=NEXT_STEPS_TEXT,
        signature=f"{form.your_name} - {form.your_agency_name}",
        contact=contact,
    )


def build_email_summary(form: FormState, projection: Optional[Projection]) -> Optional[str]:
    """Plain text summary for the clipboard; ``None`` until a projection exists."""

    if projection is None:
        return None
    symbol = form.currency_symbol
    lines = [
        f"Proposal for: {form.client_name}",
        "",
        f"Key Projections ({form.timeframe_months} months):",
        f"- Extra Monthly Revenue: {format_currency(projection.extra_revenue_per_month, symbol, 2)}",
        f"- Total Extra Revenue: {format_currency(projection.extra_revenue_timeframe, symbol)}",
        f"- Total Service Cost: {format_currency(projection.service_cost_timeframe, symbol)}",
        f"- Net Gain: {format_currency(projection.net_gain_timeframe, symbol)}",
        f"- Estimated ROI: {format_percent(projection.roi_percent)}",
        "",
        f"This is based on an estimated {format_number(projection.extra_leads_per_month)} "
        f"extra leads per month from our {form.package_name}.",
    ]
    return "\n".join(lines).strip()


def build_talking_points(form: FormState, projection: Optional[Projection]) -> List[str]:
    """Screen-share script for walking a client through the numbers live."""

    symbol = form.currency_symbol
    p = projection
    multiple = format_number(p.value_to_fee_multiple if p else None, 1, placeholder=PENDING)
    sale_value = format_currency(coerce_number(form.average_sale_value), symbol)
    return [
        f"\"Okay, {form.client_name}, let's plug in your current numbers together to see what's possible.\"",
        f"\"You mentioned you're getting around {form.current_monthly_leads} leads per month, "
        f"with an average sale value of {sale_value}.\"",
        f"\"Here’s what happens if we just improve your creatives by a conservative "
        f"{form.expected_lead_increase_percent}%. This isn't about more ad spend, just better-performing ads.\"",
        f"\"Based on that, we're looking at an extra "
        f"{format_number(p.extra_leads_per_month if p else None, placeholder=PENDING)} leads per month.\"",
        f"\"Over {form.timeframe_months} months, that’s an extra "
        f"{format_currency(p.extra_revenue_timeframe if p else None, symbol, placeholder=PENDING)} "
        f"in revenue for your business.\"",
        f"\"My fee over the same period is "
        f"{format_currency(p.service_cost_timeframe if p else None, symbol, placeholder=PENDING)}. "
        f"When you look at the total return, that's about a {multiple}x return on your investment.\"",
        f"\"So, for every dollar you put in, you'd get about {multiple} dollars back in new revenue. "
        f"Does that kind of ROI make sense for your growth goals?\"",
    ]


def proposal_filename(client_name: str) -> str:
    return f"Proposal for {client_name}.pdf"


__all__ = [
    "ProposalDocument",
    "Segment",
    "StatCard",
    "build_email_summary",
    "build_proposal_document",
    "build_talking_points",
    "proposal_filename",
]
