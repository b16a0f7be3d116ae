"""Pydantic models for the proposal form, its numeric inputs and projections."""
from __future__ import annotations

from decimal import Decimal
from typing import Any, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from validators import coerce_int, coerce_number

TEXT_FIELDS: Tuple[str, ...] = (
    "client_name",
    "client_industry",
    "client_website",
    "client_logo_url",
    "average_sale_value",
    "current_monthly_leads",
    "lead_to_customer_rate",
    "expected_lead_increase_percent",
    "service_fee_monthly",
    "currency_symbol",
    "timeframe_months",
    "package_name",
    "notes",
    "your_name",
    "your_agency_name",
    "your_email",
    "your_phone",
    "agency_logo_url",
)


class FormState(BaseModel):
    """Everything the user edits, kept as text exactly as typed."""

    client_name: str = ""
    client_industry: str = ""
    client_website: str = ""
    client_logo_url: str = ""

    average_sale_value: str = ""
    current_monthly_leads: str = ""
    lead_to_customer_rate: str = ""
    expected_lead_increase_percent: str = ""
    service_fee_monthly: str = ""

    currency_symbol: str = "$"
    timeframe_months: str = ""

    package_name: str = ""
    package_bullets: List[str] = Field(default_factory=list)
    notes: str = ""

    your_name: str = ""
    your_agency_name: str = ""
    your_email: str = ""
    your_phone: str = ""
    agency_logo_url: str = ""

    @field_validator(*TEXT_FIELDS, mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str:
        # Older snapshots stored numbers for the numeric fields.
        if value is None:
            return ""
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        return str(value)

    @field_validator("package_bullets", mode="before")
    @classmethod
    def _coerce_bullets(cls, value: Any) -> List[str]:
        if value is None:
            return []
        if isinstance(value, str) or not isinstance(value, (list, tuple)):
            raise ValueError("package_bullets must be a list of strings")
        return ["" if item is None else str(item) for item in value]


class MetricsInput(BaseModel):
    """Numeric subset of :class:`FormState` consumed by the projection engine."""

    model_config = ConfigDict(frozen=True)

    current_monthly_leads: Decimal = Decimal("0")
    expected_lead_increase_percent: Decimal = Decimal("0")
    lead_to_customer_rate: Decimal = Decimal("0")
    average_sale_value: Decimal = Decimal("0")
    service_fee_monthly: Decimal = Decimal("0")
    timeframe_months: int = 0

    @field_validator(
        "current_monthly_leads",
        "expected_lead_increase_percent",
        "lead_to_customer_rate",
        "average_sale_value",
        "service_fee_monthly",
        mode="before",
    )
    @classmethod
    def _coerce_decimal(cls, value: Any) -> Decimal:
        return coerce_number(value)

    @field_validator("timeframe_months", mode="before")
    @classmethod
    def _coerce_months(cls, value: Any) -> int:
        return coerce_int(value)

    @classmethod
    def from_form(cls, form: FormState) -> "MetricsInput":
        return cls(
            current_monthly_leads=form.current_monthly_leads,
            expected_lead_increase_percent=form.expected_lead_increase_percent,
            lead_to_customer_rate=form.lead_to_customer_rate,
            average_sale_value=form.average_sale_value,
            service_fee_monthly=form.service_fee_monthly,
            timeframe_months=form.timeframe_months,
        )


class Projection(BaseModel):
    """Derived financial figures for one :class:`MetricsInput`.

    ``roi_percent`` and ``value_to_fee_multiple`` are ``None`` when there is no
    service cost to divide by.
    """

    model_config = ConfigDict(frozen=True)

    extra_leads_per_month: Decimal
    extra_customers_per_month: Decimal
    extra_revenue_per_month: Decimal
    extra_revenue_timeframe: Decimal
    service_cost_timeframe: Decimal
    net_gain_timeframe: Decimal
    roi_percent: Optional[Decimal]
    value_to_fee_multiple: Optional[Decimal]


DEFAULT_FORM_STATE = FormState(
    client_name="Prospect Inc.",
    client_industry="eCommerce",
    average_sale_value="2500",
    current_monthly_leads="50",
    lead_to_customer_rate="10",
    expected_lead_increase_percent="30",
    service_fee_monthly="3000",
    currency_symbol="$",
    timeframe_months="12",
    package_name="Ad Creative Growth Package",
    package_bullets=[
        "Up to 30 new ad creatives per month",
        "Ongoing testing & optimization",
        "Creative strategy sessions",
    ],
    your_name="Your Name",
    your_agency_name="AdGenius Agency",
)


def default_form_state() -> FormState:
    """Return a fresh, independently mutable copy of the default form."""
    return DEFAULT_FORM_STATE.model_copy(deep=True)
