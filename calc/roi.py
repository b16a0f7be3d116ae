"""ROI projection built on top of the typed proposal models."""
from __future__ import annotations

from decimal import Decimal, InvalidOperation, Overflow, localcontext
from typing import Optional

from models import FormState, MetricsInput, Projection

HUNDRED = Decimal("100")
ZERO = Decimal("0")


def _finite(value: Decimal) -> Decimal:
    # Results past the Decimal exponent range count as zero, like unparseable input.
    return value if value.is_finite() else ZERO


def _ratio(numerator: Decimal, denominator: Decimal) -> Optional[Decimal]:
    if denominator > ZERO:
        ratio = numerator / denominator
        return ratio if ratio.is_finite() else None
    return None


def compute_projection(metrics: MetricsInput) -> Projection:
    """Derive the projection for *metrics*.

    Pure and total: the same input always yields an equal projection, and a
    zero service cost produces ``None`` ratios instead of a division error.
    Figures that overflow the Decimal range are treated as zero. Rounding is
    left to the formatting layer.
    """

    with localcontext() as ctx:
        ctx.traps[Overflow] = False
        ctx.traps[InvalidOperation] = False

        extra_leads = _finite(metrics.current_monthly_leads * (metrics.expected_lead_increase_percent / HUNDRED))
        extra_customers = _finite(extra_leads * (metrics.lead_to_customer_rate / HUNDRED))
        extra_revenue_month = _finite(extra_customers * metrics.average_sale_value)
        extra_revenue_total = _finite(extra_revenue_month * metrics.timeframe_months)
        service_cost_total = _finite(metrics.service_fee_monthly * metrics.timeframe_months)
        net_gain = _finite(extra_revenue_total - service_cost_total)

        roi_ratio = _ratio(net_gain, service_cost_total)
        roi_percent = roi_ratio * HUNDRED if roi_ratio is not None else None
        if roi_percent is not None and not roi_percent.is_finite():
            roi_percent = None
        value_to_fee_multiple = _ratio(extra_revenue_total, service_cost_total)

    return Projection(
        extra_leads_per_month=extra_leads,
        extra_customers_per_month=extra_customers,
        extra_revenue_per_month=extra_revenue_month,
        extra_revenue_timeframe=extra_revenue_total,
        service_cost_timeframe=service_cost_total,
        net_gain_timeframe=net_gain,
        roi_percent=roi_percent,
        value_to_fee_multiple=value_to_fee_multiple,
    )


def project_form(form: FormState) -> Projection:
    """Coerce the numeric fields of *form* and compute its projection."""
    return compute_projection(MetricsInput.from_form(form))


__all__ = ["compute_projection", "project_form"]
