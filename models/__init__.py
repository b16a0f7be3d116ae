"""Model package exports."""

from .actions import (
    AddBullet,
    FormAction,
    RemoveBullet,
    ResetForm,
    SetBullet,
    SetField,
    reduce_form,
)
from .proposal import (
    DEFAULT_FORM_STATE,
    TEXT_FIELDS,
    FormState,
    MetricsInput,
    Projection,
    default_form_state,
)

__all__ = [
    "AddBullet",
    "FormAction",
    "RemoveBullet",
    "ResetForm",
    "SetBullet",
    "SetField",
    "reduce_form",
    "DEFAULT_FORM_STATE",
    "TEXT_FIELDS",
    "FormState",
    "MetricsInput",
    "Projection",
    "default_form_state",
]
