"""Form edits expressed as actions and applied by a single reducer."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .proposal import TEXT_FIELDS, FormState, default_form_state


@dataclass(frozen=True)
class SetField:
    """Replace one text field of the form."""

    name: str
    value: str


@dataclass(frozen=True)
class SetBullet:
    index: int
    value: str


@dataclass(frozen=True)
class AddBullet:
    """Append an empty bullet to the package list."""


@dataclass(frozen=True)
class RemoveBullet:
    """Drop the bullet at *index*; later bullets move up by one."""

    index: int


@dataclass(frozen=True)
class ResetForm:
    """Replace the whole form with the defaults."""


FormAction = Union[SetField, SetBullet, AddBullet, RemoveBullet, ResetForm]


def _checked_index(form: FormState, index: int) -> int:
    if not 0 <= index < len(form.package_bullets):
        raise IndexError(f"bullet index {index} out of range")
    return index


def reduce_form(form: FormState, action: FormAction) -> FormState:
    """Return the form that results from applying *action* to *form*.

    The input form is never modified; every action yields a new object.
    """

    if isinstance(action, SetField):
        if action.name not in TEXT_FIELDS:
            raise KeyError(f"unknown form field: {action.name!r}")
        return form.model_copy(update={action.name: str(action.value)}, deep=True)
    if isinstance(action, SetBullet):
        bullets = list(form.package_bullets)
        bullets[_checked_index(form, action.index)] = str(action.value)
        return form.model_copy(update={"package_bullets": bullets}, deep=True)
    if isinstance(action, AddBullet):
        return form.model_copy(update={"package_bullets": [*form.package_bullets, ""]}, deep=True)
    if isinstance(action, RemoveBullet):
        bullets = list(form.package_bullets)
        del bullets[_checked_index(form, action.index)]
        return form.model_copy(update={"package_bullets": bullets}, deep=True)
    if isinstance(action, ResetForm):
        return default_form_state()
    raise TypeError(f"unsupported form action: {type(action).__name__}")


__all__ = [
    "AddBullet",
    "FormAction",
    "RemoveBullet",
    "ResetForm",
    "SetBullet",
    "SetField",
    "reduce_form",
]
