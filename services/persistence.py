"""Load and save the proposal form as one JSON snapshot in the local store."""
from __future__ import annotations

import json
import logging
from typing import Optional, Protocol

from sqlalchemy.exc import SQLAlchemyError

from config import STORAGE_KEY
from models import FormState, default_form_state
from services.logo import clear_stale_logo_url

log = logging.getLogger(__name__)

# json/pydantic errors are ValueError subclasses.
STORAGE_ERRORS = (SQLAlchemyError, OSError, ValueError, TypeError)


class KeyValueStore(Protocol):
    def get_item(self, key: str) -> Optional[str]: ...

    def set_item(self, key: str, value: str) -> None: ...


def load_form_state(store: KeyValueStore, key: str = STORAGE_KEY) -> FormState:
    """Return the saved form merged over the defaults.

    Keys missing from the snapshot (fields added since it was written) come
    from the defaults; keys present in both take the saved value. If the
    snapshot can't be read the defaults are returned and the error is logged.
    """

    defaults = default_form_state()
    try:
        raw = store.get_item(key)
        if raw is None:
            return defaults
        snapshot = json.loads(raw)
        if not isinstance(snapshot, dict):
            raise ValueError(f"saved form is a {type(snapshot).__name__}, expected an object")
        snapshot = clear_stale_logo_url(snapshot)
        return FormState.model_validate({**defaults.model_dump(), **snapshot})
    except STORAGE_ERRORS:
        log.exception("Error reading saved form; starting from defaults")
        return defaults


def save_form_state(store: KeyValueStore, form: FormState, key: str = STORAGE_KEY) -> bool:
    """Overwrite the saved snapshot with *form*. Returns ``False`` if it could not be written."""

    try:
        store.set_item(key, json.dumps(form.model_dump(), ensure_ascii=False))
    except STORAGE_ERRORS:
        log.exception("Error writing form to local store")
        return False
    return True


__all__ = ["KeyValueStore", "load_form_state", "save_form_state"]
