"""The single owner of the editable form, its projection and side effects."""
from __future__ import annotations

import logging
import time
from typing import Callable, Optional

from calc import project_form
from config import LOGO_DEBOUNCE_SECONDS, LOGO_DEV_API_KEY
from models import FormAction, FormState, Projection, ResetForm, SetField, reduce_form
from services.debounce import Debouncer
from services.logo import LogoLookup, build_logo_url, resolve_logo_url
from services.persistence import KeyValueStore, load_form_state, save_form_state

log = logging.getLogger(__name__)


class ProposalSession:
    """Holds the form for one user session and keeps it in sync with the store.

    All edits go through :meth:`dispatch`, which saves the whole form after
    every change. The projection is only refreshed by :meth:`calculate`
    (called once on start-up), and a reset returns it to ``None``.
    """

    def __init__(
        self,
        store: KeyValueStore,
        *,
        api_key: str = LOGO_DEV_API_KEY,
        quiet_period: float = LOGO_DEBOUNCE_SECONDS,
        clock: Callable[[], float] = time.monotonic,
        logo_lookup: LogoLookup = build_logo_url,
    ) -> None:
        self.store = store
        self.api_key = api_key
        self.logo_lookup = logo_lookup
        self.logo_debouncer = Debouncer(quiet_period, clock=clock)
        self.form: FormState = load_form_state(store)
        self.projection: Optional[Projection] = None
        self.calculate()

    def dispatch(self, action: FormAction) -> FormState:
        previous = self.form
        self.form = reduce_form(previous, action)
        if isinstance(action, ResetForm):
            self.projection = None
        save_form_state(self.store, self.form)
        if self.form.client_website != previous.client_website:
            self.logo_debouncer.schedule(self.resolve_logo)
        return self.form

    def calculate(self) -> Projection:
        self.projection = project_form(self.form)
        return self.projection

    def resolve_logo(self) -> Optional[str]:
        """Fill the client logo from the website if the policy allows it."""

        logo_url = resolve_logo_url(
            self.form.client_website,
            self.form.client_logo_url,
            api_key=self.api_key,
            lookup=self.logo_lookup,
        )
        if logo_url is not None:
            log.info("Client logo resolved from website %s", self.form.client_website)
            self.dispatch(SetField("client_logo_url", logo_url))
        return logo_url

    def poll(self) -> bool:
        """Run a due logo evaluation. Returns ``True`` if the form may have changed."""
        return self.logo_debouncer.poll()


__all__ = ["ProposalSession"]
