import json

from sqlalchemy.exc import OperationalError

from config import STORAGE_KEY
from models import DEFAULT_FORM_STATE, SetField, default_form_state, reduce_form
from services.database import LocalStore
from services.persistence import load_form_state, save_form_state


class BrokenStore:
    def get_item(self, key):
        raise OSError("disk unavailable")

    def set_item(self, key, value):
        raise OperationalError("INSERT", {}, Exception("database is locked"))


def test_local_store_round_trip(tmp_path):
    store = LocalStore(f"sqlite:///{tmp_path / 'store.db'}")
    form = reduce_form(default_form_state(), SetField("client_name", "Acme"))

    assert save_form_state(store, form) is True
    assert load_form_state(store) == form

    store.remove_item(STORAGE_KEY)
    assert store.get_item(STORAGE_KEY) is None
    assert load_form_state(store) == DEFAULT_FORM_STATE


def test_local_store_overwrites_value(tmp_path):
    store = LocalStore(f"sqlite:///{tmp_path / 'store.db'}")
    store.set_item("k", "one")
    store.set_item("k", "two")

    assert store.get_item("k") == "two"


def test_missing_snapshot_loads_defaults(memory_store):
    assert load_form_state(memory_store) == DEFAULT_FORM_STATE


def test_missing_keys_are_backfilled_from_defaults(memory_store):
    memory_store.items[STORAGE_KEY] = json.dumps({"client_name": "Acme", "service_fee_monthly": "4500"})

    form = load_form_state(memory_store)

    assert form.client_name == "Acme"
    assert form.service_fee_monthly == "4500"
    assert form.package_name == DEFAULT_FORM_STATE.package_name
    assert form.package_bullets == DEFAULT_FORM_STATE.package_bullets


def test_saved_values_win_over_defaults(memory_store):
    memory_store.items[STORAGE_KEY] = json.dumps({"client_name": "", "package_bullets": []})

    form = load_form_state(memory_store)

    assert form.client_name == ""
    assert form.package_bullets == []


def test_numeric_snapshot_values_become_text(memory_store):
    memory_store.items[STORAGE_KEY] = json.dumps({"average_sale_value": 2500, "timeframe_months": 12.0})

    form = load_form_state(memory_store)

    assert form.average_sale_value == "2500"
    assert form.timeframe_months == "12"


def test_stale_logo_url_is_cleared_on_load(memory_store):
    memory_store.items[STORAGE_KEY] = json.dumps({"client_logo_url": "https://img.logo.dev/?token=abc&size=200"})

    assert load_form_state(memory_store).client_logo_url == ""


def test_unreadable_snapshot_falls_back_to_defaults(memory_store):
    for raw in ("{not json", "[1, 2]", json.dumps({"package_bullets": "one"})):
        memory_store.items[STORAGE_KEY] = raw
        assert load_form_state(memory_store) == DEFAULT_FORM_STATE


def test_store_errors_are_contained():
    store = BrokenStore()

    assert load_form_state(store) == DEFAULT_FORM_STATE
    assert save_form_state(store, default_form_state()) is False


def test_save_writes_full_snapshot(memory_store):
    assert save_form_state(memory_store, default_form_state()) is True

    snapshot = json.loads(memory_store.items[STORAGE_KEY])
    assert snapshot["client_name"] == "Prospect Inc."
    assert len(snapshot["package_bullets"]) == 3
