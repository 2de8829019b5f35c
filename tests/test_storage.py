import json
import math

from budgetplan.api import _sanitize_value
from budgetplan.engine.storage import PlanStore, _sanitize_json_compat, load_seed, save_plans, save_seed


def test_sanitize_json_compat_replaces_special_numbers():
    payload = {
        "float": math.nan,
        "list": [1, float("inf"), -float("inf")],
        "nested": {"value": math.nan},
    }

    clean = _sanitize_json_compat(payload)

    assert clean == {
        "float": None,
        "list": [1, None, None],
        "nested": {"value": None},
    }


def test_save_plans_persists_sanitized_values(tmp_path):
    path = tmp_path / "plans.json"
    data = {"Plan": {"value": math.nan, "items": [1, float("inf")]}}

    save_plans(str(path), data)

    with path.open("r", encoding="utf-8") as handle:
        stored = json.load(handle)

    assert stored == {"Plan": {"value": None, "items": [1, None]}}


def test_sanitize_value_used_for_api_payloads():
    rows = {"value": float("nan"), "other": 5, "flag": True, "name": "x"}

    assert _sanitize_value(rows) == {"value": None, "other": 5, "flag": True, "name": "x"}


def test_seed_round_trip_creates_missing_folders(tmp_path):
    path = tmp_path / "nested" / "seed.json"
    seed = {"name": "Mine", "years": {"0": {"items": [{"name": "work", "amount": 100}]}}}

    save_seed(str(path), seed)

    assert load_seed(str(path)) == seed
    assert not (tmp_path / "nested" / "seed.json.tmp").exists()


def test_missing_or_broken_files_load_empty(tmp_path):
    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")

    assert load_seed(str(tmp_path / "absent.json")) == {}
    assert load_seed(str(broken)) == {}


def test_plan_store_persists_between_instances(tmp_path):
    path = str(tmp_path / "plans.json")
    store = PlanStore(path)

    store.save("b", {"name": "b"})
    store.save("a", {"name": "a"})
    store.delete("b")

    assert PlanStore(path).list_names() == ["a"]
    assert PlanStore(path).get("a") == {"name": "a"}
