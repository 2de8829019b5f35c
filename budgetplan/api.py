"""REST backend for running budget plan projections."""

from __future__ import annotations

import logging
import math
import os
from typing import Any, Dict

from flask import Flask, jsonify, request

from budgetplan.data_model import MAX_HORIZON_YEARS, Plan, PlanError
from budgetplan.engine.seed import payload_to_config
from budgetplan.engine.storage import DEFAULT_SEED_PATH, PlanStore

logger = logging.getLogger(__name__)

app = Flask(__name__)

plan_store = PlanStore(os.environ.get("BUDGETPLAN_SEED_PATH", DEFAULT_SEED_PATH))


def _is_nan(value: Any) -> bool:
    try:
        return not math.isfinite(value)
    except (TypeError, ValueError):
        return False


def _sanitize_value(value: Any):
    if isinstance(value, dict):
        return {key: _sanitize_value(val) for key, val in value.items()}
    if isinstance(value, list):
        return [_sanitize_value(item) for item in value]
    if isinstance(value, bool):
        return value
    return None if _is_nan(value) else value


def _extract_payload_value(payload: dict, *keys: str, default=None):
    for key in keys:
        if key in payload and payload[key] is not None:
            return payload[key]
    return default


def _to_flag(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in {"true", "1", "yes"}:
        return True
    if text in {"false", "0", "no", ""}:
        return False
    raise ValueError(f"Not a boolean flag: {value!r}")


def _projection_payload(plan: Plan, include_accounts: bool) -> Dict[str, Any]:
    return _sanitize_value(
        {
            "current_year": plan.current_year,
            "years": {str(index): year for index, year in plan.to_export(include_accounts).items()},
            "extra_cash": {str(index): cash for index, cash in plan.extra_cash_by_year().items()},
        }
    )


def _run_payload(payload: dict):
    """Run a seed payload; returns ``(body, status)``."""
    try:
        target_year = int(_extract_payload_value(payload, "target_year", "targetYear", "horizon", default=0))
        max_horizon = int(_extract_payload_value(payload, "max_horizon", "maxHorizon", default=MAX_HORIZON_YEARS))
        include_accounts = _to_flag(_extract_payload_value(payload, "include_accounts", "includeAccounts", default=False))
    except (TypeError, ValueError):
        return {"error": "Invalid projection parameters."}, 400
    # clients may tighten the cap but never lift it
    if not 0 < max_horizon <= MAX_HORIZON_YEARS:
        return {"error": f"max_horizon must be between 1 and {MAX_HORIZON_YEARS}."}, 400

    try:
        cfg = payload_to_config(payload)
        plan = cfg.to_plan().run_years(target_year, max_horizon=max_horizon)
    except PlanError as exc:
        logger.info("Rejected projection for %s: %s", payload.get("name", "<unnamed>"), exc)
        return {"error": str(exc)}, 400

    logger.info("Projected %s to year %d", cfg.name, plan.current_year)
    body = _projection_payload(plan, include_accounts)
    body["name"] = cfg.name
    body["start_year"] = cfg.start_year
    return body, 200


@app.after_request
def apply_cors_headers(response):
    response.headers["Access-Control-Allow-Origin"] = "*"
    response.headers["Access-Control-Allow-Methods"] = "GET,POST,DELETE,OPTIONS"
    response.headers["Access-Control-Allow-Headers"] = "Content-Type"
    return response


@app.get("/api/health")
def healthcheck():
    return jsonify({"status": "ok"})


@app.post("/api/projection")
def run_projection():
    payload = request.get_json(silent=True) or {}
    body, status = _run_payload(payload)
    return jsonify(body), status


@app.get("/api/plans")
def list_saved_plans():
    return jsonify({"plans": plan_store.list_names()})


@app.get("/api/plans/<plan_name>")
def get_plan(plan_name: str):
    plan = plan_store.get(plan_name)
    if not plan:
        return jsonify({"error": "Plan not found."}), 404
    return jsonify(plan)


@app.post("/api/plans")
def save_plan():
    payload = request.get_json(silent=True) or {}
    name = str(payload.get("name", "")).strip()
    if not name:
        return jsonify({"error": "Plan name is required."}), 400
    try:
        payload_to_config(payload)
    except PlanError as exc:
        return jsonify({"error": str(exc)}), 400
    plan_store.save(name, payload)
    return jsonify({
        "message": "Plan saved.",
        "plans": plan_store.list_names(),
        "plan": payload,
    })


@app.delete("/api/plans/<plan_name>")
def delete_plan(plan_name: str):
    plan_store.delete(plan_name)
    return jsonify({"message": "Plan deleted.", "plans": plan_store.list_names()})


@app.post("/api/plans/<plan_name>/run")
def run_saved_plan(plan_name: str):
    seed = plan_store.get(plan_name)
    if not seed:
        return jsonify({"error": "Plan not found."}), 404
    overrides = request.get_json(silent=True) or {}
    body, status = _run_payload({**seed, **overrides})
    return jsonify(body), status


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    app.run(debug=False, port=8000)
