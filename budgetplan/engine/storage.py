# engine/storage.py
from __future__ import annotations

import json
import logging
import math
import os
from typing import Any, Dict

logger = logging.getLogger(__name__)

DEFAULT_SEED_PATH = "user_data/plans.json"


def ensure_user_data_dir(path: str) -> None:
    folder = os.path.dirname(path)
    if folder and not os.path.exists(folder):
        os.makedirs(folder, exist_ok=True)


def _sanitize_json_compat(value: Any):
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return None
        return value
    if isinstance(value, dict):
        return {key: _sanitize_json_compat(val) for key, val in value.items()}
    if isinstance(value, (list, tuple)):
        return [_sanitize_json_compat(item) for item in value]
    return value


def _read_json(path: str):
    if not os.path.exists(path):
        return None
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw_text = f.read().strip()
            if not raw_text:
                return None
            return json.loads(raw_text)
    except (json.JSONDecodeError, OSError) as exc:
        logger.warning("Ignoring unreadable plan file %s: %s", path, exc)
        return None


def _write_json(path: str, data: Any) -> None:
    ensure_user_data_dir(path)
    tmp_path = f"{path}.tmp"
    clean = _sanitize_json_compat(data)
    with open(tmp_path, "w", encoding="utf-8") as f:
        json.dump(clean, f, allow_nan=False, indent=2)
    os.replace(tmp_path, path)


def load_seed(path: str) -> Dict[str, Any]:
    """Load a single seed payload; missing or broken files load as ``{}``."""
    data = _read_json(path)
    if not isinstance(data, dict):
        return {}
    return _sanitize_json_compat(data)


def save_seed(path: str, payload: Dict[str, Any]) -> None:
    _write_json(path, payload)


def load_plans(path: str) -> Dict[str, dict]:
    data = _read_json(path)
    if not isinstance(data, dict):
        return {}
    return _sanitize_json_compat(data)


def save_plans(path: str, plans: Dict[str, dict]) -> None:
    _write_json(path, plans)


class PlanStore:
    """Named seed payloads kept in one JSON file."""

    def __init__(self, storage_path: str = DEFAULT_SEED_PATH):
        self.storage_path = storage_path
        self.plans: Dict[str, dict] = load_plans(storage_path)

    def list_names(self):
        return sorted(self.plans.keys())

    def get(self, name: str) -> dict | None:
        return self.plans.get(name)

    def save(self, name: str, payload: dict) -> None:
        self.plans[name] = payload
        self._save()

    def delete(self, name: str) -> None:
        if name in self.plans:
            del self.plans[name]
            self._save()

    def _save(self) -> None:
        save_plans(self.storage_path, self.plans)
