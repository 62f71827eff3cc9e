# config_manager.py - JSON config manager

import json
import os

DEFAULTS = {
    "metric": "levenshtein",  # name looked up in core.registry
    "max_distance": 1,
    "show_tree": False,
    "log_path": "",           # empty -> logger_utils default
    "echo_logs": False,
}


class Config:
    def __init__(self, path="metric_bktree.json"):
        # path=None keeps the defaults in memory only
        self.path = path
        self.data = dict(DEFAULTS)
        self._load()

    def _load(self):
        if self.path is None:
            return
        if os.path.exists(self.path):
            try:
                with open(self.path, "r", encoding="utf8") as f:
                    loaded = json.load(f)
            except json.JSONDecodeError as e:
                raise ValueError(f"config file {self.path} is not valid JSON: {e}") from e
            if not isinstance(loaded, dict):
                raise ValueError(f"config file {self.path} must hold a JSON object")
            self.data.update(loaded)
        else:
            self.save()

    def save(self):
        if self.path is None:
            return
        folder = os.path.dirname(self.path)
        if folder:
            os.makedirs(folder, exist_ok=True)
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def get(self, key, default=None):
        return self.data.get(key, default)

    def __getitem__(self, key):
        return self.data[key]

    def show(self):
        for k, v in self.data.items():
            print(f"{k:15} = {v}")

    def set(self, key, val):
        if key not in DEFAULTS:
            raise KeyError(f"no such option: {key}")
        kind = type(DEFAULTS[key])
        if kind is bool and isinstance(val, str):
            val = val.strip().lower() in ("1", "true", "yes", "on")
        self.data[key] = kind(val)
        self.save()
