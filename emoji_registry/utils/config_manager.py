# config_manager.py - JSON config manager

import json
import os

from emoji_registry.utils.logger_utils import log

DEFAULTS = {
    "emoji_dir": "emoji",          # root scanned by the directory loader
    "base_url": "/emoji",          # prefix for emoji locators
    "extensions": [".png", ".gif", ".jpg", ".jpeg", ".svg", ".webp"],
    "default_tag": "Custom",       # tag for loose files in emoji_dir
    "reference_data": None,        # None = bundled emoji-test.txt
    "log_path": None,              # None = console only
    "log_level": "INFO",
    "log_color": True,
}


class Config:
    def __init__(self, path="emoji_registry.json", create=False):
        self.path = path
        self.data = json.loads(json.dumps(DEFAULTS))
        self._load(create)

    def _load(self, create):
        if os.path.exists(self.path):
            try:
                with open(self.path, "r", encoding="utf8") as f:
                    loaded = json.load(f)
            except (OSError, ValueError) as e:
                log.warning(f"config {self.path} unreadable, using defaults: {e}")
                return
            if not isinstance(loaded, dict):
                log.warning(f"config {self.path} is not a JSON object, using defaults")
                return
            self.data.update(loaded)
        elif create:
            self.save()

    def get(self, key, default=None):
        return self.data.get(key, default)

    def save(self):
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def show(self):
        for k, v in self.data.items():
            print(f"{k:15} = {v}")

    def set(self, key, val):
        if key not in DEFAULTS:
            raise KeyError(f"no such option: {key}")
        default = DEFAULTS[key]
        if isinstance(default, bool) and isinstance(val, str):
            val = val.lower() in ("1", "true", "yes", "on")
        elif isinstance(default, list) and isinstance(val, str):
            val = [v.strip() for v in val.split(",") if v.strip()]
        elif default is not None:
            val = type(default)(val)
        self.data[key] = val
        self.save()
