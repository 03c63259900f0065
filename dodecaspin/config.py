# config.py
import copy
import json

from dodecaspin.logger import log

_DEFAULT_CONFIG = {
    "display": {
        "backend": "pygame",
        "width": 800,
        "height": 600,
        "fps": 60,
        "title": "Color Coded"
    },
    "general": {
        "sequence": ["dodecahedron"],
        "debug": False,
        "max_runtime_s": 0,
        "max_iterations": -1
    }
}

class Config:
    def __init__(self, filename="config.json"):
        self._config = copy.deepcopy(_DEFAULT_CONFIG)
        self.load(filename)

    def load(self, filename):
        # missing file means defaults
        try:
            with open(filename, "r") as f:
                loaded = json.load(f)
        except FileNotFoundError:
            return False
        except (OSError, ValueError) as e:
            log(f"Could not read config {filename}: {e}", "WARN")
            return False

        if not isinstance(loaded, dict):
            log(f"Ignoring config {filename}: top level is not an object", "WARN")
            return False

        for section, values in loaded.items():
            if section in self._config and isinstance(values, dict):
                self._config[section].update(values)
            else:
                self._config[section] = values
        return True

    def get(self, section, key, default=None):
        return self._config.get(section, {}).get(key, default)

    def set(self, section, key, value):
        self._config.setdefault(section, {})[key] = value

    def __getitem__(self, section):
        return self._config.get(section, {})

config = Config()
