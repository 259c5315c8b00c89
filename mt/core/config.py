import json
from mt.common.logger import log
from mt.common.setup import PATHS
from mt.util import now_iso


#region === Helpers and Paths ===

SETTINGS_PATH = PATHS.data / "settings.json"

# Default values for every setting, along with the type each one must have.
_SETTINGS_DEFAULTS = {
    "default_total_seconds": 10,
    "tick_ms": 100,
    "add_seconds": 30,
    "show_lobby": True,
    "confirm_reset": True,
    "theme": "Slate Dark",
}
# bool is checked exactly, since isinstance(True, int) would let a flag slip into a number field.
def _valid_type(value, default):
    if isinstance(default, bool):
        return isinstance(value, bool)
    if isinstance(default, int):
        return isinstance(value, int) and not isinstance(value, bool)
    return isinstance(value, type(default))

# Helper to return a truly fresh, default settings dict.
def build_default_settings():
    return dict(_SETTINGS_DEFAULTS)

#endregion === Helpers and Paths ===

#region === Saving and Loading Settings ===

# Loads settings from SETTINGS_PATH, filling in defaults for anything missing or of the wrong type.
def load_settings():
    try:
        if not SETTINGS_PATH.exists():
            log.info("No existing settings.json found, loading fresh settings dict.")
            return build_default_settings()

        with open(SETTINGS_PATH, "r", encoding="utf-8") as f:
            raw = json.load(f)
        if not isinstance(raw, dict):
            raise TypeError(f"settings.json holds a {type(raw).__name__}, expected an object")

        settings = build_default_settings()
        defaulted_values = set()
        for key, default in _SETTINGS_DEFAULTS.items():
            if key in raw and _valid_type(raw[key], default):
                settings[key] = raw[key]
            else:
                defaulted_values.add(key)

        # Numbers that only make sense as positive values
        for key in ("default_total_seconds", "tick_ms", "add_seconds"):
            if settings[key] <= 0:
                defaulted_values.add(key)
                settings[key] = _SETTINGS_DEFAULTS[key]

        if defaulted_values:
            log.warning(f"Successfully loaded settings from '{SETTINGS_PATH}', but with missing values that were defaulted: {', '.join(sorted(defaulted_values))}")
        else:
            log.info(f"Successfully loaded settings from '{SETTINGS_PATH}'.")
        return settings
    # Fall back to fresh settings in case of error, but warn in log
    except (json.JSONDecodeError, OSError, TypeError):
        log.warning("Ran into an error while trying to load settings.json, falling back to default settings.",exc_info=True)
        return build_default_settings()
# Write the given settings to disk under SETTINGS_PATH
def save_settings(settings):
    payload = dict(settings)
    payload["saved_at"] = now_iso()
    SETTINGS_PATH.parent.mkdir(parents=True, exist_ok=True)
    with open(SETTINGS_PATH, "w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2)
    log.info(f"Successfully saved settings to '{SETTINGS_PATH}'")

#endregion === Saving and Loading Settings ===
