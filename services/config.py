from dataclasses import dataclass, asdict, fields
from typing import Optional
from pathlib import Path
import json

from .app_paths import user_file, ensure_parent

DEFAULT_BACKGROUND = "#ffffff"


# Persisted app state (window geometry and startup defaults only; the
# color picked in the editor is never written back)
@dataclass
class AppState:
    background_color: Optional[str] = DEFAULT_BACKGROUND
    window_width: Optional[int] = None
    window_height: Optional[int] = None
    debug_log: Optional[bool] = True


_state = AppState()

# Expected JSON type per field; None is always allowed
_FIELD_TYPES = {
    "background_color": str,
    "window_width": int,
    "window_height": int,
    "debug_log": bool,
}


def _valid(name: str, value) -> bool:
    if value is None:
        return True
    expected = _FIELD_TYPES[name]
    if expected is int:
        return isinstance(value, int) and not isinstance(value, bool) and value > 0
    return isinstance(value, expected)


def _state_path() -> Path:
    return user_file("user_settings.json")


def load_state() -> AppState:
    global _state
    p = _state_path()
    try:
        if p.exists():
            data = json.loads(p.read_text(encoding="utf-8"))
            # Ignore unknown keys to remain forward/backward compatible
            allowed = {f.name for f in fields(AppState)}
            filtered = {k: v for k, v in (data or {}).items() if k in allowed}
            # Wrong-typed values fall back to the field default
            filtered = {k: v for k, v in filtered.items() if _valid(k, v)}
            _state = AppState(**filtered)
        else:
            _state = AppState()
    except (OSError, ValueError, TypeError, AttributeError):
        # Corrupt or incompatible; start fresh
        _state = AppState()
    return _state


def save_state() -> None:
    p = ensure_parent(_state_path())
    try:
        p.write_text(json.dumps(asdict(_state), ensure_ascii=False, indent=2), encoding="utf-8")
    except OSError:
        pass


def state() -> AppState:
    return _state


# Load on import
load_state()
