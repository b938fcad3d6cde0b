from __future__ import annotations

import threading
from datetime import datetime
from pathlib import Path

from .app_paths import user_file
from .config import state

_log_lock = threading.Lock()


def log_path() -> Path:
    return user_file("debug.log")


def log(message: str) -> None:
    """Append a timestamped, thread-tagged message to debug.log (best effort)."""
    if state().debug_log is False:
        return
    try:
        line = f"{datetime.now().isoformat()} [{threading.current_thread().name}] {message}\n"
        path = log_path()
        with _log_lock:
            path.parent.mkdir(parents=True, exist_ok=True)
            with path.open("a", encoding="utf-8") as f:
                f.write(line)
    except OSError:
        pass
