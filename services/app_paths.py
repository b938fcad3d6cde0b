import os
import sys
from pathlib import Path

HOME_ENV = "COLORIZED_HOME"


def app_root() -> Path:
    """Return the directory that holds writable app data.

    ``COLORIZED_HOME`` wins when set. A PyInstaller build uses the folder
    next to the executable; a source checkout uses the repo root.
    """
    override = os.environ.get(HOME_ENV)
    if override:
        return Path(override).expanduser()
    if getattr(sys, "frozen", False):
        exe_dir = Path(sys.executable).resolve().parent
        if exe_dir.exists():
            return exe_dir
    return Path(__file__).resolve().parents[1]


def user_file(name: str) -> Path:
    return app_root() / name


def ensure_parent(path: Path) -> Path:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError:
        pass
    return path
