from __future__ import annotations

import faulthandler
import sys
import traceback
from datetime import datetime
from pathlib import Path
from typing import Optional

from .app_paths import user_file, ensure_parent

_log_path: Optional[Path] = None
_orig_sys_hook = None
_orig_qt_handler = None
_faulthandler_file = None


def log_path() -> Path:
    return _log_path or user_file("crash.log")


def _write_line(text: str) -> None:
    try:
        path = ensure_parent(log_path())
        with path.open("a", encoding="utf-8") as f:
            f.write(text + "\n")
    except OSError:
        # Never raise from crash logging.
        pass


def _format_report(exc_type, exc_value, exc_tb) -> str:
    ts = datetime.now().isoformat(timespec="seconds")
    body = "".join(traceback.format_exception(exc_type, exc_value, exc_tb)).rstrip()
    return f"=== Unhandled exception @ {ts} ===\n{body}\n"


def _show_dialog(summary: str) -> None:
    from PyQt5.QtWidgets import QApplication, QMessageBox

    if QApplication.instance() is None:
        return
    QMessageBox.critical(
        None,
        "Unexpected Error",
        f"{summary}\n\nDetails were written to:\n{log_path()}",
    )


def _sys_excepthook(exc_type, exc_value, exc_tb) -> None:
    _write_line(_format_report(exc_type, exc_value, exc_tb))
    try:
        _show_dialog(f"{exc_type.__name__}: {exc_value}")
    except Exception as ex:
        _write_line(f"[crash_reporter] could not show dialog: {ex}")
    if callable(_orig_sys_hook):
        _orig_sys_hook(exc_type, exc_value, exc_tb)


def _qt_message_handler(mode, context, message) -> None:
    _write_line(f"[Qt/{int(mode)}] {message}")
    if callable(_orig_qt_handler):
        _orig_qt_handler(mode, context, message)


def install(path: Optional[Path] = None) -> None:
    """Capture unhandled exceptions, hard crashes and Qt warnings in crash.log."""
    global _log_path, _orig_sys_hook, _orig_qt_handler, _faulthandler_file

    if path is not None:
        _log_path = Path(path)
    target = ensure_parent(log_path())

    try:
        _faulthandler_file = target.open("a", encoding="utf-8")
        faulthandler.enable(_faulthandler_file)
    except OSError:
        _faulthandler_file = None

    _orig_sys_hook = sys.excepthook
    sys.excepthook = _sys_excepthook

    from PyQt5.QtCore import qInstallMessageHandler

    _orig_qt_handler = qInstallMessageHandler(_qt_message_handler)


def uninstall() -> None:
    global _orig_sys_hook, _orig_qt_handler, _faulthandler_file

    if _orig_sys_hook is not None:
        sys.excepthook = _orig_sys_hook
        _orig_sys_hook = None

    from PyQt5.QtCore import qInstallMessageHandler

    qInstallMessageHandler(_orig_qt_handler)
    _orig_qt_handler = None

    if _faulthandler_file is not None:
        faulthandler.disable()
        _faulthandler_file.close()
        _faulthandler_file = None
