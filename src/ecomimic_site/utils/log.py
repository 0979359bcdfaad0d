from __future__ import annotations

import traceback
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

DEFAULT_LOG_PATH = Path.home() / "EcoMimicSite.log"

_active_log_path: Path = DEFAULT_LOG_PATH


def set_log_path(path: Optional[Path | str]) -> Path:
    """Point subsequent log calls without an explicit path at ``path``."""
    global _active_log_path
    _active_log_path = Path(path).expanduser() if path else DEFAULT_LOG_PATH
    return _active_log_path


def redact(secret: Optional[str], keep: int = 2) -> str:
    """Mask a secret for log output, keeping only a short prefix."""
    text = str(secret or "")
    if not text:
        return "<unset>"
    if len(text) <= keep:
        return "*" * len(text)
    return text[:keep] + "*" * (len(text) - keep)


def _one_line(value: Any, max_len: int = 800) -> str:
    text = value if isinstance(value, str) else repr(value)
    text = text.translate({ord("\r"): "\\r", ord("\n"): "\\n"})
    return text if len(text) <= max_len else text[: max_len - 3] + "..."


def _append(text: str, log_path: Optional[Path]) -> None:
    # A broken log file must never take the page down
    try:
        with open(log_path or _active_log_path, "a", encoding="utf-8") as f:
            f.write(text)
    except OSError:
        pass


def log_event(context: str, message: str, log_path: Optional[Path] = None) -> None:
    """Append a single-line site event (startup, readiness, token requests)."""
    _append(f"{datetime.now().isoformat()}  |  {context}  |  {_one_line(message)}\n", log_path)


def log_exception(context: str, log_path: Optional[Path] = None) -> None:
    """Append the traceback of the exception currently being handled."""
    rule = "=" * 80
    _append(f"\n\n{rule}\n{datetime.now().isoformat()}  |  {context}\n{traceback.format_exc()}", log_path)
