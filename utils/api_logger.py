from __future__ import annotations

import json
import logging
import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional


logger = logging.getLogger(__name__)


def _ensure_parent_dir(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)


def log_call(
    *,
    caller: str,
    provider: str,
    operation: str,
    duration_ms: Optional[int] = None,
    status: str = "ok",
    http_status: Optional[int] = None,
    error: Optional[str] = None,
    extras: Optional[Dict[str, Any]] = None,
) -> None:
    """Append a single JSON line describing an outbound API call if tracing is enabled.

    Controlled by API_TRACE / API_LOG_PATH in config/settings.py
    """
    from config.settings import get_settings
    settings = get_settings()
    if not settings.api_trace:
        return

    log_path = Path(settings.api_log_path)

    payload: Dict[str, Any] = {
        "ts": datetime.now(timezone.utc).isoformat(),
        "caller": caller,
        "provider": provider,
        "operation": operation,
        "duration_ms": duration_ms,
        "status": status,
        "http_status": http_status,
        "error": error,
    }
    run_id = os.getenv("RUN_ID")
    if run_id:
        payload["run_id"] = run_id

    if extras:
        payload["extras"] = extras

    try:
        _ensure_parent_dir(log_path)
        with log_path.open("a", encoding="utf-8") as f:
            f.write(json.dumps(payload, ensure_ascii=False) + "\n")
    except OSError as exc:
        # Tracing must never break a lookup
        logger.warning("Could not write API trace to %s: %s", log_path, exc)
