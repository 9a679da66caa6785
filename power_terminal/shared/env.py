"""Environment utilities for resolving secret files."""

from __future__ import annotations

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

SECRET_FILE_SUFFIX = "_FILE"


def _failure_event(exc: Exception) -> str:
    if isinstance(exc, FileNotFoundError):
        return "env.secret_file.missing"
    if isinstance(exc, UnicodeDecodeError):
        return "env.secret_file.decode_failed"
    return "env.secret_file.load_failed"


def load_secret_file_variables() -> None:
    """
    Expose Docker-style ``KEY_FILE`` secrets as ``KEY``.

    The access token is usually mounted this way (``HA_TOKEN_FILE``). A
    variable that is already set wins over its file; unreadable files are
    logged and skipped.
    """

    for key, file_path in list(os.environ.items()):
        if not key.endswith(SECRET_FILE_SUFFIX) or not file_path:
            continue
        target_key = key[: -len(SECRET_FILE_SUFFIX)]
        if os.environ.get(target_key):
            continue

        try:
            secret = Path(file_path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning(
                _failure_event(exc),
                extra={"key": key, "path": file_path, "error": str(exc)},
            )
            continue

        os.environ[target_key] = secret.strip()
