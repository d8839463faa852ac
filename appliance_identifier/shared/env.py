"""Resolve Docker-style ``*_FILE`` secret variables into the environment."""

from __future__ import annotations

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

_FILE_SUFFIX = "_FILE"


def load_secret_file_variables() -> None:
    """
    Expose the contents of every ``KEY_FILE`` file as ``KEY``.

    An explicitly set ``KEY`` always wins. Unreadable files are logged
    and skipped so that a missing secret never prevents start-up; the
    settings layer reports the missing value instead.
    """
    for key, file_path in list(os.environ.items()):
        if not key.endswith(_FILE_SUFFIX) or not file_path:
            continue
        target_key = key[: -len(_FILE_SUFFIX)]
        if os.environ.get(target_key):
            continue
        try:
            os.environ[target_key] = Path(file_path).read_text(encoding="utf-8").strip()
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning(
                "env.secret_file.unreadable",
                extra={"key": key, "path": file_path, "error": str(exc)},
            )


load_secret_file_variables()
