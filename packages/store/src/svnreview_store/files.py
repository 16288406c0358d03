"""FileStore — writes each review record as a UTF-8 text file."""

from __future__ import annotations

import logging
from pathlib import Path

from svnreview_store.base import BaseStore

logger = logging.getLogger(__name__)


class FileStore(BaseStore):
    """Stores review records as flat files under ``output_dir``.

    The directory is created on first save. An existing file with the same
    name is overwritten.
    """

    def __init__(self, output_dir: str | Path = "."):
        self._output_dir = Path(output_dir)

    def save(self, file_name: str, text: str) -> Path:
        self._output_dir.mkdir(parents=True, exist_ok=True)
        path = self._output_dir / file_name
        path.write_text(text, encoding="utf-8")
        logger.debug("Wrote %d characters to %s", len(text), path)
        return path
