from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path

from feedview.data import LoadResult
from feedview.errors import LoadFailure
from feedview.loader.payload import parse_payload

logger = logging.getLogger(__name__)


class FileArticleLoader:
    """Load the article feed from a local JSON file.

    Args:
        path: Path to the feed JSON document.
    """

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    async def load(self) -> LoadResult:
        """Read and decode the feed.

        Raises:
            LoadFailure: If the file cannot be read or is not valid UTF-8 JSON.
        """
        logger.info(f"Reading articles from {self._path}")
        try:
            text = await asyncio.to_thread(self._path.read_text, encoding="utf-8")
            data = json.loads(text)
        except OSError as e:
            raise LoadFailure(f"Failed to read {self._path}: {e}") from e
        except ValueError as e:
            # JSONDecodeError and UnicodeDecodeError
            raise LoadFailure(f"Invalid JSON in {self._path}: {e}") from e

        return parse_payload(data)
