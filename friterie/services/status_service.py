"""Open/closed status stored in a single JSON file."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path

from pydantic import ValidationError as PydanticValidationError

from friterie.schemas.status import RestaurantStatus

logger = logging.getLogger(__name__)

DEFAULT_STATUS: RestaurantStatus = RestaurantStatus(is_open=True, message=None)


class StatusStore:
    """Read and overwrite the restaurant status file. No history is kept."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def get(self) -> RestaurantStatus:
        """Return the stored status, or the default when the file is missing or unreadable."""
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return DEFAULT_STATUS.model_copy()
        try:
            return RestaurantStatus.model_validate(json.loads(raw))
        except (json.JSONDecodeError, PydanticValidationError):
            logger.warning("[STATUS] %s is not a valid status file; using default", self.path)
            return DEFAULT_STATUS.model_copy()

    def set(self, status: RestaurantStatus) -> RestaurantStatus:
        """Replace the whole file; written to a temp file first so readers never see half of it."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = status.model_dump_json(by_alias=True, indent=2)
        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=".status-", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(payload)
            os.replace(tmp_name, self.path)
        except OSError:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        logger.info("[STATUS] restaurant is now %s", "open" if status.is_open else "closed")
        return status
