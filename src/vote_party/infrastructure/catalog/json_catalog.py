"""Act catalog backed by a static JSON file of the form ``{"acts": [...]}``."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from pydantic import BaseModel

from vote_party.domain.catalog.entities import Act
from vote_party.domain.catalog.repository import ActCatalog
from vote_party.domain.catalog.value_objects import EventType
from vote_party.domain.shared.messages import ErrorMessages, LogTemplates

logger = logging.getLogger(__name__)


class _ActsFile(BaseModel):
    acts: list[Act]


class JsonActCatalog(ActCatalog):
    """Loads the acts file once, on first use, and serves it from memory."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        self._acts: list[Act] | None = None
        self._lock = asyncio.Lock()

    @property
    def path(self) -> Path:
        return self._path

    async def list_acts(self, event_type: EventType | str | None = None) -> list[Act]:
        acts = await self._load()
        if event_type is None or event_type == "":
            return list(acts)
        wanted = EventType.parse(event_type)
        return [act for act in acts if act.event_type is wanted]

    async def _load(self) -> list[Act]:
        if self._acts is not None:
            return self._acts
        async with self._lock:
            if self._acts is None:
                self._acts = await asyncio.to_thread(self._read_sync)
                logger.info(LogTemplates.CATALOG_LOADED, len(self._acts), self._path)
        return self._acts

    def _read_sync(self) -> list[Act]:
        try:
            raw = self._path.read_bytes()
        except OSError as exc:
            raise FileNotFoundError(ErrorMessages.ACTS_FILE_UNREADABLE.format(path=self._path)) from exc
        parsed = _ActsFile.model_validate_json(raw)
        return sorted(parsed.acts, key=lambda act: (act.event_type.value, act.running_order))
