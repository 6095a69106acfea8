# services/remote_sync.py
"""
Best-effort client for the hazard sync service.

Calls never raise: every outcome comes back as a SyncResult and the caller
decides what to do with a failure (normally nothing). No retries.
"""
import logging
from dataclasses import dataclass
from typing import Any, List, Optional

import httpx
from pydantic import TypeAdapter

import config
from schemas import Hazard
from services.hazard_store import encode_hazards

logger = logging.getLogger(__name__)

HazardList = TypeAdapter(List[Hazard])

@dataclass(frozen=True)
class SyncResult:
    ok: bool
    value: Any = None
    error: Optional[str] = None

    @classmethod
    def success(cls, value: Any = None) -> "SyncResult":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: str) -> "SyncResult":
        return cls(ok=False, error=error)

class RemoteSync:
    def __init__(
        self,
        base_url: str,
        timeout: float = config.SYNC_TIMEOUT,
        client: Optional[httpx.Client] = None
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._client = client or httpx.Client(timeout=httpx.Timeout(timeout))

    @property
    def url(self) -> str:
        return f"{self.base_url}/hazards"

    def push(self, hazard: Hazard) -> SyncResult:
        """Upsert one hazard on the server"""
        try:
            body = {"action": "save", "hazard": hazard.model_dump(mode="json")}
            r = self._client.post(self.url, json=body)
            r.raise_for_status()
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
            logger.warning(f"Push of hazard {hazard.id} failed: {e}")
            return SyncResult.failure(str(e))
        return SyncResult.success()

    def pull(self) -> SyncResult:
        """Fetch recent hazards; value is the list, or None if the server sent none"""
        try:
            r = self._client.get(self.url)
            r.raise_for_status()
            payload = r.json()
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
            logger.warning(f"Pull from {self.url} failed: {e}")
            return SyncResult.failure(str(e))

        raw = payload.get("hazards") if isinstance(payload, dict) else None
        if raw is None:
            return SyncResult.success(None)

        try:
            hazards = HazardList.validate_python(raw)
            encode_hazards(hazards)
        except ValueError as e:
            logger.warning(f"Server sent malformed hazards: {e}")
            return SyncResult.failure("malformed hazards")
        return SyncResult.success(hazards)

    def close(self) -> None:
        self._client.close()
