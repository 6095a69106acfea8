# services/hazard_store.py
import os
import logging
import tempfile
from typing import List, Optional

from pydantic import TypeAdapter, ValidationError

import config
from schemas import Hazard
from services.errors import HazardStoreError

logger = logging.getLogger(__name__)

HazardList = TypeAdapter(List[Hazard])

def encode_hazards(hazards: List[Hazard]) -> bytes:
    """JSON bytes for the list; raises ValueError on unencodable text such as lone surrogates"""
    return HazardList.dump_json(hazards)

class HazardStore:
    """One durable slot holding the whole hazard list as JSON"""

    def __init__(self, storage_dir: Optional[str] = None, key: str = config.STORAGE_KEY):
        self.storage_dir = storage_dir or config.STORAGE_DIR
        self.key = key

    @property
    def path(self) -> str:
        return os.path.join(self.storage_dir, f"{self.key}.json")

    def load(self) -> List[Hazard]:
        """Read the slot; absent or unreadable data yields an empty list"""
        try:
            with open(self.path, "rb") as f:
                raw = f.read()
        except FileNotFoundError:
            return []
        except OSError as e:
            logger.warning(f"Could not read hazard store {self.path}: {e}")
            return []

        try:
            return HazardList.validate_json(raw)
        except (ValidationError, ValueError) as e:
            logger.warning(f"Discarding unreadable hazard store {self.path}: {e}")
            return []

    def save(self, hazards: List[Hazard]) -> None:
        """Replace the slot with the full list, or leave it as it was"""
        try:
            data = encode_hazards(hazards)
        except ValueError as e:
            raise HazardStoreError(f"Could not save hazards: {e}") from e

        tmp_path = None
        try:
            os.makedirs(self.storage_dir, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "wb", dir=self.storage_dir, prefix=f".{self.key}.", delete=False
            ) as f:
                tmp_path = f.name
                f.write(data)
            os.replace(tmp_path, self.path)
        except OSError as e:
            if tmp_path and os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise HazardStoreError(f"Could not save hazards: {e}") from e
        logger.debug(f"Saved {len(hazards)} hazards to {self.path}")
