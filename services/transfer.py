# services/transfer.py
"""JSON export and import of the whole hazard list. No versioning."""
import json
import logging
from typing import List

from pydantic import ValidationError

from schemas import Hazard
from services.errors import InvalidHazardFile
from services.hazard_store import encode_hazards

logger = logging.getLogger(__name__)

def export_all(hazards: List[Hazard]) -> bytes:
    data = [h.model_dump(mode="json") for h in hazards]
    return json.dumps(data, indent=2).encode("utf-8")

def export_to_file(hazards: List[Hazard], path: str) -> str:
    with open(path, "wb") as f:
        f.write(export_all(hazards))
    logger.info(f"Exported {len(hazards)} hazards to {path}")
    return path

def import_all(file_bytes: bytes) -> List[Hazard]:
    try:
        data = json.loads(file_bytes)
    except ValueError:
        raise InvalidHazardFile("Invalid JSON")

    if not isinstance(data, list):
        raise InvalidHazardFile("Invalid file")

    try:
        hazards = [Hazard.model_validate(item) for item in data]
    except ValidationError as e:
        logger.warning(f"Import rejected: {e.error_count()} invalid fields")
        raise InvalidHazardFile("Invalid file")

    try:
        encode_hazards(hazards)
    except ValueError as e:
        logger.warning(f"Import rejected: {e}")
        raise InvalidHazardFile("Invalid file")
    return hazards
