# services/form_controller.py
import base64
import io
import logging
import mimetypes
import uuid
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Optional

from PIL import Image, UnidentifiedImageError

from schemas import CATEGORIES, Coordinate, Hazard
from services.errors import LocationNotSelected

logger = logging.getLogger(__name__)

def new_hazard_id() -> str:
    return uuid.uuid4().hex

def utc_timestamp() -> str:
    """ISO-8601 UTC with milliseconds and a Z suffix"""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")

def image_data_uri(file_bytes: bytes, filename: Optional[str] = None) -> str:
    """Embed an image file as a base64 data URI, as-is (no resize)"""
    mime = None
    try:
        with Image.open(io.BytesIO(file_bytes)) as img:
            mime = Image.MIME.get(img.format)
    except (UnidentifiedImageError, OSError):
        logger.debug("Pillow could not identify attached photo")

    if not mime and filename:
        mime = mimetypes.guess_type(filename)[0]
    encoded = base64.b64encode(file_bytes).decode("ascii")
    return f"data:{mime or 'application/octet-stream'};base64,{encoded}"

@dataclass
class HazardDraft:
    title: str = ""
    description: str = ""
    category: str = "pothole"
    photo: Optional[str] = None

class HazardFormController:
    """Pending map location plus the draft fields of the report form"""

    def __init__(self):
        self.pending_location: Optional[Coordinate] = None
        self.draft = HazardDraft()

    def select_location(self, position: Coordinate) -> None:
        self.pending_location = position
        self.draft = HazardDraft()

    def cancel(self) -> None:
        self.pending_location = None

    def update_draft(self, **fields) -> None:
        category = fields.get("category")
        if category is not None and category not in CATEGORIES:
            raise ValueError(f"Unknown category: {category}")
        self.draft = replace(self.draft, **fields)

    def attach_photo(self, file_bytes: bytes, filename: Optional[str] = None) -> None:
        if not file_bytes:
            return
        self.draft.photo = image_data_uri(file_bytes, filename)

    def selected_label(self) -> str:
        if self.pending_location is None:
            return "none"
        return f"{self.pending_location.lat:.4f}, {self.pending_location.lng:.4f}"

    def submit(self) -> Hazard:
        """Build the new hazard and clear the pending location"""
        if self.pending_location is None:
            raise LocationNotSelected()

        hazard = Hazard(
            id=new_hazard_id(),
            lat=self.pending_location.lat,
            lng=self.pending_location.lng,
            title=self.draft.title or "Untitled",
            description=self.draft.description or "",
            category=self.draft.category,
            votes=0,
            resolved=False,
            createdAt=utc_timestamp(),
            photo=self.draft.photo,
        )
        self.pending_location = None
        return hazard
