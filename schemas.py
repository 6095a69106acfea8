# schemas.py
# Defines the hazard record and request/response Pydantic models
from pydantic import BaseModel, Field
from typing import Optional, List, Literal

CATEGORIES = ("pothole", "flood", "accident", "debris", "other")
Category = Literal["pothole", "flood", "accident", "debris", "other"]

# -------------------- HAZARD --------------------
class Coordinate(BaseModel):
    lat: float = Field(..., allow_inf_nan=False)
    lng: float = Field(..., allow_inf_nan=False)

class Hazard(BaseModel):
    id: str = Field(..., min_length=1)
    lat: float = Field(..., allow_inf_nan=False)
    lng: float = Field(..., allow_inf_nan=False)
    title: str = "Untitled"
    description: str = ""
    category: Category = "pothole"
    votes: int = Field(0, ge=0)
    resolved: bool = False
    createdAt: str  # ISO-8601, set once at creation
    photo: Optional[str] = None  # base64 data URI

    class Config:
        from_attributes = True

# -------------------- SYNC --------------------
class SyncRequest(BaseModel):
    action: Literal["save"]
    hazard: Hazard

class HazardsOut(BaseModel):
    hazards: List[Hazard]

# -------------------- RESPONSES --------------------
class OkResponse(BaseModel):
    ok: bool = True

class ErrorResponse(BaseModel):
    error: str
