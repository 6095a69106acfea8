# routers/hazards.py
from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import ValidationError
from sqlalchemy.orm import Session
from database import get_db
from model import Hazard
from schemas import Hazard as HazardSchema, SyncRequest, HazardsOut, OkResponse
from typing import List
import logging

router = APIRouter(prefix="/hazards", tags=["Hazards"])

RECENT_LIMIT = 500  # GET never returns more than this

logger = logging.getLogger(__name__)

def find_recent_hazards(db: Session, limit: int = RECENT_LIMIT) -> List[Hazard]:
    """Most recently created hazards first"""
    return db.query(Hazard).order_by(Hazard.createdAt.desc()).limit(limit).all()

def upsert_hazard(db: Session, hazard: HazardSchema) -> Hazard:
    """Insert the hazard, or overwrite every field of the stored one with the same id"""
    record = db.merge(Hazard(**hazard.model_dump()))
    db.commit()
    db.refresh(record)
    return record

@router.get("", response_model=HazardsOut)
def list_hazards(db: Session = Depends(get_db)):
    """Fetch recent hazards for clients pulling from the server"""
    try:
        records = find_recent_hazards(db, RECENT_LIMIT)
        return {"hazards": [HazardSchema.model_validate(r) for r in records]}
    except Exception as e:
        logger.exception(f"Error fetching hazards: {str(e)}")
        raise HTTPException(status_code=500, detail="Error fetching hazards")

@router.post("", response_model=OkResponse)
async def save_hazard(request: Request, db: Session = Depends(get_db)):
    """Upsert one hazard by id. Body: {"action": "save", "hazard": {...}}"""
    try:
        payload = SyncRequest.model_validate(await request.json())
    except (ValueError, ValidationError) as e:
        logger.warning(f"Rejected sync request: {e}")
        raise HTTPException(status_code=400, detail="bad request")

    try:
        upsert_hazard(db, payload.hazard)
    except Exception as e:
        db.rollback()
        logger.exception(f"Error saving hazard {payload.hazard.id}: {str(e)}")
        raise HTTPException(status_code=500, detail="Error saving hazard")

    logger.info(f"Hazard {payload.hazard.id} saved ({payload.hazard.category})")
    return {"ok": True}
