# services/hazard_list.py
"""
Pure operations over the ordered hazard list.

The list is kept newest first. Every function returns a new list and leaves
its input untouched.
"""
from typing import Callable, Dict, Any, Iterable, List

from schemas import Hazard

def add(hazards: List[Hazard], hazard: Hazard) -> List[Hazard]:
    return [hazard, *hazards]

def update_by_id(
    hazards: List[Hazard],
    hazard_id: str,
    mutator: Callable[[Hazard], Dict[str, Any]]
) -> List[Hazard]:
    """Replace the matching record with a copy carrying the mutator's updates"""
    if not any(h.id == hazard_id for h in hazards):
        return hazards
    return [
        h.model_copy(update=mutator(h)) if h.id == hazard_id else h
        for h in hazards
    ]

def remove_by_id(hazards: List[Hazard], hazard_id: str) -> List[Hazard]:
    return [h for h in hazards if h.id != hazard_id]

def merge_by_id_prefer_existing(hazards: List[Hazard], incoming: Iterable[Hazard]) -> List[Hazard]:
    """Prepend incoming records whose id is not present yet; existing ones win"""
    existing_ids = {h.id for h in hazards}
    to_add = []
    for h in incoming:
        if h.id in existing_ids:
            continue
        existing_ids.add(h.id)
        to_add.append(h)
    return to_add + list(hazards)

def concat(incoming: Iterable[Hazard], hazards: List[Hazard]) -> List[Hazard]:
    """File import: incoming first, no dedup"""
    return list(incoming) + list(hazards)

# -------------------- MUTATORS --------------------
def vote(hazard: Hazard) -> Dict[str, Any]:
    return {"votes": hazard.votes + 1}

def toggle_resolved(hazard: Hazard) -> Dict[str, Any]:
    return {"resolved": not hazard.resolved}
