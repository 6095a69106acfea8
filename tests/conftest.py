import os
import sys
import tempfile
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

# Must be set before database.py builds its engine
_db_dir = tempfile.mkdtemp(prefix="hazards-test-")
os.environ["DATABASE_URL"] = f"sqlite:///{_db_dir}/hazards.db"

from schemas import Hazard
from services.hazard_store import HazardStore


def make_hazard(hazard_id="h1", **overrides):
    fields = {
        "id": hazard_id,
        "lat": 12.97,
        "lng": 77.59,
        "title": f"Hazard {hazard_id}",
        "description": "",
        "category": "pothole",
        "votes": 0,
        "resolved": False,
        "createdAt": "2026-10-19T08:00:00.000Z",
        "photo": None,
    }
    fields.update(overrides)
    return Hazard(**fields)


@pytest.fixture()
def store(tmp_path):
    return HazardStore(storage_dir=str(tmp_path / "storage"))
