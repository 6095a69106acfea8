# config.py - client-side settings, read from the environment
import os

# Local persistence slot, the stand-in for browser localStorage
STORAGE_DIR = os.getenv(
    "HAZARDS_STORAGE_DIR",
    os.path.join(os.path.expanduser("~"), ".crowd_hazards")
)
STORAGE_KEY = "crowd_hazards_v1"

# Remote sync is disabled unless a base URL is given, e.g. http://localhost:8000
SYNC_URL = os.getenv("HAZARDS_SYNC_URL")
SYNC_TIMEOUT = float(os.getenv("HAZARDS_SYNC_TIMEOUT", "3"))

# India center
DEFAULT_CENTER = (20.5937, 78.9629)
DEFAULT_ZOOM = 13

EXPORT_FILENAME = "hazards.json"
