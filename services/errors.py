# services/errors.py

class HazardMapError(Exception):
    """Base class for recoverable client-side errors; message is user-facing"""

class LocationNotSelected(HazardMapError):
    def __init__(self, message: str = "Click map to pick location first"):
        super().__init__(message)

class InvalidHazardFile(HazardMapError):
    """Import payload is not JSON, or not a list of hazards"""

class HazardStoreError(HazardMapError):
    """The hazard list could not be written; the previous slot is untouched"""
