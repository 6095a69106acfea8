# services/geolocation.py
import logging
from abc import ABC, abstractmethod
from typing import Optional

from schemas import Coordinate

logger = logging.getLogger(__name__)

class BaseLocator(ABC):
    """Position source supplied by the host platform"""

    @abstractmethod
    def get_position(self) -> Optional[Coordinate]:
        pass

    def locate(self) -> Optional[Coordinate]:
        try:
            return self.get_position()
        except Exception as e:
            # Same as the user denying the permission prompt
            logger.warning(f"Geolocation failed: {e}")
            return None

class StaticLocator(BaseLocator):
    def __init__(self, lat: float, lng: float):
        self.position = Coordinate(lat=lat, lng=lng)

    def get_position(self) -> Optional[Coordinate]:
        return self.position

class NullLocator(BaseLocator):
    """No geolocation available"""

    def get_position(self) -> Optional[Coordinate]:
        return None
