# services/map_view.py
"""
Map state handed to the external tile library: center, zoom and one marker
per hazard. Drawing tiles is left to that library.
"""
from dataclasses import dataclass
from typing import Callable, Dict, Any, List, Optional

import config
from schemas import Coordinate, Hazard

@dataclass
class Marker:
    id: str
    lat: float
    lng: float
    popup: Dict[str, Any]

def popup_for(hazard: Hazard) -> Dict[str, Any]:
    return {
        "title": hazard.title,
        "category": hazard.category,
        "description": hazard.description,
        "photo": hazard.photo,
        "votes": hazard.votes,
        "resolve_label": "Unresolve" if hazard.resolved else "Resolve",
    }

class MapView:
    def __init__(self, center: Optional[Coordinate] = None, zoom: int = config.DEFAULT_ZOOM):
        lat, lng = config.DEFAULT_CENTER
        self.center = center or Coordinate(lat=lat, lng=lng)
        self.zoom = zoom
        self.markers: List[Marker] = []
        self._click_listeners: List[Callable[[Coordinate], None]] = []

    def set_hazards(self, hazards: List[Hazard]) -> None:
        self.markers = [Marker(h.id, h.lat, h.lng, popup_for(h)) for h in hazards]

    def on_click(self, callback: Callable[[Coordinate], None]) -> None:
        self._click_listeners.append(callback)

    def click(self, lat: float, lng: float) -> None:
        """Report a click on the map to whoever listens"""
        position = Coordinate(lat=lat, lng=lng)
        for callback in self._click_listeners:
            callback(position)

    def recenter(self, position: Coordinate) -> None:
        self.center = position

    def to_geojson(self) -> Dict[str, Any]:
        return {
            "type": "FeatureCollection",
            "features": [
                {
                    "type": "Feature",
                    "id": m.id,
                    # GeoJSON positions are [lng, lat]
                    "geometry": {"type": "Point", "coordinates": [m.lng, m.lat]},
                    "properties": m.popup,
                }
                for m in self.markers
            ],
        }
