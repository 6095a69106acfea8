# services/app_controller.py
import logging
from typing import Callable, List, Optional

import config
from schemas import Coordinate, Hazard
from services import hazard_list
from services.errors import HazardMapError, HazardStoreError
from services.form_controller import HazardFormController
from services.geolocation import BaseLocator, NullLocator
from services.hazard_store import HazardStore
from services.map_view import MapView
from services.remote_sync import RemoteSync
from services.transfer import export_to_file, import_all

logger = logging.getLogger(__name__)

class AppController:
    """
    Owns the hazard list. Every mutation goes through _commit, which
    rewrites the store and refreshes the map markers.

    Remote calls are synchronous with a short timeout and are never
    cancelled; a pull still in flight when the front end goes away simply
    completes against this controller.
    """

    def __init__(
        self,
        store: HazardStore,
        remote: Optional[RemoteSync] = None,
        locator: Optional[BaseLocator] = None,
        map_view: Optional[MapView] = None,
        form: Optional[HazardFormController] = None
    ):
        self.store = store
        self.remote = remote
        self.locator = locator or NullLocator()
        self.map_view = map_view or MapView()
        self.form = form or HazardFormController()
        self.hazards: List[Hazard] = []
        self.status = ""
        self.map_view.on_click(self._on_map_click)

    # ============ STARTUP ============

    def startup(self) -> None:
        self.hazards = self.store.load()
        self.map_view.set_hazards(self.hazards)
        logger.info(f"Loaded {len(self.hazards)} hazards from {self.store.path}")
        self.go_to_my_location()

    def go_to_my_location(self) -> None:
        position = self.locator.locate()
        if position is not None:
            self.map_view.recenter(position)

    # ============ MUTATIONS ============

    def _commit(self, hazards: List[Hazard]) -> bool:
        """Save first; the in-memory list only moves once the store has it"""
        try:
            self.store.save(hazards)
        except HazardStoreError as e:
            logger.error(str(e))
            self.status = "Could not save hazards"
            return False
        self.hazards = hazards
        self.map_view.set_hazards(hazards)
        return True

    def _on_map_click(self, position: Coordinate) -> None:
        self.form.select_location(position)

    def select_location(self, lat: float, lng: float) -> None:
        self.map_view.click(lat, lng)

    def submit(self) -> Optional[Hazard]:
        """Add the drafted hazard, save it, then try the server"""
        try:
            hazard = self.form.submit()
        except HazardMapError as e:
            self.status = str(e)
            return None

        if not self._commit(hazard_list.add(self.hazards, hazard)):
            return None
        self.status = "Saved locally"

        if self.remote is not None:
            result = self.remote.push(hazard)
            if result.ok:
                self.status += " • Synced to server"
        return hazard

    def vote(self, hazard_id: str) -> None:
        self._commit(hazard_list.update_by_id(self.hazards, hazard_id, hazard_list.vote))

    def toggle_resolved(self, hazard_id: str) -> None:
        self._commit(hazard_list.update_by_id(self.hazards, hazard_id, hazard_list.toggle_resolved))

    def remove(self, hazard_id: str, confirm: Callable[[str], bool]) -> bool:
        if not confirm("Delete hazard?"):
            return False
        return self._commit(hazard_list.remove_by_id(self.hazards, hazard_id))

    def view(self, hazard_id: str) -> None:
        for h in self.hazards:
            if h.id == hazard_id:
                self.map_view.recenter(Coordinate(lat=h.lat, lng=h.lng))
                return

    # ============ IMPORT / EXPORT ============

    def export_json(self, path: str = config.EXPORT_FILENAME) -> str:
        return export_to_file(self.hazards, path)

    def import_json(self, file_bytes: bytes) -> None:
        try:
            incoming = import_all(file_bytes)
        except HazardMapError as e:
            self.status = str(e)
            return

        if not self._commit(hazard_list.concat(incoming, self.hazards)):
            return
        self.status = "Imported hazards - merged with local list"

    # ============ SERVER SYNC ============

    def pull_from_server(self) -> None:
        if self.remote is None:
            self.status = "No server sync available"
            return

        result = self.remote.pull()
        if not result.ok:
            self.status = "No server sync available"
            return
        if result.value is None:
            self.status = "No server data"
            return

        remote = result.value
        merged = hazard_list.merge_by_id_prefer_existing(self.hazards, remote)
        if len(merged) != len(self.hazards) and not self._commit(merged):
            return
        self.status = f"Pulled from server: {len(remote)}"

def build_app_controller(locator: Optional[BaseLocator] = None) -> AppController:
    """Wire the controller from environment configuration"""
    remote = RemoteSync(config.SYNC_URL) if config.SYNC_URL else None
    controller = AppController(HazardStore(), remote=remote, locator=locator)
    controller.startup()
    return controller
