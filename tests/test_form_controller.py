import base64
import io
import re

import pytest
from PIL import Image

from schemas import Coordinate
from services.errors import LocationNotSelected
from services.form_controller import HazardFormController, image_data_uri


def _png_bytes():
    buf = io.BytesIO()
    Image.new("RGB", (4, 4), color=(200, 30, 30)).save(buf, format="PNG")
    return buf.getvalue()


def test_submit_without_location_raises():
    form = HazardFormController()
    form.update_draft(title="Pothole")
    with pytest.raises(LocationNotSelected) as exc:
        form.submit()
    assert str(exc.value) == "Click map to pick location first"


def test_select_location_resets_draft():
    form = HazardFormController()
    form.update_draft(title="Old", category="flood")
    form.select_location(Coordinate(lat=1.0, lng=2.0))
    assert form.draft.title == ""
    assert form.draft.category == "pothole"
    assert form.selected_label() == "1.0000, 2.0000"


def test_submit_applies_defaults_and_clears_location():
    form = HazardFormController()
    form.select_location(Coordinate(lat=12.97, lng=77.59))
    hazard = form.submit()

    assert hazard.title == "Untitled"
    assert hazard.description == ""
    assert hazard.category == "pothole"
    assert hazard.votes == 0
    assert hazard.resolved is False
    assert hazard.photo is None
    assert re.match(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z$", hazard.createdAt)
    assert form.pending_location is None
    assert form.selected_label() == "none"


def test_submit_generates_unique_ids():
    form = HazardFormController()
    ids = set()
    for _ in range(20):
        form.select_location(Coordinate(lat=0.0, lng=0.0))
        ids.add(form.submit().id)
    assert len(ids) == 20


def test_unknown_category_rejected():
    form = HazardFormController()
    with pytest.raises(ValueError):
        form.update_draft(category="volcano")


def test_cancel_clears_location():
    form = HazardFormController()
    form.select_location(Coordinate(lat=1.0, lng=1.0))
    form.cancel()
    with pytest.raises(LocationNotSelected):
        form.submit()


def test_attach_photo_embeds_png():
    data = _png_bytes()
    form = HazardFormController()
    form.select_location(Coordinate(lat=1.0, lng=1.0))
    form.attach_photo(data, "road.png")

    prefix = "data:image/png;base64,"
    assert form.draft.photo.startswith(prefix)
    assert base64.b64decode(form.draft.photo[len(prefix):]) == data
    assert form.submit().photo == form.draft.photo


def test_unidentified_image_falls_back_to_filename():
    uri = image_data_uri(b"<svg xmlns='http://www.w3.org/2000/svg'/>", "sign.svg")
    assert uri.startswith("data:image/svg+xml;base64,")


def test_unidentified_image_without_name():
    assert image_data_uri(b"garbage").startswith("data:application/octet-stream;base64,")
