"""
QR payload and rendering tests
"""

import base64
import json
from datetime import date

import pytest

from metro_booking.exceptions import QRCodeEncodeError
from metro_booking.tickets.qr_service import QRCodeService, build_qr_payload, render_qr_data_url

BOOKING_FIELDS = {
    "booking_id": "1234567890",
    "from_station": "central",
    "to_station": "airport",
    "travel_date": date(2030, 1, 15),
    "travel_time": "09:00",
    "passengers": 2,
    "ticket_type": "regular",
}


def test_payload_contains_ticket_fields():
    payload = json.loads(build_qr_payload(**BOOKING_FIELDS))

    assert payload == {
        "bookingId": "1234567890",
        "from": "central",
        "to": "airport",
        "date": "2030-01-15",
        "time": "09:00",
        "passengers": 2,
        "type": "regular",
    }


def test_payload_is_canonical():
    first = build_qr_payload(**BOOKING_FIELDS)
    second = build_qr_payload(**dict(reversed(list(BOOKING_FIELDS.items()))))

    assert first == second
    assert " " not in first


def test_render_returns_png_data_url():
    data_url = render_qr_data_url(build_qr_payload(**BOOKING_FIELDS))

    prefix = "data:image/png;base64,"
    assert data_url.startswith(prefix)
    assert base64.b64decode(data_url[len(prefix):]).startswith(b"\x89PNG")


def test_encode_uses_injected_renderer():
    service = QRCodeService(renderer=lambda payload: f"image:{len(payload)}")

    payload, image = service.encode(**BOOKING_FIELDS)

    assert json.loads(payload)["bookingId"] == "1234567890"
    assert image == f"image:{len(payload)}"


def test_renderer_failure_raises_encode_error():
    def broken_renderer(payload):
        raise RuntimeError("encoder unavailable")

    with pytest.raises(QRCodeEncodeError) as exc_info:
        QRCodeService(renderer=broken_renderer).encode(**BOOKING_FIELDS)

    assert exc_info.value.code == "ENCODE_FAILURE"


def test_encode_or_none_degrades(caplog):
    def broken_renderer(payload):
        raise RuntimeError("encoder unavailable")

    result = QRCodeService(renderer=broken_renderer).encode_or_none(**BOOKING_FIELDS)

    assert result == (None, None)
    assert "without a QR code" in caplog.text
