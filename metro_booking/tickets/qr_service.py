import base64
import json
import logging
from io import BytesIO
from typing import Any, Callable, Optional, Tuple

import qrcode
from qrcode import constants

from metro_booking.exceptions import QRCodeEncodeError

logger = logging.getLogger(__name__)


def build_qr_payload(
    booking_id: str,
    from_station: str,
    to_station: str,
    travel_date: Any,
    travel_time: str,
    passengers: int,
    ticket_type: str
) -> str:
    """Canonical JSON embedded in the ticket's QR code"""
    data = {
        "bookingId": booking_id,
        "from": from_station,
        "to": to_station,
        "date": travel_date.isoformat() if hasattr(travel_date, "isoformat") else str(travel_date),
        "time": travel_time,
        "passengers": passengers,
        "type": ticket_type,
    }
    return json.dumps(data, separators=(",", ":"))


def render_qr_data_url(payload: str) -> str:
    """PNG QR code for the payload as a data URL"""
    qr = qrcode.QRCode(
        version=1,
        error_correction=constants.ERROR_CORRECT_M,
        box_size=10,
        border=4,
    )
    qr.add_data(payload)
    qr.make(fit=True)

    image = qr.make_image(fill_color="black", back_color="white")
    buffer = BytesIO()
    image.save(buffer, format="PNG")
    encoded = base64.b64encode(buffer.getvalue()).decode("ascii")
    return f"data:image/png;base64,{encoded}"


class QRCodeService:
    """Builds ticket QR payloads and hands them to an image renderer"""

    def __init__(self, renderer: Optional[Callable[[str], str]] = None):
        self.renderer = renderer or render_qr_data_url

    def encode(self, **booking_fields) -> Tuple[str, str]:
        """Payload and rendered image, or QRCodeEncodeError"""
        try:
            payload = build_qr_payload(**booking_fields)
            image = self.renderer(payload)
        except Exception as e:
            raise QRCodeEncodeError(f"QR code generation failed: {e}") from e
        return payload, image

    def encode_or_none(self, **booking_fields) -> Tuple[Optional[str], Optional[str]]:
        """Same as encode, but a failure is logged and yields (None, None)"""
        try:
            return self.encode(**booking_fields)
        except QRCodeEncodeError as e:
            logger.error(
                "Booking %s will be stored without a QR code: %s",
                booking_fields.get("booking_id"), e.message
            )
            return None, None
