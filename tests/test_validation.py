"""
Booking request validation tests
"""

from datetime import date, timedelta
from decimal import Decimal

import pytest

from metro_booking.bookings.schemas import BookingCreateRequest
from metro_booking.bookings.validation import (
    BookingValidator, parse_passenger_count, parse_total_price, parse_travel_date
)
from metro_booking.exceptions import (
    MissingFieldError, SameStationError, PastDateError, UnknownStationError,
    UnknownTicketTypeError, InvalidPassengerCountError, InvalidTotalPriceError
)
from metro_booking.stations.service import ReferenceDataService


def make_request(payload, **overrides):
    body = dict(payload)
    body.update(overrides)
    return BookingCreateRequest(**body)


class TestRequiredFields:

    def test_valid_request_passes(self, db, booking_request):
        assert BookingValidator(db).validate(booking_request) is None

    @pytest.mark.parametrize("field", ["from", "to", "date", "time", "passengers", "ticketType"])
    def test_missing_field_is_named(self, db, booking_payload, field):
        body = dict(booking_payload)
        del body[field]

        with pytest.raises(MissingFieldError) as exc_info:
            BookingValidator(db).validate(BookingCreateRequest(**body))

        assert exc_info.value.field == field
        assert exc_info.value.code == "MISSING_FIELD"

    def test_blank_string_counts_as_missing(self, db, booking_payload):
        with pytest.raises(MissingFieldError) as exc_info:
            BookingValidator(db).validate(make_request(booking_payload, time="  "))

        assert exc_info.value.field == "time"

    def test_total_price_is_optional(self, db, booking_payload):
        request = make_request(booking_payload)

        assert request.total_price is None
        BookingValidator(db).validate(request)


class TestCheckOrder:
    """The first failing check wins"""

    @pytest.mark.parametrize("code", ["central", "park", "does-not-exist"])
    def test_same_station_for_any_code(self, db, booking_payload, code):
        with pytest.raises(SameStationError):
            BookingValidator(db).validate(make_request(booking_payload, **{"from": code, "to": code}))

    def test_missing_field_beats_same_station(self, db, booking_payload):
        body = dict(booking_payload, to="central")
        del body["ticketType"]

        with pytest.raises(MissingFieldError):
            BookingValidator(db).validate(BookingCreateRequest(**body))

    def test_same_station_beats_past_date(self, db, booking_payload, yesterday):
        request = make_request(booking_payload, to="central", date=yesterday.isoformat())

        with pytest.raises(SameStationError):
            BookingValidator(db).validate(request)

    def test_past_date_beats_unknown_station(self, db, booking_payload, yesterday):
        request = make_request(booking_payload, to="moon", date=yesterday.isoformat())

        with pytest.raises(PastDateError):
            BookingValidator(db).validate(request)

    def test_unknown_station_beats_unknown_ticket_type(self, db, booking_payload):
        request = make_request(booking_payload, to="moon", ticketType="vip")

        with pytest.raises(UnknownStationError):
            BookingValidator(db).validate(request)

    def test_unknown_ticket_type_beats_passenger_count(self, db, booking_payload):
        request = make_request(booking_payload, ticketType="vip", passengers=0)

        with pytest.raises(UnknownTicketTypeError):
            BookingValidator(db).validate(request)


class TestTravelDate:

    def test_yesterday_is_rejected(self, db, booking_payload, yesterday):
        with pytest.raises(PastDateError):
            BookingValidator(db).validate(make_request(booking_payload, date=yesterday.isoformat()))

    def test_today_is_accepted(self, db, booking_payload):
        BookingValidator(db).validate(make_request(booking_payload, date=date.today().isoformat()))

    def test_comparison_uses_supplied_today(self, db, booking_payload):
        request = make_request(booking_payload, date="2030-01-01")

        with pytest.raises(PastDateError):
            BookingValidator(db).validate(request, today=date(2030, 1, 2))
        BookingValidator(db).validate(request, today=date(2030, 1, 1))

    @pytest.mark.parametrize("value", ["not-a-date", "2030-02-30", "31/12/2030"])
    def test_unparseable_date_is_rejected(self, db, booking_payload, value):
        with pytest.raises(PastDateError):
            BookingValidator(db).validate(make_request(booking_payload, date=value))

    def test_parse_travel_date_accepts_datetime_strings(self):
        assert parse_travel_date("2030-05-06T10:30:00") == date(2030, 5, 6)
        assert parse_travel_date("2030-05-06") == date(2030, 5, 6)
        assert parse_travel_date(None) is None


class TestCatalogChecks:

    def test_unknown_from_station(self, db, booking_payload):
        with pytest.raises(UnknownStationError) as exc_info:
            BookingValidator(db).validate(make_request(booking_payload, **{"from": "moon"}))

        assert exc_info.value.field == "from"

    def test_unknown_to_station(self, db, booking_payload):
        with pytest.raises(UnknownStationError) as exc_info:
            BookingValidator(db).validate(make_request(booking_payload, to="moon"))

        assert exc_info.value.field == "to"

    def test_inactive_station_is_unknown(self, db, booking_request):
        ReferenceDataService.set_station_active(db, "airport", False)

        with pytest.raises(UnknownStationError):
            BookingValidator(db).validate(booking_request)

    def test_unknown_ticket_type(self, db, booking_payload):
        with pytest.raises(UnknownTicketTypeError):
            BookingValidator(db).validate(make_request(booking_payload, ticketType="vip"))

    def test_non_string_station_is_unknown(self, db, booking_payload):
        with pytest.raises(UnknownStationError) as exc_info:
            BookingValidator(db).validate(make_request(booking_payload, **{"from": 123}))

        assert exc_info.value.field == "from"

    def test_non_string_ticket_type_is_unknown(self, db, booking_payload):
        with pytest.raises(UnknownTicketTypeError):
            BookingValidator(db).validate(make_request(booking_payload, ticketType=5))

    def test_non_string_time_is_missing(self, db, booking_payload):
        with pytest.raises(MissingFieldError) as exc_info:
            BookingValidator(db).validate(make_request(booking_payload, time=900))

        assert exc_info.value.field == "time"


class TestPassengerCount:

    @pytest.mark.parametrize("value", [
        0, -3, 2.5, "two", True, "²", "10000000000000000000000", 2147483648
    ])
    def test_invalid_counts(self, db, booking_payload, value):
        with pytest.raises(InvalidPassengerCountError):
            BookingValidator(db).validate(make_request(booking_payload, passengers=value))

    def test_parse_passenger_count(self):
        assert parse_passenger_count(3) == 3
        assert parse_passenger_count("4") == 4
        assert parse_passenger_count(0) is None
        assert parse_passenger_count(1.0) is None
        assert parse_passenger_count(" 7 ") == 7
        assert parse_passenger_count("²") is None
        assert parse_passenger_count(2147483647) == 2147483647
        assert parse_passenger_count("10000000000000000000000") is None


class TestSuppliedTotalPrice:

    def test_negative_total_is_rejected(self, db, booking_payload):
        with pytest.raises(InvalidTotalPriceError):
            BookingValidator(db).validate(make_request(booking_payload, totalPrice=Decimal("-1.00")))

    def test_zero_total_is_allowed(self, db, booking_payload):
        BookingValidator(db).validate(make_request(booking_payload, totalPrice=Decimal("0")))

    @pytest.mark.parametrize("value", ["abc", "NaN", "Infinity", "100000000", True, [5]])
    def test_unusable_total_is_rejected(self, db, booking_payload, value):
        with pytest.raises(InvalidTotalPriceError):
            BookingValidator(db).validate(make_request(booking_payload, totalPrice=value))

    def test_parse_total_price(self):
        assert parse_total_price("4.20") == Decimal("4.20")
        assert parse_total_price(3) == Decimal("3")
        assert parse_total_price(" 1.5 ") == Decimal("1.5")
        assert parse_total_price("abc") is None
        assert parse_total_price(None) is None


def test_error_detail_shape(db, booking_payload):
    with pytest.raises(MissingFieldError) as exc_info:
        BookingValidator(db).validate(make_request(booking_payload, **{"from": None}))

    assert exc_info.value.to_detail() == {
        "error_code": "MISSING_FIELD",
        "error_message": "Missing required field: from",
        "field": "from",
    }
