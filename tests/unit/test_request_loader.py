"""Unit tests for loading sample requests from .json and .pb3 files."""

import pytest

from booking_validator.models import (
    BookingAvailabilityRequest,
    BookingSubmitRequest,
    DeviceType,
    ErrorKind,
    LoadError,
)
from booking_validator.services.request_loader import dump_request, load_request


class TestLoadJson:
    """Tests for .json request files."""

    def test_loads_sample_availability_request(self, fake_reader) -> None:
        """The sample request file decodes."""
        request = load_request("/requests/availability.json", BookingAvailabilityRequest, reader=fake_reader)

        assert request.hotel_id == "97322"
        assert request.party.children == [1, 3]
        assert request.device_type == DeviceType.DESKTOP

    def test_round_trip_yields_equal_message(
        self,
        availability_request: BookingAvailabilityRequest,
        submit_request: BookingSubmitRequest,
    ) -> None:
        """A dumped request loads back unchanged."""
        for message in (availability_request, submit_request):
            reader = {"/tmp/request.json": dump_request(message).encode()}.__getitem__

            loaded = load_request("/tmp/request.json", type(message), reader=reader)

            assert loaded == message

    def test_camel_case_names_accepted(self) -> None:
        """JSON names in camelCase are accepted."""
        reader = {"r.json": b'{"hotelId": "97322", "startDate": "2018-06-03"}'}.__getitem__

        request = load_request("r.json", BookingAvailabilityRequest, reader=reader)

        assert request.hotel_id == "97322"
        assert request.start_date == "2018-06-03"

    def test_numeric_enum_values_accepted(self) -> None:
        """Enums may be given by number."""
        reader = {"r.json": b'{"device_type": 2}'}.__getitem__

        request = load_request("r.json", BookingAvailabilityRequest, reader=reader)

        assert request.device_type == DeviceType.MOBILE

    def test_malformed_json_raises(self) -> None:
        """Broken JSON is a load error."""
        reader = {"r.json": b'{"hotel_id": '}.__getitem__

        with pytest.raises(LoadError) as exc_info:
            load_request("r.json", BookingAvailabilityRequest, reader=reader)

        assert exc_info.value.kind == ErrorKind.LOAD_ERROR

    def test_unknown_field_raises(self) -> None:
        """Misspelled fields are a load error."""
        reader = {"r.json": b'{"hotel": "97322"}'}.__getitem__

        with pytest.raises(LoadError) as exc_info:
            load_request("r.json", BookingAvailabilityRequest, reader=reader)

        assert "hotel" in str(exc_info.value)


class TestLoadTextFormat:
    """Tests for .pb3 request files."""

    def test_pb3_matches_json(self, fake_reader) -> None:
        """Both sample formats decode to the same request."""
        from_json = load_request("/requests/availability.json", BookingAvailabilityRequest, reader=fake_reader)
        from_text = load_request("/requests/availability.pb3", BookingAvailabilityRequest, reader=fake_reader)

        assert from_text == from_json

    def test_nested_repeated_messages(self) -> None:
        text = b"""
            hotel_id: "97322"
            room_rate {
              code: "RT1-RP1"
              line_items { price { amount: 120.5 currency: "USD" } }
              line_items { price { amount: 18 currency: "USD" } type: TAX_VAT }
            }
        """
        reader = {"submit.pb3": text}.__getitem__

        request = load_request("submit.pb3", BookingSubmitRequest, reader=reader)

        assert request.room_rate.code == "RT1-RP1"
        assert [item.price.amount for item in request.room_rate.line_items] == [120.5, 18.0]
        assert request.room_rate.line_items[1].type.value == "TAX_VAT"

    def test_malformed_text_raises(self) -> None:
        """Broken text format is a load error."""
        reader = {"r.pb3": b"party { adults: 2"}.__getitem__

        with pytest.raises(LoadError) as exc_info:
            load_request("r.pb3", BookingAvailabilityRequest, reader=reader)

        assert "text format" in str(exc_info.value)


class TestLoadErrors:
    """Tests for file-level errors."""

    @pytest.mark.parametrize("path", ["request.txt", "request", "request.pb"])
    def test_unsupported_extension(self, fake_reader, path: str) -> None:
        """Other extensions fail before the file is read."""
        with pytest.raises(LoadError) as exc_info:
            load_request(path, BookingAvailabilityRequest, reader=fake_reader)

        assert str(exc_info.value) == (
            f'Could not load request: unexpected extension for file "{path}", expected .json or .pb3'
        )
        assert fake_reader.reads == []

    def test_unreadable_file(self, fake_reader) -> None:
        """A missing file is a load error."""
        with pytest.raises(LoadError) as exc_info:
            load_request("/requests/missing.json", BookingAvailabilityRequest, reader=fake_reader)

        assert "unable to read input file" in str(exc_info.value)
