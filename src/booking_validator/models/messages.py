"""Request and response messages of the Hotel Booking partner API.

The models follow proto3 field semantics so that a payload decoded from the
wire looks the same whether or not the partner omitted default values:

- scalar fields default to their zero value ("", 0, 0.0, False)
- enum fields default to the member numbered 0
- repeated fields default to an empty list
- sub-messages default to None (unset)

JSON is accepted with either the proto field names (``hotel_id``) or their
lowerCamel JSON names (``hotelId``); unknown fields are rejected.
"""

import typing
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from .enums import (
    AvailabilityErrorType,
    CancellationSummary,
    CardType,
    DeviceType,
    GuaranteeType,
    LineItemType,
    ProtoEnum,
    RoomAmenityType,
    SubmitErrorType,
    SubmitStatus,
)


def _enum_type(annotation: Any) -> type[ProtoEnum] | None:
    """Return the ProtoEnum class behind a field annotation, if any."""
    if isinstance(annotation, type) and issubclass(annotation, ProtoEnum):
        return annotation
    for arg in typing.get_args(annotation):
        found = _enum_type(arg)
        if found is not None:
            return found
    return None


class ProtoMessage(BaseModel):
    """Base class for all partner API messages."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )

    @model_validator(mode="before")
    @classmethod
    def _apply_wire_defaults(cls, data: Any) -> Any:
        """Drop explicit nulls and decode numeric enum values."""
        if not isinstance(data, dict):
            return data

        # null on the wire means "use the default"
        converted = {key: value for key, value in data.items() if value is not None}

        for name, field in cls.model_fields.items():
            enum_type = _enum_type(field.annotation)
            if enum_type is None:
                continue
            for key in {name, field.alias or name}:
                if key not in converted:
                    continue
                value = converted[key]
                if isinstance(value, list):
                    converted[key] = [enum_type.coerce(item) for item in value]
                else:
                    converted[key] = enum_type.coerce(value)
        return converted

    def to_wire_dict(self) -> dict[str, Any]:
        """Dump to a JSON-ready dict keyed by field name, omitting defaults."""
        return self.model_dump(mode="json", exclude_defaults=True)

    def to_wire_json(self) -> str:
        """Serialize to the JSON wire format, omitting defaults."""
        return self.model_dump_json(exclude_defaults=True)


# === Shared building blocks ===


class DisplayString(ProtoMessage):
    """Localized text."""

    text: str = ""
    language: str = ""


class Address(ProtoMessage):
    """Postal address."""

    address1: str = ""
    address2: str = ""
    address3: str = ""
    city: str = ""
    province: str = ""
    postal_code: str = ""
    country: str = Field(default="", description="ISO 3166-1 alpha-2 code")


class BasicAmenities(ProtoMessage):
    free_breakfast: bool = False
    free_wifi: bool = False
    free_parking: bool = False


class Capacity(ProtoMessage):
    adults: int = 0
    children: int = 0


class Occupancy(ProtoMessage):
    """Party composition: adult count and the age of every child."""

    adults: int = 0
    children: list[int] = Field(default_factory=list)


class Price(ProtoMessage):
    amount: float = 0.0
    currency: str = ""


class Photo(ProtoMessage):
    url: str = ""
    description: Optional[DisplayString] = None


class Tracking(ProtoMessage):
    campaign_id: str = ""
    pos_url: str = ""


class Customer(ProtoMessage):
    """Person making the booking."""

    first_name: str = ""
    last_name: str = ""
    phone_number: str = ""
    email: str = ""
    country: str = ""
    join_loyalty_program: bool = False
    loyalty_member_id: str = ""


class Traveler(ProtoMessage):
    """Lead guest staying at the hotel."""

    first_name: str = ""
    last_name: str = ""
    occupancy: Optional[Occupancy] = None


# === Hotel, room and rate descriptions ===


class Geolocation(ProtoMessage):
    latitude: float = 0.0
    longitude: float = 0.0


class HotelPolicies(ProtoMessage):
    check_in_time: str = ""
    check_out_time: str = ""
    max_child_age: int = 0
    unstructured_policies: list[DisplayString] = Field(default_factory=list)


class HotelDetails(ProtoMessage):
    """Static information about the hotel being searched."""

    name: str = ""
    address: Optional[Address] = None
    geolocation: Optional[Geolocation] = None
    phone_number: str = ""
    policies: Optional[HotelPolicies] = None
    photos: list[Photo] = Field(default_factory=list)
    email: str = ""
    homepage_url: str = ""


class CardOption(ProtoMessage):
    card_type: CardType = CardType.AX
    cvc_required: bool = False


class PartnerPolicies(ProtoMessage):
    card_options: list[CardOption] = Field(default_factory=list)
    unstructured_policies: list[DisplayString] = Field(default_factory=list)


class CancellationPolicy(ProtoMessage):
    summary: CancellationSummary = CancellationSummary.UNKNOWN_CANCELLATION_POLICY
    cancellation_deadline: str = ""
    unstructured_policy: Optional[DisplayString] = None


class RateRestriction(ProtoMessage):
    requires_loyalty_membership: bool = False


class RatePlan(ProtoMessage):
    """Conditions under which a room can be sold."""

    code: str = ""
    name: Optional[DisplayString] = None
    description: Optional[DisplayString] = None
    basic_amenities: Optional[BasicAmenities] = None
    guarantee_type: GuaranteeType = GuaranteeType.UNKNOWN_GUARANTEE_TYPE
    cancellation_policy: Optional[CancellationPolicy] = None
    unstructured_policies: list[DisplayString] = Field(default_factory=list)
    rate_restrictions: list[RateRestriction] = Field(default_factory=list)


class BedTypes(ProtoMessage):
    total_beds: int = 0
    king_beds: int = 0
    queen_beds: int = 0
    double_beds: int = 0
    single_or_twin_beds: int = 0
    murphy_beds: int = 0
    sofa_beds: int = 0
    bunk_beds: int = 0
    other_beds: int = 0


class RoomType(ProtoMessage):
    """Physical room category offered by the hotel."""

    code: str = ""
    name: Optional[DisplayString] = None
    description: Optional[DisplayString] = None
    basic_amenities: Optional[BasicAmenities] = None
    amenities: list[RoomAmenityType] = Field(default_factory=list)
    room_area_sq_meters: float = 0.0
    room_area_sq_feet: float = 0.0
    photos: list[Photo] = Field(default_factory=list)
    capacity: Optional[Capacity] = None
    bed_types: Optional[BedTypes] = None
    unstructured_policies: list[DisplayString] = Field(default_factory=list)


class LineItem(ProtoMessage):
    """One component (base rate, tax or fee) of a room rate's price."""

    price: Optional[Price] = None
    type: LineItemType = LineItemType.BASE_RATE
    paid_at_checkout: bool = False
    description: Optional[DisplayString] = None


class CancellationRule(ProtoMessage):
    deadline: str = ""
    penalty: Optional[Price] = None


class RoomRate(ProtoMessage):
    """A bookable combination of a room type and a rate plan."""

    code: str = ""
    room_type_code: str = ""
    rate_plan_code: str = ""
    maximum_allowed_occupancy: Optional[Capacity] = None
    total_price_at_booking: Optional[Price] = None
    total_price_at_checkout: Optional[Price] = None
    line_items: list[LineItem] = Field(default_factory=list)
    cancellation_rules: list[CancellationRule] = Field(default_factory=list)
    unstructured_policy: Optional[DisplayString] = None
    partner_data: list[str] = Field(default_factory=list)
    room_count: int = 0


# === Error payloads ===


class AvailabilityError(ProtoMessage):
    type: AvailabilityErrorType = AvailabilityErrorType.UNKNOWN_ERROR
    message: str = ""


class SubmitError(ProtoMessage):
    type: SubmitErrorType = SubmitErrorType.UNKNOWN_ERROR
    message: str = ""


# === Availability ===


class BookingAvailabilityRequest(ProtoMessage):
    """Search criteria sent to the partner's availability endpoint."""

    api_version: int = 0
    transaction_id: str = ""
    tracking: Optional[Tracking] = None
    hotel_id: str = ""
    start_date: str = Field(default="", description="Check-in date (YYYY-MM-DD)")
    end_date: str = Field(default="", description="Check-out date (YYYY-MM-DD)")
    party: Optional[Occupancy] = None
    language: str = ""
    currency: str = ""
    user_country: str = ""
    device_type: DeviceType = DeviceType.UNKNOWN_DEVICE_TYPE


class BookingAvailabilityResponse(ProtoMessage):
    """Rooms, rate plans and rates returned for an availability search.

    hotel_id, start_date, end_date and party echo the request.
    """

    api_version: int = 0
    transaction_id: str = ""
    hotel_id: str = ""
    start_date: str = ""
    end_date: str = ""
    party: Optional[Occupancy] = None
    room_types: list[RoomType] = Field(default_factory=list)
    rate_plans: list[RatePlan] = Field(default_factory=list)
    room_rates: list[RoomRate] = Field(default_factory=list)
    hotel_details: Optional[HotelDetails] = None
    policies: Optional[PartnerPolicies] = None
    error: Optional[AvailabilityError] = None


# === Submit ===


class PaymentCardParameters(ProtoMessage):
    card_type: CardType = CardType.AX
    card_number: str = ""
    cardholder_name: str = ""
    expiration_month: str = ""
    expiration_year: str = ""
    cvc: str = ""
    cavv: str = ""
    eci: str = ""


class Payment(ProtoMessage):
    type: GuaranteeType = GuaranteeType.UNKNOWN_GUARANTEE_TYPE
    payment_card_parameters: Optional[PaymentCardParameters] = None
    payment_token: str = ""
    billing_address: Optional[Address] = None


class BookingSubmitRequest(ProtoMessage):
    """Booking details sent to the partner's submit endpoint."""

    api_version: int = 0
    transaction_id: str = ""
    tracking: Optional[Tracking] = None
    hotel_id: str = ""
    start_date: str = ""
    end_date: str = ""
    ip_address: str = ""
    language: str = ""
    customer: Optional[Customer] = None
    traveler: Optional[Traveler] = None
    room_rate: Optional[RoomRate] = None
    payment: Optional[Payment] = None


class Locator(ProtoMessage):
    id: str = ""
    pin: str = ""


class Reservation(ProtoMessage):
    """Confirmed reservation; hotel_id through room_rate echo the request."""

    locator: Optional[Locator] = None
    hotel_locators: list[Locator] = Field(default_factory=list)
    hotel_id: str = ""
    start_date: str = ""
    end_date: str = ""
    customer: Optional[Customer] = None
    traveler: Optional[Traveler] = None
    room_rate: Optional[RoomRate] = None


class BookingSubmitResponse(ProtoMessage):
    """Reservation confirmation returned for a booking submission."""

    api_version: int = 0
    transaction_id: str = ""
    status: SubmitStatus = SubmitStatus.SUCCESS
    reservation: Optional[Reservation] = None
    error: Optional[SubmitError] = None
