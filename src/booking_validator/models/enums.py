"""Enumeration types for the Hotel Booking partner API messages.

Members are declared in wire-number order: the first member of every enum
is number 0, which is the proto3 default for an unset field.
"""

from enum import Enum
from typing import Any


class ProtoEnum(str, Enum):
    """Enum serialized by member name and decodable from its wire number."""

    @property
    def number(self) -> int:
        """Wire number of this member (its position in declaration order)."""
        return list(type(self)).index(self)

    @classmethod
    def coerce(cls, value: Any) -> Any:
        """Map a wire number to its member; leave anything else for validation."""
        if isinstance(value, int) and not isinstance(value, bool):
            members = list(cls)
            if 0 <= value < len(members):
                return members[value]
        return value


class DeviceType(ProtoEnum):
    """Device the end user searched from."""

    UNKNOWN_DEVICE_TYPE = "UNKNOWN_DEVICE_TYPE"
    DESKTOP = "DESKTOP"
    MOBILE = "MOBILE"
    TABLET = "TABLET"


class SubmitStatus(ProtoEnum):
    """Outcome of a booking submission."""

    SUCCESS = "SUCCESS"
    FAILURE = "FAILURE"


class AvailabilityErrorType(ProtoEnum):
    """Error categories a partner may report for an availability search."""

    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    API_VERSION_UNSUPPORTED = "API_VERSION_UNSUPPORTED"
    DATE_SELECTION_INVALID = "DATE_SELECTION_INVALID"
    HOTEL_NOT_FOUND = "HOTEL_NOT_FOUND"
    NETWORK_ERROR = "NETWORK_ERROR"
    RECOVERABLE_ERROR = "RECOVERABLE_ERROR"
    REQUEST_DATA_INVALID = "REQUEST_DATA_INVALID"
    REQUEST_INCOMPLETE = "REQUEST_INCOMPLETE"
    REQUEST_NOT_PARSABLE = "REQUEST_NOT_PARSABLE"
    SUPPLIER_ERROR = "SUPPLIER_ERROR"


class SubmitErrorType(ProtoEnum):
    """Error categories a partner may report for a booking submission."""

    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    API_VERSION_UNSUPPORTED = "API_VERSION_UNSUPPORTED"
    CHECKIN_TOO_CLOSE = "CHECKIN_TOO_CLOSE"
    CUSTOMER_NAME_INVALID = "CUSTOMER_NAME_INVALID"
    DATE_SELECTION_INVALID = "DATE_SELECTION_INVALID"
    DUPLICATE_BOOKING = "DUPLICATE_BOOKING"
    HOTEL_NOT_FOUND = "HOTEL_NOT_FOUND"
    NETWORK_ERROR = "NETWORK_ERROR"
    PAYMENT_BILLING_ADDRESS_INVALID = "PAYMENT_BILLING_ADDRESS_INVALID"
    PAYMENT_CARD_CARDHOLDER_NAME_INVALID = "PAYMENT_CARD_CARDHOLDER_NAME_INVALID"
    PAYMENT_CARD_CVC_INVALID = "PAYMENT_CARD_CVC_INVALID"
    PAYMENT_CARD_EXPIRATION_INVALID = "PAYMENT_CARD_EXPIRATION_INVALID"
    PAYMENT_CARD_NUMBER_INVALID = "PAYMENT_CARD_NUMBER_INVALID"
    PAYMENT_CARD_TYPE_NOT_SUPPORTED = "PAYMENT_CARD_TYPE_NOT_SUPPORTED"
    PAYMENT_DECLINED = "PAYMENT_DECLINED"
    PAYMENT_INVALID = "PAYMENT_INVALID"
    PAYMENT_INSUFFICIENT = "PAYMENT_INSUFFICIENT"
    PAYMENT_PROCESSOR_ERROR = "PAYMENT_PROCESSOR_ERROR"
    PAYMENT_TYPE_NOT_ACCEPTED = "PAYMENT_TYPE_NOT_ACCEPTED"
    RATE_PLAN_UNAVAILABLE = "RATE_PLAN_UNAVAILABLE"
    RECOVERABLE_ERROR = "RECOVERABLE_ERROR"
    REQUEST_DATA_INVALID = "REQUEST_DATA_INVALID"
    REQUEST_INCOMPLETE = "REQUEST_INCOMPLETE"
    REQUEST_NOT_PARSABLE = "REQUEST_NOT_PARSABLE"
    ROOM_RATE_MISMATCH = "ROOM_RATE_MISMATCH"
    ROOM_RATE_PRICE_MISMATCH = "ROOM_RATE_PRICE_MISMATCH"
    ROOM_RATE_UNAVAILABLE = "ROOM_RATE_UNAVAILABLE"
    ROOM_TYPE_UNAVAILABLE = "ROOM_TYPE_UNAVAILABLE"
    TRAVELER_NAME_INVALID = "TRAVELER_NAME_INVALID"
    SUPPLIER_ERROR = "SUPPLIER_ERROR"
    LOYALTY_IDENTIFIER_INVALID = "LOYALTY_IDENTIFIER_INVALID"
    LOYALTY_IDENTIFIER_MISMATCH = "LOYALTY_IDENTIFIER_MISMATCH"
    LOYALTY_SIGNUP_FAILED = "LOYALTY_SIGNUP_FAILED"


class CancellationSummary(ProtoEnum):
    """Short classification of a cancellation policy."""

    UNKNOWN_CANCELLATION_POLICY = "UNKNOWN_CANCELLATION_POLICY"
    FREE_CANCELLATION = "FREE_CANCELLATION"
    NON_REFUNDABLE = "NON_REFUNDABLE"
    PARTIAL_REFUND = "PARTIAL_REFUND"


class LineItemType(ProtoEnum):
    """Kind of charge a room rate line item represents."""

    BASE_RATE = "BASE_RATE"
    UNKNOWN_TAXES_AND_FEES = "UNKNOWN_TAXES_AND_FEES"
    UNKNOWN_TAXES = "UNKNOWN_TAXES"
    TAX_MUNICIPAL = "TAX_MUNICIPAL"
    TAX_VAT = "TAX_VAT"
    TAX_OTHER = "TAX_OTHER"
    UNKNOWN_FEES = "UNKNOWN_FEES"
    FEE_BOOKING = "FEE_BOOKING"
    FEE_HOTEL = "FEE_HOTEL"
    FEE_RESORT = "FEE_RESORT"
    FEE_TRANSFER = "FEE_TRANSFER"
    FEE_OTHER = "FEE_OTHER"


class CardType(ProtoEnum):
    """Payment card networks."""

    AX = "AX"  # American Express
    DC = "DC"  # Diners Club
    DS = "DS"  # Discover
    JC = "JC"  # JCB
    MC = "MC"  # Mastercard
    VI = "VI"  # Visa


class GuaranteeType(ProtoEnum):
    """How a booking is guaranteed."""

    UNKNOWN_GUARANTEE_TYPE = "UNKNOWN_GUARANTEE_TYPE"
    PAYMENT_CARD = "PAYMENT_CARD"
    NO_GUARANTEE = "NO_GUARANTEE"


class RoomAmenityType(ProtoEnum):
    """Amenities available inside a room."""

    UNKNOWN_ROOM_AMENITY_TYPE = "UNKNOWN_ROOM_AMENITY_TYPE"
    ALARM_CLOCK = "ALARM_CLOCK"
    CHARGING_BEDSIDE_TABLE = "CHARGING_BEDSIDE_TABLE"
    HYPOALLERGENIC_BEDDING = "HYPOALLERGENIC_BEDDING"
    PILLOW = "PILLOW"
    SYNTHETIC_PILLOW = "SYNTHETIC_PILLOW"
    MEMORY_FOAM_PILLOW = "MEMORY_FOAM_PILLOW"
    FEATHER_PILLOW = "FEATHER_PILLOW"
    ROLL_AWAY_BED = "ROLL_AWAY_BED"
    CRIB = "CRIB"
    KITCHEN = "KITCHEN"
    REFRIGERATOR = "REFRIGERATOR"
    DISHWASHER = "DISHWASHER"
    STOVE = "STOVE"
    OVEN = "OVEN"
    COOKWARE = "COOKWARE"
    SINK = "SINK"
    MICROWAVE = "MICROWAVE"
    TOASTER = "TOASTER"
    TOASTER_OVEN = "TOASTER_OVEN"
    INDOOR_GRILL = "INDOOR_GRILL"
    OUTDOOR_GRILL = "OUTDOOR_GRILL"
    DISHES_AND_UTENSILS = "DISHES_AND_UTENSILS"
    COOKING_UTENSILS = "COOKING_UTENSILS"
    CONDIMENTS = "CONDIMENTS"
    PANTRY_STAPLES = "PANTRY_STAPLES"
    MINIBAR = "MINIBAR"
    SNACKBAR = "SNACKBAR"
    BOTTLE_WATER = "BOTTLE_WATER"
    BOTTLE_WATER_FREE = "BOTTLE_WATER_FREE"
    COFFEE_MAKER = "COFFEE_MAKER"
    KETTLE = "KETTLE"
    TEA_STATION = "TEA_STATION"
    PRIVATE_BATHROOM = "PRIVATE_BATHROOM"
    TOILET = "TOILET"
    BIDET = "BIDET"
    SHOWER = "SHOWER"
    SHOWER_ACCESSIBLE = "SHOWER_ACCESSIBLE"
    BATHTUB = "BATHTUB"
    HAIRDRYER = "HAIRDRYER"
    BATHROBE = "BATHROBE"
    PRIVATE_INDOOR_HOT_TUB = "PRIVATE_INDOOR_HOT_TUB"
    PRIVATE_OUTDOOR_HOT_TUB = "PRIVATE_OUTDOOR_HOT_TUB"
    PRIVATE_POOL = "PRIVATE_POOL"
    PRIVATE_SAUNA = "PRIVATE_SAUNA"
    WASHER_DRYER = "WASHER_DRYER"
    IRONING_EQUIPMENT = "IRONING_EQUIPMENT"
    UNIVERSAL_POWER_ADAPTERS = "UNIVERSAL_POWER_ADAPTERS"
    AIR_CONDITIONING = "AIR_CONDITIONING"
    HEATING = "HEATING"
    FIREPLACE = "FIREPLACE"
    TV = "TV"
    TV_WITH_CASTING = "TV_WITH_CASTING"
    TV_WITH_STREAMING = "TV_WITH_STREAMING"
    PAY_PER_VIEW_MOVIES = "PAY_PER_VIEW_MOVIES"
    LARGE_SCREEN_TV = "LARGE_SCREEN_TV"
    IN_ROOM_SAFE = "IN_ROOM_SAFE"
    ELECTRONIC_ROOM_KEY = "ELECTRONIC_ROOM_KEY"
    SECOND_LOCK_ON_GUEST_DOORS = "SECOND_LOCK_ON_GUEST_DOORS"
    SMOKE_DETECTOR_IN_GUEST_ROOMS = "SMOKE_DETECTOR_IN_GUEST_ROOMS"
    FIRE_EXTINGUISHERS = "FIRE_EXTINGUISHERS"
    EMERGENCY_EXIT_MAPS = "EMERGENCY_EXIT_MAPS"
    STAIRS = "STAIRS"
    LOFT = "LOFT"
    ACCESSIBLE_ROOM = "ACCESSIBLE_ROOM"
    ADA_COMPLIANT_ROOM = "ADA_COMPLIANT_ROOM"
    NON_SMOKING = "NON_SMOKING"
    WINDOWS_THAT_OPEN = "WINDOWS_THAT_OPEN"
    PATIO = "PATIO"
    BALCONY = "BALCONY"
