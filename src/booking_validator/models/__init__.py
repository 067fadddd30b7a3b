"""Pydantic models for Hotel Booking partner API messages and validator errors."""

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
from .errors import (
    FAILURE_MESSAGES,
    STAGE_PREFIXES,
    ConnectionSetupError,
    ErrorKind,
    LoadError,
    NetworkError,
    ParseError,
    PatternError,
    ResponseValidationError,
    SerializeError,
    ValidationFailure,
    ValidatorError,
    is_fatal,
)
from .messages import (
    Address,
    AvailabilityError,
    BookingAvailabilityRequest,
    BookingAvailabilityResponse,
    BookingSubmitRequest,
    BookingSubmitResponse,
    CancellationPolicy,
    Capacity,
    Customer,
    DisplayString,
    HotelDetails,
    LineItem,
    Locator,
    Occupancy,
    Payment,
    Price,
    ProtoMessage,
    RatePlan,
    Reservation,
    RoomRate,
    RoomType,
    SubmitError,
    Tracking,
    Traveler,
)

__all__ = [
    # Enums
    "AvailabilityErrorType",
    "CancellationSummary",
    "CardType",
    "DeviceType",
    "GuaranteeType",
    "LineItemType",
    "ProtoEnum",
    "RoomAmenityType",
    "SubmitErrorType",
    "SubmitStatus",
    # Errors
    "ConnectionSetupError",
    "ErrorKind",
    "FAILURE_MESSAGES",
    "LoadError",
    "NetworkError",
    "ParseError",
    "PatternError",
    "ResponseValidationError",
    "SerializeError",
    "STAGE_PREFIXES",
    "ValidationFailure",
    "ValidatorError",
    "is_fatal",
    # Messages
    "Address",
    "AvailabilityError",
    "BookingAvailabilityRequest",
    "BookingAvailabilityResponse",
    "BookingSubmitRequest",
    "BookingSubmitResponse",
    "CancellationPolicy",
    "Capacity",
    "Customer",
    "DisplayString",
    "HotelDetails",
    "LineItem",
    "Locator",
    "Occupancy",
    "Payment",
    "Price",
    "ProtoMessage",
    "RatePlan",
    "Reservation",
    "RoomRate",
    "RoomType",
    "SubmitError",
    "Tracking",
    "Traveler",
]
