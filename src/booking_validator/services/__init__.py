"""Endpoint checks for the Hotel Booking partner API."""

from .booking_api import booking_availability, booking_submit, serialize_request
from .connection import HTTPConnection, init_http_connection
from .reporter import EndpointResult, RunReport, log_stats
from .request_loader import load_request
from .validation import (
    validate_booking_availability_response,
    validate_booking_submit_response,
)

__all__ = [
    "booking_availability",
    "booking_submit",
    "serialize_request",
    "HTTPConnection",
    "init_http_connection",
    "EndpointResult",
    "RunReport",
    "log_stats",
    "load_request",
    "validate_booking_availability_response",
    "validate_booking_submit_response",
]
