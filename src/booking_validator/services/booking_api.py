"""BookingAvailability and BookingSubmit calls against a partner server.

Each call serializes the request, exchanges it over the connection, decodes
the response and validates it. Any stage can fail; the raised
ValidatorError's string form names the stage.
"""

from typing import Optional, TypeVar

from pydantic import ValidationError

from booking_validator.models.errors import ParseError, SerializeError
from booking_validator.models.messages import (
    BookingAvailabilityRequest,
    BookingAvailabilityResponse,
    BookingSubmitRequest,
    BookingSubmitResponse,
    ProtoMessage,
)
from booking_validator.utils.logging import get_logger

from .connection import HTTPConnection
from .validation import ensure_valid_availability_response, ensure_valid_submit_response

logger = get_logger(__name__)

DEFAULT_AVAILABILITY_ENDPOINT = "/v1/BookingAvailability"
DEFAULT_SUBMIT_ENDPOINT = "/v1/BookingSubmit"

ResponseT = TypeVar("ResponseT", bound=ProtoMessage)


def summarize_validation_error(error: ValidationError) -> str:
    """Render pydantic validation errors as one line.

    Example: "room_rates.0.line_items: Input should be a valid list; hotelIdd: Extra inputs are not permitted"
    """
    parts = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"])
        parts.append(f"{location}: {item['msg']}" if location else item["msg"])
    return "; ".join(parts)


def serialize_request(request: ProtoMessage) -> str:
    """Convert a request to its JSON wire body.

    Raises:
        SerializeError: If the request cannot be converted to JSON
    """
    try:
        return request.to_wire_json()
    except (ValueError, TypeError) as e:
        raise SerializeError(str(e)) from e


def _parse(body: str, response_type: type[ResponseT]) -> ResponseT:
    try:
        return response_type.model_validate_json(body)
    except ValidationError as e:
        raise ParseError(summarize_validation_error(e)) from e


def booking_availability(
    request: BookingAvailabilityRequest,
    conn: HTTPConnection,
    endpoint: str = DEFAULT_AVAILABILITY_ENDPOINT,
    *,
    body: Optional[str] = None,
) -> BookingAvailabilityResponse:
    """Run an availability search and validate the partner's answer.

    Args:
        request: Search criteria to send
        conn: Connection to the partner server
        endpoint: Endpoint path on the partner server
        body: Request already serialized by serialize_request, if any

    Returns:
        The decoded response, once it has passed validation

    Raises:
        SerializeError: If the request cannot be converted to JSON
        NetworkError: If the HTTP exchange fails
        ParseError: If the response body is not a valid BookingAvailabilityResponse
        ResponseValidationError: If the response fails validation
    """
    if body is None:
        body = serialize_request(request)
    response = _parse(conn.send_request(endpoint, body), BookingAvailabilityResponse)
    ensure_valid_availability_response(request, response)
    logger.info("Availability response for hotel %s is valid", request.hotel_id)
    return response


def booking_submit(
    request: BookingSubmitRequest,
    conn: HTTPConnection,
    endpoint: str = DEFAULT_SUBMIT_ENDPOINT,
    *,
    body: Optional[str] = None,
) -> BookingSubmitResponse:
    """Submit a booking and validate the partner's answer.

    Args:
        request: Booking details to send
        conn: Connection to the partner server
        endpoint: Endpoint path on the partner server
        body: Request already serialized by serialize_request, if any

    Returns:
        The decoded response, once it has passed validation

    Raises:
        SerializeError: If the request cannot be converted to JSON
        NetworkError: If the HTTP exchange fails
        ParseError: If the response body is not a valid BookingSubmitResponse
        ResponseValidationError: If the response fails validation
    """
    if body is None:
        body = serialize_request(request)
    response = _parse(conn.send_request(endpoint, body), BookingSubmitResponse)
    ensure_valid_submit_response(request, response)
    locator = response.reservation.locator.id if response.reservation and response.reservation.locator else ""
    logger.info("Submit response for reservation %s is valid", locator)
    return response
