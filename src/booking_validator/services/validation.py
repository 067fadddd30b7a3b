"""Response validation pipelines for BookingAvailability and BookingSubmit.

Each pipeline runs its phases in a fixed order and stops at the first phase
that fails:

1. required fields are present
2. formats (dates, country codes) are valid
3. echo fields equal the request
4. every element of the repeated lists has its required fields
5. room rates only reference declared room types and rate plans

Within a phase every check runs, so one failure lists every offending field.
Checking presence before format before correctness keeps a response that
lacks half its fields from also drowning in format and echo noise.
"""

from typing import Any, Optional

from booking_validator.models.errors import ResponseValidationError, ValidationFailure
from booking_validator.models.messages import (
    BookingAvailabilityRequest,
    BookingAvailabilityResponse,
    BookingSubmitRequest,
    BookingSubmitResponse,
    ProtoMessage,
)
from booking_validator.utils.logging import get_logger

from .checks import (
    DATE_FORMAT,
    ISO3166,
    EchoCheck,
    FormatCheck,
    LabeledCheck,
    check_references,
    check_required,
    compare_fields,
    validate_format,
)

logger = get_logger(__name__)


def _field(message: Optional[ProtoMessage], *path: str) -> Any:
    """Follow a chain of attributes, yielding None past an unset sub-message."""
    value: Any = message
    for name in path:
        if value is None:
            return None
        value = getattr(value, name)
    return value


def _text(message: Optional[ProtoMessage], *path: str) -> str:
    return _field(message, *path) or ""


def validate_booking_availability_response(
    req: BookingAvailabilityRequest,
    resp: BookingAvailabilityResponse,
) -> Optional[ValidationFailure]:
    """Check an availability response against the request that produced it.

    Args:
        req: Search criteria that were sent
        resp: Decoded partner response

    Returns:
        None if the response conforms, otherwise the first failing phase's failure
    """
    _log_partner_error(resp.error)

    failure = check_required(
        [
            LabeledCheck("api_version", resp.api_version),
            LabeledCheck("transaction_id", resp.transaction_id),
            LabeledCheck("hotel_id", resp.hotel_id),
            LabeledCheck("party > adults", _field(resp.party, "adults")),
            LabeledCheck("hotel_details > name", _field(resp.hotel_details, "name")),
            LabeledCheck(
                "hotel_details > address > address1",
                _field(resp.hotel_details, "address", "address1"),
            ),
            LabeledCheck(
                "hotel_details > address > city",
                _field(resp.hotel_details, "address", "city"),
            ),
            LabeledCheck(
                "hotel_details > address > province",
                _field(resp.hotel_details, "address", "province"),
            ),
        ]
    )
    if failure is not None:
        return failure

    failure = validate_format(
        [
            FormatCheck("start_date", resp.start_date, DATE_FORMAT),
            FormatCheck("end_date", resp.end_date, DATE_FORMAT),
            FormatCheck(
                "hotel_details > address > country",
                _text(resp.hotel_details, "address", "country"),
                ISO3166,
            ),
        ]
    )
    if failure is not None:
        return failure

    failure = compare_fields(
        [
            EchoCheck("hotel_id", req.hotel_id, resp.hotel_id),
            EchoCheck("start_date", req.start_date, resp.start_date),
            EchoCheck("end_date", req.end_date, resp.end_date),
            EchoCheck("party", req.party, resp.party),
        ]
    )
    if failure is not None:
        return failure

    failure = check_required(_element_checks(resp))
    if failure is not None:
        return failure

    return check_references(
        resp.room_rates,
        [room_type.code for room_type in resp.room_types],
        [rate_plan.code for rate_plan in resp.rate_plans],
    )


def _element_checks(resp: BookingAvailabilityResponse) -> list[LabeledCheck]:
    """Required fields of every room type, rate plan and room rate."""
    checks = []

    for i, room_type in enumerate(resp.room_types):
        checks.extend(
            [
                LabeledCheck(f"room_types[{i}] > code", room_type.code),
                LabeledCheck(f"room_types[{i}] > name", room_type.name),
            ]
        )

    for i, rate_plan in enumerate(resp.rate_plans):
        checks.extend(
            [
                LabeledCheck(f"rate_plans[{i}] > code", rate_plan.code),
                LabeledCheck(f"rate_plans[{i}] > name", rate_plan.name),
                LabeledCheck(
                    f"rate_plans[{i}] > cancellation_policy",
                    rate_plan.cancellation_policy,
                ),
            ]
        )

    for i, room_rate in enumerate(resp.room_rates):
        # A zero amount counts as a missing price, same as an unset one
        for j, line_item in enumerate(room_rate.line_items):
            checks.append(
                LabeledCheck(
                    f"room_rates[{i}] > line_items[{j}] > price",
                    _field(line_item.price, "amount"),
                )
            )
        checks.append(LabeledCheck(f"room_rates[{i}] > code", room_rate.code))

    return checks


def validate_booking_submit_response(
    req: BookingSubmitRequest,
    resp: BookingSubmitResponse,
) -> Optional[ValidationFailure]:
    """Check a submit response against the booking request that produced it.

    Args:
        req: Booking details that were sent
        resp: Decoded partner response

    Returns:
        None if the response conforms, otherwise the first failing phase's failure
    """
    _log_partner_error(resp.error)
    reservation = resp.reservation

    failure = check_required(
        [
            LabeledCheck("api_version", resp.api_version),
            LabeledCheck("transaction_id", resp.transaction_id),
            # Checked by name: SUCCESS is member 0, so any decoded status is present
            LabeledCheck("status", resp.status.value),
            LabeledCheck("reservation > locator > id", _field(reservation, "locator", "id")),
        ]
    )
    if failure is not None:
        return failure

    return compare_fields(
        [
            EchoCheck("hotel_id", req.hotel_id, _field(reservation, "hotel_id")),
            EchoCheck("start_date", req.start_date, _field(reservation, "start_date")),
            EchoCheck("end_date", req.end_date, _field(reservation, "end_date")),
            EchoCheck("customer", req.customer, _field(reservation, "customer")),
            EchoCheck("traveler", req.traveler, _field(reservation, "traveler")),
            EchoCheck("room_rate", req.room_rate, _field(reservation, "room_rate")),
        ]
    )


def ensure_valid_availability_response(
    req: BookingAvailabilityRequest,
    resp: BookingAvailabilityResponse,
) -> None:
    """Raise if an availability response does not conform.

    Raises:
        ResponseValidationError: Carrying the first failing phase's failure
    """
    failure = validate_booking_availability_response(req, resp)
    if failure is not None:
        raise ResponseValidationError(failure)


def ensure_valid_submit_response(
    req: BookingSubmitRequest,
    resp: BookingSubmitResponse,
) -> None:
    """Raise if a submit response does not conform.

    Raises:
        ResponseValidationError: Carrying the first failing phase's failure
    """
    failure = validate_booking_submit_response(req, resp)
    if failure is not None:
        raise ResponseValidationError(failure)


def _log_partner_error(error: Optional[ProtoMessage]) -> None:
    if error is not None:
        logger.warning(
            "Partner reported an error: type=%s message=%r",
            error.type.value,
            error.message,
        )
