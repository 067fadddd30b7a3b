#!/usr/bin/env python3
"""Command-line entry point: check a partner's booking endpoints.

Usage:
    booking-validator --server_addr partner.example.com:443 \\
        --ca_file roots.pem --credentials_file creds.txt \\
        --availability_request BookingAvailabilityRequest.json \\
        --submit_request BookingSubmitRequest.pb3

The exit status is the number of endpoint checks that failed, or 1 when the
run could not start (bad configuration or unreadable request files).
"""

import argparse
import sys
from typing import Callable, Optional, Sequence

import httpx
from pydantic import ValidationError

from .config import DEFAULT_SERVER_ADDR, ValidatorConfig, env_default
from .models.errors import ValidatorError, is_fatal
from .models.messages import (
    BookingAvailabilityRequest,
    BookingSubmitRequest,
    ProtoMessage,
)
from .services.booking_api import (
    DEFAULT_AVAILABILITY_ENDPOINT,
    DEFAULT_SUBMIT_ENDPOINT,
    booking_availability,
    booking_submit,
    serialize_request,
    summarize_validation_error,
)
from .services.connection import init_http_connection
from .services.reporter import EndpointResult, RunReport, log_stats
from .services.request_loader import load_request
from .utils.files import FileReader, read_file
from .utils.logging import (
    clear_correlation_id,
    configure_logging,
    get_logger,
    log_flow,
    set_correlation_id,
)

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="booking-validator",
        description="Validate a partner's Hotel Booking API implementation",
    )
    parser.add_argument(
        "--server_addr",
        default=env_default("BOOKING_VALIDATOR_SERVER_ADDR", DEFAULT_SERVER_ADDR),
        help="Your http server's address in the format of host:port (default: localhost:8080)",
    )
    parser.add_argument(
        "--credentials_file",
        default="",
        help="File containing exactly one line 'username:password'. Leave blank to bypass authentication.",
    )
    parser.add_argument(
        "--ca_file",
        default="",
        help="Path to your server's root certificates (PEM). Leave blank to connect using http rather than https.",
    )
    parser.add_argument(
        "--full_server_name",
        default="",
        help="Fully qualified domain name used to sign the certificate CN. "
        "Only needed with --ca_file when it differs from the server address.",
    )
    parser.add_argument(
        "--availability_request",
        default="",
        help="Path to a sample BookingAvailabilityRequest (.json or .pb3)",
    )
    parser.add_argument(
        "--submit_request",
        default="",
        help="Path to a sample BookingSubmitRequest (.json or .pb3)",
    )
    parser.add_argument(
        "--availability_endpoint",
        default=env_default("BOOKING_VALIDATOR_AVAILABILITY_ENDPOINT", DEFAULT_AVAILABILITY_ENDPOINT),
        help="URL endpoint for BookingAvailabilityRequest (default: /v1/BookingAvailability)",
    )
    parser.add_argument(
        "--submit_endpoint",
        default=env_default("BOOKING_VALIDATOR_SUBMIT_ENDPOINT", DEFAULT_SUBMIT_ENDPOINT),
        help="URL endpoint for BookingSubmitRequest (default: /v1/BookingSubmit)",
    )
    parser.add_argument(
        "--log_level",
        default=env_default("LOG_LEVEL", "INFO"),
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Log verbosity (default: INFO or LOG_LEVEL env var)",
    )
    return parser


def _run_check(
    name: str,
    flow: str,
    call: Callable[[], ProtoMessage],
) -> EndpointResult:
    """Run one endpoint check under its own correlation ID.

    Fatal errors propagate; every other ValidatorError becomes a failed result.
    """
    set_correlation_id()
    log_flow(logger, flow, "Start")
    try:
        call()
    except ValidatorError as e:
        if is_fatal(e):
            raise
        logger.error("Error making %sRequest: %s", name, e)
        return EndpointResult(name=name, passed=False, error_kind=e.kind, message=str(e))
    finally:
        log_flow(logger, flow, "End")
        clear_correlation_id()
    return EndpointResult(name=name, passed=True)


def run(
    config: ValidatorConfig,
    *,
    reader: FileReader = read_file,
    transport: Optional[httpx.BaseTransport] = None,
) -> RunReport:
    """Check every endpoint the config names.

    Request files are loaded and serialized before anything is sent.

    Args:
        config: Resolved run options
        reader: File reading capability
        transport: Optional httpx transport (tests pass a mock)

    Returns:
        Outcome of every endpoint check, in run order

    Raises:
        LoadError: If a request file cannot be loaded
        ConnectionSetupError: If credentials or certificates cannot be loaded
        SerializeError: If a request cannot be converted to JSON
    """
    availability_request = None
    if config.availability_request:
        availability_request = load_request(
            config.availability_request, BookingAvailabilityRequest, reader=reader
        )
    submit_request = None
    if config.submit_request:
        submit_request = load_request(config.submit_request, BookingSubmitRequest, reader=reader)

    availability_body = serialize_request(availability_request) if availability_request is not None else None
    submit_body = serialize_request(submit_request) if submit_request is not None else None

    report = RunReport()
    conn = init_http_connection(
        config.server_addr,
        config.credentials_file,
        config.ca_file,
        config.full_server_name,
        reader=reader,
        transport=transport,
    )
    with conn:
        if availability_request is not None:
            report.record(
                _run_check(
                    "BookingAvailability",
                    "Availability Check",
                    lambda: booking_availability(
                        availability_request, conn, config.availability_endpoint, body=availability_body
                    ),
                )
            )
        if submit_request is not None:
            report.record(
                _run_check(
                    "BookingSubmit",
                    "Submit Check",
                    lambda: booking_submit(submit_request, conn, config.submit_endpoint, body=submit_body),
                )
            )
    return report


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the validator.

    Returns:
        Number of failed endpoint checks, or 1 if the run could not start
    """
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    try:
        config = ValidatorConfig(**vars(args))
    except ValidationError as e:
        logger.error("%s", summarize_validation_error(e))
        return 1

    try:
        report = run(config)
    except ValidatorError as e:
        logger.error("%s", e)
        return 1

    log_stats(report)
    return report.failed_count


if __name__ == "__main__":
    sys.exit(main())
