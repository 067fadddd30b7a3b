"""Error kinds and failure types for the booking API validator.

Validation failures are plain data (ValidationFailure) so they can be
compared structurally; they are rendered to text only when reported.
Everything that aborts a call is raised as a ValidatorError subclass whose
string form carries a stage-specific prefix.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class ErrorKind(str, Enum):
    """Origin of a failure, from request loading through response validation."""

    # Setup errors, fatal for the whole run
    LOAD_ERROR = "load_error"
    CONFIGURATION_ERROR = "configuration_error"
    SERIALIZE_ERROR = "serialize_error"

    # Transport errors, fatal for the current endpoint only
    NETWORK_ERROR = "network_error"
    PARSE_ERROR = "parse_error"

    # Validation errors
    MISSING_REQUIRED = "missing_required"
    FORMAT_MISMATCH = "format_mismatch"
    ECHO_MISMATCH = "echo_mismatch"
    REFERENTIAL_INTEGRITY = "referential_integrity"


# Message prefix for each stage a call can fail in
STAGE_PREFIXES: dict[ErrorKind, str] = {
    ErrorKind.LOAD_ERROR: "Could not load request",
    ErrorKind.CONFIGURATION_ERROR: "Invalid configuration",
    ErrorKind.SERIALIZE_ERROR: "Could not convert request to json",
    ErrorKind.NETWORK_ERROR: "HTTP response yielded error",
    ErrorKind.PARSE_ERROR: "Could not parse HTTP response",
    ErrorKind.MISSING_REQUIRED: "Validation error",
    ErrorKind.FORMAT_MISMATCH: "Validation error",
    ErrorKind.ECHO_MISMATCH: "Validation error",
    ErrorKind.REFERENTIAL_INTEGRITY: "Validation error",
}

# Lead-in for aggregated field lists
FAILURE_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.MISSING_REQUIRED: "required field(s) missing",
    ErrorKind.FORMAT_MISMATCH: "error validating format for field(s)",
    ErrorKind.ECHO_MISMATCH: "echo field(s) did not match request",
}


class ValidationFailure(BaseModel):
    """The failing outcome of one validation phase.

    field_paths keeps the order in which checks were declared. value is only
    set for referential integrity failures, where it holds the dangling code.
    """

    model_config = ConfigDict(frozen=True)

    kind: ErrorKind
    field_paths: tuple[str, ...]
    value: Optional[str] = None

    @property
    def message(self) -> str:
        """Render as a single human-readable line."""
        if self.kind == ErrorKind.REFERENTIAL_INTEGRITY:
            path = self.field_paths[0]
            target = _REFERENCE_TARGETS.get(path.rsplit(" > ", 1)[-1], "code")
            return f"{_strip_index(path)} {self.value} not present in {target}"
        return f"{FAILURE_MESSAGES[self.kind]}: {', '.join(self.field_paths)}"

    def __str__(self) -> str:
        return self.message


_REFERENCE_TARGETS: dict[str, str] = {
    "room_type_code": "room_types > code",
    "rate_plan_code": "rate_plans > code",
}


def _strip_index(path: str) -> str:
    """Drop element indexes: room_rates[2] > room_type_code -> room_rates > room_type_code."""
    return " > ".join(part.split("[", 1)[0] for part in path.split(" > "))


class ValidatorError(Exception):
    """Base exception for every failure raised by the validator.

    The string form is "<stage prefix>: <detail>" so failures can be told
    apart by origin in the run log.
    """

    kind: ErrorKind = ErrorKind.CONFIGURATION_ERROR

    def __init__(self, detail: str) -> None:
        self.detail = detail
        self.message = f"{STAGE_PREFIXES[self.kind]}: {detail}"
        super().__init__(self.message)


class LoadError(ValidatorError):
    """Raised when a sample request file cannot be read or decoded."""

    kind = ErrorKind.LOAD_ERROR


class ConnectionSetupError(ValidatorError):
    """Raised when credentials or root certificates cannot be loaded."""

    kind = ErrorKind.CONFIGURATION_ERROR


class PatternError(ValidatorError):
    """Raised when a format check is configured with an invalid regular expression."""

    kind = ErrorKind.CONFIGURATION_ERROR


class SerializeError(ValidatorError):
    """Raised when a request cannot be converted to the JSON wire format."""

    kind = ErrorKind.SERIALIZE_ERROR


class NetworkError(ValidatorError):
    """Raised when the HTTP exchange fails (connection, TLS or timeout)."""

    kind = ErrorKind.NETWORK_ERROR


class ParseError(ValidatorError):
    """Raised when a response body does not decode into the expected message."""

    kind = ErrorKind.PARSE_ERROR


class ResponseValidationError(ValidatorError):
    """Raised when a decoded response fails a validation phase."""

    def __init__(self, failure: ValidationFailure) -> None:
        self.kind = failure.kind
        self.failure = failure
        super().__init__(failure.message)


def is_fatal(error: ValidatorError) -> bool:
    """Whether an error aborts the whole run rather than a single endpoint."""
    return error.kind in {
        ErrorKind.LOAD_ERROR,
        ErrorKind.CONFIGURATION_ERROR,
        ErrorKind.SERIALIZE_ERROR,
    }
