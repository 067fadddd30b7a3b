"""Run configuration for the booking API validator.

Command-line flags override environment variables, which override the
built-in defaults.
"""

import os

from pydantic import BaseModel, Field, model_validator

from .services.booking_api import DEFAULT_AVAILABILITY_ENDPOINT, DEFAULT_SUBMIT_ENDPOINT

DEFAULT_SERVER_ADDR = "localhost:8080"


def env_default(name: str, default: str) -> str:
    """Read a setting from the environment, falling back to a default."""
    return os.environ.get(name, default)


class ValidatorConfig(BaseModel):
    """Resolved options for one validator run."""

    server_addr: str = Field(default=DEFAULT_SERVER_ADDR, description="host:port of the partner server")
    credentials_file: str = Field(default="", description="File holding 'username:password'")
    ca_file: str = Field(default="", description="PEM root certificates; enables https")
    full_server_name: str = Field(default="", description="TLS server name when it differs from server_addr")
    availability_request: str = Field(default="", description="Sample BookingAvailabilityRequest (.json or .pb3)")
    submit_request: str = Field(default="", description="Sample BookingSubmitRequest (.json or .pb3)")
    availability_endpoint: str = DEFAULT_AVAILABILITY_ENDPOINT
    submit_endpoint: str = DEFAULT_SUBMIT_ENDPOINT
    log_level: str = "INFO"

    @model_validator(mode="after")
    def _require_a_request(self) -> "ValidatorConfig":
        if not self.availability_request and not self.submit_request:
            raise ValueError("You must provide availability_request or submit_request")
        return self
