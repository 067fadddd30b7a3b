"""Per-run outcome of the endpoint checks and the closing stats summary."""

import logging
from typing import Optional

from pydantic import BaseModel, Field

from booking_validator.models.errors import ErrorKind
from booking_validator.utils.logging import get_logger

logger = get_logger(__name__)


class EndpointResult(BaseModel):
    """Outcome of checking one endpoint."""

    name: str = Field(..., description="Check name, e.g. BookingAvailability")
    passed: bool
    error_kind: Optional[ErrorKind] = None
    message: str = ""


class RunReport(BaseModel):
    """Outcomes of every endpoint checked in one run, in run order."""

    results: list[EndpointResult] = Field(default_factory=list)

    def record(self, result: EndpointResult) -> None:
        self.results.append(result)

    @property
    def failed_count(self) -> int:
        """Number of endpoints that failed; used as the process exit code."""
        return sum(1 for result in self.results if not result.passed)

    @property
    def all_passed(self) -> bool:
        return bool(self.results) and self.failed_count == 0


def log_stats(report: RunReport, log: Optional[logging.Logger] = None) -> None:
    """Log the pass/fail line of every checked endpoint and the overall verdict."""
    log = log or logger
    log.info("\n************* Begin Stats *************\n")
    for result in report.results:
        log.info("%s %s", result.name, "Succeeded" if result.passed else "Failed")
    if report.all_passed:
        log.info("All tests pass!")
    log.info("\n************* End Stats *************\n")
