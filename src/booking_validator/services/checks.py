"""Field-level checks shared by every response validator.

Each checker takes an ordered list of labeled checks, evaluates all of them,
and returns either None (every check passed) or one ValidationFailure that
names every failing field path in input order. The referential integrity
check is the exception: it stops at the first dangling code.
"""

import difflib
import json
import re
from functools import lru_cache, singledispatch
from typing import Any, NamedTuple, Optional, Sequence

from booking_validator.models.enums import ProtoEnum
from booking_validator.models.errors import ErrorKind, PatternError, ValidationFailure
from booking_validator.models.messages import ProtoMessage, RoomRate
from booking_validator.utils.logging import get_logger

logger = get_logger(__name__)

# YYYY-MM-DD with a plausible month and day; not a calendar check
DATE_FORMAT = r"[12][0-9]{3}-(0[1-9]|1[0-2])-(0[1-9]|[12][0-9]|3[01])"

# Two-letter ISO 3166-1 alpha-2 country code
ISO3166 = (
    r"A(?![ABCHJKNPVY])[A-Z]|B(?![CKPUX])[A-Z]|C(?![BEJPQST])[A-Z]|D[EJKMOZ]|E[CEGHRST]"
    r"|F[IJKMOR]|G(?![CJKOVXZ])[A-Z]|H[KMNRTU]|I[DEL-OQ-T]|J[EMOP]|K[EGHIMNPRWYZ]"
    r"|L[ABCIKR-VY]|M(?![BIJ])[A-Z]|N[ACEFGILOPRUZ]|OM|P[AE-HKNRSTWY]|QA|R[EOSUW]"
    r"|S(?![FPQUW])[A-Z]|T(?![ABEIPQSUXY])[A-Z]|U[AGMSYZ]|V[ACEGINU]|WF|WS|YE|YT|Z[AMW]"
)


class LabeledCheck(NamedTuple):
    """A value paired with the path used to report it."""

    field: str
    value: Any


class FormatCheck(NamedTuple):
    """A string value and the pattern it must match in full."""

    field: str
    value: str
    pattern: str


class EchoCheck(NamedTuple):
    """A response value that must equal the request value it echoes."""

    field: str
    want: Any
    got: Any


# === Zero-value detection ===


@singledispatch
def is_zero(value: Any) -> bool:
    """Whether a value is the default for its type, i.e. was never set.

    Raises:
        TypeError: For value types a message field cannot hold
    """
    raise TypeError(f"no zero value defined for {type(value).__name__}")


@is_zero.register(type(None))
def _(value: None) -> bool:
    return True


@is_zero.register(ProtoEnum)
def _(value: ProtoEnum) -> bool:
    return value.number == 0


@is_zero.register(str)
def _(value: str) -> bool:
    return value == ""


@is_zero.register(int)
@is_zero.register(float)
def _(value: float) -> bool:
    return value == 0


@is_zero.register(list)
@is_zero.register(tuple)
def _(value: Sequence[Any]) -> bool:
    return len(value) == 0


@is_zero.register(ProtoMessage)
def _(value: ProtoMessage) -> bool:
    return all(is_zero(getattr(value, name)) for name in type(value).model_fields)


# === Structural equality ===


def canonical(value: Any) -> Any:
    """Reduce a value to plain data with all defaults dropped.

    An unset sub-message and one whose fields are all defaults reduce to the
    same thing; repeated fields keep their order.
    """
    if value is None:
        return {}
    if isinstance(value, ProtoMessage):
        fields = {}
        for name in type(value).model_fields:
            raw = getattr(value, name)
            reduced = canonical(raw)
            if reduced == {} or (not isinstance(raw, ProtoMessage) and is_zero(raw)):
                continue
            fields[name] = reduced
        return fields
    if isinstance(value, ProtoEnum):
        return value.value
    if isinstance(value, (list, tuple)):
        return [canonical(item) for item in value]
    return value


def values_equal(want: Any, got: Any) -> bool:
    """Deep structural equality between two message values."""
    return canonical(want) == canonical(got)


def _diff(field: str, got: Any, want: Any) -> str:
    got_lines = json.dumps(canonical(got), indent=2, sort_keys=True).splitlines()
    want_lines = json.dumps(canonical(want), indent=2, sort_keys=True).splitlines()
    return "\n".join(
        difflib.unified_diff(got_lines, want_lines, fromfile=f"got {field}", tofile=f"want {field}", lineterm="")
    )


# === Checkers ===


def check_required(checks: Sequence[LabeledCheck]) -> Optional[ValidationFailure]:
    """Ensure every check's value is set.

    Args:
        checks: Values to test, in the order failures should be reported

    Returns:
        None if all values are set, otherwise a MISSING_REQUIRED failure
    """
    missing = []
    for check in checks:
        if is_zero(check.value):
            missing.append(check.field)
            logger.warning("Required field %s was not set", check.field)

    if missing:
        return ValidationFailure(kind=ErrorKind.MISSING_REQUIRED, field_paths=tuple(missing))
    return None


@lru_cache(maxsize=None)
def _compile(pattern: str) -> re.Pattern[str]:
    try:
        return re.compile(pattern)
    except re.error as e:
        raise PatternError(f"invalid pattern {pattern!r}: {e}") from e


def validate_format(checks: Sequence[FormatCheck]) -> Optional[ValidationFailure]:
    """Ensure every check's value matches its pattern in full.

    Args:
        checks: Values and patterns, in the order failures should be reported

    Returns:
        None if all values match, otherwise a FORMAT_MISMATCH failure

    Raises:
        PatternError: If a pattern is not a valid regular expression
    """
    mismatched = []
    for check in checks:
        if _compile(check.pattern).fullmatch(check.value) is None:
            mismatched.append(check.field)
            logger.warning(
                "Field %s value %r did not match pattern %s",
                check.field,
                check.value,
                check.pattern,
            )

    if mismatched:
        return ValidationFailure(kind=ErrorKind.FORMAT_MISMATCH, field_paths=tuple(mismatched))
    return None


def compare_fields(checks: Sequence[EchoCheck]) -> Optional[ValidationFailure]:
    """Ensure every echoed response value equals the request value.

    Args:
        checks: Request/response value pairs, in the order failures should be reported

    Returns:
        None if all pairs are equal, otherwise an ECHO_MISMATCH failure
    """
    different = []
    for check in checks:
        if not values_equal(check.want, check.got):
            different.append(check.field)
            logger.warning(
                "%s did not match (-got +want)\n%s",
                check.field,
                _diff(check.field, check.got, check.want),
            )

    if different:
        return ValidationFailure(kind=ErrorKind.ECHO_MISMATCH, field_paths=tuple(different))
    return None


def check_references(
    room_rates: Sequence[RoomRate],
    room_type_codes: Sequence[str],
    rate_plan_codes: Sequence[str],
) -> Optional[ValidationFailure]:
    """Ensure each room rate points at a declared room type and rate plan.

    Stops at the first dangling reference.

    Args:
        room_rates: Room rates of the response, in order
        room_type_codes: Codes of the response's room types
        rate_plan_codes: Codes of the response's rate plans

    Returns:
        None if every reference resolves, otherwise a REFERENTIAL_INTEGRITY failure
    """
    known_room_types = set(room_type_codes)
    known_rate_plans = set(rate_plan_codes)

    for i, rate in enumerate(room_rates):
        if rate.room_type_code not in known_room_types:
            return _dangling(f"room_rates[{i}] > room_type_code", rate.room_type_code)
        if rate.rate_plan_code not in known_rate_plans:
            return _dangling(f"room_rates[{i}] > rate_plan_code", rate.rate_plan_code)
    return None


def _dangling(field: str, code: str) -> ValidationFailure:
    failure = ValidationFailure(
        kind=ErrorKind.REFERENTIAL_INTEGRITY,
        field_paths=(field,),
        value=code,
    )
    logger.warning("%s", failure.message)
    return failure
