"""Load sample request messages from disk.

Supported formats, picked by file extension:
- ``.json``: JSON using proto field names (lowerCamel names also accepted)
- ``.pb3``: protobuf text format
"""

import json
from pathlib import PurePath
from typing import TypeVar

from pydantic import ValidationError

from booking_validator.models.errors import LoadError
from booking_validator.models.messages import ProtoMessage
from booking_validator.utils.files import FileReader, read_file
from booking_validator.utils.logging import get_logger
from booking_validator.utils.text_format import TextFormatError, parse_text_format, shape_for_model

from .booking_api import summarize_validation_error

logger = get_logger(__name__)

MessageT = TypeVar("MessageT", bound=ProtoMessage)

SUPPORTED_EXTENSIONS = (".json", ".pb3")


def load_request(
    path: str,
    message_type: type[MessageT],
    *,
    reader: FileReader = read_file,
) -> MessageT:
    """Read a request file and decode it into a message.

    Args:
        path: Path to a .json or .pb3 file
        message_type: Message model the file holds
        reader: File reading capability

    Returns:
        Decoded request message

    Raises:
        LoadError: If the extension is unsupported or the file cannot be read or decoded
    """
    extension = PurePath(path).suffix.lower()
    if extension not in SUPPORTED_EXTENSIONS:
        raise LoadError(f'unexpected extension for file "{path}", expected .json or .pb3')

    try:
        content = reader(path)
    except OSError as e:
        raise LoadError(f'unable to read input file "{path}": {e}') from e

    try:
        text = content.decode("utf-8")
    except UnicodeDecodeError as e:
        raise LoadError(f'input file "{path}" is not valid UTF-8: {e}') from e

    if extension == ".json":
        message = _load_json(path, text, message_type)
    else:
        message = _load_text_format(path, text, message_type)

    logger.info("Loaded %s from %s", message_type.__name__, path)
    return message


def _load_json(path: str, text: str, message_type: type[MessageT]) -> MessageT:
    try:
        return message_type.model_validate_json(text)
    except ValidationError as e:
        raise LoadError(
            f'unable to parse "{path}" as {message_type.__name__}: {summarize_validation_error(e)}'
        ) from e


def _load_text_format(path: str, text: str, message_type: type[MessageT]) -> MessageT:
    try:
        fields = parse_text_format(text)
    except TextFormatError as e:
        raise LoadError(f'unable to parse "{path}" as text format: {e}') from e

    try:
        return message_type.model_validate(shape_for_model(fields, message_type))
    except ValidationError as e:
        raise LoadError(
            f'unable to parse "{path}" as {message_type.__name__}: {summarize_validation_error(e)}'
        ) from e


def dump_request(message: ProtoMessage) -> str:
    """Render a message as a pretty-printed .json request file body."""
    return json.dumps(message.to_wire_dict(), indent=2) + "\n"
