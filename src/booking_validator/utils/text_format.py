"""Reader for protobuf text format, as used by ``.pb3`` sample request files.

Example input:

    hotel_id: "97322"
    party {
      adults: 2
      children: 4
      children: 7
    }
    device_type: MOBILE

parse_text_format() produces a plain dict in which every field maps to the
list of values seen for it. shape_for_model() then collapses that against a
message model: repeated fields stay lists, singular fields keep their last
value, and sub-messages are shaped recursively. The result can be passed to
``Model.model_validate``.
"""

import codecs
import re
import typing
from typing import Any, Iterator

from pydantic import BaseModel

_TOKEN_RE = re.compile(
    r"""
      (?P<skip>\s+|\#[^\n]*)
    | (?P<string>"(?:[^"\\\n]|\\.)*"|'(?:[^'\\\n]|\\.)*')
    | (?P<number>[-+]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][-+]?[0-9]+)?[fF]?)
    | (?P<ident>[A-Za-z_][A-Za-z0-9_]*)
    | (?P<symbol>[:{}<>\[\],;])
    """,
    re.VERBOSE,
)

_CLOSING = {"{": "}", "<": ">"}


class TextFormatError(ValueError):
    """Raised when input is not valid protobuf text format."""


def _tokenize(text: str) -> Iterator[tuple[str, str, int]]:
    pos = 0
    while pos < len(text):
        match = _TOKEN_RE.match(text, pos)
        if match is None:
            raise TextFormatError(f"unexpected character {text[pos]!r} at offset {pos}")
        kind = match.lastgroup or "skip"
        if kind != "skip":
            yield kind, match.group(), pos
        pos = match.end()


def _unquote(token: str) -> str:
    body = token[1:-1].encode("utf-8")
    try:
        return codecs.escape_decode(body)[0].decode("utf-8")
    except ValueError as e:
        raise TextFormatError(f"invalid string literal {token}: {e}") from e


def _number(token: str) -> int | float:
    token = token.rstrip("fF")
    if any(c in token for c in ".eE"):
        return float(token)
    return int(token)


class _Parser:
    def __init__(self, text: str) -> None:
        self._tokens = list(_tokenize(text))
        self._pos = 0

    def _peek(self) -> tuple[str, str, int] | None:
        return self._tokens[self._pos] if self._pos < len(self._tokens) else None

    def _next(self) -> tuple[str, str, int]:
        token = self._peek()
        if token is None:
            raise TextFormatError("unexpected end of input")
        self._pos += 1
        return token

    def _accept(self, symbol: str) -> bool:
        token = self._peek()
        if token is not None and token[0] == "symbol" and token[1] == symbol:
            self._pos += 1
            return True
        return False

    def parse_message(self, closing: str | None = None) -> dict[str, list[Any]]:
        fields: dict[str, list[Any]] = {}
        while True:
            token = self._peek()
            if token is None:
                if closing is not None:
                    raise TextFormatError(f"missing {closing!r} at end of input")
                return fields
            if closing is not None and token[0] == "symbol" and token[1] == closing:
                self._pos += 1
                return fields

            kind, name, offset = self._next()
            if kind != "ident":
                raise TextFormatError(f"expected field name at offset {offset}, got {name!r}")
            has_colon = self._accept(":")
            fields.setdefault(name, []).extend(self._parse_field_values(has_colon))

            # Optional field separators
            if not self._accept(","):
                self._accept(";")

    def _parse_field_values(self, has_colon: bool) -> list[Any]:
        token = self._peek()
        if token is None:
            raise TextFormatError("unexpected end of input")
        kind, value, offset = token

        if kind == "symbol" and value in _CLOSING:
            self._pos += 1
            return [self.parse_message(_CLOSING[value])]
        if not has_colon:
            raise TextFormatError(f"expected ':' before scalar value at offset {offset}")
        if kind == "symbol" and value == "[":
            self._pos += 1
            items: list[Any] = []
            if self._accept("]"):
                return items
            while True:
                items.append(self._parse_list_item())
                if self._accept("]"):
                    return items
                if not self._accept(","):
                    raise TextFormatError(f"expected ',' or ']' in list near offset {offset}")
        return [self._parse_scalar()]

    def _parse_list_item(self) -> Any:
        token = self._peek()
        if token is not None and token[0] == "symbol" and token[1] in _CLOSING:
            self._pos += 1
            return self.parse_message(_CLOSING[token[1]])
        return self._parse_scalar()

    def _parse_scalar(self) -> Any:
        kind, value, offset = self._next()
        if kind == "string":
            parts = [_unquote(value)]
            # Adjacent string literals are concatenated
            while self._peek() is not None and self._peek()[0] == "string":
                parts.append(_unquote(self._next()[1]))
            return "".join(parts)
        if kind == "number":
            return _number(value)
        if kind == "ident":
            if value in ("true", "True", "t"):
                return True
            if value in ("false", "False", "f"):
                return False
            return value
        raise TextFormatError(f"unexpected {value!r} at offset {offset}")


def parse_text_format(text: str) -> dict[str, list[Any]]:
    """Parse protobuf text format into field name -> list of values.

    Args:
        text: Text-format message body

    Returns:
        Dict mapping each field name to every value given for it, in order.
        Sub-message values are dicts of the same shape.

    Raises:
        TextFormatError: If the text is malformed
    """
    return _Parser(text).parse_message()


def _message_type(annotation: Any) -> type[BaseModel] | None:
    if isinstance(annotation, type) and issubclass(annotation, BaseModel):
        return annotation
    for arg in typing.get_args(annotation):
        found = _message_type(arg)
        if found is not None:
            return found
    return None


def _is_repeated(annotation: Any) -> bool:
    return typing.get_origin(annotation) is list


def shape_for_model(fields: dict[str, list[Any]], model: type[BaseModel]) -> dict[str, Any]:
    """Collapse parsed fields to the structure a message model expects.

    Unknown field names are passed through unchanged (as singular values) so
    model validation reports them.

    Args:
        fields: Output of parse_text_format()
        model: Message model the text describes

    Returns:
        Dict suitable for ``model.model_validate``
    """
    shaped: dict[str, Any] = {}
    for name, values in fields.items():
        field = model.model_fields.get(name)
        if field is None:
            shaped[name] = values[-1]
            continue

        sub_model = _message_type(field.annotation)
        if sub_model is not None:
            values = [
                shape_for_model(value, sub_model) if isinstance(value, dict) else value
                for value in values
            ]

        shaped[name] = list(values) if _is_repeated(field.annotation) else values[-1]
    return shaped
