"""Value coercion: caller-supplied values -> resolved values.

Accepted shapes:
- None                                  -> ABSENT
- str                                   -> Text
- sequence of str | None                -> ListValue
- mapping of str -> str | None          -> AssocValue
- sequence of (str, str | None) pairs   -> AssocValue

Anything else raises InvalidValueTypeError. Values are never stringified,
so a stray int or UUID fails loudly instead of ending up in a URI.
"""

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from uritemplate_resolver.core import ABSENT, AssocValue, ListValue, ResolvedValue, Text
from uritemplate_resolver.exceptions import InvalidValueTypeError

logger = logging.getLogger(__name__)

_NOT_SEQUENCES = (str, bytes, bytearray, memoryview)
_UNENCODABLE = "str with unencodable surrogate"


def describe_type(value: Any) -> str:
    """Type name for error messages: builtins bare, others module-qualified."""
    value_type = type(value)
    if value_type.__module__ == "builtins":
        return value_type.__qualname__
    return f"{value_type.__module__}.{value_type.__qualname__}"


def _is_text_or_none(item: Any) -> bool:
    return item is None or isinstance(item, str)


def _is_pair(item: Any) -> bool:
    return (
        isinstance(item, tuple)
        and len(item) == 2
        and isinstance(item[0], str)
        and _is_text_or_none(item[1])
    )


def _is_encodable(text: str | None) -> bool:
    """False for text that cannot become UTF-8 (lone surrogates)."""
    if text is None:
        return True
    try:
        text.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def _reject(name: str, description: str) -> InvalidValueTypeError:
    logger.debug("[COERCION] Rejected value for %r: %s", name, description)
    return InvalidValueTypeError(name, description)


def _coerce_mapping(name: str, raw: Mapping) -> AssocValue:
    pairs = []
    for key, value in raw.items():
        if not isinstance(key, str):
            raise _reject(name, f"{describe_type(raw)} with {describe_type(key)} keys")
        if not _is_text_or_none(value):
            raise _reject(name, f"{describe_type(raw)} with {describe_type(value)} values")
        if not (_is_encodable(key) and _is_encodable(value)):
            raise _reject(name, f"{describe_type(raw)} containing {_UNENCODABLE}")
        pairs.append((key, value))
    return AssocValue(tuple(pairs))


def _check_encodable(name: str, raw: Any, texts: Iterable[str | None]) -> None:
    if not all(_is_encodable(text) for text in texts):
        raise _reject(name, f"{describe_type(raw)} containing {_UNENCODABLE}")


def _coerce_sequence(name: str, raw: Sequence) -> ListValue | AssocValue:
    items = tuple(raw)

    if all(_is_text_or_none(item) for item in items):
        _check_encodable(name, raw, items)
        return ListValue(items)
    if all(_is_pair(item) for item in items):
        _check_encodable(name, raw, (text for pair in items for text in pair))
        return AssocValue(items)

    container = describe_type(raw)
    for item in items:
        if not _is_text_or_none(item) and not _is_pair(item):
            raise _reject(name, f"{container} containing {describe_type(item)}")
    raise _reject(name, f"{container} mixing strings and (key, value) pairs")


def coerce(name: str, raw: Any) -> ResolvedValue:
    """Classify a caller-supplied value.

    Args:
        name: Variable name (used in error messages)
        raw: The value from the caller's lookup; None means undefined

    Raises:
        InvalidValueTypeError: if `raw` is not one of the accepted shapes
    """
    if raw is None:
        return ABSENT
    if isinstance(raw, str):
        if not _is_encodable(raw):
            raise _reject(name, _UNENCODABLE)
        return Text(raw)
    if isinstance(raw, Mapping):
        return _coerce_mapping(name, raw)
    if isinstance(raw, Sequence) and not isinstance(raw, _NOT_SEQUENCES):
        return _coerce_sequence(name, raw)
    raise _reject(name, describe_type(raw))
