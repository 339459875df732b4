# nanoargs/core/converters.py

import re
import logging
from typing import Any, Callable, Dict, Type

from .exceptions import InvalidFormatError

logger = logging.getLogger(__name__)

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")

def _to_str(raw: str) -> str:
    return raw

def _to_int(raw: str) -> int:
    if not _INTEGER_PATTERN.fullmatch(raw):
        raise ValueError(f"not a base-10 integer: {raw!r}")
    return int(raw, 10)

def _to_float(raw: str) -> float:
    # float() tolerates padding and digit separators; whole-string parses only
    if not raw or raw != raw.strip() or "_" in raw:
        raise ValueError(f"not a floating point number: {raw!r}")
    return float(raw)

CONVERTERS: Dict[type, Callable[[str], Any]] = {
    str: _to_str,
    int: _to_int,
    float: _to_float,
}

TYPE_LABELS: Dict[type, str] = {
    str: "string",
    int: "integer",
    float: "floating point number",
}

def type_label(target_type: Type) -> str:
    """Human readable name for a supported target type"""
    return TYPE_LABELS.get(target_type, getattr(target_type, "__name__", str(target_type)))

def convert(name: str, raw: str, target_type: Type = str) -> Any:
    """
    Convert a raw argument value to one of the supported scalar types.

    Args:
        name: Argument name, used in error reports
        raw: Raw string value from the command line
        target_type: str, int or float

    Returns:
        The converted value

    Raises:
        TypeError: If target_type is not supported
        InvalidFormatError: If the whole value cannot be parsed as target_type
    """
    try:
        converter = CONVERTERS[target_type]
    except (KeyError, TypeError):
        raise TypeError(
            f"Unsupported argument type {target_type!r}; expected one of: str, int, float"
        ) from None

    try:
        return converter(raw)
    except ValueError as e:
        logger.debug(f"Conversion of {name} failed: {e}")
        raise InvalidFormatError(name, raw, expected_type=type_label(target_type)) from e
