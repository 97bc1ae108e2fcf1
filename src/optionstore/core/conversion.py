"""
Type coercion for stored and default option values.

Stored values are always strings. Defaults may be any Python value. Both are
converted to the requested type through a small closed set of converters.
"""

import math
import uuid
from datetime import datetime
from typing import Any, Callable, Dict, Tuple, Union, get_args, get_origin

from ..exceptions import TypeConversionFailure

_NONE_TYPE = type(None)

_TRUE_STRINGS = {"true", "yes", "on", "1"}
_FALSE_STRINGS = {"false", "no", "off", "0"}


def _to_int(value: Any) -> int:
    if isinstance(value, str):
        return int(value.strip())
    if isinstance(value, float):
        if not math.isfinite(value):
            raise ValueError(f"cannot convert {value} to int")
        return int(round(value))
    return int(value)


def _to_float(value: Any) -> float:
    if isinstance(value, str):
        return float(value.strip())
    return float(value)


def _to_bool(value: Any) -> bool:
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
        raise ValueError(f"'{value}' is not a boolean literal")
    return bool(value)


def _to_uuid(value: Any) -> uuid.UUID:
    if isinstance(value, uuid.UUID):
        return value
    return uuid.UUID(str(value))


def _to_datetime(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime.fromisoformat(str(value).strip())


_CONVERTERS: Dict[type, Callable[[Any], Any]] = {
    int: _to_int,
    float: _to_float,
    bool: _to_bool,
    uuid.UUID: _to_uuid,
    datetime: _to_datetime,
}

_ZERO_VALUES: Dict[type, Any] = {
    str: "",
    int: 0,
    float: 0.0,
    bool: False,
    uuid.UUID: uuid.UUID(int=0),
    datetime: datetime.min,
}


def _unwrap_optional(target_type: Any) -> Tuple[Any, bool]:
    """Return (inner_type, is_optional) for Optional[T] targets."""
    if get_origin(target_type) is Union:
        args = [arg for arg in get_args(target_type) if arg is not _NONE_TYPE]
        if len(args) == 1 and len(get_args(target_type)) == 2:
            return args[0], True
    return target_type, False


def zero_value(target_type: Any) -> Any:
    """Zero/empty representation of a type, None outside the known set."""
    return _ZERO_VALUES.get(target_type)


def change_type(value: Any, target_type: Any = str) -> Any:
    """
    Convert a stored or default value to target_type.

    Args:
        value: Raw value, usually a string read from storage or a declared default
        target_type: One of str, int, float, bool, uuid.UUID, datetime,
            Optional[...] of those, or any other type for a checked pass-through

    Returns:
        The converted value

    Raises:
        TypeConversionFailure: If the value cannot be represented as target_type
    """
    inner_type, optional = _unwrap_optional(target_type)

    if value is None:
        return None if optional else zero_value(inner_type)

    if isinstance(value, str):
        if inner_type is uuid.UUID:
            try:
                return uuid.UUID(value)
            except ValueError as e:
                raise TypeConversionFailure(f"'{value}' is not a valid identifier") from e
        if value == "" and inner_type is not str:
            return change_type(None, target_type)
    elif inner_type is str:
        return str(value)

    if inner_type is str or inner_type is Any or inner_type is object:
        return value

    converter = _CONVERTERS.get(inner_type)
    if converter is not None:
        # bool is an int subclass; keep it from passing through as 0/1
        if isinstance(value, inner_type) and not (inner_type is int and isinstance(value, bool)):
            return value
        try:
            return converter(value)
        except (ValueError, TypeError, OverflowError) as e:
            raise TypeConversionFailure(
                f"Cannot convert {value!r} to {getattr(inner_type, '__name__', inner_type)}"
            ) from e

    if isinstance(inner_type, type) and isinstance(value, inner_type):
        return value

    raise TypeConversionFailure(
        f"Cannot convert {type(value).__name__} value {value!r} to "
        f"{getattr(inner_type, '__name__', inner_type)}"
    )
