"""JSON serialization and deserialization.

This module provides functions for converting DateTime and Offset values
to and from JSON-serializable dictionaries.

Functions:
    to_json: Convert a value to a JSON-serializable dict.
    from_json: Create a value from a JSON dict.

The JSON format uses canonical RFC 3339 strings with type tags for
polymorphic deserialization:

    {"_type": "DateTime", "value": "2024-01-15T14:30:00.123456789Z"}
    {"_type": "DateTime", "value": "2024-01-15T14:30:00.1Z", "precision": 3}
    {"_type": "Offset", "value": "-00:00"}

Examples:
    >>> from rfcstamp import DateTime
    >>> from rfcstamp.convert import to_json, from_json

    >>> dt = DateTime.parse("2024-01-15T14:30:45+05:30")
    >>> data = to_json(dt)
    >>> data['_type']
    'DateTime'

    >>> from_json(data) == dt
    True
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Union

from rfcstamp.errors import ParseError

if TYPE_CHECKING:
    from rfcstamp.core.datetime import DateTime
    from rfcstamp.units.offset import Offset

# Type alias for serializable values
StampType = Union["DateTime", "Offset"]


def to_json(value: StampType) -> dict[str, Any]:
    """Convert a DateTime or Offset to a JSON-serializable dictionary.

    The returned dictionary includes a `_type` field for polymorphic
    deserialization and a `value` field containing the RFC 3339 text.
    A DateTime with a fixed precision also stores `precision`.

    Args:
        value: A DateTime or Offset to convert.

    Returns:
        A JSON-serializable dictionary with type information.

    Raises:
        TypeError: If value is not a supported type.

    Examples:
        >>> from rfcstamp import DateTime, Offset
        >>> to_json(Offset.unknown_local())
        {'_type': 'Offset', 'value': '-00:00'}

        >>> to_json(DateTime.parse("2024-01-15T14:30:45.1234Z").with_precision(3))
        {'_type': 'DateTime', 'value': '2024-01-15T14:30:45.1234Z', 'precision': 3}
    """
    # Import here to avoid circular imports
    from rfcstamp.core.datetime import DateTime
    from rfcstamp.units.offset import Offset

    if isinstance(value, (DateTime, Offset)):
        return value.to_json()
    raise TypeError(f"expected DateTime or Offset, got {type(value).__name__}")


def from_json(data: dict[str, Any]) -> StampType:
    """Create a DateTime or Offset from a JSON dictionary.

    The dictionary must include a `_type` field specifying the type to create.

    Args:
        data: A dictionary with `_type` and `value` fields.

    Returns:
        A DateTime or Offset based on the `_type` field.

    Raises:
        ParseError: If the data is missing required fields or has invalid format.
        TypeError: If `_type` is not a recognized type.

    Examples:
        >>> from_json({'_type': 'Offset', 'value': 'Z'})
        Offset.utc()

        >>> dt = from_json({'_type': 'DateTime', 'value': '2024-01-15T14:30:45Z'})
        >>> dt.year
        2024
    """
    # Import here to avoid circular imports
    from rfcstamp.core.datetime import DateTime
    from rfcstamp.units.offset import Offset

    if not isinstance(data, dict):
        raise ParseError(repr(data), f"expected dict, got {type(data).__name__}")

    type_name = data.get("_type")
    if not type_name:
        raise ParseError(repr(data), "missing '_type' field in JSON data")

    if type_name == "DateTime":
        return DateTime.from_json(data)
    elif type_name == "Offset":
        return Offset.from_json(data)
    else:
        raise TypeError(f"unknown type: {type_name!r}")


__all__ = ["to_json", "from_json"]
