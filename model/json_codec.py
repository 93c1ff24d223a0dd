"""
JSON view of modeled shapes.

jsonize() walks the present body members of a shape and produces plain
JSON-ready Python values keyed by wire name; parse_json() does the reverse.
Timestamps default to epoch seconds and blobs to base64, which is what the
json and rest-json protocols put on the wire.
"""
from enum import Enum
from typing import Any, Dict, Optional

from model.fields import BODY, Field
from utils.wire_formats import (
    UNIX_TIMESTAMP,
    decode_blob,
    encode_blob,
    format_timestamp,
    parse_timestamp,
)


def jsonize(shape: Any, timestamp_format: str = UNIX_TIMESTAMP) -> Dict[str, Any]:
    """Serialize the present body members of `shape` into a JSON-ready dict."""
    body: Dict[str, Any] = {}
    for _, field, value in shape.present_items():
        if field.location != BODY:
            continue
        body[field.wire_name] = encode_value(field, value, timestamp_format)
    return body


def encode_value(field: Field, value: Any, timestamp_format: str = UNIX_TIMESTAMP) -> Any:
    type_name = field.type_name
    if value is None:
        return None
    if type_name == "structure":
        return jsonize(value, timestamp_format)
    if type_name == "list":
        return [encode_value(field.member, item, timestamp_format) for item in value]
    if type_name == "map":
        return {
            str(_scalar(k)): encode_value(field.value, v, timestamp_format)
            for k, v in value.items()
        }
    if type_name == "timestamp":
        return format_timestamp(value, field.timestamp_format or timestamp_format)
    if type_name == "blob":
        return encode_blob(value)
    return _scalar(value)


def _scalar(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    return value


def parse_json(shape_cls: type, data: Optional[Dict[str, Any]]) -> Any:
    """Build a `shape_cls` instance from a JSON view, skipping unknown and null keys."""
    shape = shape_cls()
    if not data:
        return shape
    for name, field in shape_cls._fields.items():
        if field.location != BODY or field.wire_name not in data:
            continue
        raw = data[field.wire_name]
        if raw is None:
            continue
        setattr(shape, name, decode_value(field, raw))
    return shape


def decode_value(field: Field, raw: Any) -> Any:
    type_name = field.type_name
    if type_name == "structure":
        return parse_json(field.shape_cls, raw)
    if type_name == "list":
        return [decode_value(field.member, item) for item in raw if item is not None]
    if type_name == "map":
        return {
            field.key.coerce(k): decode_value(field.value, v)
            for k, v in raw.items() if v is not None
        }
    if type_name == "timestamp":
        return parse_timestamp(raw)
    if type_name == "blob":
        return decode_blob(raw)
    if type_name == "integer":
        return int(raw)
    if type_name == "float":
        return float(raw)
    if type_name == "boolean":
        return bool(raw)
    return field.coerce(raw)
