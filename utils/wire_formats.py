"""
Scalar conversions shared by every wire protocol.
"""
import base64
import datetime as dt
from datetime import timezone
from email.utils import format_datetime
from typing import Union
from urllib.parse import quote

from dateutil import parser as date_parser

ISO8601 = "iso8601"
RFC822 = "rfc822"
UNIX_TIMESTAMP = "unixTimestamp"


def _as_utc(value: dt.datetime) -> dt.datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def format_timestamp(value: dt.datetime, fmt: str) -> Union[str, int, float]:
    """
    Render a datetime in one of the three AWS timestamp formats.

    Naive datetimes are treated as UTC.
    """
    value = _as_utc(value)
    if fmt == UNIX_TIMESTAMP:
        seconds = round(value.timestamp(), 3)
        return int(seconds) if seconds.is_integer() else seconds
    if fmt == RFC822:
        return format_datetime(value, usegmt=True)
    if value.microsecond:
        return value.strftime('%Y-%m-%dT%H:%M:%S.%f')[:-3] + 'Z'
    return value.strftime('%Y-%m-%dT%H:%M:%SZ')


def parse_timestamp(raw: Union[str, int, float]) -> dt.datetime:
    """
    Parse an epoch number, ISO 8601 string or RFC 822 string into an aware datetime.
    """
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        return dt.datetime.fromtimestamp(raw, tz=timezone.utc)
    text = str(raw).strip()
    try:
        return dt.datetime.fromtimestamp(float(text), tz=timezone.utc)
    except ValueError:
        pass
    parsed = date_parser.parse(text)
    return _as_utc(parsed)


def encode_blob(value: Union[bytes, str]) -> str:
    if isinstance(value, str):
        value = value.encode('utf-8')
    return base64.b64encode(value).decode('ascii')


def decode_blob(raw: str) -> bytes:
    return base64.b64decode(raw)


def format_bool(value: bool) -> str:
    return 'true' if value else 'false'


def parse_bool(raw: Union[str, bool]) -> bool:
    if isinstance(raw, bool):
        return raw
    return str(raw).strip().lower() == 'true'


def percent_encode(value: str, safe: str = '') -> str:
    """Percent-encode a value with the RFC 3986 unreserved set left alone."""
    return quote(value, safe=safe + '-_.~')
