"""
Protocol base class and the HTTP message types protocols produce and consume.

A protocol turns a ServiceRequest into an HttpRequest and an HttpResponse
into a ServiceResult or a ServiceError. The base class handles the
members every protocol binds the same way: header, prefixed-header,
query-string and status-code members.
"""
from dataclasses import dataclass, field as dataclass_field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Tuple, Type

from requests.structures import CaseInsensitiveDict

from logger_config import get_logger
from model.fields import BODY, HEADER, HEADERS, QUERYSTRING, STATUS_CODE, Field
from model.request import append_query
from utils.exceptions import ServiceError
from utils.wire_formats import (
    ISO8601,
    RFC822,
    UNIX_TIMESTAMP,
    encode_blob,
    format_bool,
    format_timestamp,
    parse_bool,
    parse_timestamp,
    decode_blob,
)

logger = get_logger(__name__)


@dataclass
class HttpRequest:
    """A fully rendered HTTP request, ready to be signed and sent."""

    method: str
    url: str
    headers: Dict[str, str] = dataclass_field(default_factory=dict)
    body: bytes = b""


@dataclass
class HttpResponse:
    """Status, headers and raw body of an HTTP response."""

    status_code: int
    headers: Mapping[str, str] = dataclass_field(default_factory=dict)
    body: bytes = b""

    def __post_init__(self) -> None:
        self.headers = CaseInsensitiveDict(self.headers or {})

    @property
    def text(self) -> str:
        return self.body.decode('utf-8') if self.body else ""


class Protocol:
    """Shared request rendering and response binding for every protocol."""

    name = ""
    default_timestamp_format = UNIX_TIMESTAMP
    request_id_header = "x-amzn-RequestId"

    # Request rendering

    def payload_bytes(self, request: Any) -> bytes:
        return b""

    def serialize_payload(self, request: Any) -> str:
        return self.payload_bytes(request).decode('utf-8')

    def headers(self, request: Any) -> Dict[str, str]:
        """Headers contributed by present header and prefixed-header members."""
        headers: Dict[str, str] = {}
        for _, field, value in request.present_items():
            if field.location == HEADER:
                headers[field.wire_name] = self.format_scalar(field, value, location=HEADER)
            elif field.location == HEADERS:
                for key, item in value.items():
                    headers[f"{field.wire_name}{key}"] = self.format_scalar(
                        field.value, item, location=HEADER
                    )
        return headers

    def query_params(self, request: Any) -> List[Tuple[str, str]]:
        """Query-string pairs contributed by present query-string members."""
        params: List[Tuple[str, str]] = []
        for _, field, value in request.present_items():
            if field.location != QUERYSTRING:
                continue
            if field.type_name == "list":
                for item in value:
                    params.append((field.wire_name, self.format_scalar(field.member, item, location=QUERYSTRING)))
            elif field.type_name == "map":
                for key, item in value.items():
                    if isinstance(item, list):
                        params.extend((key, self.format_scalar(field.value.member, v, location=QUERYSTRING)) for v in item)
                    else:
                        params.append((key, self.format_scalar(field.value, item, location=QUERYSTRING)))
            else:
                params.append((field.wire_name, self.format_scalar(field, value, location=QUERYSTRING)))
        return params

    def dump_body_to_url(self, request: Any, uri: str) -> str:
        return uri

    def format_scalar(self, field: Field, value: Any, location: str = BODY) -> str:
        """Render one scalar member value as text for a URI, query, header or XML node."""
        type_name = field.type_name
        if type_name == "timestamp":
            if field.timestamp_format:
                fmt = field.timestamp_format
            elif location == HEADER:
                fmt = RFC822
            else:
                fmt = ISO8601
            return str(format_timestamp(value, fmt))
        if type_name == "boolean":
            return format_bool(value)
        if type_name == "blob":
            return encode_blob(value)
        if type_name == "list":
            return ",".join(self.format_scalar(field.member, item, location) for item in value)
        if isinstance(value, Enum):
            return str(value.value)
        return str(value)

    def build_http_request(self, request: Any, endpoint: str) -> "HttpRequest":
        uri = endpoint.rstrip("/") + request.resolve_request_uri()
        url = append_query(uri, self.query_params(request))
        return HttpRequest(
            method=request.HTTP.method,
            url=url,
            headers=self.headers(request),
            body=self.payload_bytes(request),
        )

    # Response binding

    def parse_result(self, result_cls: type, response: HttpResponse) -> Any:
        raise NotImplementedError

    def parse_error(self, response: HttpResponse, errors: Optional[Dict[str, Type[ServiceError]]] = None) -> ServiceError:
        raise NotImplementedError

    def request_id(self, response: HttpResponse) -> Optional[str]:
        return response.headers.get(self.request_id_header)

    def parse_header_scalar(self, field: Field, raw: str) -> Any:
        type_name = field.type_name
        if type_name == "timestamp":
            return parse_timestamp(raw)
        if type_name == "integer":
            return int(raw)
        if type_name == "float":
            return float(raw)
        if type_name == "boolean":
            return parse_bool(raw)
        if type_name == "blob":
            return decode_blob(raw)
        if type_name == "list":
            return [self.parse_header_scalar(field.member, part.strip()) for part in raw.split(",") if part.strip()]
        return field.coerce(raw)

    def bind_response_members(self, result: Any, response: HttpResponse) -> None:
        """Fill header, prefixed-header and status-code members and the response metadata."""
        for name, field in result._fields.items():
            if field.location == HEADER:
                raw = response.headers.get(field.wire_name)
                if raw is not None:
                    setattr(result, name, self.parse_header_scalar(field, raw))
            elif field.location == HEADERS:
                prefix = field.wire_name.lower()
                matched = {
                    key[len(prefix):]: value
                    for key, value in response.headers.items()
                    if key.lower().startswith(prefix)
                }
                if matched:
                    setattr(result, name, matched)
            elif field.location == STATUS_CODE:
                setattr(result, name, response.status_code)

        metadata = getattr(result, "response_metadata", None)
        if metadata is not None:
            metadata.http_status_code = response.status_code
            metadata.headers = dict(response.headers)
            if metadata.request_id is None:
                metadata.request_id = self.request_id(response)

    def build_error(
        self,
        code: Optional[str],
        message: str,
        response: HttpResponse,
        data: Optional[Dict[str, Any]] = None,
        errors: Optional[Dict[str, Type[ServiceError]]] = None,
        request_id: Optional[str] = None,
    ) -> ServiceError:
        error_cls = (errors or {}).get(code or "", ServiceError)
        error = error_cls(
            message or f"Service returned HTTP {response.status_code}",
            error_code=code,
            status_code=response.status_code,
            request_id=request_id or self.request_id(response),
            response_data=data,
        )
        logger.debug(f"Parsed {self.name} error {code} (HTTP {response.status_code})")
        return error
