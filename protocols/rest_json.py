"""
REST-JSON protocol.

Members bind to the URI path, the query string, headers or a JSON body
according to their location; the method and path template come from the
operation's HttpBinding.
"""
from typing import Any, Dict, Optional, Type

from model.fields import BODY
from model.json_codec import decode_value, jsonize, parse_json
from protocols.base import HttpResponse, Protocol
from protocols.json_rpc import dumps, error_code_from, error_message_from, load_json_body
from utils.exceptions import ResponseParseError, ServiceError


def payload_field(shape_cls: type):
    for name, field in shape_cls._fields.items():
        if field.payload:
            return name, field
    return None, None


def has_body_members(shape_cls: type) -> bool:
    return any(field.location == BODY for field in shape_cls._fields.values())


class RestJsonProtocol(Protocol):
    """restJson1 protocol."""

    name = "rest-json"

    def payload_bytes(self, request: Any) -> bytes:
        name, field = payload_field(type(request))
        if field is not None:
            if not request.is_set(name):
                return b""
            value = getattr(request, name)
            if field.type_name == "structure":
                return dumps(jsonize(value, self.default_timestamp_format))
            if isinstance(value, str):
                return value.encode('utf-8')
            return bytes(value)
        if not has_body_members(type(request)):
            return b""
        return dumps(jsonize(request, self.default_timestamp_format))

    def headers(self, request: Any) -> Dict[str, str]:
        headers = super().headers(request)
        name, field = payload_field(type(request))
        if field is not None and field.type_name == "blob":
            if request.is_set(name):
                headers.setdefault("Content-Type", "application/octet-stream")
        elif self.payload_bytes(request):
            headers.setdefault("Content-Type", "application/json")
        return headers

    def parse_result(self, result_cls: type, response: HttpResponse) -> Any:
        name, field = payload_field(result_cls)
        if field is not None:
            result = result_cls()
            if field.type_name == "structure":
                document = load_json_body(response)
                if document:
                    setattr(result, name, parse_json(field.shape_cls, document))
            elif field.type_name == "blob":
                setattr(result, name, response.body)
            elif response.body:
                setattr(result, name, decode_value(field, response.text))
        elif has_body_members(result_cls):
            result = parse_json(result_cls, load_json_body(response))
        else:
            result = result_cls()
        self.bind_response_members(result, response)
        return result

    def parse_error(self, response: HttpResponse, errors: Optional[Dict[str, Type[ServiceError]]] = None) -> ServiceError:
        try:
            data = load_json_body(response)
        except ResponseParseError:
            data = {}
        return self.build_error(
            error_code_from(response, data),
            error_message_from(data),
            response,
            data=data,
            errors=errors,
        )
